"""Forward-only iterators over events of an event list.

Two variants share the ``EventIterator`` interface:

* ``RangeEventIterator`` walks a contiguous ID range directly.
* ``IndexedEventIterator`` walks an explicit, ordered indirection table of
  event IDs, so filtered (non-contiguous) positions can be traversed in order.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from steppack.core.models import Event

if TYPE_CHECKING:
    from steppack.db.event_list import EventList


class EventIterator:
    """Base iterator over events of a shared event list."""

    __slots__ = ("_event_list", "_position", "_stop")

    def __init__(self, event_list: EventList, start: int, stop: int) -> None:
        self._event_list = event_list
        self._position = start
        self._stop = max(start, stop)

    def __iter__(self) -> EventIterator:
        return self

    def __next__(self) -> Event:
        if self.done():
            raise StopIteration
        event = self._event_list[self._resolve(self._position)]
        self._position += 1
        return event

    def __len__(self) -> int:
        return self._stop - self._position

    def done(self) -> bool:
        return self._position >= self._stop

    def _resolve(self, position: int) -> int:
        raise NotImplementedError


class RangeEventIterator(EventIterator):
    """Iterates event IDs ``[start, end)`` directly, clamped to the list bounds."""

    __slots__ = ()

    def __init__(self, event_list: EventList, start: int, end: int) -> None:
        size = len(event_list)
        lower = min(max(start, 0), size)
        upper = min(max(end, 0), size)
        super().__init__(event_list, lower, upper)

    def _resolve(self, position: int) -> int:
        return position


class IndexedEventIterator(EventIterator):
    """Iterates positions ``0 .. len(table) - 1`` resolving each through ``table``."""

    __slots__ = ("_table",)

    def __init__(self, event_list: EventList, table: Sequence[int]) -> None:
        super().__init__(event_list, 0, len(table))
        self._table = table

    def _resolve(self, position: int) -> int:
        return self._table[position]
