"""Append-only event list with a string-keyed event type registry."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from steppack.core.models import Event, EventType
from steppack.core.types import UNKNOWN_TYPE_ID
from steppack.db.exceptions import EventOrderError, EventTypeError
from steppack.db.iterator import RangeEventIterator


class EventList:
    """Ordered, append-only collection of trace events.

    Event IDs are contiguous integers assigned in append order, so an event's
    ID is also its position in the list. Event types are registered by name
    and receive small stable integer IDs.
    """

    def __init__(self) -> None:
        self._types: dict[str, EventType] = {}
        self._events: list[Event] = []

    def __len__(self) -> int:
        return len(self._events)

    def __getitem__(self, index: int) -> Event:
        return self._events[index]

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    def define_event_type(self, name: str, *, hidden: bool = False) -> EventType:
        """Register an event type, or return the existing identical registration."""
        normalized = str(name).strip()
        if not normalized:
            raise EventTypeError("event type name must be a non-empty string")

        existing = self._types.get(normalized)
        if existing is not None:
            if existing.hidden != hidden:
                raise EventTypeError(
                    f"event type {normalized!r} already defined with hidden={existing.hidden}"
                )
            return existing

        event_type = EventType(name=normalized, id=len(self._types), hidden=bool(hidden))
        self._types[normalized] = event_type
        return event_type

    def get_event_type(self, name: str) -> EventType | None:
        return self._types.get(name)

    def get_event_type_id(self, name: str) -> int:
        """Return the type ID for ``name`` or ``UNKNOWN_TYPE_ID`` if unregistered."""
        event_type = self._types.get(name)
        if event_type is None:
            return UNKNOWN_TYPE_ID
        return event_type.id

    def event_types(self) -> tuple[EventType, ...]:
        return tuple(self._types.values())

    def append(
        self,
        type_name: str,
        *,
        time: float = 0.0,
        args: Mapping[str, Any] | None = None,
        hidden: bool | None = None,
    ) -> Event:
        """Append an event of a registered type and return it.

        ``hidden`` overrides the type's default hidden flag for this event.
        """
        event_type = self._types.get(type_name)
        if event_type is None:
            raise EventTypeError(f"unknown event type: {type_name}")

        if self._events and time < self._events[-1].time:
            raise EventOrderError(
                f"event time {time} precedes previous event time {self._events[-1].time}"
            )

        event = Event(
            index=len(self._events),
            type=event_type,
            time=float(time),
            args=args or {},
            hidden=event_type.hidden if hidden is None else bool(hidden),
        )
        self._events.append(event)
        return event

    def begin_event_range(self, start_event_id: int, end_event_id: int) -> RangeEventIterator:
        """Iterate events ``[start_event_id, end_event_id)``."""
        return RangeEventIterator(self, start_event_id, end_event_id)

    def begin(self) -> RangeEventIterator:
        return RangeEventIterator(self, 0, len(self._events))
