"""Step: the events between two frames or within one frame."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from steppack.db.event_list import EventList
from steppack.db.frames import Frame
from steppack.db.iterator import EventIterator, IndexedEventIterator
from steppack.replay.visibility import DEFAULT_VISIBILITY_POLICY, VisibilityPolicy


@dataclass(frozen=True, slots=True, eq=False)
class Step:
    """A window ``[start_event_id, end_event_id)`` over a shared event list.

    The event list, frame and initial context mapping are borrowed, not
    owned: the session that owns the event list must outlive its steps.
    Visible events are computed once at construction and never refreshed.

    Args:
        event_list: Event list for the entire trace.
        start_event_id: First event ID of the step.
        end_event_id: Event ID one past the last event of the step. Callers
            must ensure ``start_event_id <= end_event_id``; inverted ranges
            simply contain no events.
        frame: The frame this step draws, or ``None`` if it draws none.
        initial_contexts: Handles of the contexts that exist when the step
            begins. Returned as-is by ``initial_contexts`` and must not be
            mutated afterwards.
        policy: Event types that stay visible even when hidden.
    """

    event_list: EventList = field(repr=False)
    start_event_id: int
    end_event_id: int
    frame: Frame | None = None
    initial_contexts: Mapping[Any, bool] | None = None
    policy: VisibilityPolicy = field(default=DEFAULT_VISIBILITY_POLICY, kw_only=True, repr=False)
    visible_events: tuple[int, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.initial_contexts is None:
            object.__setattr__(self, "initial_contexts", {})
        object.__setattr__(self, "visible_events", self._compute_visible_events())

    def get_event_iterator(self, visible: bool = False) -> EventIterator:
        """Create a fresh iterator over the step's events.

        Args:
            visible: Only include visible events when true.
        """
        if visible:
            return IndexedEventIterator(self.event_list, self.visible_events)
        return self.event_list.begin_event_range(self.start_event_id, self.end_event_id)

    @property
    def draws_frame(self) -> bool:
        return self.frame is not None

    @property
    def event_count(self) -> int:
        return len(self.get_event_iterator())

    @property
    def visible_event_count(self) -> int:
        return len(self.visible_events)

    def to_dict(self) -> dict[str, Any]:
        return {
            "start_event_id": self.start_event_id,
            "end_event_id": self.end_event_id,
            "event_count": self.event_count,
            "visible_event_count": self.visible_event_count,
            "frame": self.frame.to_dict() if self.frame is not None else None,
            "initial_contexts": sorted(str(handle) for handle in self.initial_contexts),
        }

    def _compute_visible_events(self) -> tuple[int, ...]:
        # Hidden context create/set events stay listed; replay depends on them.
        always_visible = self.policy.resolve(self.event_list)
        return tuple(
            event.index
            for event in self.get_event_iterator()
            if not event.hidden or event.type_id in always_visible
        )
