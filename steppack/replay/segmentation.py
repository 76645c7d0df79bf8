"""Partition a trace into steps between and within frames."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from steppack.core.types import CONTEXT_CREATED, UNKNOWN_TYPE_ID
from steppack.db.event_list import EventList
from steppack.db.frames import Frame, find_frames
from steppack.replay.exceptions import SegmentationError
from steppack.replay.step import Step
from steppack.replay.visibility import DEFAULT_VISIBILITY_POLICY, VisibilityPolicy


def build_steps(
    event_list: EventList,
    frames: Sequence[Frame] | None = None,
    *,
    policy: VisibilityPolicy | None = None,
) -> list[Step]:
    """Split ``event_list`` into consecutive, non-overlapping steps.

    Each frame yields one step that draws it, preceded by an intermediate step
    for any events since the previous frame. Events after the last frame form
    a trailing intermediate step. Every step receives a snapshot of the
    contexts created before it starts.

    Args:
        event_list: Event list for the entire trace.
        frames: Frames in event order. Detected from frame markers when omitted.
        policy: Visibility policy passed to every step.

    Returns:
        Steps covering every event exactly once, in order.

    Raises:
        SegmentationError: If frames overlap, are out of order, or fall outside
            the event list.
    """
    effective_policy = policy or DEFAULT_VISIBILITY_POLICY
    resolved_frames = list(frames) if frames is not None else find_frames(event_list)
    _validate_frames(resolved_frames, len(event_list))

    tracker = _ContextTracker(event_list)
    steps: list[Step] = []

    def emit(start: int, end: int, frame: Frame | None) -> None:
        steps.append(
            Step(
                event_list,
                start,
                end,
                frame,
                tracker.snapshot(),
                policy=effective_policy,
            )
        )
        tracker.advance(start, end)

    cursor = 0
    for frame in resolved_frames:
        if cursor < frame.start_event_id:
            emit(cursor, frame.start_event_id, None)
        emit(frame.start_event_id, frame.end_event_id + 1, frame)
        cursor = frame.end_event_id + 1

    if cursor < len(event_list):
        emit(cursor, len(event_list), None)

    return steps


class _ContextTracker:
    """Accumulates the handles of contexts created so far."""

    def __init__(self, event_list: EventList) -> None:
        self._event_list = event_list
        self._create_id = event_list.get_event_type_id(CONTEXT_CREATED)
        self._contexts: dict[Any, bool] = {}

    def snapshot(self) -> dict[Any, bool]:
        return dict(self._contexts)

    def advance(self, start: int, end: int) -> None:
        if self._create_id == UNKNOWN_TYPE_ID:
            return
        for event in self._event_list.begin_event_range(start, end):
            if event.type_id != self._create_id:
                continue
            handle = event.args.get("handle")
            if handle is None:
                continue
            try:
                self._contexts[handle] = True
            except TypeError as error:
                raise SegmentationError(
                    f"event {event.index}: context handle must be a scalar, got {handle!r}"
                ) from error


def _validate_frames(frames: Sequence[Frame], size: int) -> None:
    previous_end = -1
    for frame in frames:
        if frame.start_event_id > frame.end_event_id:
            raise SegmentationError(
                f"frame {frame.number} ends before it starts "
                f"({frame.start_event_id} > {frame.end_event_id})"
            )
        if frame.start_event_id < 0 or frame.end_event_id >= size:
            raise SegmentationError(
                f"frame {frame.number} is outside the event list "
                f"({frame.start_event_id}..{frame.end_event_id}, {size} events)"
            )
        if frame.start_event_id <= previous_end:
            raise SegmentationError(
                f"frame {frame.number} overlaps or precedes the previous frame "
                f"(starts at {frame.start_event_id}, previous ended at {previous_end})"
            )
        previous_end = frame.end_event_id
