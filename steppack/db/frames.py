"""Frame records and frame-marker detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from steppack.core.types import FRAME_END, FRAME_START, UNKNOWN_TYPE_ID
from steppack.db.event_list import EventList


@dataclass(frozen=True, slots=True)
class Frame:
    """A rendered frame bounded by its start and end marker events (inclusive)."""

    number: int
    start_event_id: int
    end_event_id: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "number": self.number,
            "start_event_id": self.start_event_id,
            "end_event_id": self.end_event_id,
        }


def find_frames(event_list: EventList) -> list[Frame]:
    """Pair frame start/end markers in event order."""
    start_id = event_list.get_event_type_id(FRAME_START)
    end_id = event_list.get_event_type_id(FRAME_END)
    if start_id == UNKNOWN_TYPE_ID or end_id == UNKNOWN_TYPE_ID:
        return []

    frames: list[Frame] = []
    open_start: int | None = None
    open_number = 0
    counter = 0

    for event in event_list.begin():
        if event.type_id == start_id:
            number = event.args.get("number")
            open_number = number if isinstance(number, int) else counter
            open_start = event.index
            counter = open_number + 1
        elif event.type_id == end_id and open_start is not None:
            frames.append(
                Frame(number=open_number, start_event_id=open_start, end_event_id=event.index)
            )
            open_start = None

    return frames
