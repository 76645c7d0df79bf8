"""Event database subsystem for StepKit."""

from steppack.db.event_list import EventList
from steppack.db.exceptions import EventListError, EventOrderError, EventTypeError
from steppack.db.frames import Frame, find_frames
from steppack.db.iterator import EventIterator, IndexedEventIterator, RangeEventIterator

__all__ = [
    "EventList",
    "EventListError",
    "EventOrderError",
    "EventTypeError",
    "EventIterator",
    "RangeEventIterator",
    "IndexedEventIterator",
    "Frame",
    "find_frames",
]
