"""Core event records and well-known event type names for StepKit."""

from steppack.core.models import Event, EventType
from steppack.core.types import (
    CONTEXT_CREATED,
    CONTEXT_SET_ACTIVE,
    FRAME_END,
    FRAME_START,
    UNKNOWN_TYPE_ID,
)

__all__ = [
    "Event",
    "EventType",
    "CONTEXT_CREATED",
    "CONTEXT_SET_ACTIVE",
    "FRAME_END",
    "FRAME_START",
    "UNKNOWN_TYPE_ID",
]
