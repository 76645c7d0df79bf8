"""Trace file subsystem for StepKit."""

from steppack.trace.exceptions import TraceError, TraceFormatError
from steppack.trace.io import event_list_from_dict, read_trace

__all__ = [
    "TraceError",
    "TraceFormatError",
    "event_list_from_dict",
    "read_trace",
]
