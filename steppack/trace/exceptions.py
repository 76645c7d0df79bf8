"""Trace file exceptions."""


class TraceError(Exception):
    """Base class for trace file errors."""


class TraceFormatError(TraceError):
    """Trace file is not valid JSON or does not match the trace layout."""
