"""Read JSON trace files into event lists."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from steppack.db.event_list import EventList
from steppack.db.exceptions import EventListError
from steppack.trace.exceptions import TraceFormatError


def read_trace(path: str | Path) -> EventList:
    """Read a trace file and return its populated event list."""
    target = Path(path)
    try:
        raw_text = target.read_text(encoding="utf-8")
    except UnicodeDecodeError as error:
        raise TraceFormatError(f"Trace is not valid UTF-8 text: {target}") from error
    except OSError as error:
        raise TraceFormatError(f"Trace could not be read: {target} ({error})") from error

    try:
        raw = json.loads(raw_text)
    except json.JSONDecodeError as error:
        raise TraceFormatError(f"Trace is not valid JSON: {target} ({error})") from error

    return event_list_from_dict(raw)


def event_list_from_dict(raw: Any) -> EventList:
    """Build an event list from a decoded trace document.

    Layout::

        {"event_types": [{"name": str, "hidden": bool}],
         "events": [{"type": str, "time": float, "args": {}, "hidden": bool}]}
    """
    if not isinstance(raw, dict):
        raise TraceFormatError("Trace root must be an object")

    event_types = raw.get("event_types", [])
    events = raw.get("events", [])
    if not isinstance(event_types, list):
        raise TraceFormatError("Trace event_types must be a list")
    if not isinstance(events, list):
        raise TraceFormatError("Trace events must be a list")

    event_list = EventList()
    try:
        for position, entry in enumerate(event_types):
            if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
                raise TraceFormatError(f"event_types[{position}] must be an object with a name")
            hidden = _optional_bool(entry, "hidden", position)
            event_list.define_event_type(entry["name"], hidden=bool(hidden))

        for position, entry in enumerate(events):
            if not isinstance(entry, dict) or not isinstance(entry.get("type"), str):
                raise TraceFormatError(f"events[{position}] must be an object with a type")
            time = entry.get("time", 0.0)
            if isinstance(time, bool) or not isinstance(time, (int, float)):
                raise TraceFormatError(f"events[{position}].time must be a number")
            args = entry.get("args", {})
            if not isinstance(args, dict):
                raise TraceFormatError(f"events[{position}].args must be an object")
            event_list.append(
                entry["type"],
                time=time,
                args=args,
                hidden=_optional_bool(entry, "hidden", position),
            )
    except EventListError as error:
        raise TraceFormatError(str(error)) from error

    return event_list


def _optional_bool(entry: dict[str, Any], key: str, position: int) -> bool | None:
    value = entry.get(key)
    if value is None or isinstance(value, bool):
        return value
    raise TraceFormatError(f"entry {position}: {key} must be a bool")
