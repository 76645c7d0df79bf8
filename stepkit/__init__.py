"""Stable public API surface for StepKit.

This module is the supported import path for library users.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from steppack.db import EventList, Frame, find_frames
from steppack.replay import DEFAULT_VISIBILITY_POLICY, Step, VisibilityPolicy
from steppack.replay import build_steps as _build_steps
from steppack.trace import read_trace

__version__ = "0.1.0"


def load_trace(path: str | Path) -> EventList:
    """Load a JSON trace file.

    Args:
        path: Trace file path.

    Returns:
        Event list holding every event of the trace.

    Raises:
        TraceFormatError: If the file is not a valid trace.
    """
    return read_trace(path)


def build_steps(
    trace: EventList | str | Path,
    *,
    frames: list[Frame] | None = None,
    always_visible: Iterable[str] = (),
) -> list[Step]:
    """Split a trace into steps between and within frames.

    Args:
        trace: Event list, or path to a JSON trace file.
        frames: Frames to split on. Detected from frame markers when omitted.
        always_visible: Extra event type names that stay visible when hidden,
            in addition to context creation and activation.

    Returns:
        Consecutive steps covering the whole trace.
    """
    event_list = trace if isinstance(trace, EventList) else read_trace(trace)
    names = tuple(always_visible)
    policy = DEFAULT_VISIBILITY_POLICY.with_names(*names) if names else DEFAULT_VISIBILITY_POLICY
    return _build_steps(event_list, frames, policy=policy)


__all__ = [
    "__version__",
    "EventList",
    "Frame",
    "Step",
    "VisibilityPolicy",
    "find_frames",
    "load_trace",
    "build_steps",
]
