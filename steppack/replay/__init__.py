"""Replay subsystem for StepKit."""

from steppack.replay.exceptions import ReplayConfigError, ReplayError, SegmentationError
from steppack.replay.segmentation import build_steps
from steppack.replay.step import Step
from steppack.replay.visibility import DEFAULT_VISIBILITY_POLICY, VisibilityPolicy

__all__ = [
    "ReplayError",
    "ReplayConfigError",
    "SegmentationError",
    "Step",
    "VisibilityPolicy",
    "DEFAULT_VISIBILITY_POLICY",
    "build_steps",
]
