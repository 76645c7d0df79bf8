"""Core data models for trace event types and events."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, slots=True)
class EventType:
    """A registered event type."""

    name: str
    id: int
    hidden: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "id": self.id,
            "hidden": self.hidden,
        }


@dataclass(frozen=True, slots=True)
class Event:
    """A single recorded trace event. Immutable once appended.

    ``args`` is exposed as a read-only view over a copy of the recorded
    arguments; nested JSON values are not copied.
    """

    index: int
    type: EventType
    time: float = 0.0
    args: Mapping[str, Any] = field(default_factory=dict)
    hidden: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", MappingProxyType(dict(self.args)))

    @property
    def type_id(self) -> int:
        return self.type.id

    @property
    def name(self) -> str:
        return self.type.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "type": self.type.name,
            "time": self.time,
            "args": dict(self.args),
            "hidden": self.hidden,
        }
