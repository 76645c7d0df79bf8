"""Allowlist of event types that stay visible even when hidden."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from steppack.core.types import CONTEXT_CREATED, CONTEXT_SET_ACTIVE, UNKNOWN_TYPE_ID
from steppack.db.event_list import EventList
from steppack.replay.exceptions import ReplayConfigError

DEFAULT_ALWAYS_VISIBLE: Mapping[str, bool] = MappingProxyType(
    {
        CONTEXT_CREATED: True,
        CONTEXT_SET_ACTIVE: True,
    }
)


@dataclass(frozen=True, slots=True)
class VisibilityPolicy:
    """Table of ``{type_name: always_visible}`` resolved against an event list."""

    always_visible: Mapping[str, bool] = field(default_factory=lambda: DEFAULT_ALWAYS_VISIBLE)

    def __post_init__(self) -> None:
        if not isinstance(self.always_visible, Mapping):
            raise ReplayConfigError("always_visible must be a mapping of type name to bool")
        for name, flag in self.always_visible.items():
            if not isinstance(name, str) or not name.strip():
                raise ReplayConfigError("always_visible type names must be non-empty strings")
            if not isinstance(flag, bool):
                raise ReplayConfigError(f"always_visible flag for {name!r} must be a bool")
        object.__setattr__(self, "always_visible", MappingProxyType(dict(self.always_visible)))

    def with_names(self, *names: str) -> VisibilityPolicy:
        """Return a copy that also pins ``names`` as always visible."""
        table = dict(self.always_visible)
        for name in names:
            table[str(name).strip()] = True
        return VisibilityPolicy(always_visible=table)

    def resolve(self, event_list: EventList) -> frozenset[int]:
        """Return the type IDs to keep visible. Unregistered names are skipped."""
        resolved = set()
        for name, flag in self.always_visible.items():
            if not flag:
                continue
            type_id = event_list.get_event_type_id(name)
            if type_id != UNKNOWN_TYPE_ID:
                resolved.add(type_id)
        return frozenset(resolved)

    def to_dict(self) -> dict[str, bool]:
        return dict(sorted(self.always_visible.items()))


DEFAULT_VISIBILITY_POLICY = VisibilityPolicy()
