"""Container log output settings.

Consumed by the log-following collaborator and, for ``driver_name`` /
``driver_opts``, by the runtime client as the container's log driver.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from runspine.run.values import freeze_mapping, hash_key, thaw


@dataclass(frozen=True)
class LogConfig:
    enabled: bool | None = None
    """Tri-state: ``None`` means "on if any other option is set"."""

    prefix: str | None = None
    date: str | None = None
    """Timestamp format for each line, e.g. ``"ISO8601"`` or ``"none"``."""

    color: str | None = None
    file: str | None = None
    driver_name: str | None = None
    driver_opts: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "driver_opts", freeze_mapping(self.driver_opts))

    def __hash__(self) -> int:
        return hash(tuple(hash_key(getattr(self, f.name)) for f in fields(self)))

    @property
    def is_enabled(self) -> bool:
        if self.enabled is not None:
            return self.enabled
        return any(
            getattr(self, f.name) is not None for f in fields(self) if f.name != "enabled"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            f.name: thaw(getattr(self, f.name))
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


__all__ = ["LogConfig"]
