"""Volume mounts for a run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from runspine.run.values import freeze_sequence


@dataclass(frozen=True)
class VolumeConfig:
    """Volumes taken from other containers plus host bind mounts.

    ``from_`` lists images (or aliases) whose started containers lend their
    volumes; ``bind`` holds ``host:container[:ro]`` entries. Both keep the
    order they were given in.
    """

    from_: tuple[str, ...] | None = None
    bind: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "from_", freeze_sequence(self.from_))
        object.__setattr__(self, "bind", freeze_sequence(self.bind))

    @property
    def is_empty(self) -> bool:
        return not self.from_ and not self.bind

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.from_ is not None:
            result["from"] = list(self.from_)
        if self.bind is not None:
            result["bind"] = list(self.bind)
        return result


__all__ = ["VolumeConfig"]
