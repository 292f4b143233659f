"""Container restart policy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

RESTART_POLICY_NAMES = ("no", "always", "on-failure", "unless-stopped")


@dataclass(frozen=True)
class RestartPolicy:
    """Restart policy handed to the runtime.

    ``name=None`` leaves the runtime's own default in place. ``retry`` is the
    maximum restart count and only meaningful for ``on-failure``.
    """

    name: str | None = None
    retry: int = 0

    DEFAULT: ClassVar[RestartPolicy]

    @property
    def is_default(self) -> bool:
        return self.name is None and self.retry == 0

    def to_dict(self) -> dict[str, object]:
        return {"name": self.name, "retry": self.retry}


RestartPolicy.DEFAULT = RestartPolicy()


__all__ = ["RestartPolicy", "RESTART_POLICY_NAMES"]
