"""Wait conditions applied after a container starts and before it stops.

The core only carries these values; the wait-polling collaborator decides
how to honor them. Times are milliseconds.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from runspine.run.values import thaw


@dataclass(frozen=True)
class WaitConfig:
    """What to wait for once the container is up."""

    time: int | None = None
    """Maximum time to wait for any of the conditions below."""

    url: str | None = None
    """HTTP URL polled until it answers with an accepted status."""

    method: str | None = None
    """HTTP method for ``url`` (``HEAD`` when unset)."""

    status: str | None = None
    """Accepted status codes, e.g. ``"200..399"``."""

    log: str | None = None
    """Regular expression awaited in the container's output."""

    tcp_host: str | None = None
    tcp_ports: tuple[int, ...] | None = None
    """Ports that must accept TCP connections."""

    health_check: bool | None = None
    """Wait for the image's own healthcheck to report healthy."""

    exit: int | None = None
    """Wait for the container to exit with this code."""

    shutdown: int | None = None
    """Pause between stopping and removing the container."""

    kill: int | None = None
    """Grace period between SIGTERM and SIGKILL on stop."""

    exec_post_start: str | None = None
    exec_pre_stop: str | None = None
    """Commands run inside the container after start / before stop."""

    def __post_init__(self) -> None:
        if self.tcp_ports is not None:
            object.__setattr__(self, "tcp_ports", tuple(self.tcp_ports))

    @property
    def has_condition(self) -> bool:
        """True when at least one startup condition is configured."""
        if self.health_check:
            return True
        return any(
            value is not None
            for value in (self.url, self.log, self.tcp_ports, self.exit)
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            f.name: thaw(getattr(self, f.name))
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


__all__ = ["WaitConfig"]
