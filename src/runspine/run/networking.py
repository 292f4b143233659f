"""Networking mode classification.

The run parameter ``net`` is a raw token. ``NetworkingMode.parse`` turns it
into one of six variants with a pure prefix classification:

=====================  ===========================
Token                  Mode
=====================  ===========================
``None``/``""``        ``DEFAULT``
``"default"``          ``DEFAULT``
``"bridge"``           ``BRIDGE``
``"host"``             ``HOST``
``"none"``             ``NONE``
``"container:<n>"``    ``CONTAINER`` named ``<n>``
``"custom:<n>"``       ``CUSTOM`` named ``<n>``
anything else          ``CUSTOM`` named by the token
=====================  ===========================

A ``container:`` or ``custom:`` prefix with nothing after it is unparseable
and maps to ``DEFAULT``; an empty name never becomes a custom network.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

CONTAINER_PREFIX = "container:"
CUSTOM_PREFIX = "custom:"


class NetworkMode(str, Enum):
    DEFAULT = "default"
    BRIDGE = "bridge"
    HOST = "host"
    NONE = "none"
    CONTAINER = "container"
    CUSTOM = "custom"


_STANDARD_TOKENS = {
    "default": NetworkMode.DEFAULT,
    "bridge": NetworkMode.BRIDGE,
    "host": NetworkMode.HOST,
    "none": NetworkMode.NONE,
}


@dataclass(frozen=True)
class NetworkingMode:
    """A classified ``net`` token."""

    mode: NetworkMode = NetworkMode.DEFAULT
    name: str | None = None
    """Container name for ``CONTAINER``, network name for ``CUSTOM``."""

    @classmethod
    def parse(cls, token: str | None) -> NetworkingMode:
        if token is None:
            return cls()
        token = token.strip()
        if not token:
            return cls()

        standard = _STANDARD_TOKENS.get(token)
        if standard is not None:
            return cls(standard)

        for prefix, mode in ((CONTAINER_PREFIX, NetworkMode.CONTAINER),
                             (CUSTOM_PREFIX, NetworkMode.CUSTOM)):
            if token.startswith(prefix):
                name = token[len(prefix):].strip()
                return cls(mode, name) if name else cls()

        return cls(NetworkMode.CUSTOM, token)

    @property
    def is_default(self) -> bool:
        return self.mode is NetworkMode.DEFAULT

    @property
    def is_standard(self) -> bool:
        """True for the runtime's built-in modes (bridge, host, none)."""
        return self.mode in (NetworkMode.BRIDGE, NetworkMode.HOST, NetworkMode.NONE)

    @property
    def is_container(self) -> bool:
        return self.mode is NetworkMode.CONTAINER

    @property
    def is_custom_network(self) -> bool:
        return self.mode is NetworkMode.CUSTOM

    @property
    def container_name(self) -> str | None:
        return self.name if self.is_container else None

    @property
    def network_name(self) -> str | None:
        return self.name if self.is_custom_network else None

    def to_docker(self) -> str | None:
        """Network mode token for the runtime; ``None`` leaves its default."""
        if self.is_default:
            return None
        if self.is_container:
            return f"{CONTAINER_PREFIX}{self.name}"
        if self.is_custom_network:
            return self.name
        return self.mode.value

    def __str__(self) -> str:
        return self.to_docker() or NetworkMode.DEFAULT.value


__all__ = ["NetworkMode", "NetworkingMode", "CONTAINER_PREFIX", "CUSTOM_PREFIX"]
