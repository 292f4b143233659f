"""The immutable run specification for a container started from a built image.

``RunSpec`` is the aggregate the runtime-invocation collaborator reads when it
creates and starts a container: environment, command, networking, volumes,
wait conditions, restart policy, and resource limits.

Key Concepts:
    RunSpec: Frozen dataclass produced by ``RunSpecBuilder.build()``.
    NamingStrategy: How the started container is named (``none``/``alias``).
    Raw vs. defaulted fields: ``ports``, ``naming_strategy`` and
        ``restart_policy`` are stored raw (``raw_*``, possibly ``None``) and
        defaulted at read time by properties, so ``is_set()`` can still tell
        "unset" apart from "explicitly set to the default".

Architecture Decisions:
    - Frozen dataclass (not Pydantic): a spec is a value produced by the
      builder, not user input. Validation of user input happens in
      ``runspine.run.binding`` before the builder is driven.
    - Sequences are tuples and mappings are read-only views of private
      copies, so a built spec is safe to share across threads.

Example::

    >>> from runspine.run import RunSpecBuilder
    >>> spec = RunSpecBuilder().net("bridge").ports(["8080:80"]).build()
    >>> spec.ports
    ('8080:80',)
    >>> spec.naming_strategy
    <NamingStrategy.NONE: 'none'>
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any

from runspine.core.errors import UnknownEnumValueError
from runspine.run.arguments import Arguments
from runspine.run.capability import resolve_api_requirement
from runspine.run.log import LogConfig
from runspine.run.networking import NetworkingMode
from runspine.run.restart import RestartPolicy
from runspine.run.values import hash_key, thaw
from runspine.run.volume import VolumeConfig
from runspine.run.wait import WaitConfig


class NamingStrategy(str, Enum):
    """Naming scheme for the started container."""

    NONE = "none"  # Let the runtime pick a name
    ALIAS = "alias"  # Use the image alias from the configuration

    @classmethod
    def parse(cls, value: str | None) -> NamingStrategy:
        """Case-insensitive lookup; ``None`` or ``""`` yields ``NONE``."""
        if value is None or value == "":
            return cls.NONE
        try:
            return cls(value.lower())
        except ValueError:
            raise UnknownEnumValueError(
                "naming_strategy", value, [member.value for member in cls]
            ) from None


_DEFAULTED_FIELDS = {
    "ports": "raw_ports",
    "naming_strategy": "raw_naming_strategy",
    "restart_policy": "raw_restart_policy",
}


@dataclass(frozen=True)
class RunSpec:
    """Everything needed to launch one container; never mutated once built."""

    env: Mapping[str, str] | None = None
    labels: Mapping[str, str] | None = None
    env_property_file: str | None = None

    cmd: Arguments | None = None
    entrypoint: Arguments | None = None

    domainname: str | None = None
    hostname: str | None = None
    user: str | None = None
    working_dir: str | None = None

    shm_size: int | None = None
    memory: int | None = None
    memory_swap: int | None = None
    """Total memory plus swap in bytes; ``-1`` means unlimited swap."""

    port_property_file: str | None = None
    net: str | None = None

    dns: tuple[str, ...] | None = None
    dns_search: tuple[str, ...] | None = None
    cap_add: tuple[str, ...] | None = None
    cap_drop: tuple[str, ...] | None = None
    extra_hosts: tuple[str, ...] | None = None
    links: tuple[str, ...] | None = None

    privileged: bool | None = None

    raw_ports: tuple[str, ...] | None = None
    raw_naming_strategy: NamingStrategy | None = None

    volumes: VolumeConfig | None = None
    wait: WaitConfig | None = None
    log: LogConfig | None = None
    raw_restart_policy: RestartPolicy | None = None

    skip: bool = False

    def __hash__(self) -> int:
        # env and labels are read-only mapping views, which are not hashable.
        return hash(tuple(hash_key(getattr(self, f.name)) for f in fields(self)))

    # ------------------------------------------------------------------
    # Defaulted accessors
    # ------------------------------------------------------------------

    @property
    def ports(self) -> tuple[str, ...]:
        """Port mappings in declaration order; never ``None``."""
        return self.raw_ports if self.raw_ports is not None else ()

    @property
    def naming_strategy(self) -> NamingStrategy:
        if self.raw_naming_strategy is None:
            return NamingStrategy.NONE
        return self.raw_naming_strategy

    @property
    def restart_policy(self) -> RestartPolicy:
        if self.raw_restart_policy is None:
            return RestartPolicy.DEFAULT
        return self.raw_restart_policy

    @property
    def networking_mode(self) -> NetworkingMode:
        return NetworkingMode.parse(self.net)

    def is_set(self, name: str) -> bool:
        """Whether a field was explicitly supplied to the builder."""
        return getattr(self, _DEFAULTED_FIELDS.get(name, name)) is not None

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def init_and_validate(self) -> str | None:
        """Validate argument lists and return the minimum runtime API version.

        Returns ``None`` when the spec needs no more than the baseline API.
        Raises ``MalformedArgumentListError`` for a broken ``cmd`` or
        ``entrypoint``.
        """
        return resolve_api_requirement(self)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Defaulted view as plain JSON-ready values; unset fields omitted."""
        result: dict[str, Any] = {}
        simple = (
            "env", "labels", "env_property_file", "domainname", "hostname", "user",
            "working_dir", "shm_size", "memory", "memory_swap", "port_property_file",
            "net", "dns", "dns_search", "cap_add", "cap_drop", "extra_hosts", "links",
            "privileged",
        )
        for name in simple:
            value = getattr(self, name)
            if value is not None:
                result[name] = thaw(value)
        for name in ("cmd", "entrypoint"):
            arguments = getattr(self, name)
            if arguments is not None:
                result[name] = arguments.to_json()
        for name in ("volumes", "wait", "log"):
            sub_config = getattr(self, name)
            if sub_config is not None:
                result[name] = sub_config.to_dict()

        result["ports"] = list(self.ports)
        result["naming_strategy"] = self.naming_strategy.value
        result["restart_policy"] = self.restart_policy.to_dict()
        result["skip"] = self.skip
        return result


__all__ = ["RunSpec", "NamingStrategy"]
