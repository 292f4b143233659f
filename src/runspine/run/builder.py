"""Staged construction of ``RunSpec``.

``RunSpecBuilder`` is the mutable draft; ``build()`` is its one conversion
into an immutable ``RunSpec``. Setters take optional values and store them
verbatim, with these exceptions:

- ``cmd`` / ``entrypoint``: a string becomes a shell-form ``Arguments``, a
  list or tuple an exec-form one; ``None`` leaves the field untouched.
- ``naming_strategy``: case-insensitive enum lookup, raises
  ``UnknownEnumValueError`` for unknown names.
- ``skip``: lenient boolean parse; only ``"true"`` (any case) is true and
  nothing ever raises.

The builder may be reused after ``build()``: every call returns a fresh
spec and later setter calls never reach specs built earlier.

Example::

    >>> spec = (
    ...     RunSpecBuilder()
    ...     .net("my-overlay")
    ...     .entrypoint("/bin/sh")
    ...     .cmd(None)
    ...     .build()
    ... )
    >>> spec.init_and_validate()
    '1.21'
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any

from runspine.core.logging import get_logger
from runspine.run.arguments import Arguments
from runspine.run.log import LogConfig
from runspine.run.restart import RestartPolicy
from runspine.run.spec import NamingStrategy, RunSpec
from runspine.run.values import freeze_mapping, freeze_sequence
from runspine.run.volume import VolumeConfig
from runspine.run.wait import WaitConfig

logger = get_logger(__name__)

ArgumentsInput = str | Sequence[str] | Arguments | None


def to_arguments(value: ArgumentsInput) -> Arguments | None:
    """Wrap a string as shell form and a sequence as exec form."""
    if value is None or isinstance(value, Arguments):
        return value
    if isinstance(value, str):
        return Arguments.of_shell(value)
    return Arguments.of_exec(value)


def parse_lenient_bool(value: str) -> bool:
    """``"true"`` in any case is True; anything else, even padded, is False."""
    return value.lower() == "true"


class RunSpecBuilder:
    """Fluent, reusable draft of a ``RunSpec``."""

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def _set(self, name: str, value: Any) -> RunSpecBuilder:
        self._values[name] = value
        return self

    # -- mappings -------------------------------------------------------

    def env(self, env: Mapping[str, str] | None) -> RunSpecBuilder:
        return self._set("env", freeze_mapping(env))

    def labels(self, labels: Mapping[str, str] | None) -> RunSpecBuilder:
        return self._set("labels", freeze_mapping(labels))

    # -- paths and plain strings ---------------------------------------

    def env_property_file(self, path: str | None) -> RunSpecBuilder:
        return self._set("env_property_file", path)

    def port_property_file(self, path: str | None) -> RunSpecBuilder:
        return self._set("port_property_file", path)

    def domainname(self, domainname: str | None) -> RunSpecBuilder:
        return self._set("domainname", domainname)

    def hostname(self, hostname: str | None) -> RunSpecBuilder:
        return self._set("hostname", hostname)

    def user(self, user: str | None) -> RunSpecBuilder:
        return self._set("user", user)

    def working_dir(self, working_dir: str | None) -> RunSpecBuilder:
        return self._set("working_dir", working_dir)

    def net(self, net: str | None) -> RunSpecBuilder:
        return self._set("net", net)

    # -- argument lists -------------------------------------------------

    def cmd(self, cmd: ArgumentsInput) -> RunSpecBuilder:
        if cmd is not None:
            self._set("cmd", to_arguments(cmd))
        return self

    def entrypoint(self, entrypoint: ArgumentsInput) -> RunSpecBuilder:
        if entrypoint is not None:
            self._set("entrypoint", to_arguments(entrypoint))
        return self

    # -- resource limits ------------------------------------------------

    def shm_size(self, shm_size: int | None) -> RunSpecBuilder:
        return self._set("shm_size", shm_size)

    def memory(self, memory: int | None) -> RunSpecBuilder:
        return self._set("memory", memory)

    def memory_swap(self, memory_swap: int | None) -> RunSpecBuilder:
        return self._set("memory_swap", memory_swap)

    # -- ordered sequences ----------------------------------------------

    def dns(self, dns: Sequence[str] | None) -> RunSpecBuilder:
        return self._set("dns", freeze_sequence(dns))

    def dns_search(self, dns_search: Sequence[str] | None) -> RunSpecBuilder:
        return self._set("dns_search", freeze_sequence(dns_search))

    def cap_add(self, cap_add: Sequence[str] | None) -> RunSpecBuilder:
        return self._set("cap_add", freeze_sequence(cap_add))

    def cap_drop(self, cap_drop: Sequence[str] | None) -> RunSpecBuilder:
        return self._set("cap_drop", freeze_sequence(cap_drop))

    def extra_hosts(self, extra_hosts: Sequence[str] | None) -> RunSpecBuilder:
        return self._set("extra_hosts", freeze_sequence(extra_hosts))

    def links(self, links: Sequence[str] | None) -> RunSpecBuilder:
        return self._set("links", freeze_sequence(links))

    def ports(self, ports: Sequence[str] | None) -> RunSpecBuilder:
        return self._set("raw_ports", freeze_sequence(ports))

    # -- flags and enums ------------------------------------------------

    def privileged(self, privileged: bool | None) -> RunSpecBuilder:
        return self._set("privileged", privileged)

    def naming_strategy(self, naming_strategy: str | None) -> RunSpecBuilder:
        return self._set("raw_naming_strategy", NamingStrategy.parse(naming_strategy))

    def skip(self, skip: str | bool | None) -> RunSpecBuilder:
        if skip is None:
            return self
        if isinstance(skip, bool):
            return self._set("skip", skip)
        return self._set("skip", parse_lenient_bool(skip))

    # -- sub-configurations ---------------------------------------------

    def volumes(self, volumes: VolumeConfig | None) -> RunSpecBuilder:
        return self._set("volumes", volumes)

    def wait(self, wait: WaitConfig | None) -> RunSpecBuilder:
        return self._set("wait", wait)

    def log(self, log: LogConfig | None) -> RunSpecBuilder:
        return self._set("log", log)

    def restart_policy(self, restart_policy: RestartPolicy | None) -> RunSpecBuilder:
        return self._set("raw_restart_policy", restart_policy)

    # ------------------------------------------------------------------

    def build(self) -> RunSpec:
        spec = replace(_EMPTY, **self._values)
        logger.debug(
            "run_spec.built",
            fields=sorted(self._values),
            net=spec.net,
            skip=spec.skip,
        )
        return spec


_EMPTY = RunSpec()


__all__ = ["RunSpecBuilder", "to_arguments", "parse_lenient_bool"]
