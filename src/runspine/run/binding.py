"""Parameter binding: primitive mappings in, ``RunSpec`` out.

A build tool hands over run parameters as primitives read from its project
file. ``RunSpecParams`` (Pydantic v2) checks their shape, then
``run_spec_from_mapping`` drives a ``RunSpecBuilder`` with them, so every
normalization rule of the builder applies exactly once.

Keys are accepted in snake_case or in the camelCase the project files use
(``workingDir``, ``portPropertyFile``, ``restartPolicy``, ...). Unknown keys
are rejected.

Example::

    >>> spec = run_spec_from_mapping({
    ...     "net": "my-overlay",
    ...     "ports": ["8080:80", "jolokia.port:8778"],
    ...     "restartPolicy": {"name": "on-failure", "retry": 3},
    ...     "skip": "false",
    ... })
    >>> spec.init_and_validate()
    '1.21'

Architecture Decisions:
    - Pydantic for user input, dataclasses for the built value: mirrors the
      split between configuration models and frozen specs elsewhere.
    - ``skip`` stays a string here: the lenient parse belongs to the builder.
    - Pydantic ``ValidationError`` is wrapped into ``InvalidParameterError``
      so callers only need to catch ``ConfigurationError``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from runspine.core.errors import InvalidParameterError
from runspine.core.logging import get_logger
from runspine.run.arguments import Arguments
from runspine.run.builder import RunSpecBuilder
from runspine.run.log import LogConfig
from runspine.run.restart import RESTART_POLICY_NAMES, RestartPolicy
from runspine.run.spec import RunSpec
from runspine.run.volume import VolumeConfig
from runspine.run.wait import WaitConfig

logger = get_logger(__name__)


class _Params(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )


class ArgumentsParams(_Params):
    """``{"shell": "..."}`` or ``{"exec": [...]}``; both is a conflict."""

    shell: str | None = None
    exec: list[str | None] | None = None

    def to_arguments(self) -> Arguments:
        return Arguments(
            shell=self.shell,
            exec=tuple(self.exec) if self.exec is not None else None,
        )


class RestartPolicyParams(_Params):
    name: str | None = None
    retry: int = Field(default=0, ge=0)

    @field_validator("name")
    @classmethod
    def _known_name(cls, value: str | None) -> str | None:
        if value is not None and value not in RESTART_POLICY_NAMES:
            raise ValueError(
                f"unknown restart policy {value!r}; expected one of "
                f"{', '.join(RESTART_POLICY_NAMES)}"
            )
        return value

    def to_policy(self) -> RestartPolicy:
        return RestartPolicy(name=self.name, retry=self.retry)


class WaitParams(_Params):
    time: int | None = Field(default=None, ge=0)
    url: str | None = None
    method: str | None = None
    status: str | None = None
    log: str | None = None
    tcp_host: str | None = None
    tcp_ports: list[int] | None = None
    health_check: bool | None = Field(default=None, alias="healthy")
    exit: int | None = None
    shutdown: int | None = Field(default=None, ge=0)
    kill: int | None = Field(default=None, ge=0)
    exec_post_start: str | None = Field(default=None, alias="postStart")
    exec_pre_stop: str | None = Field(default=None, alias="preStop")

    def to_config(self) -> WaitConfig:
        return WaitConfig(**self.model_dump(by_alias=False))


class LogParams(_Params):
    enabled: bool | None = None
    prefix: str | None = None
    date: str | None = None
    color: str | None = None
    file: str | None = None
    driver_name: str | None = Field(default=None, alias="driverName")
    driver_opts: dict[str, str] | None = Field(default=None, alias="driverOpts")

    def to_config(self) -> LogConfig:
        return LogConfig(**self.model_dump(by_alias=False))


class VolumeParams(_Params):
    from_: list[str] | None = Field(default=None, alias="from")
    bind: list[str] | None = None

    def to_config(self) -> VolumeConfig:
        return VolumeConfig(from_=self.from_, bind=self.bind)


class RunSpecParams(_Params):
    """Primitive run parameters as a build tool would supply them."""

    env: dict[str, str] | None = None
    labels: dict[str, str] | None = None
    env_property_file: str | None = None

    cmd: str | list[str | None] | ArgumentsParams | None = None
    entrypoint: str | list[str | None] | ArgumentsParams | None = None

    domainname: str | None = None
    hostname: str | None = None
    user: str | None = None
    working_dir: str | None = None

    shm_size: int | None = Field(default=None, ge=0)
    memory: int | None = Field(default=None, ge=0)
    memory_swap: int | None = Field(default=None, ge=-1)

    port_property_file: str | None = None
    net: str | None = None

    dns: list[str] | None = None
    dns_search: list[str] | None = None
    cap_add: list[str] | None = None
    cap_drop: list[str] | None = None
    extra_hosts: list[str] | None = None
    links: list[str] | None = None

    privileged: bool | None = None
    ports: list[str] | None = None
    naming_strategy: str | None = None

    volumes: VolumeParams | None = None
    wait: WaitParams | None = None
    log: LogParams | None = None
    restart_policy: RestartPolicyParams | None = None

    skip: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _skip_as_text(cls, data: Any) -> Any:
        # Booleans and numbers from JSON/TOML go through the same lenient text parse.
        if isinstance(data, Mapping) and isinstance(data.get("skip"), (bool, int, float)):
            data = dict(data)
            data["skip"] = str(data["skip"]).lower()
        return data

    def apply(self, builder: RunSpecBuilder) -> RunSpecBuilder:
        """Feed every parameter to ``builder``; unset ones are passed as None."""
        (
            builder.env(self.env)
            .labels(self.labels)
            .env_property_file(self.env_property_file)
            .cmd(_arguments(self.cmd))
            .entrypoint(_arguments(self.entrypoint))
            .domainname(self.domainname)
            .hostname(self.hostname)
            .user(self.user)
            .working_dir(self.working_dir)
            .shm_size(self.shm_size)
            .memory(self.memory)
            .memory_swap(self.memory_swap)
            .port_property_file(self.port_property_file)
            .net(self.net)
            .dns(self.dns)
            .dns_search(self.dns_search)
            .cap_add(self.cap_add)
            .cap_drop(self.cap_drop)
            .extra_hosts(self.extra_hosts)
            .links(self.links)
            .privileged(self.privileged)
            .ports(self.ports)
            .naming_strategy(self.naming_strategy)
            .skip(self.skip)
        )
        if self.volumes is not None:
            builder.volumes(self.volumes.to_config())
        if self.wait is not None:
            builder.wait(self.wait.to_config())
        if self.log is not None:
            builder.log(self.log.to_config())
        if self.restart_policy is not None:
            builder.restart_policy(self.restart_policy.to_policy())
        return builder


def _arguments(value: str | list[str | None] | ArgumentsParams | None) -> Any:
    if isinstance(value, ArgumentsParams):
        return value.to_arguments()
    return value


def parse_params(data: Mapping[str, Any]) -> RunSpecParams:
    """Validate a primitive mapping; raise ``InvalidParameterError`` on bad shape."""
    try:
        return RunSpecParams.model_validate(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise InvalidParameterError(
            f"Invalid run parameter {location or '<root>'}: {first['msg']}",
            field=location or None,
            cause=exc,
        ).with_context(error_count=exc.error_count()) from exc


def run_spec_from_mapping(data: Mapping[str, Any]) -> RunSpec:
    """Bind ``data`` onto a fresh builder and build the spec."""
    params = parse_params(data)
    logger.debug("run_spec.bound", keys=sorted(params.model_fields_set))
    return params.apply(RunSpecBuilder()).build()


__all__ = [
    "ArgumentsParams",
    "LogParams",
    "RestartPolicyParams",
    "RunSpecParams",
    "VolumeParams",
    "WaitParams",
    "parse_params",
    "run_spec_from_mapping",
]
