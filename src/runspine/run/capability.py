"""Minimum runtime API version required by a finished run spec.

Two outcomes are kept apart on purpose:

- A structurally broken ``cmd`` / ``entrypoint`` raises
  ``MalformedArgumentListError``; the spec must not be launched.
- An elevated API requirement is returned, never raised. The caller compares
  it against the runtime it talks to (``ensure_api_version``) and decides
  whether to abort with "runtime too old".
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from runspine.core.errors import InvalidParameterError, UnsupportedApiVersionError
from runspine.core.logging import get_logger

if TYPE_CHECKING:
    from runspine.run.spec import RunSpec

logger = get_logger(__name__)

CUSTOM_NETWORK_API_VERSION = "1.21"
"""User-defined networks arrived with runtime API 1.21 (Docker 1.9)."""


def resolve_api_requirement(spec: RunSpec) -> str | None:
    """Validate ``spec`` and return the API version it needs, or ``None``."""
    if spec.entrypoint is not None:
        spec.entrypoint.validate("entrypoint")
    if spec.cmd is not None:
        spec.cmd.validate("cmd")

    mode = spec.networking_mode
    if mode.is_custom_network:
        logger.debug(
            "run_spec.api_requirement",
            required=CUSTOM_NETWORK_API_VERSION,
            network=mode.network_name,
        )
        return CUSTOM_NETWORK_API_VERSION
    return None


def parse_api_version(version: str) -> tuple[int, ...]:
    """``"1.21"`` -> ``(1, 21)``; a leading ``v`` is accepted."""
    text = version.strip().lstrip("vV")
    try:
        parts = tuple(int(part) for part in text.split("."))
    except ValueError as exc:
        raise InvalidParameterError(
            f"Not an API version: {version!r}", field="api_version", value=version, cause=exc
        ) from exc
    if not parts:
        raise InvalidParameterError(
            f"Not an API version: {version!r}", field="api_version", value=version
        )
    return parts


def api_version_satisfied(required: str | None, available: str) -> bool:
    """True when ``available`` is at least ``required`` (``None`` always is)."""
    if required is None:
        return True
    return parse_api_version(available) >= parse_api_version(required)


def ensure_api_version(required: str | None, available: str) -> None:
    """Raise ``UnsupportedApiVersionError`` when the runtime is too old."""
    if required is not None and not api_version_satisfied(required, available):
        raise UnsupportedApiVersionError(required, available)


__all__ = [
    "CUSTOM_NETWORK_API_VERSION",
    "resolve_api_requirement",
    "parse_api_version",
    "api_version_satisfied",
    "ensure_api_version",
]
