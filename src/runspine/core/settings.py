"""Environment-driven settings for run-spine.

``RunSpineSettings`` reads ``RUNSPINE_*`` environment variables (and a
``.env`` file when present). Only the CLI consumes it; the ``runspine.run``
core takes no configuration beyond what is handed to the builder.

Examples:
    >>> RunSpineSettings(api_version="1.20").api_version
    '1.20'

Tags:
    settings, configuration, pydantic, environment, run-spine
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RunSpineSettings(BaseSettings):
    """Settings shared by the run-spine command line tools.

    Fields
    ──────
    log_level    : Structlog log level
    log_json     : Force JSON (True) or console (False) output; None = auto
    service_name : ``service.name`` attached to every log record
    api_version  : Runtime API version to gate ``check`` against
    """

    model_config = SettingsConfigDict(
        env_prefix="RUNSPINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", description="Structlog log level")
    log_json: bool | None = Field(default=None, description="JSON log output; None = auto")
    service_name: str = Field(default="run-spine", description="Service name in log records")
    api_version: str | None = Field(
        default=None,
        description="Runtime API version available, e.g. '1.41'",
    )


@lru_cache(maxsize=1)
def get_settings() -> RunSpineSettings:
    """Return the process-wide settings (cached)."""
    return RunSpineSettings()


def clear_settings_cache() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()


__all__ = ["RunSpineSettings", "get_settings", "clear_settings_cache"]
