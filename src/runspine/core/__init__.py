"""Ambient primitives for run-spine: errors, logging, settings."""

from runspine.core.errors import (
    ConfigurationError,
    ErrorCategory,
    ErrorContext,
    InvalidParameterError,
    MalformedArgumentListError,
    RunSpineError,
    UnknownEnumValueError,
    UnsupportedApiVersionError,
)
from runspine.core.logging import configure_logging, get_logger

__all__ = [
    "ConfigurationError",
    "ErrorCategory",
    "ErrorContext",
    "InvalidParameterError",
    "MalformedArgumentListError",
    "RunSpineError",
    "UnknownEnumValueError",
    "UnsupportedApiVersionError",
    "configure_logging",
    "get_logger",
]
