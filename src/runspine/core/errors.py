"""
Structured error types for run-spine.

Every error raised while turning user-authored run parameters into a
``RunSpec`` extends ``RunSpineError`` and carries:

- **Category:** What kind of error (config, validation, internal)
- **Retryable:** Always ``False`` here; a bad configuration must be fixed
- **Context:** The offending field and value, plus free-form metadata
- **Cause:** Chained underlying exception for root cause analysis

Architecture:
    ::

        ┌───────────────────────────────────────────────────────────┐
        │                      RunSpineError                         │
        │           (category, retryable, context, cause)            │
        ├───────────────────────────────────────────────────────────┤
        │                   ConfigurationError                       │
        │                       (CONFIG)                             │
        │        │                  │                   │            │
        │  MalformedArgument   UnknownEnumValue   InvalidParameter   │
        │  ListError           Error              Error              │
        │                                                            │
        │                 UnsupportedApiVersionError                 │
        └───────────────────────────────────────────────────────────┘

Two policies meet here. Argument lists and enum-valued fields are
authoritative: malformed input raises. Cosmetic flags such as ``skip`` fall
back to a safe default and never reach this module.

Examples:
    >>> err = MalformedArgumentListError("entrypoint is empty", field="entrypoint")
    >>> err.category
    <ErrorCategory.CONFIG: 'CONFIG'>
    >>> err.to_dict()["context"]
    {'field': 'entrypoint'}

Tags:
    error-handling, exception-hierarchy, configuration, run-spine
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field as dc_field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and reporting."""

    CONFIG = "CONFIG"  # Invalid or inconsistent run parameters
    VALIDATION = "VALIDATION"  # Primitive values of the wrong shape
    INTERNAL = "INTERNAL"  # Bugs, unexpected state
    UNKNOWN = "UNKNOWN"  # Uncategorized errors


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Attributes:
        field: Name of the run parameter that was rejected
        value: The rejected value, if useful for the message
        metadata: Additional key-value pairs
    """

    field: str | None = None
    value: Any = None
    metadata: dict[str, Any] = dc_field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result: dict[str, Any] = {}
        if self.field is not None:
            result["field"] = self.field
        if self.value is not None:
            result["value"] = self.value
        if self.metadata:
            result.update(self.metadata)
        return result


class RunSpineError(Exception):
    """
    Base exception for all run-spine errors.

    Subclasses set ``default_category`` and ``default_retryable`` to give
    their domain sensible defaults.

    Examples:
        >>> error = RunSpineError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.retryable
        False

        Adding context fluently:

        >>> error = RunSpineError("bad value").with_context(field="net")
        >>> error.context.field
        'net'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    default_retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
        category: ErrorCategory | None = None,
        retryable: bool | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.retryable = retryable if retryable is not None else self.default_retryable
        self.context = context or ErrorContext()
        if field is not None:
            self.context.field = field
        if value is not None:
            self.context.value = value
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> RunSpineError:
        """
        Add context to this error (fluent API).

        Usage:
            raise ConfigurationError("bad").with_context(field="cmd", source="pom")
        """
        for key, value in kwargs.items():
            if key in ("field", "value"):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
            "retryable": self.retryable,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# CONFIGURATION ERRORS (Never Retryable)
# =============================================================================


class ConfigurationError(RunSpineError):
    """
    Run configuration error.

    Fatal to the configuration build: the caller must not launch a
    container from a spec that raised one of these.
    """

    default_category = ErrorCategory.CONFIG
    default_retryable = False


class MalformedArgumentListError(ConfigurationError):
    """An argument list (cmd or entrypoint) is internally inconsistent."""


class UnknownEnumValueError(ConfigurationError, ValueError):
    """A string-valued enum setter received a value matching no variant."""

    def __init__(self, field: str, value: str, allowed: list[str]):
        self.allowed = allowed
        super().__init__(
            f"Unknown value {value!r} for {field}; expected one of: {', '.join(allowed)}",
            field=field,
            value=value,
        )


class InvalidParameterError(ConfigurationError):
    """A bound run parameter has the wrong primitive shape."""

    default_category = ErrorCategory.VALIDATION


class UnsupportedApiVersionError(ConfigurationError):
    """The container runtime is older than the API version a spec requires."""

    def __init__(self, required: str, available: str):
        self.required = required
        self.available = available
        super().__init__(
            f"Run configuration requires runtime API {required}, "
            f"but the runtime only offers {available}",
            field="api_version",
            value=available,
        )


# =============================================================================
# HELPERS
# =============================================================================


def categorize_error(error: Exception) -> ErrorCategory:
    """Get the category of an error."""
    if isinstance(error, RunSpineError):
        return error.category
    if isinstance(error, (ValueError, TypeError)):
        return ErrorCategory.VALIDATION
    return ErrorCategory.UNKNOWN


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "RunSpineError",
    "ConfigurationError",
    "MalformedArgumentListError",
    "UnknownEnumValueError",
    "InvalidParameterError",
    "UnsupportedApiVersionError",
    "categorize_error",
]
