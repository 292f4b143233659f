"""run-spine: declarative container run specifications for image builds.

Example:
    >>> from runspine import RunSpecBuilder
    >>> spec = RunSpecBuilder().ports(["8080:80"]).naming_strategy("ALIAS").build()
    >>> spec.naming_strategy.value
    'alias'
"""

from __future__ import annotations

from runspine.core.errors import (
    ConfigurationError,
    MalformedArgumentListError,
    UnknownEnumValueError,
)
from runspine.run import (
    Arguments,
    NamingStrategy,
    NetworkingMode,
    RestartPolicy,
    RunSpec,
    RunSpecBuilder,
)

__version__ = "0.1.0"

__all__ = [
    "Arguments",
    "ConfigurationError",
    "MalformedArgumentListError",
    "NamingStrategy",
    "NetworkingMode",
    "RestartPolicy",
    "RunSpec",
    "RunSpecBuilder",
    "UnknownEnumValueError",
    "__version__",
]
