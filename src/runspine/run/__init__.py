"""run-spine core: the declarative run specification for a built image.

Turns sparse, user-authored run parameters into a fully-defaulted,
immutable ``RunSpec`` and reports the minimum runtime API version the spec
needs. Pure data transformation: no networking, no process execution, no
file I/O.

Key Concepts:
    RunSpecBuilder: Mutable draft; ``build()`` converts it into a RunSpec.
    RunSpec: Frozen aggregate with read-time defaults for ``ports``,
        ``naming_strategy`` and ``restart_policy``.
    Arguments: Tagged union (shell string / exec tokens) for cmd/entrypoint.
    NetworkingMode: Classification of the raw ``net`` token.
    resolve_api_requirement: Validation plus minimum API version.

Related Modules:
    - :mod:`runspine.run.binding`: primitive mapping -> RunSpec
    - :mod:`runspine.core.errors`: ConfigurationError hierarchy
    - :mod:`runspine.cli`: ``runspine check`` / ``runspine show``

Example:
    >>> from runspine.run import RunSpecBuilder
    >>> RunSpecBuilder().net("host").build().init_and_validate() is None
    True
"""

from __future__ import annotations

from runspine.run.arguments import Arguments, ArgumentsForm
from runspine.run.builder import RunSpecBuilder
from runspine.run.capability import (
    CUSTOM_NETWORK_API_VERSION,
    api_version_satisfied,
    ensure_api_version,
    resolve_api_requirement,
)
from runspine.run.log import LogConfig
from runspine.run.networking import NetworkingMode, NetworkMode
from runspine.run.restart import RESTART_POLICY_NAMES, RestartPolicy
from runspine.run.spec import NamingStrategy, RunSpec
from runspine.run.volume import VolumeConfig
from runspine.run.wait import WaitConfig

__all__ = [
    "Arguments",
    "ArgumentsForm",
    "CUSTOM_NETWORK_API_VERSION",
    "LogConfig",
    "NamingStrategy",
    "NetworkMode",
    "NetworkingMode",
    "RESTART_POLICY_NAMES",
    "RestartPolicy",
    "RunSpec",
    "RunSpecBuilder",
    "VolumeConfig",
    "WaitConfig",
    "api_version_satisfied",
    "ensure_api_version",
    "resolve_api_requirement",
]
