"""Copy-on-store helpers that keep run specs immutable.

Builders hand caller-owned lists and dicts to frozen dataclasses. These
helpers take a private copy so later mutation by the caller cannot change a
built spec.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any


def freeze_sequence(values: Iterable[str] | None) -> tuple[str, ...] | None:
    """Copy into a tuple, keeping order; ``None`` stays ``None``."""
    if values is None:
        return None
    if isinstance(values, str):
        return (values,)
    return tuple(values)


def freeze_mapping(values: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
    """Copy into a read-only mapping, keeping insertion order."""
    if values is None:
        return None
    return MappingProxyType(dict(values))


def hash_key(value: Any) -> Any:
    """Hashable stand-in for a frozen value; mappings hash by their item set."""
    if isinstance(value, Mapping):
        return frozenset(value.items())
    return value


def thaw(value: Any) -> Any:
    """Turn frozen containers back into plain JSON-friendly ones."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw(item) for item in value]
    return value


__all__ = ["freeze_sequence", "freeze_mapping", "hash_key", "thaw"]
