# resultkit/core/errors/freezing.py
"""
Deep freeze / thaw of JSON-like values.

Frozen form:
- mappings -> MappingProxyType over a fresh dict
- lists / tuples -> tuple
- sets -> frozenset
- everything else is kept as-is (scalars are already immutable)
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Mapping


def deep_freeze(value: Any) -> Any:
    """Recursively copy ``value`` into immutable containers"""
    if isinstance(value, Mapping):
        return freeze_mapping(value)
    if isinstance(value, (list, tuple)):
        return tuple(deep_freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(deep_freeze(item) for item in value)
    return value


def freeze_mapping(data: Mapping[Any, Any]) -> Mapping[Any, Any]:
    frozen = {}
    for k, v in data.items():
        frozen[k] = deep_freeze(v)
    return MappingProxyType(frozen)


def thaw(value: Any) -> Any:
    """Inverse of deep_freeze: plain dicts and lists, safe to mutate"""
    if isinstance(value, Mapping):
        return thaw_mapping(value)
    if isinstance(value, (list, tuple)):
        return [thaw(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return [thaw(item) for item in value]
    return value


def thaw_mapping(data: Mapping[Any, Any]) -> Dict[Any, Any]:
    return {k: thaw(v) for k, v in data.items()}


__all__ = [
    "deep_freeze",
    "freeze_mapping",
    "thaw",
    "thaw_mapping",
]
