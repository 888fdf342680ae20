# resultkit/core/errors/types.py
"""
Shared structural types for the error model.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Protocol, Sequence, Union, runtime_checkable


# JSON-like value carried in error data.
# Frozen nodes store mappings as MappingProxyType and lists as tuples.
JsonValue = Union[None, bool, int, float, str, List[Any], Mapping[str, Any]]


@runtime_checkable
class ErrorLike(Protocol):
    """Anything exposing message, data and children like a result error."""

    message: str
    data: Mapping[str, JsonValue]
    children: Sequence[Any]
