# resultkit/core/errors/classify.py
"""
Child classification.

Every child handed to a result error (constructor argument, or an entry of
the children list of an object error) falls into exactly one ChildKind.
Callers dispatch on the kind instead of probing the value shape themselves.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from resultkit.core.contracts.v1.object_error import ObjectErrorV1
from .types import ErrorLike


class ChildKind(str, Enum):
    """
    Kind of a child error input.

    - STRUCTURED: already a result error (mutable, frozen, or look-alike)
    - PLAIN_OBJECT: object error shape (mapping or ObjectErrorV1)
    - TEXT: non-empty message string, becomes a leaf
    - ABSENT: None or empty string, dropped
    """
    STRUCTURED = "structured"
    PLAIN_OBJECT = "plain_object"
    TEXT = "text"
    ABSENT = "absent"


def classify_child(value: Any) -> ChildKind:
    if value is None:
        return ChildKind.ABSENT
    if isinstance(value, str):
        return ChildKind.TEXT if value else ChildKind.ABSENT
    if isinstance(value, (Mapping, ObjectErrorV1)):
        return ChildKind.PLAIN_OBJECT
    if isinstance(value, ErrorLike):
        return ChildKind.STRUCTURED
    raise TypeError(
        f"child error must be a result error, an object error, a string or None, "
        f"got {type(value).__name__}"
    )


__all__ = [
    "ChildKind",
    "classify_child",
]
