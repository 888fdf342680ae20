# resultkit/core/errors/bridge.py
"""
Serialization bridge between result errors and the object error shape.

Object error shape (the only wire format):
- MESSAGE_KEY: message text, required
- CHILDREN_KEY: ordered child causes, optional, omitted when empty
- any other key: caller payload, kept verbatim

Reserved keys are structural, never payload. They are stripped from data
when parsing and written back only here when serializing.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Sequence, Tuple

from resultkit.core.contracts.v1.object_error import ObjectErrorV1
from .classify import ChildKind, classify_child
from .exceptions import InvalidObjectError
from .freezing import thaw_mapping
from .keys import CHILDREN_KEY, MESSAGE_KEY, RESERVED_KEYS, has_reserved_key
from .types import ErrorLike

logger = logging.getLogger(__name__)


def split_object(obj: Mapping[str, Any]) -> Tuple[str, Dict[str, Any], Sequence[Any]]:
    """
    Split an object error into (message, data, raw_children).

    Raises:
        InvalidObjectError: obj is not a mapping, the message is missing or
            not a string, or the children entry is not a list
    """
    if not isinstance(obj, Mapping):
        raise InvalidObjectError(
            f"object error must be a mapping, got {type(obj).__name__}",
            details={"type": type(obj).__name__},
        )

    if MESSAGE_KEY not in obj:
        raise InvalidObjectError(
            f"object error is missing required key '{MESSAGE_KEY}'",
            details={"keys": [str(k) for k in obj.keys()]},
        )
    message = obj[MESSAGE_KEY]
    if not isinstance(message, str):
        raise InvalidObjectError(
            f"'{MESSAGE_KEY}' must be a string, got {type(message).__name__}",
            details={"key": MESSAGE_KEY, "type": type(message).__name__},
        )

    raw_children = obj.get(CHILDREN_KEY)
    if raw_children is None:
        raw_children = ()
    elif not isinstance(raw_children, (list, tuple)):
        raise InvalidObjectError(
            f"'{CHILDREN_KEY}' must be a list, got {type(raw_children).__name__}",
            details={"key": CHILDREN_KEY, "type": type(raw_children).__name__},
        )

    data = dict(obj)
    for key in RESERVED_KEYS:
        data.pop(key, None)

    return message, data, raw_children


def _copy_data(data: Mapping[str, Any]) -> Dict[str, Any]:
    # frozen data is thawed so the caller gets plain, mutable containers
    if isinstance(data, MappingProxyType):
        return thaw_mapping(data)
    return dict(data)


def to_object(error: ErrorLike) -> Dict[str, Any]:
    """
    Serialize a result error (mutable or frozen) to an object error.

    Key order: data keys, then MESSAGE_KEY, then CHILDREN_KEY (only when
    there are children). A result error child whose data already holds a
    reserved key is placed in the list as-is instead of being serialized.
    Raw children appended to a builder are classified first: absent ones
    are dropped, text becomes a leaf, object errors are normalized.
    """
    return _serialize(error.message, error.data, error.children)


def _serialize(message: str, data: Mapping[str, Any], raw_children: Sequence[Any]) -> Dict[str, Any]:
    obj = _copy_data(data)
    for key in RESERVED_KEYS:
        obj.pop(key, None)
    obj[MESSAGE_KEY] = message

    children: List[Any] = []
    for child in raw_children:
        kind = classify_child(child)
        if kind is ChildKind.ABSENT:
            continue
        if kind is ChildKind.TEXT:
            children.append({MESSAGE_KEY: child})
        elif kind is ChildKind.PLAIN_OBJECT:
            if isinstance(child, ObjectErrorV1):
                child = child.to_object()
            children.append(_serialize(*split_object(child)))
        elif has_reserved_key(child.data):
            logger.debug(
                f"Passing child error through unconverted (reserved key in data): {child.message!r}"
            )
            children.append(child)
        else:
            children.append(to_object(child))

    if children:
        obj[CHILDREN_KEY] = children
    return obj


__all__ = [
    "split_object",
    "to_object",
]
