# resultkit/core/errors/builder.py
"""
ResultError: mutable error builder.

Accumulates a message, free-form data and child errors. Freeze it to get an
immutable FrozenResultError that can travel as a Result's error payload.

    >>> error = ResultError("3 of 5 uploads failed", {"batch": 7})
    >>> error.children.append(ResultError("timeout", {"file": "a.bin"}))
    >>> error.data["retry"] = True
    >>> frozen = error.freeze()
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from resultkit.core.contracts.v1.object_error import ObjectErrorV1
from . import bridge
from .classify import ChildKind, classify_child
from .exceptions import FailedResultError
from .freezing import thaw_mapping
from .frozen import FrozenResultError
from .types import ErrorLike, JsonValue

logger = logging.getLogger(__name__)


class ResultError:
    """
    Mutable result error.

    ``message``, ``data`` and ``children`` are plain attributes. Callers set
    data entries and append children directly; nothing is validated until
    the error is frozen, rendered or serialized.
    """

    def __init__(
        self,
        message: str,
        data: Optional[Mapping[str, Any]] = None,
        *children: Any,
    ):
        """
        Args:
            message: Human-readable description
            data: Structured context, shallow-copied
            *children: Child causes. None and "" are skipped, strings become
                leaf errors, ResultError instances are kept by reference,
                other result errors and object errors are converted.
        """
        self.message = message
        self.data: Dict[str, JsonValue] = dict(data or {})
        self.children: List[ResultError] = []

        for child in children:
            converted = _coerce_child(child, keep_builders=True)
            if converted is not None:
                self.children.append(converted)

    # -------- factories --------

    @classmethod
    def from_object(cls, obj: Union[Mapping[str, Any], ObjectErrorV1]) -> "ResultError":
        """
        Build from an object error.

        Reserved keys become message and children; every other key is copied
        into data.

        Raises:
            InvalidObjectError: obj does not have the object error shape
        """
        if isinstance(obj, ObjectErrorV1):
            obj = obj.to_object()

        message, data, raw_children = bridge.split_object(obj)

        error = cls(message)
        error.data.update(data)
        for raw in raw_children:
            child = _coerce_child(raw, keep_builders=False)
            if child is not None:
                error.children.append(child)
        return error

    @classmethod
    def from_error(cls, error: ErrorLike) -> "ResultError":
        """Copy any result error (mutable or frozen) field by field"""
        copy = cls(error.message, thaw_mapping(error.data))
        for raw in error.children:
            child = _coerce_child(raw, keep_builders=False)
            if child is not None:
                copy.children.append(child)
        return copy

    # -------- conversions --------

    def to_object(self) -> Dict[str, Any]:
        """Serialize to an object error"""
        return bridge.to_object(self)

    def freeze(self) -> FrozenResultError:
        """
        Snapshot the current state.

        The builder stays usable; later changes do not reach earlier
        snapshots.
        """
        return FrozenResultError.from_builder(self)

    def to_error(self) -> FailedResultError:
        """Exception carrying only the top-level message"""
        return FailedResultError(self.message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResultError):
            return NotImplemented
        return (
            self.message == other.message
            and self.data == other.data
            and self.children == other.children
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"ResultError(message={self.message!r}, data={self.data!r}, "
            f"children={self.children!r})"
        )


def _coerce_child(value: Any, *, keep_builders: bool) -> Optional[ResultError]:
    kind = classify_child(value)

    if kind is ChildKind.ABSENT:
        logger.debug("Dropping absent child error")
        return None
    if kind is ChildKind.TEXT:
        return ResultError(value)
    if kind is ChildKind.PLAIN_OBJECT:
        return ResultError.from_object(value)

    # STRUCTURED
    if keep_builders and isinstance(value, ResultError):
        return value
    return ResultError.from_error(value)


__all__ = [
    "ResultError",
]
