# resultkit/core/contracts/v1/object_error.py
"""
ObjectErrorV1: stable wire contract for the object error shape.

Shape:
- "error": message text (required)
- "inners": ordered child causes (optional); each entry is a nested object
  error, a plain message string, or null (dropped)
- any other key: caller payload, preserved verbatim

Design principles:
- Reserved keys are structural, never payload
- Unknown keys are allowed and kept in their original order
- Checks the shape only; payload values are opaque
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from resultkit.core.errors.exceptions import FailedResultError, InvalidObjectError
from resultkit.core.errors.keys import CHILDREN_KEY, MESSAGE_KEY


class ObjectErrorV1(BaseModel):
    """
    Validated object error.

    Payload keys live in ``model_extra``; the structural fields are exposed
    as ``message`` and ``children``.
    """
    model_config = ConfigDict(extra="allow")

    message: str = Field(alias=MESSAGE_KEY, description="Error message")
    children: Optional[List[Union["ObjectErrorV1", str, None]]] = Field(
        default=None,
        alias=CHILDREN_KEY,
        description="Child causes (null entries are dropped)",
    )

    @property
    def payload(self) -> Dict[str, Any]:
        """Caller payload (every non-reserved key)"""
        return dict(self.model_extra or {})

    def to_object(self) -> Dict[str, Any]:
        """Convert back to a plain object error"""
        obj = self.payload
        obj[MESSAGE_KEY] = self.message

        children = [
            child.to_object() if isinstance(child, ObjectErrorV1) else child
            for child in (self.children or [])
            if child is not None
        ]
        if children:
            obj[CHILDREN_KEY] = children
        return obj

    def to_error(self) -> FailedResultError:
        return FailedResultError(self.message)


ObjectErrorV1.model_rebuild()


def validate_object_error(payload: Mapping[str, Any]) -> ObjectErrorV1:
    """
    Validate a plain mapping against the object error shape.

    Raises:
        InvalidObjectError: payload is not an object error
    """
    if not isinstance(payload, Mapping):
        raise InvalidObjectError(
            f"Invalid object error: expected a mapping, got {type(payload).__name__}",
            details={"type": type(payload).__name__},
        )
    try:
        return ObjectErrorV1.model_validate(dict(payload))
    except ValidationError as e:
        raise InvalidObjectError(
            f"Invalid object error: {e.error_count()} validation error(s)",
            details={"errors": e.errors(include_url=False, include_context=False)},
        ) from e


__all__ = [
    "ObjectErrorV1",
    "validate_object_error",
]
