# resultkit/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


class ResultKitError(Exception):
    """Base class for every recoverable resultkit exception."""


@dataclass
class FailedResultError(ResultKitError):
    """
    Exception raised when a failed result is unwrapped.

    Carries only the top-level message of the structured error. Data and
    children stay on the structured error and are rendered explicitly.
    """
    message: str

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


@dataclass
class InvalidObjectError(ResultKitError, ValueError):
    """A plain object does not have the object error shape."""
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "INVALID_OBJECT_ERROR",
            "message": self.message,
            "details": self.details,
        }


class InvariantViolation(AssertionError):
    """
    Programmer error: reading a value from a failed result or from Nothing,
    or reading the error of a succeeded result.

    Not a ResultKitError: ``except ResultKitError`` handlers never catch it.
    """
