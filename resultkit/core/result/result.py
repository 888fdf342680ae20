# resultkit/core/result/result.py
"""
Result: success or failure of an operation.

A failed result usually carries a FrozenResultError; get_or_throw() turns
it into an exception that holds only the top-level message.

    >>> error = ResultError("upload failed", {"file": "a.bin"}).freeze()
    >>> Result.failure(error).map(len).ok
    False
    >>> Result.success("abc").map(len).get_or_throw()
    3
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Generic, Optional, TypeVar

from resultkit.core.errors.exceptions import FailedResultError, InvariantViolation
from resultkit.core.errors.keys import MESSAGE_KEY
from resultkit.core.option.option import Option, nothing, some

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Result(Generic[T, E]):
    """
    Outcome of an operation: a value on success, an error on failure.

    Create with Result.success / Result.failure.
    """

    __slots__ = ("_ok", "_payload")

    def __init__(self, ok: bool, payload: Any):
        self._ok = ok
        self._payload = payload

    # -------- factories --------

    @classmethod
    def success(cls, value: T) -> "Result[T, Any]":
        return cls(True, value)

    @classmethod
    def failure(cls, error: E) -> "Result[Any, E]":
        return cls(False, error)

    # -------- state --------

    @property
    def ok(self) -> bool:
        return self._ok

    @property
    def value(self) -> T:
        if not self._ok:
            raise InvariantViolation("Failed result has no value")
        return self._payload

    @property
    def error(self) -> E:
        if self._ok:
            raise InvariantViolation("Succeeded result has no error")
        return self._payload

    # -------- callbacks --------

    def on_ok(self, callback: Optional[Callable[[T], Any]] = None) -> "Result[T, E]":
        if self._ok and callback is not None:
            callback(self._payload)
        return self

    def on_error(self, callback: Optional[Callable[[E], Any]] = None) -> "Result[T, E]":
        if not self._ok and callback is not None:
            callback(self._payload)
        return self

    def on_both(self, callback: Optional[Callable[[], Any]] = None) -> "Result[T, E]":
        if callback is not None:
            callback()
        return self

    # -------- composition --------

    def map(self, mapper: Callable[[T], U]) -> "Result[U, E]":
        if self._ok:
            return Result.success(mapper(self._payload))
        return Result.failure(self._payload)

    def bind(self, mapper: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        if self._ok:
            return mapper(self._payload)
        return Result.failure(self._payload)

    # -------- exits --------

    def get_or_throw(self) -> T:
        """
        Return the value, or raise the error converted to an exception.

        Conversion of the error:
        1. has a callable to_error() -> its return value
        2. is an exception -> raised as-is
        3. has a string message under the reserved message key (mapping key
           or attribute) -> FailedResultError(message)
        4. anything else -> FailedResultError(str(error))
        """
        if self._ok:
            return self._payload
        raise _to_exception(self._payload)

    def throw_when_failed(self) -> None:
        self.get_or_throw()

    def to_option(self) -> Option[T]:
        return some(self._payload) if self._ok else nothing()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._ok == other._ok and self._payload == other._payload

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._ok:
            return f"Result.success({self._payload!r})"
        return f"Result.failure({self._payload!r})"


def _to_exception(error: Any) -> BaseException:
    to_error = getattr(error, "to_error", None)
    if callable(to_error):
        exc = to_error()
        if isinstance(exc, BaseException):
            return exc
        return FailedResultError(str(exc))

    if isinstance(error, BaseException):
        return error

    if isinstance(error, Mapping) and MESSAGE_KEY in error:
        return FailedResultError(str(error[MESSAGE_KEY]))

    message = getattr(error, MESSAGE_KEY, None)
    if isinstance(message, str):
        return FailedResultError(message)

    return FailedResultError(str(error))


__all__ = [
    "Result",
]
