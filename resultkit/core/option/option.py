# resultkit/core/option/option.py
"""
Option: a value that may be absent.

- Some(value): holds a value
- Nothing(): holds nothing

Usage:
    >>> get({"user": {"name": "ada"}}, "user.name").map(str.upper).to_nullable()
    'ADA'
    >>> wrap(None).on_none(lambda: print("missing")).has_value
    missing
    False
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, List, Optional, TypeVar

from resultkit.core.errors.exceptions import InvariantViolation

if TYPE_CHECKING:
    from resultkit.core.result.result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Option(ABC, Generic[T]):
    """Common interface of Some and Nothing"""

    @property
    @abstractmethod
    def value(self) -> T:
        """Held value; raises InvariantViolation on Nothing"""

    @property
    @abstractmethod
    def has_value(self) -> bool:
        ...

    @abstractmethod
    def on_some(self, callback: Optional[Callable[[T], Any]] = None) -> "Option[T]":
        ...

    @abstractmethod
    def on_none(self, callback: Optional[Callable[[], Any]] = None) -> "Option[T]":
        ...

    def on_both(self, callback: Optional[Callable[[], Any]] = None) -> "Option[T]":
        """Call ``callback`` whatever the branch"""
        if callback is not None:
            callback()
        return self

    @abstractmethod
    def map(self, mapper: Callable[[T], U]) -> "Option[U]":
        ...

    @abstractmethod
    def bind(self, mapper: Callable[[T], "Option[U]"]) -> "Option[U]":
        ...

    @abstractmethod
    def to_nullable(self) -> Optional[T]:
        ...

    @abstractmethod
    def to_result(self, error: E) -> "Result[T, E]":
        ...


@dataclass(frozen=True)
class Some(Option[T]):
    """Option holding a value (which may itself be None)"""
    _value: T

    @property
    def value(self) -> T:
        return self._value

    @property
    def has_value(self) -> bool:
        return True

    def on_some(self, callback: Optional[Callable[[T], Any]] = None) -> "Some[T]":
        if callback is not None:
            callback(self._value)
        return self

    def on_none(self, callback: Optional[Callable[[], Any]] = None) -> "Some[T]":
        return self

    def map(self, mapper: Callable[[T], U]) -> "Some[U]":
        return Some(mapper(self._value))

    def bind(self, mapper: Callable[[T], Option[U]]) -> Option[U]:
        return mapper(self._value)

    def to_nullable(self) -> Optional[T]:
        return self._value

    def to_result(self, error: E) -> "Result[T, E]":
        from resultkit.core.result.result import Result
        return Result.success(self._value)

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


@dataclass(frozen=True)
class Nothing(Option[Any]):
    """Option holding nothing. All instances are equal."""

    @property
    def value(self) -> Any:
        raise InvariantViolation("Nothing has no value")

    @property
    def has_value(self) -> bool:
        return False

    def on_some(self, callback: Optional[Callable[[Any], Any]] = None) -> "Nothing":
        return self

    def on_none(self, callback: Optional[Callable[[], Any]] = None) -> "Nothing":
        if callback is not None:
            callback()
        return self

    def map(self, mapper: Callable[[Any], U]) -> "Nothing":
        return self

    def bind(self, mapper: Callable[[Any], Option[U]]) -> "Nothing":
        return self

    def to_nullable(self) -> None:
        return None

    def to_result(self, error: E) -> "Result[Any, E]":
        from resultkit.core.result.result import Result
        return Result.failure(error)

    def __repr__(self) -> str:
        return "Nothing()"


def some(value: T) -> Some[T]:
    return Some(value)


def nothing() -> Nothing:
    return Nothing()


def wrap(value: Optional[T]) -> Option[T]:
    """None -> Nothing, anything else (including 0 and "") -> Some"""
    return nothing() if value is None else some(value)


def _split_keys(keys: tuple) -> List[Any]:
    path: List[Any] = []
    for key in keys:
        if isinstance(key, str):
            path.extend(key.split("."))
        else:
            path.append(key)
    return path


def _as_index(key: Any) -> Optional[int]:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str) and key.isdigit():
        return int(key)
    return None


_SCALARS = (str, bytes, bytearray, int, float, complex, bool, type(None))


def get(obj: Any, *keys: Any) -> Option[Any]:
    """
    Walk ``obj`` along ``keys`` and return the value found there.

    String keys are split on "."; each step looks up a mapping key, a
    non-negative sequence index or an attribute. Any missing step gives
    Nothing.

        >>> get({"a": [{"b": 1}]}, "a.0.b")
        Some(1)
    """
    current = obj
    for key in _split_keys(keys):
        if isinstance(current, Mapping):
            if key not in current:
                return nothing()
            current = current[key]
        elif isinstance(current, _SCALARS):
            return nothing()
        elif isinstance(current, Sequence):
            index = _as_index(key)
            if index is None or not 0 <= index < len(current):
                return nothing()
            current = current[index]
        elif isinstance(key, str) and hasattr(current, key):
            current = getattr(current, key)
        else:
            return nothing()
    return some(current)


def unwrap(outer: Any) -> Option[Any]:
    """
    Flatten nested options: Some(Some(1)) -> Some(1).
    Nothing at any level gives Nothing; a plain value becomes Some.
    """
    while isinstance(outer, Option):
        if not outer.has_value:
            return nothing()
        outer = outer.value
    return some(outer)


__all__ = [
    "Option",
    "Some",
    "Nothing",
    "some",
    "nothing",
    "wrap",
    "get",
    "unwrap",
]
