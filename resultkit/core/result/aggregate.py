# resultkit/core/result/aggregate.py
"""
Collapse many options / results into one.
"""

from __future__ import annotations

from typing import Iterable, List, TypeVar

from resultkit.core.option.option import Option, nothing, some
from .result import Result

T = TypeVar("T")
E = TypeVar("E")


def collect_options(options: Iterable[Option[T]]) -> Option[List[T]]:
    """Nothing if any option is Nothing, otherwise Some(list of values)"""
    values: List[T] = []
    for option in options:
        if not option.has_value:
            return nothing()
        values.append(option.value)
    return some(values)


def collect_results(results: Iterable[Result[T, E]]) -> Result[List[T], E]:
    """First failure if any, otherwise success(list of values)"""
    values: List[T] = []
    for result in results:
        if not result.ok:
            return Result.failure(result.error)
        values.append(result.value)
    return Result.success(values)


__all__ = [
    "collect_options",
    "collect_results",
]
