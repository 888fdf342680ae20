# resultkit/core/option/__init__.py
"""
Optional values.

No side effects on import.
"""

from .option import Option, Some, Nothing, some, nothing, wrap, get, unwrap

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
