# resultkit/__init__.py
"""
resultkit - explicit absent values, explicit failures, structured errors

User-facing API:
- Option (Some / Nothing): a value that may be absent
- Result: success or failure of an operation
- ResultError: mutable structured error (message + data + child errors)
- FrozenResultError: immutable snapshot, renders to text

Basic usage:

Structured errors:
    >>> from resultkit import ResultError
    >>> error = ResultError("sync failed", {"job": 42}, "disk full", None)
    >>> error.children.append(ResultError("network down", {"host": "db1"}))
    >>> print(error.freeze())
    ! sync failed
    + "job": 42
      ! disk full
      ! network down
      + "host": "db1"

Object error shape (wire format):
    >>> error.to_object()["error"]
    'sync failed'
    >>> ResultError.from_object({"error": "boom", "inners": ["cause"], "code": 7}).data
    {'code': 7}

Results:
    >>> from resultkit import Result
    >>> Result.failure(error.freeze()).get_or_throw()
    Traceback (most recent call last):
    ...
    resultkit.core.errors.exceptions.FailedResultError: sync failed
"""

__version__ = "0.1.0"

# Structured errors
from .core.errors.builder import ResultError
from .core.errors.frozen import FrozenResultError, escape_key
from .core.errors.keys import MESSAGE_KEY, CHILDREN_KEY, RESERVED_KEYS
from .core.errors.classify import ChildKind, classify_child
from .core.errors.types import ErrorLike
from .core.errors.exceptions import (
    ResultKitError,
    FailedResultError,
    InvalidObjectError,
    InvariantViolation,
)

# Wire contract
from .core.contracts import ObjectErrorV1, validate_object_error

# Option / Result
from .core.option import Option, Some, Nothing, some, nothing
from .core.option import wrap as wrap_option, get as get_option, unwrap as unwrap_option
from .core.result import Result, collect_options, collect_results

# Configuration
from .config import FormatConfig, ResultKitConfig, load_config

__all__ = [
    # Version
    "__version__",

    # Structured errors
    "ResultError",
    "FrozenResultError",
    "escape_key",
    "MESSAGE_KEY",
    "CHILDREN_KEY",
    "RESERVED_KEYS",
    "ChildKind",
    "classify_child",
    "ErrorLike",

    # Exceptions
    "ResultKitError",
    "FailedResultError",
    "InvalidObjectError",
    "InvariantViolation",

    # Wire contract
    "ObjectErrorV1",
    "validate_object_error",

    # Option / Result
    "Option",
    "Some",
    "Nothing",
    "some",
    "nothing",
    "wrap_option",
    "get_option",
    "unwrap_option",
    "Result",
    "collect_options",
    "collect_results",

    # Configuration
    "FormatConfig",
    "ResultKitConfig",
    "load_config",
]
