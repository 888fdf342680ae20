# resultkit/core/contracts/__init__.py
"""
Versioned data contracts.

No side effects on import.
"""

from .v1 import ObjectErrorV1, validate_object_error

__all__ = [
    "ObjectErrorV1",
    "validate_object_error",
]
