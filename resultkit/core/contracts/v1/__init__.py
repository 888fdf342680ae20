# resultkit/core/contracts/v1/__init__.py
"""
Contracts v1: stable wire shapes.
"""

from .object_error import ObjectErrorV1, validate_object_error

__all__ = [
    "ObjectErrorV1",
    "validate_object_error",
]
