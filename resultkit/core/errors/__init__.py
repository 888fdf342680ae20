# resultkit/core/errors/__init__.py
"""
Structured result errors for resultkit.

This package defines the components responsible for:
- Building errors (ResultError, mutable)
- Freezing and rendering errors (FrozenResultError, immutable)
- Converting errors to and from the object error shape

No side effects on import.
"""
