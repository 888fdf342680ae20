# resultkit/core/__init__.py
"""
Core components of resultkit: options, results and structured errors.

No side effects on import.
"""
