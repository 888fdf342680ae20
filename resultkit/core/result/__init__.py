# resultkit/core/result/__init__.py
"""
Success / failure results.

No side effects on import.
"""

from .result import Result
from .aggregate import collect_options, collect_results

__all__ = [
    "Result",
    "collect_options",
    "collect_results",
]
