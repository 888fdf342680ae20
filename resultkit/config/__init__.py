# resultkit/config/__init__.py
"""
resultkit Configuration

Design principles:
1. Code has defaults for everything
2. YAML is input parameters (YAML can be deleted)
"""

from .format import FormatConfig, ESCAPE_ALL, ESCAPE_FIRST, ESCAPE_MODES
from .loader import ResultKitConfig, load_config
from .validator import validate_config, ConfigIssue

__all__ = [
    "FormatConfig",
    "ESCAPE_ALL",
    "ESCAPE_FIRST",
    "ESCAPE_MODES",
    "ResultKitConfig",
    "load_config",
    "validate_config",
    "ConfigIssue",
]
