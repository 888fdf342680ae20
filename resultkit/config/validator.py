# resultkit/config/validator.py
"""
Configuration Validator

Validates configuration for illegal/misleading values.
Returns structured issues with level (warn/error), path, message, hint.
"""

from typing import List, Literal
from dataclasses import dataclass

from .format import ESCAPE_FIRST, ESCAPE_MODES, FormatConfig


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for logging.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "format.escape_mode"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"[{self.level}] [{self.path}] {self.message}{hint_str}"


def validate_config(fmt: FormatConfig) -> List[ConfigIssue]:
    """
    Validate format configuration.

    Returns:
        List of issues (warn/error level)
    """
    issues = []

    if fmt.escape_mode not in ESCAPE_MODES:
        issues.append(ConfigIssue(
            level="error",
            path="format.escape_mode",
            message=f"unknown escape_mode '{fmt.escape_mode}'",
            hint=f"Use one of: {', '.join(ESCAPE_MODES)}",
        ))

    if not isinstance(fmt.indent_unit, str) or fmt.indent_unit.strip():
        issues.append(ConfigIssue(
            level="error",
            path="format.indent_unit",
            message=f"indent_unit must be whitespace, got {fmt.indent_unit!r}",
            hint="Use spaces or a tab, e.g. '  '",
        ))
    elif not fmt.indent_unit:
        issues.append(ConfigIssue(
            level="warn",
            path="format.indent_unit",
            message="empty indent_unit flattens nested child errors",
            hint="Use at least one space",
        ))

    if not isinstance(fmt.newline, str) or not fmt.newline:
        issues.append(ConfigIssue(
            level="error",
            path="format.newline",
            message="newline must be a non-empty string",
            hint="Use '\\n' or '\\r\\n'",
        ))

    if fmt.escape_mode == ESCAPE_FIRST:
        issues.append(ConfigIssue(
            level="warn",
            path="format.escape_mode",
            message="escape_mode='first' leaves repeated special characters in keys unescaped",
            hint="Use escape_mode='all' unless byte-compatible legacy output is required",
        ))

    return issues


def has_errors(issues: List[ConfigIssue]) -> bool:
    return any(issue.level == "error" for issue in issues)
