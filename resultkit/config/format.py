# resultkit/config/format.py
"""
Format Configuration

Controls how frozen result errors are rendered to text.
"""

from dataclasses import dataclass
from typing import Any, Dict, Final


ESCAPE_ALL: Final[str] = "all"
ESCAPE_FIRST: Final[str] = "first"
ESCAPE_MODES: Final[tuple] = (ESCAPE_ALL, ESCAPE_FIRST)


@dataclass(frozen=True)
class FormatConfig:
    """
    Rendering options for FrozenResultError.format / to_string.

    - indent_unit: prefix added per nesting level, also used to pretty-print
      data values
    - newline: separator used by to_string when none is given
    - escape_mode: "all" escapes every special character in data keys,
      "first" only the first occurrence of each (legacy output)
    - ensure_ascii: escape non-ASCII characters in rendered values
    """

    indent_unit: str = "  "
    newline: str = "\n"
    escape_mode: str = ESCAPE_ALL
    ensure_ascii: bool = False

    @classmethod
    def default(cls) -> "FormatConfig":
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "indent_unit": self.indent_unit,
            "newline": self.newline,
            "escape_mode": self.escape_mode,
            "ensure_ascii": self.ensure_ascii,
        }
