# resultkit/core/errors/frozen.py
"""
FrozenResultError: immutable snapshot of a ResultError.

Obtain one with ResultError.freeze(). Data is deep-frozen (mappings become
MappingProxyType, lists become tuples) and children are frozen recursively,
so no caller can change what a frozen error reports.

Rendered text format (for humans, not meant to be parsed back):

    ! outer message
    + "key": <pretty-printed JSON value>
      ! child message
      + "child_key": 1
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from resultkit.config.format import ESCAPE_FIRST, ESCAPE_MODES, FormatConfig
from . import bridge
from .classify import ChildKind, classify_child
from .exceptions import FailedResultError
from .freezing import freeze_mapping
from .types import ErrorLike


# (raw, escaped) pairs; backslash must stay first
_KEY_ESCAPES: Tuple[Tuple[str, str], ...] = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\t", "\\t"),
    ("\r", "\\r"),
    ("\n", "\\n"),
    ("\b", "\\b"),
    ("\f", "\\f"),
)


def escape_key(key: str, mode: str = "all") -> str:
    """
    Escape a data key for the rendered text format.

    mode="all" escapes every occurrence. mode="first" escapes only the first
    occurrence of each special character (legacy output).
    """
    if mode not in ESCAPE_MODES:
        raise ValueError(f"unknown escape mode: {mode!r}")
    count = 1 if mode == ESCAPE_FIRST else -1
    for raw, escaped in _KEY_ESCAPES:
        key = key.replace(raw, escaped, count)
    return key


def _json_default(value: Any) -> Any:
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, (set, frozenset)):
        return list(value)
    return str(value)


def render_value(value: Any, config: FormatConfig) -> str:
    """Pretty-print a data value as JSON text"""
    return json.dumps(
        value,
        indent=config.indent_unit,
        ensure_ascii=config.ensure_ascii,
        default=_json_default,
    )


@dataclass(frozen=True)
class FrozenResultError:
    """
    Immutable result error.

    Build through ResultError.freeze(). Direct construction also deep-freezes
    the given data and children.
    """
    message: str
    data: Mapping[str, Any] = field(default_factory=dict)
    children: Tuple["FrozenResultError", ...] = ()

    # data is a MappingProxyType
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", freeze_mapping(self.data))
        frozen_children = []
        for child in self.children:
            frozen = _freeze_child(child)
            if frozen is not None:
                frozen_children.append(frozen)
        object.__setattr__(self, "children", tuple(frozen_children))

    @classmethod
    def from_builder(cls, builder: ErrorLike) -> "FrozenResultError":
        return cls(
            message=builder.message,
            data=builder.data,
            children=tuple(builder.children),
        )

    # -------- rendering --------

    def format(self, indent: int = 0, *, config: Optional[FormatConfig] = None) -> List[str]:
        """
        Render as lines.

        Args:
            indent: Number of indent units in front of the message line
            config: Indent unit and key escaping (defaults if None)

        Returns:
            Message line, one line per data entry (multi-line values keep
            their own indentation), then every child rendered one indent unit
            deeper.
        """
        config = config or FormatConfig.default()
        unit = config.indent_unit
        prefix = unit * indent

        lines = [f"{prefix}! {self.message}"]

        for key, value in self.data.items():
            value_lines = render_value(value, config).split("\n")
            escaped = escape_key(str(key), config.escape_mode)
            lines.append(f'{prefix}+ "{escaped}": {value_lines[0]}')
            lines.extend(value_lines[1:])

        for child in self.children:
            lines.extend(unit + line for line in child.format(indent, config=config))

        return lines

    def to_string(self, newline: Optional[str] = None, *, config: Optional[FormatConfig] = None) -> str:
        config = config or FormatConfig.default()
        if newline is None:
            newline = config.newline
        return newline.join(self.format(config=config))

    def __str__(self) -> str:
        return self.to_string()

    # -------- conversions --------

    def to_error(self) -> FailedResultError:
        """Plain exception carrying only the message"""
        return FailedResultError(self.message)

    def to_object(self) -> Dict[str, Any]:
        """Serialize to an object error (data thawed to plain containers)"""
        return bridge.to_object(self)


def _freeze_child(child: Any) -> Optional[FrozenResultError]:
    if isinstance(child, FrozenResultError):
        return child

    kind = classify_child(child)
    if kind is ChildKind.ABSENT:
        return None
    if kind is ChildKind.TEXT:
        return FrozenResultError(child)
    if kind is ChildKind.PLAIN_OBJECT:
        from .builder import ResultError
        return ResultError.from_object(child).freeze()
    return FrozenResultError.from_builder(child)


__all__ = [
    "FrozenResultError",
    "escape_key",
    "render_value",
]
