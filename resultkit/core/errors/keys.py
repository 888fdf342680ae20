# resultkit/core/errors/keys.py
from __future__ import annotations

from typing import Final, FrozenSet


# ---- reserved keys of the object error shape (stable wire contract) ----
# message text
MESSAGE_KEY: Final[str] = "error"
# ordered child causes
CHILDREN_KEY: Final[str] = "inners"


# Structural fields. These are never payload data.
RESERVED_KEYS: Final[FrozenSet[str]] = frozenset({
    MESSAGE_KEY,
    CHILDREN_KEY,
})


def has_reserved_key(data: object) -> bool:
    """True if a data mapping carries either structural field."""
    try:
        return any(key in data for key in RESERVED_KEYS)  # type: ignore[operator]
    except TypeError:
        return False
