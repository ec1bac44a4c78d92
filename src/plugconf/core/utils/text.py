"""Boolean-ish classification of configuration values."""
from __future__ import annotations

from typing import Optional

_EMPTY_VALUES = frozenset({"false", "0", "null", "n/a"})
_DEFAULT_VALUES = frozenset({"true", "default"})


def is_empty(value: Optional[str]) -> bool:
    """True for None, "" and the disabled markers false/0/null/N/A (any case)."""
    if not value:
        return True
    return value.lower() in _EMPTY_VALUES


def is_not_empty(value: Optional[str]) -> bool:
    return not is_empty(value)


def is_default(value: Optional[str]) -> bool:
    """True when ``value`` asks for the default behaviour (true/default)."""
    if not value:
        return False
    return value.lower() in _DEFAULT_VALUES


__all__ = ["is_empty", "is_not_empty", "is_default"]
