"""Extension directive resolution.

A directive is a comma separated list of extension names that adjusts a
default ordering:

- ``default`` marks where the default extensions are spliced in. Without it
  the defaults are prepended.
- ``-name`` removes ``name`` wherever it came from (directive or defaults).
- ``-default`` suppresses the default extensions entirely.

Example:
    >>> resolve_extensions(["a", "b"], "c,default,-b,d", lambda name: True)
    ['c', 'a', 'd']
"""
from __future__ import annotations

from typing import Callable, Iterable, List, Optional

from plugconf.core.constants import COMMA_SPLIT_PATTERN, DEFAULT_KEY, REMOVE_VALUE_PREFIX

ExistsPredicate = Callable[[str], bool]

NEGATED_DEFAULT = REMOVE_VALUE_PREFIX + DEFAULT_KEY


def tokenize_directive(directive: Optional[str]) -> List[str]:
    """Split ``directive`` into tokens, dropping empty ones.

    Commas may repeat and be padded with whitespace; surrounding whitespace
    of the whole directive is ignored.
    """
    if directive is None or not directive.strip():
        return []
    return [token for token in COMMA_SPLIT_PATTERN.split(directive.strip()) if token.strip()]


def filter_defaults(defaults: Optional[Iterable[str]], exists: ExistsPredicate) -> List[str]:
    """Keep the defaults for which ``exists`` holds, in their original order."""
    return [name for name in (defaults or ()) if exists(name)]


def splice_defaults(tokens: List[str], defaults: List[str]) -> List[str]:
    """Insert ``defaults`` at the first ``default`` marker and drop every marker.

    Defaults are prepended when the marker is absent or leads the sequence.
    ``-default`` suppresses the defaults altogether.
    """
    explicit = [token for token in tokens if token != DEFAULT_KEY]
    if NEGATED_DEFAULT in tokens:
        return explicit
    position = tokens.index(DEFAULT_KEY) if DEFAULT_KEY in tokens else 0
    # No marker occurs before ``position``, so the explicit prefix is intact.
    return explicit[:position] + list(defaults) + explicit[position:]


def apply_removals(names: List[str]) -> List[str]:
    """Drop every ``-name`` token together with every occurrence of ``name``."""
    removed = set()
    for name in names:
        if name.startswith(REMOVE_VALUE_PREFIX):
            removed.add(name)
            removed.add(name[len(REMOVE_VALUE_PREFIX):])
    return [name for name in names if name not in removed]


def resolve_extensions(
    defaults: Optional[Iterable[str]],
    directive: Optional[str],
    exists: ExistsPredicate,
) -> List[str]:
    """Compute the effective extension list for ``directive``.

    Args:
        defaults: Built-in extension ordering. ``None`` is treated as empty.
        directive: User directive string. ``None``/blank keeps the defaults.
        exists: Existence oracle; filters ``defaults`` only, never the
            names listed explicitly in the directive.

    Returns:
        Ordered extension names. Names the directive repeats are kept as
        repeated; only removals collapse entries.
    """
    working_defaults = filter_defaults(defaults, exists)
    names = splice_defaults(tokenize_directive(directive), working_defaults)
    return apply_removals(names)


__all__ = [
    "ExistsPredicate",
    "NEGATED_DEFAULT",
    "tokenize_directive",
    "filter_defaults",
    "splice_defaults",
    "apply_removals",
    "resolve_extensions",
]
