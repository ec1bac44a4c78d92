"""Extension directive resolution and extension registries.

Usage:
    from plugconf.core.extensions import resolve_extensions

    active = resolve_extensions(["a", "b"], "c,default,-b", registry.has_extension)
"""
from __future__ import annotations

from .directive import (
    ExistsPredicate,
    apply_removals,
    filter_defaults,
    resolve_extensions,
    splice_defaults,
    tokenize_directive,
)
from .registry import (
    ExtensionRegistry,
    clear_extension_registries,
    get_extension_registry,
    merge_values,
)

__all__ = [
    "ExistsPredicate",
    "apply_removals",
    "filter_defaults",
    "resolve_extensions",
    "splice_defaults",
    "tokenize_directive",
    "ExtensionRegistry",
    "clear_extension_registries",
    "get_extension_registry",
    "merge_values",
]
