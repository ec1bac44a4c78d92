"""Extension registries used as the existence oracle for directives.

One registry exists per extension type (any hashable key, usually the
interface class). Registries only answer lookups; resolving which
extensions are active is done by :func:`resolve_extensions`.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Hashable, List, Optional

from .directive import resolve_extensions

logger = logging.getLogger(__name__)

_registries: Dict[Hashable, "ExtensionRegistry"] = {}
_registries_lock = threading.Lock()


class ExtensionRegistry:
    """Name -> implementation lookup for a single extension type.

    Usage:
        registry = get_extension_registry(Filter)
        registry.register("tracing", TracingFilter)
        registry.has_extension("tracing")  # True
    """

    def __init__(self, extension_type: Hashable) -> None:
        self.extension_type = extension_type
        self._extensions: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def register(self, name: str, impl: Any) -> None:
        """Register ``impl`` under ``name``, replacing any previous entry."""
        if not name or not name.strip():
            raise ValueError("Extension name must be a non-empty string")
        with self._lock:
            if name in self._extensions:
                logger.debug("Replacing extension '%s' for %r", name, self.extension_type)
            self._extensions[name] = impl

    def unregister(self, name: str) -> None:
        with self._lock:
            self._extensions.pop(name, None)

    def has_extension(self, name: str) -> bool:
        return name in self._extensions

    def get(self, name: str) -> Optional[Any]:
        return self._extensions.get(name)

    def list_names(self) -> List[str]:
        """List all registered extension names.

        Returns:
            Sorted list of extension names
        """
        return sorted(self._extensions)

    def __contains__(self, name: object) -> bool:
        return name in self._extensions

    def __len__(self) -> int:
        return len(self._extensions)

    def __repr__(self) -> str:
        return f"ExtensionRegistry({self.extension_type!r}, names={self.list_names()!r})"


def get_extension_registry(extension_type: Hashable) -> ExtensionRegistry:
    """Return the process-wide registry for ``extension_type``, creating it on first use."""
    registry = _registries.get(extension_type)
    if registry is not None:
        return registry
    with _registries_lock:
        return _registries.setdefault(extension_type, ExtensionRegistry(extension_type))


def clear_extension_registries() -> None:
    """Drop every registry (used by tests)."""
    with _registries_lock:
        _registries.clear()


def merge_values(extension_type: Hashable, directive: Optional[str], defaults: Optional[List[str]]) -> List[str]:
    """Resolve ``directive`` against ``defaults`` using the registry of ``extension_type``.

    Default names not registered for ``extension_type`` are skipped.
    """
    registry = get_extension_registry(extension_type)
    return resolve_extensions(defaults, directive, registry.has_extension)


__all__ = [
    "ExtensionRegistry",
    "get_extension_registry",
    "clear_extension_registries",
    "merge_values",
]
