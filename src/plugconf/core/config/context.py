"""Configuration context and the process-wide properties slot.

A :class:`ConfigContext` bundles everything property lookups need: the
resource search path, the properties encoding and file name, the loaded
properties and the system-property overrides. Contexts are immutable;
"changing" one means building a new context with :meth:`ConfigContext.with_properties`.

The module-level functions operate on an optional process-wide context for
callers that cannot pass one explicitly. The slot is replaced as a whole,
never mutated in place, so concurrent readers see either the old or the new
context. Set it once during start-up, before readers begin.
"""
from __future__ import annotations

import dataclasses
import logging
import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from plugconf.core.constants import (
    DEFAULT_PROPERTIES_ENCODING,
    DEFAULT_PROPERTIES_FILE,
    PROPERTIES_FILE_KEY,
    VARIABLE_PATTERN,
)
from plugconf.core.properties.loader import PropertiesLoader
from plugconf.core.properties.resources import ResourceSearchPath

from .cache import get_cached_config, register_cache_clearer
from .domains import PropertiesConfig, ResourcesConfig

logger = logging.getLogger(__name__)


def _freeze(values: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return MappingProxyType(dict(values or {}))


@dataclass(frozen=True)
class ConfigContext:
    """Immutable inputs for property lookups.

    Attributes:
        search_path: Resource roots used when a name is not a file on disk.
        encoding: Encoding of ``.properties`` files.
        properties_file: Properties file consulted by :meth:`load_properties`.
        properties: Loaded properties, or None when not loaded yet.
        overrides: System-property overrides, consulted after the environment.
    """

    search_path: ResourceSearchPath = field(default_factory=ResourceSearchPath)
    encoding: str = DEFAULT_PROPERTIES_ENCODING
    properties_file: str = DEFAULT_PROPERTIES_FILE
    properties: Optional[Mapping[str, str]] = None
    overrides: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        if self.properties is not None and not isinstance(self.properties, MappingProxyType):
            object.__setattr__(self, "properties", _freeze(self.properties))
        if not isinstance(self.overrides, MappingProxyType):
            object.__setattr__(self, "overrides", _freeze(self.overrides))

    @classmethod
    def from_config(cls, repo_root: Optional[Path] = None, **kwargs) -> "ConfigContext":
        """Build a context from the layered plugconf configuration of ``repo_root``."""
        cfg = get_cached_config(repo_root=repo_root)
        props_cfg = PropertiesConfig(repo_root, config=cfg)
        resources_cfg = ResourcesConfig(repo_root, config=cfg)
        kwargs.setdefault("search_path", resources_cfg.build_search_path())
        kwargs.setdefault("encoding", props_cfg.encoding)
        kwargs.setdefault("properties_file", props_cfg.file_name)
        return cls(**kwargs)

    def loader(self) -> PropertiesLoader:
        return PropertiesLoader(self.search_path, encoding=self.encoding)

    def with_properties(self, properties: Optional[Mapping[str, str]]) -> "ConfigContext":
        return dataclasses.replace(self, properties=properties)

    def get_system_property(self, key: str) -> Optional[str]:
        """Environment variable first, then the context overrides."""
        value = os.environ.get(key)
        if not value:
            value = self.overrides.get(key)
        return value

    def load_properties(self) -> Mapping[str, str]:
        """Load the configured properties file (single file, optional)."""
        path = self.get_system_property(PROPERTIES_FILE_KEY) or self.properties_file
        return _freeze(self.loader().load(path, allow_multiple=False, optional=True))


_global_context: Optional[ConfigContext] = None
_global_lock = threading.Lock()


def get_global_context() -> ConfigContext:
    """Return the process-wide context, building it from the working directory's config on first use."""
    global _global_context
    ctx = _global_context
    if ctx is not None:
        return ctx
    with _global_lock:
        if _global_context is None:
            _global_context = ConfigContext.from_config()
        return _global_context


def set_global_context(context: ConfigContext) -> None:
    global _global_context
    with _global_lock:
        _global_context = context


def reset_global_context() -> None:
    """Forget the process-wide context (it is rebuilt on next use)."""
    global _global_context
    with _global_lock:
        _global_context = None


register_cache_clearer("config.context", reset_global_context)


def set_properties(properties: Optional[Mapping[str, str]]) -> None:
    """Replace the process-wide properties with a frozen copy of ``properties``.

    Call this during start-up, before any reader runs. ``None`` makes the
    next :func:`get_properties` load the properties file again.
    """
    global _global_context
    base = get_global_context()
    with _global_lock:
        _global_context = (_global_context or base).with_properties(properties)


def get_properties(context: Optional[ConfigContext] = None) -> Mapping[str, str]:
    """Return the context's properties, loading the properties file when needed.

    Without an explicit ``context`` the process-wide one is used, and a
    freshly loaded result is installed into it.
    """
    global _global_context
    ctx = context if context is not None else get_global_context()
    if ctx.properties is not None:
        return ctx.properties

    loaded = ctx.load_properties()
    if context is None:
        with _global_lock:
            current = _global_context or ctx
            if current.properties is not None:
                return current.properties
            _global_context = current.with_properties(loaded)
            return _global_context.properties  # type: ignore[return-value]
    return loaded


def get_system_property(key: str, context: Optional[ConfigContext] = None) -> Optional[str]:
    ctx = context if context is not None else get_global_context()
    return ctx.get_system_property(key)


def replace_property(
    expression: Optional[str],
    params: Optional[Mapping[str, str]] = None,
    context: Optional[ConfigContext] = None,
) -> Optional[str]:
    """Expand ``$name`` / ``${name}`` placeholders in ``expression``.

    Each placeholder becomes the system property of that name, else
    ``params[name]``, else the empty string.
    """
    if not expression or "$" not in expression:
        return expression

    def _substitute(match) -> str:
        key = match.group(1)
        value = get_system_property(key, context)
        if value is None and params is not None:
            value = params.get(key)
        return value if value is not None else ""

    return VARIABLE_PATTERN.sub(_substitute, expression)


def get_property(
    key: str,
    default: Optional[str] = None,
    context: Optional[ConfigContext] = None,
) -> Optional[str]:
    """Look up ``key``: system property first, then the (expanded) properties value."""
    value = get_system_property(key, context)
    if value:
        return value
    properties = get_properties(context)
    return replace_property(properties.get(key, default), properties, context)


__all__ = [
    "ConfigContext",
    "get_global_context",
    "set_global_context",
    "reset_global_context",
    "set_properties",
    "get_properties",
    "get_system_property",
    "replace_property",
    "get_property",
]
