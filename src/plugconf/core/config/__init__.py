"""plugconf configuration system.

Usage:
    from plugconf.core.config import ConfigContext, get_property

    ctx = ConfigContext.from_config(repo_root=Path("/path/to/project"))
    timeout = get_property("app.timeout", "30", context=ctx)
"""
from __future__ import annotations

from .cache import clear_all_caches, get_cached_config, is_cached, register_cache_clearer
from .context import (
    ConfigContext,
    get_global_context,
    get_properties,
    get_property,
    get_system_property,
    replace_property,
    reset_global_context,
    set_global_context,
    set_properties,
)
from .domains import BaseDomainConfig, LoggingConfig, PropertiesConfig, ResourcesConfig
from .manager import ConfigManager

__all__ = [
    "ConfigManager",
    "get_cached_config",
    "clear_all_caches",
    "is_cached",
    "register_cache_clearer",
    "BaseDomainConfig",
    "PropertiesConfig",
    "ResourcesConfig",
    "LoggingConfig",
    "ConfigContext",
    "get_global_context",
    "set_global_context",
    "reset_global_context",
    "set_properties",
    "get_properties",
    "get_property",
    "get_system_property",
    "replace_property",
]
