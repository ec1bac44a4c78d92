"""Centralized configuration caching.

Provides a single source of truth for loaded configuration across all
domain configs and the configuration context.
"""
from __future__ import annotations

import hashlib
import os
import threading
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from plugconf.core.constants import ENV_PREFIX

_config_cache: Dict[str, Dict[str, Any]] = {}
_cache_clearers: Dict[str, Callable[[], None]] = {}
_cache_lock = threading.Lock()


def _normalize_repo_root(repo_root: Optional[Path]) -> Path:
    if repo_root is None:
        return Path.cwd().resolve()
    return Path(repo_root).expanduser().resolve()


def _cache_key(repo_root: Optional[Path], validate: bool = True) -> str:
    """Generate a cache key from repo_root, the validate flag and PLUGCONF_* env vars.

    Including the environment keeps long-running processes and tests that
    mutate PLUGCONF_* variables from reading stale config.
    """
    base = str(_normalize_repo_root(repo_root))
    env_items = sorted((k, v) for k, v in os.environ.items() if k.startswith(ENV_PREFIX))
    env_fp = hashlib.sha256(repr(env_items).encode("utf-8")).hexdigest()[:12]
    return f"{base}:validate={validate}:env={env_fp}"


def get_cached_config(repo_root: Optional[Path] = None, validate: bool = True) -> Dict[str, Any]:
    """Get configuration with caching.

    Returns the same config dict instance for the same repo_root, avoiding
    repeated file I/O. Treat the returned dict as immutable.
    """
    normalized_root = _normalize_repo_root(repo_root)
    key = _cache_key(normalized_root, validate=validate)

    cached = _config_cache.get(key)
    if cached is not None:
        return cached

    # Lazy import to avoid circular dependency
    from .manager import ConfigManager

    cfg = ConfigManager(repo_root=normalized_root)._load_config_uncached(validate=validate)
    with _cache_lock:
        return _config_cache.setdefault(key, cfg)


def clear_all_caches() -> None:
    """Clear the config dict cache and every registered dependent cache."""
    with _cache_lock:
        _config_cache.clear()
    for clearer in list(_cache_clearers.values()):
        clearer()


def register_cache_clearer(name: str, clearer: Callable[[], None]) -> None:
    """Register an additional cache clearer to run inside ``clear_all_caches()``."""
    _cache_clearers[name] = clearer


def is_cached(repo_root: Optional[Path] = None, validate: bool = True) -> bool:
    return _cache_key(repo_root, validate) in _config_cache


__all__ = ["get_cached_config", "clear_all_caches", "register_cache_clearer", "is_cached"]
