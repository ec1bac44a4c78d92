"""Domain-specific configuration accessors.

Each accessor exposes one top-level section of the merged configuration
with typed, cached properties.

Usage:
    props = PropertiesConfig(repo_root=Path("/path/to/project"))
    props.encoding  # "iso-8859-1"
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cached_property
from pathlib import Path
from typing import Any, Dict, List, Optional

from plugconf.core.constants import DEFAULT_PROPERTIES_ENCODING, DEFAULT_PROPERTIES_FILE

from .cache import get_cached_config


class BaseDomainConfig(ABC):
    """Abstract base class for domain-specific configuration accessors."""

    def __init__(self, repo_root: Optional[Path] = None, *, config: Optional[Dict[str, Any]] = None) -> None:
        """Initialize domain config.

        Args:
            repo_root: Repository root path. Uses the working directory if None.
            config: Already merged configuration; loaded via the cache if None.
        """
        self._repo_root = repo_root
        self._config = config if config is not None else get_cached_config(repo_root=repo_root)

    @property
    def repo_root(self) -> Path:
        return Path(self._repo_root) if self._repo_root else Path.cwd()

    @abstractmethod
    def _config_section(self) -> str:
        """Return the top-level config key for this domain."""

    @cached_property
    def section(self) -> Dict[str, Any]:
        """This domain's configuration section, or an empty dict."""
        return self._config.get(self._config_section(), {}) or {}


class PropertiesConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "properties"

    @cached_property
    def file_name(self) -> str:
        return str(self.section.get("fileName") or DEFAULT_PROPERTIES_FILE)

    @cached_property
    def encoding(self) -> str:
        return str(self.section.get("encoding") or DEFAULT_PROPERTIES_ENCODING)


class ResourcesConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "resources"

    @cached_property
    def include_bundled(self) -> bool:
        return bool(self.section.get("includeBundled", True))

    @cached_property
    def search_path(self) -> List[str]:
        """Extra resource roots, low -> high precedence."""
        return [str(p) for p in (self.section.get("searchPath") or [])]

    def build_search_path(self):
        from plugconf.core.properties.resources import ResourceSearchPath

        return ResourceSearchPath.from_config(self)


class LoggingConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "logging"

    @cached_property
    def level(self) -> str:
        return str(self.section.get("level") or "WARNING").upper()

    @cached_property
    def path(self) -> Optional[Path]:
        raw = self.section.get("path")
        if not raw:
            return None
        p = Path(str(raw)).expanduser()
        return p if p.is_absolute() else self.repo_root / p


__all__ = ["BaseDomainConfig", "PropertiesConfig", "ResourcesConfig", "LoggingConfig"]
