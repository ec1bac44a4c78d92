"""User and project configuration directory resolution.

Precedence (highest to lowest):
1. Environment variables: PLUGCONF_paths__user_config_dir / PLUGCONF_paths__project_config_dir
2. Bundled defaults: plugconf.data/config/defaults.yaml (paths.*)
3. Hardcoded fallback: ".plugconf"

The user directory is resolved relative to the home directory and the
project directory relative to the repository root, unless absolute.
These values are read before the layered configuration exists, so project
and user YAML files cannot move them.
"""
from __future__ import annotations

import os
from pathlib import Path

from plugconf.data import read_yaml

DEFAULT_USER_CONFIG_PRIMARY = ".plugconf"
DEFAULT_PROJECT_CONFIG_PRIMARY = ".plugconf"


def _resolve_dir_name(key: str, fallback: str) -> str:
    env_override = os.environ.get(f"PLUGCONF_paths__{key}")
    if isinstance(env_override, str) and env_override.strip():
        return env_override.strip()

    paths_section = read_yaml("config", "defaults.yaml").get("paths")
    if isinstance(paths_section, dict):
        value = paths_section.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return fallback


def get_user_config_dir() -> Path:
    """Return the user config directory (default: ``~/.plugconf``)."""
    p = Path(_resolve_dir_name("user_config_dir", DEFAULT_USER_CONFIG_PRIMARY)).expanduser()
    if not p.is_absolute():
        p = Path.home() / p
    return p.resolve()


def get_project_config_dir(repo_root: Path) -> Path:
    """Return the project config directory (default: ``<repo_root>/.plugconf``)."""
    p = Path(_resolve_dir_name("project_config_dir", DEFAULT_PROJECT_CONFIG_PRIMARY)).expanduser()
    if not p.is_absolute():
        p = Path(repo_root) / p
    return p


__all__ = [
    "DEFAULT_USER_CONFIG_PRIMARY",
    "DEFAULT_PROJECT_CONFIG_PRIMARY",
    "get_user_config_dir",
    "get_project_config_dir",
]
