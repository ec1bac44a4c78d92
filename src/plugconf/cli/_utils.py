"""Shared CLI utilities."""
from __future__ import annotations

import argparse
from pathlib import Path

from plugconf.core.config import ConfigContext
from plugconf.core.properties import ResourceSearchPath


def get_repo_root(args: argparse.Namespace) -> Path:
    """Repository root from ``--repo-root`` or the working directory."""
    raw = getattr(args, "repo_root", None)
    return Path(raw).resolve() if raw else Path.cwd()


def build_context(args: argparse.Namespace) -> ConfigContext:
    """Build the configuration context for a command invocation.

    ``--search-path`` entries replace the configured search path.
    """
    repo_root = get_repo_root(args)
    search_paths = getattr(args, "search_path", None)
    if search_paths:
        return ConfigContext.from_config(repo_root, search_path=ResourceSearchPath(Path(p) for p in search_paths))
    return ConfigContext.from_config(repo_root)


__all__ = ["get_repo_root", "build_context"]
