"""Common argument registration helpers for CLI commands."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--json", action="store_true", help="Output as JSON")


def add_repo_root_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--repo-root", type=str, help="Override repository root path")


def add_search_path_arg(parser: argparse.ArgumentParser) -> None:
    """Add a repeatable --search-path option (replaces the configured search path)."""
    parser.add_argument(
        "--search-path",
        action="append",
        metavar="DIR",
        default=None,
        help="Resource root to search (repeatable, low -> high precedence). "
        "Defaults to the configured search path.",
    )


def split_csv(value: str | None) -> list[str]:
    """Split a comma separated option value, dropping blanks."""
    return [item.strip() for item in (value or "").split(",") if item.strip()]


__all__ = ["add_json_flag", "add_repo_root_flag", "add_search_path_arg", "split_csv"]
