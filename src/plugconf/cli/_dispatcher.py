"""
Auto-discovery CLI dispatcher for plugconf.

Scans ``cli/commands`` and registers every public module as a subcommand.
Adding a command = adding a .py file there.
"""
from __future__ import annotations

import argparse
import importlib
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any

from plugconf import __version__
from plugconf.core.exceptions import PlugconfError
from plugconf.core.stdlib_logging import configure_logging, configure_logging_from_config

from ._utils import get_repo_root


@lru_cache(maxsize=1)
def discover_commands() -> dict[str, dict[str, Any]]:
    """Discover top-level commands under cli/commands."""
    commands_dir = Path(__file__).parent / "commands"
    commands: dict[str, dict[str, Any]] = {}

    for item in sorted(commands_dir.glob("*.py")):
        if item.name.startswith("_"):
            continue
        cmd_name = item.stem
        try:
            module = importlib.import_module(f"plugconf.cli.commands.{cmd_name}")
        except ImportError as e:
            print(f"Warning: Could not import command {cmd_name}: {e}", file=sys.stderr)
            continue
        commands[cmd_name] = {
            "summary": getattr(module, "SUMMARY", cmd_name),
            "register_args": getattr(module, "register_args", None),
            "main": getattr(module, "main", None),
        }
    return commands


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plugconf",
        description="Resolve extension directives and inspect layered properties",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for plugconf diagnostics (sent to stderr)",
    )

    subparsers = parser.add_subparsers(dest="command", title="commands", metavar="<command>")
    for cmd_name, cmd_info in discover_commands().items():
        cmd_parser = subparsers.add_parser(cmd_name.replace("_", "-"), help=cmd_info["summary"])
        if cmd_info["register_args"]:
            cmd_info["register_args"](cmd_parser)
        if cmd_info["main"]:
            cmd_parser.set_defaults(_func=cmd_info["main"])
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the plugconf CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "_func", None):
        parser.print_help()
        return 0

    try:
        if args.log_level:
            configure_logging(level=args.log_level)
        else:
            configure_logging_from_config(get_repo_root(args))
        return int(args._func(args) or 0)
    except PlugconfError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


__all__ = ["build_parser", "discover_commands", "main"]
