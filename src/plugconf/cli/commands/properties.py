"""
plugconf properties command.

SUMMARY: Load a properties file or search-path resource
"""
from __future__ import annotations

import argparse

from plugconf.cli import OutputFormatter, add_json_flag, add_repo_root_flag, add_search_path_arg, build_context

SUMMARY = "Load a properties file or search-path resource"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("name", help="File path or resource name (e.g. 'app.properties')")
    parser.add_argument(
        "--multiple",
        action="store_true",
        help="Merge every matching resource (later roots win)",
    )
    parser.add_argument("--optional", action="store_true", help="Do not warn when nothing matches")
    add_search_path_arg(parser)
    add_repo_root_flag(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    context = build_context(args)
    properties = context.loader().load(args.name, allow_multiple=args.multiple, optional=args.optional)
    lines = [f"{key}={value}" for key, value in sorted(properties.items())]
    formatter.success({"name": args.name, "properties": properties}, "\n".join(lines))
    return 0
