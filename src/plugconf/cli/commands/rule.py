"""
plugconf rule command.

SUMMARY: Print the raw text of a migration rule file
"""
from __future__ import annotations

import argparse

from plugconf.cli import OutputFormatter, add_json_flag, add_repo_root_flag, add_search_path_arg, build_context

SUMMARY = "Print the raw text of a migration rule file"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("name", help="File path or resource name of the rule")
    add_search_path_arg(parser)
    add_repo_root_flag(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    context = build_context(args)
    rule = context.loader().load_migration_rule(args.name)
    formatter.success({"name": args.name, "rule": rule}, rule)
    return 0
