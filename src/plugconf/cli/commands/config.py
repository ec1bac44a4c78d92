"""
plugconf config command.

SUMMARY: Show the merged plugconf configuration

Displays the configuration merged from bundled defaults, user and project
overrides and PLUGCONF_* environment variables.
"""
from __future__ import annotations

import argparse

import yaml

from plugconf.cli import OutputFormatter, add_json_flag, add_repo_root_flag, get_repo_root
from plugconf.core.config import get_cached_config

SUMMARY = "Show the merged plugconf configuration"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("key", nargs="?", help="Dot-separated key to show (e.g. 'properties.encoding')")
    add_repo_root_flag(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    cfg = get_cached_config(get_repo_root(args))

    value = cfg
    if args.key:
        for part in (p for p in args.key.split(".") if p):
            if not isinstance(value, dict) or part not in value:
                formatter.error(KeyError(args.key), f"Configuration key not found: {args.key}")
                return 1
            value = value[part]

    if isinstance(value, (dict, list)):
        text = yaml.safe_dump(value, default_flow_style=False, sort_keys=True).rstrip()
    else:
        text = str(value)
    formatter.success({"key": args.key, "value": value}, text)
    return 0
