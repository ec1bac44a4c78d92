"""
plugconf resolve command.

SUMMARY: Resolve an extension directive against a default ordering

Directives that start with ``-`` must be attached with ``=`` so argparse
does not read them as options::

    plugconf resolve --defaults a,b --directive=-default,c
"""
from __future__ import annotations

import argparse

from plugconf.cli import OutputFormatter, add_json_flag, split_csv
from plugconf.core.extensions import resolve_extensions

SUMMARY = "Resolve an extension directive against a default ordering"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-d",
        "--directive",
        default="",
        help="Directive, e.g. 'c,default,d' or --directive=-default,c",
    )
    parser.add_argument("--defaults", default="", help="Comma separated default ordering")
    parser.add_argument(
        "--available",
        default=None,
        help="Comma separated registered extensions (defaults not listed are dropped). "
        "When omitted every default is considered registered.",
    )
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    defaults = split_csv(args.defaults)
    available = None if args.available is None else set(split_csv(args.available))

    resolved = resolve_extensions(
        defaults, args.directive, lambda name: available is None or name in available
    )
    formatter.success(
        {"defaults": defaults, "directive": args.directive, "extensions": resolved},
        ",".join(resolved),
    )
    return 0
