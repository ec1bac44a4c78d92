"""
plugconf CLI package.

Commands live in ``plugconf/cli/commands``; each module provides ``SUMMARY``,
``register_args(parser)`` and ``main(args) -> int`` and is discovered
automatically.
"""
from ._args import add_json_flag, add_repo_root_flag, add_search_path_arg, split_csv
from ._output import OutputFormatter
from ._utils import build_context, get_repo_root

__all__ = [
    "OutputFormatter",
    "add_json_flag",
    "add_repo_root_flag",
    "add_search_path_arg",
    "split_csv",
    "build_context",
    "get_repo_root",
    "main",
]


def main(argv=None) -> int:
    from ._dispatcher import main as _main

    return _main(argv)
