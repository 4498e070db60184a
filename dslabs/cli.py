"""Command line entry point that starts one of the interactive menus."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence

from dslabs.list_menu import run_list_menu
from dslabs.queue_menu import run_queue_menu
from dslabs.search_tree_menu import run_search_tree_menu
from dslabs.stack_menu import (
    run_expression_menu,
    run_palindrome_menu,
    run_stack_menu,
)
from dslabs.tree_menu import run_tree_menu

_MENUS: dict[str, Callable] = {
    "list": run_list_menu,
    "stack": run_stack_menu,
    "expression": run_expression_menu,
    "palindrome": run_palindrome_menu,
    "queue": run_queue_menu,
    "tree": run_tree_menu,
    "search-tree": run_search_tree_menu,
}


def _read_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the chosen menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="dslabs", description="Interactive data structure menus."
    )
    parser.add_argument(
        "menu",
        nargs="?",
        default="search-tree",
        choices=sorted(_MENUS),
        help="which menu to start (default: search-tree)",
    )
    args = parser.parse_args(argv)
    _MENUS[args.menu](_read_line, sys.stdout.write)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())