"""Command line entry point for showing and walking small binary trees."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Optional

from bintree.boundary import boundary_traversal
from bintree.node import display, sample_tree
from bintree.traversal import nth_level

DEFAULT_TREE = [1, 2, 3, 4, 5, 6, 7]
DEFAULT_BOUNDARY = [20, 8, 22, 4, 12, -1, 25, -1, -1, 10, 14]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bintree", description="Show and traverse binary trees."
    )
    commands = parser.add_subparsers(dest="command")

    show = commands.add_parser("display", help="print the tree in preorder")
    show.add_argument("values", nargs="*", type=int, help="level-order values")

    level = commands.add_parser("level", help="print the values on one level")
    level.add_argument("level", type=int, help="1-based level number")
    level.add_argument("values", nargs="*", type=int, help="level-order values")

    edge = commands.add_parser("boundary", help="print the boundary traversal")
    edge.add_argument("values", nargs="*", type=int, help="level-order array")
    return parser


def _join(values: Sequence[int]) -> str:
    return " ".join(str(value) for value in values)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line interface and return the exit status."""
    args = _build_parser().parse_args(argv)
    command = args.command or "display"
    values = getattr(args, "values", None) or None

    if command == "display":
        print(display(sample_tree(values or DEFAULT_TREE)))
    elif command == "level":
        print(_join(nth_level(sample_tree(values or DEFAULT_TREE), args.level)))
    else:
        print(_join(boundary_traversal(values or DEFAULT_BOUNDARY)))
    return 0