"""Aggregate measures over a binary tree."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from bintree.node import Node


def _values(root: Optional[Node]) -> Iterable[int]:
    return root if root is not None else ()


def tree_sum(root: Optional[Node]) -> int:
    """Return the sum of all values; an empty tree sums to 0."""
    return sum(_values(root))


def size(root: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _values(root))


def max_value(root: Optional[Node]) -> int:
    """Return the largest value in the tree.

    Raises ValueError for an empty tree.
    """
    if root is None:
        raise ValueError("an empty tree has no maximum value")
    return max(root)


def min_value(root: Optional[Node]) -> int:
    """Return the smallest value in the tree.

    Raises ValueError for an empty tree.
    """
    if root is None:
        raise ValueError("an empty tree has no minimum value")
    return min(root)


def levels(root: Optional[Node]) -> int:
    """Return the number of levels (height) of the tree; 0 when empty."""
    count = 0
    frontier = [root] if root is not None else []
    while frontier:
        count += 1
        frontier = [
            child
            for node in frontier
            for child in (node.left, node.right)
            if child is not None
        ]
    return count