"""Boundary traversal of a binary tree stored as a level-order array.

The node at index ``i`` has children at ``2*i + 1`` and ``2*i + 2``; every
entry is treated as a node, including placeholder values.
"""

from __future__ import annotations

from collections.abc import Sequence


def is_leaf(index: int, n: int) -> bool:
    """Return whether the entry at ``index`` is a leaf of an ``n``-entry array."""
    return n // 2 <= index < n


def _descend(tree: Sequence[int], prefer_left: bool) -> list[int]:
    n = len(tree)
    path: list[int] = []
    index = 0
    while True:
        left, right = 2 * index + 1, 2 * index + 2
        choices = (left, right) if prefer_left else (right, left)
        for child in choices:
            if child < n and not is_leaf(child, n):
                path.append(tree[child])
                index = child
                break
        else:
            return path


def left_boundary(tree: Sequence[int]) -> list[int]:
    """Return the left edge below the root, top down, leaves excluded."""
    return _descend(tree, prefer_left=True)


def leaves(tree: Sequence[int]) -> list[int]:
    """Return all leaf entries, left to right."""
    n = len(tree)
    return [value for index, value in enumerate(tree) if is_leaf(index, n)]


def right_boundary(tree: Sequence[int]) -> list[int]:
    """Return the right edge below the root, bottom up, leaves excluded."""
    return _descend(tree, prefer_left=False)[::-1]


def boundary_traversal(tree: Sequence[int]) -> list[int]:
    """Return root, left boundary, leaves and reversed right boundary."""
    if not tree:
        return []
    return [tree[0], *left_boundary(tree), *leaves(tree), *right_boundary(tree)]