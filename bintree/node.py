"""Binary tree node and helpers for building and showing small trees."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class Node:
    """A binary tree node holding an integer value and two optional children."""

    val: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values of this subtree in preorder."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node.val
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)


def sample_tree(values: Iterable[Optional[int]]) -> Optional[Node]:
    """Build a tree from values laid out in level order, heap style.

    The children of the value at position ``i`` sit at ``2*i + 1`` and
    ``2*i + 2``. A ``None`` entry leaves that position empty; anything
    placed below an empty position is not reachable from the root.
    """
    nodes = [None if value is None else Node(value) for value in values]
    count = len(nodes)
    for position, node in enumerate(nodes):
        if node is None:
            continue
        left, right = 2 * position + 1, 2 * position + 2
        if left < count:
            node.left = nodes[left]
        if right < count:
            node.right = nodes[right]
    return nodes[0] if nodes else None


def display(root: Optional[Node]) -> str:
    """Return the preorder values of the tree separated by spaces."""
    if root is None:
        return ""
    return " ".join(str(value) for value in root)