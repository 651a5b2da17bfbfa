"""Depth-first and breadth-first traversals of a binary tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Optional

from bintree.node import Node


def preorder(root: Optional[Node]) -> list[int]:
    """Return values in root, left, right order."""
    return list(root) if root is not None else []


def inorder(root: Optional[Node]) -> list[int]:
    """Return values in left, root, right order."""
    result: list[int] = []
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def postorder(root: Optional[Node]) -> list[int]:
    """Return values in left, right, root order."""
    if root is None:
        return []
    reversed_values: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        reversed_values.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return reversed_values[::-1]


def _level_nodes(root: Optional[Node]) -> Iterator[list[Node]]:
    frontier = [root] if root is not None else []
    while frontier:
        yield frontier
        frontier = [
            child
            for node in frontier
            for child in (node.left, node.right)
            if child is not None
        ]


def nth_level(root: Optional[Node], level: int) -> list[int]:
    """Return the values on the given 1-based level, left to right."""
    if level < 1:
        return []
    for depth, nodes in enumerate(_level_nodes(root), start=1):
        if depth == level:
            return [node.val for node in nodes]
    return []


def level_order(root: Optional[Node]) -> list[list[int]]:
    """Return the values of each level, from the root level down."""
    return [[node.val for node in nodes] for nodes in _level_nodes(root)]


def level_order_queue(root: Optional[Node]) -> list[int]:
    """Return all values in breadth-first order using a queue."""
    result: list[int] = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        result.append(node.val)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result