import pytest
from hypothesis import given, strategies as st

from bintree.node import Node, sample_tree
from bintree.traversal import (
    inorder,
    level_order,
    level_order_queue,
    nth_level,
    postorder,
    preorder,
)

VALUES = [1, 2, 3, 4, 5, 6, 7]


@pytest.fixture
def tree():
    return sample_tree(VALUES)


def _insert(root, value):
    if root is None:
        return Node(value)
    node = root
    while True:
        if value < node.val:
            if node.left is None:
                node.left = Node(value)
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = Node(value)
                return root
            node = node.right


def test_preorder(tree):
    assert preorder(tree) == [1, 2, 4, 5, 3, 6, 7]


def test_inorder(tree):
    assert inorder(tree) == [4, 2, 5, 1, 6, 3, 7]


def test_postorder(tree):
    assert postorder(tree) == [4, 5, 2, 6, 7, 3, 1]


def test_empty_tree_traversals():
    assert preorder(None) == []
    assert inorder(None) == []
    assert postorder(None) == []
    assert level_order(None) == []
    assert level_order_queue(None) == []
    assert nth_level(None, 1) == []


def test_nth_level_third(tree):
    assert nth_level(tree, 3) == VALUES[3:]


def test_nth_level_first_is_root(tree):
    assert nth_level(tree, 1) == [tree.val]


@pytest.mark.parametrize("level", [0, -2, 4, 10])
def test_nth_level_outside_tree_is_empty(tree, level):
    assert nth_level(tree, level) == []


def test_level_order_rows(tree):
    assert level_order(tree) == [VALUES[:1], VALUES[1:3], VALUES[3:]]


def test_level_order_queue_matches_input(tree):
    assert level_order_queue(tree) == VALUES


@given(st.lists(st.integers(), min_size=1, max_size=60))
def test_queue_order_of_complete_tree_is_input(values):
    assert level_order_queue(sample_tree(values)) == values


@given(st.lists(st.integers(), min_size=1, max_size=60))
def test_level_order_flattens_to_queue_order(values):
    root = sample_tree(values)
    rows = level_order(root)
    assert [v for row in rows for v in row] == level_order_queue(root)
    assert all(nth_level(root, i) == row for i, row in enumerate(rows, start=1))


@given(st.lists(st.integers(), min_size=1, max_size=60))
def test_dfs_orders_are_permutations(values):
    root = sample_tree(values)
    assert preorder(root)[0] == values[0]
    assert postorder(root)[-1] == values[0]
    assert sorted(inorder(root)) == sorted(values)
    assert sorted(postorder(root)) == sorted(values)


@given(st.lists(st.integers(-500, 500), min_size=1, max_size=60))
def test_inorder_of_search_tree_is_sorted(values):
    root = None
    for value in values:
        root = _insert(root, value)
    assert inorder(root) == sorted(values)