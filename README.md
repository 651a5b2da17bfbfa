# bintree

A small library for working with binary trees: a plain `Node` dataclass,
whole-tree metrics, depth-first and breadth-first traversals, and boundary
traversal of a tree stored as an array. It needs nothing beyond the standard
library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Building a tree

`bintree.node.Node` is a dataclass with `val`, `left` and `right`. Iterating
over a node yields the values of its subtree in preorder.

```python
from bintree.node import Node, display, sample_tree

root = Node(1, Node(2, Node(4), Node(5)), Node(3, Node(6), Node(7)))

# The same tree, built from values in level order:
root = sample_tree([1, 2, 3, 4, 5, 6, 7])

display(root)  # '1 2 4 5 3 6 7'
```

`sample_tree(values)` lays the values out heap style: the children of the
value at position `i` are at `2*i + 1` and `2*i + 2`. A `None` entry leaves
that position empty. It returns `None` for an empty sequence.

`display(root)` returns the preorder values joined by spaces, or an empty
string for an empty tree.

## Metrics

`bintree.metrics` works on a tree rooted at a `Node`, or on `None`:

- `tree_sum(root)`: sum of all values (0 for an empty tree)
- `size(root)`: number of nodes
- `max_value(root)` / `min_value(root)`: largest and smallest value; both
  raise `ValueError` for an empty tree
- `levels(root)`: number of levels (height), 0 for an empty tree

```python
from bintree.metrics import tree_sum, size, levels

tree_sum(root)  # 28
size(root)      # 7
levels(root)    # 3
```

## Traversals

`bintree.traversal` returns lists of values:

- `preorder(root)`, `inorder(root)`, `postorder(root)`: depth-first orders
- `nth_level(root, level)`: the values on one level, counting from 1, left to
  right; an empty list for a level that does not exist
- `level_order(root)`: one list of values per level, from the root down
- `level_order_queue(root)`: all values in breadth-first order

```python
from bintree.traversal import preorder, inorder, postorder, nth_level

preorder(root)      # [1, 2, 4, 5, 3, 6, 7]
inorder(root)       # [4, 2, 5, 1, 6, 3, 7]
postorder(root)     # [4, 5, 2, 6, 7, 3, 1]
nth_level(root, 3)  # [4, 5, 6, 7]
```

## Boundary traversal

`bintree.boundary` treats a list as a binary tree in array form, where the
children of index `i` sit at `2*i + 1` and `2*i + 2`. Every entry counts as a
node, placeholder values such as `-1` included, and every index in the second
half of the list (`is_leaf(index, n)`) counts as a leaf.

```python
from bintree.boundary import boundary_traversal

boundary_traversal([20, 8, 22, 4, 12, -1, 25, -1, -1, 10, 14])
# [20, 8, 4, -1, 25, -1, -1, 10, 14, 22]
```

The result is the root, then the left boundary top down, then the leaves from
left to right, then the right boundary bottom up; an empty list gives an empty
result. The parts are also available on their own as `left_boundary(tree)`,
`leaves(tree)` and `right_boundary(tree)`.

## Command line

Installing the package provides a `bintree` command with three subcommands.
Values are integers in level order; when none are given, a built-in sample is
used (`1 2 3 4 5 6 7` for trees, `20 8 22 4 12 -1 25 -1 -1 10 14` for the
boundary array).

```
bintree                      # same as "bintree display"
bintree display 1 2 3        # prints the preorder values: 1 2 3
bintree level 3              # prints the values on level 3: 4 5 6 7
bintree boundary             # prints the boundary traversal of the sample array
```

The command line only accepts integers, so it cannot leave positions empty the
way `sample_tree` can with `None`; use the library for such trees.