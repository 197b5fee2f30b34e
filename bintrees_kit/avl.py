"""Self-balancing AVL trees built on the BST operations."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .bst import bst_remove
from .metrics import balance
from .node import Node
from .rotate import rotate_left, rotate_right


def _checked_levels(node: Node | None, low: int | None, high: int | None) -> int | None:
    """Levels of a valid AVL subtree within bounds, or None if it is invalid."""
    if node is None:
        return 0
    if (low is not None and node.n <= low) or (high is not None and node.n >= high):
        return None
    left = _checked_levels(node.left, low, node.n)
    if left is None:
        return None
    right = _checked_levels(node.right, node.n, high)
    if right is None or abs(left - right) > 1:
        return None
    return 1 + max(left, right)


def is_avl(tree: Node | None) -> bool:
    """Return True if ``tree`` is a BST whose every node is height-balanced."""
    if tree is None:
        return False
    return _checked_levels(tree, None, None) is not None


def _insert(node: Node | None, parent: Node | None, value: int) -> Node:
    if node is None:
        return Node(value, parent)
    if value < node.n:
        node.left = _insert(node.left, node, value)
    elif value > node.n:
        node.right = _insert(node.right, node, value)
    else:
        raise ValueError(f"value {value} is already in the tree")

    factor = balance(node)
    if factor > 1 and value < node.left.n:
        return rotate_right(node)
    if factor < -1 and value > node.right.n:
        return rotate_left(node)
    if factor > 1 and value > node.left.n:
        rotate_left(node.left)
        return rotate_right(node)
    if factor < -1 and value < node.right.n:
        rotate_right(node.right)
        return rotate_left(node)
    return node


def avl_insert(root: Node | None, value: int) -> Node:
    """Insert ``value`` into the AVL tree and return the new root.

    Raises ValueError if the value is already present.
    """
    return _insert(root, None, value)


def array_to_avl(values: Iterable[int]) -> Node | None:
    """Build an AVL tree by inserting ``values`` in order, skipping duplicates."""
    root: Node | None = None
    seen: set[int] = set()
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        root = avl_insert(root, value)
    return root


def _rebalance(node: Node | None) -> Node | None:
    """Rebalance every subtree bottom-up and return the new subtree root."""
    if node is None or (node.left is None and node.right is None):
        return node
    node.left = _rebalance(node.left)
    node.right = _rebalance(node.right)
    factor = balance(node)
    if factor > 1:
        if balance(node.left) < 0:
            rotate_left(node.left)
        return rotate_right(node)
    if factor < -1:
        if balance(node.right) > 0:
            rotate_right(node.right)
        return rotate_left(node)
    return node


def avl_remove(root: Node | None, value: int) -> Node | None:
    """Remove ``value`` from the AVL tree and return the rebalanced root.

    A value that is not in the tree leaves it unchanged.
    """
    if root is None:
        return None
    try:
        root = bst_remove(root, value)
    except KeyError:
        pass
    return _rebalance(root)


def _build(parent: Node | None, values: Sequence[int], begin: int, last: int) -> Node | None:
    if begin > last:
        return None
    mid = (begin + last) // 2
    node = Node(values[mid], parent)
    node.left = _build(node, values, begin, mid - 1)
    node.right = _build(node, values, mid + 1, last)
    return node


def sorted_array_to_avl(values: Sequence[int]) -> Node | None:
    """Build a balanced tree from sorted ``values`` by taking middle elements."""
    if not values:
        return None
    return _build(None, values, 0, len(values) - 1)