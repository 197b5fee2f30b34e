"""Binary search trees with strictly ordered, distinct values."""

from __future__ import annotations

from collections.abc import Iterable

from .node import Node


def is_bst(tree: Node | None) -> bool:
    """Return True if ``tree`` is a valid binary search tree.

    Every value in a left subtree must be smaller than its ancestor and every
    value in a right subtree larger; duplicates are not allowed. An empty
    tree is not a BST.
    """
    if tree is None:
        return False
    stack: list[tuple[Node, int | None, int | None]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if (low is not None and node.n <= low) or (high is not None and node.n >= high):
            return False
        if node.left is not None:
            stack.append((node.left, low, node.n))
        if node.right is not None:
            stack.append((node.right, node.n, high))
    return True


def bst_insert(root: Node | None, value: int) -> Node:
    """Insert ``value`` into the BST rooted at ``root`` and return the new node.

    When ``root`` is None the returned node is the root of a new tree.
    Raises ValueError if the value is already present.
    """
    if root is None:
        return Node(value)
    node = root
    while True:
        if value < node.n:
            if node.left is None:
                node.left = Node(value, node)
                return node.left
            node = node.left
        elif value > node.n:
            if node.right is None:
                node.right = Node(value, node)
                return node.right
            node = node.right
        else:
            raise ValueError(f"value {value} is already in the tree")


def array_to_bst(values: Iterable[int]) -> Node | None:
    """Build a BST by inserting ``values`` in order, skipping duplicates."""
    root: Node | None = None
    for value in values:
        try:
            inserted = bst_insert(root, value)
        except ValueError:
            continue
        if root is None:
            root = inserted
    return root


def bst_search(tree: Node | None, value: int) -> Node | None:
    """Return the node holding ``value``, or None if it is absent."""
    node = tree
    while node is not None:
        if value == node.n:
            return node
        node = node.left if value < node.n else node.right
    return None


def _leftmost(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def bst_remove(root: Node | None, value: int) -> Node | None:
    """Remove ``value`` from the BST and return the new root.

    A node with two children takes the value of its in-order successor,
    which is then removed in its place. Raises KeyError if the value is
    not in the tree.
    """
    node = bst_search(root, value)
    if node is None:
        raise KeyError(value)
    if node.left is not None and node.right is not None:
        successor = _leftmost(node.right)
        node.n = successor.n
        node = successor
    child = node.left if node.left is not None else node.right
    parent = node.parent
    if child is not None:
        child.parent = parent
    node.parent = node.left = node.right = None
    if parent is None:
        return child
    if parent.left is node:
        parent.left = child
    else:
        parent.right = child
    return root