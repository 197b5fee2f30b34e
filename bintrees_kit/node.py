"""Binary tree nodes and the basic operations on single nodes."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value and links to its family."""

    n: int
    parent: Node | None = field(default=None, repr=False)
    left: Node | None = field(default=None, repr=False)
    right: Node | None = field(default=None, repr=False)


def _require(parent: Node | None) -> Node:
    if parent is None:
        raise ValueError("a parent node is required")
    return parent


def insert_left(parent: Node | None, value: int) -> Node:
    """Insert a new node as the left child of ``parent``.

    An existing left child becomes the left child of the new node.
    """
    parent = _require(parent)
    new = Node(value, parent)
    if parent.left is not None:
        new.left = parent.left
        parent.left.parent = new
    parent.left = new
    return new


def insert_right(parent: Node | None, value: int) -> Node:
    """Insert a new node as the right child of ``parent``.

    An existing right child becomes the right child of the new node.
    """
    parent = _require(parent)
    new = Node(value, parent)
    if parent.right is not None:
        new.right = parent.right
        parent.right.parent = new
    parent.right = new
    return new


def delete(tree: Node | None) -> None:
    """Dismantle a whole tree, unlinking every node in it."""
    if tree is None:
        return
    parent = tree.parent
    if parent is not None:
        if parent.left is tree:
            parent.left = None
        elif parent.right is tree:
            parent.right = None
    stack = [tree]
    while stack:
        node = stack.pop()
        stack.extend(child for child in (node.left, node.right) if child is not None)
        node.left = node.right = node.parent = None


def is_leaf(node: Node | None) -> bool:
    """Return True if ``node`` exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Node | None) -> bool:
    """Return True if ``node`` exists and has no parent."""
    return node is not None and node.parent is None


def depth(node: Node | None) -> int:
    """Return the number of edges between ``node`` and its root (0 for None)."""
    count = 0
    while node is not None and node.parent is not None:
        count += 1
        node = node.parent
    return count


def sibling(node: Node | None) -> Node | None:
    """Return the other child of ``node``'s parent, if any."""
    if node is None or node.parent is None:
        return None
    if node.parent.left is node:
        return node.parent.right
    return node.parent.left


def uncle(node: Node | None) -> Node | None:
    """Return the sibling of ``node``'s parent, if any."""
    if node is None:
        return None
    return sibling(node.parent)