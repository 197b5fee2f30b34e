"""Measurements and shape checks for binary trees."""

from __future__ import annotations

from collections import deque

from .node import Node


def _levels(tree: Node | None) -> int:
    """Number of nodes on the longest root-to-leaf path (0 for None)."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def _walk(tree: Node | None):
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.left, node.right) if child is not None)


def height(tree: Node | None) -> int:
    """Return the number of edges on the longest downward path (0 for None)."""
    return max(_levels(tree) - 1, 0)


def size(tree: Node | None) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _walk(tree))


def leaves(tree: Node | None) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _walk(tree) if node.left is None and node.right is None)


def nodes(tree: Node | None) -> int:
    """Return the number of nodes with at least one child."""
    return sum(
        1 for node in _walk(tree) if node.left is not None or node.right is not None
    )


def balance(tree: Node | None) -> int:
    """Return the height of the left subtree minus that of the right."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Node | None) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    return all((node.left is None) == (node.right is None) for node in _walk(tree))


def is_perfect(tree: Node | None) -> bool:
    """Return True if the tree is full and all its leaves share one depth."""
    if tree is None:
        return False
    leaf_depths = set()
    stack = [(tree, 0)]
    while stack:
        node, level = stack.pop()
        if node.left is None and node.right is None:
            leaf_depths.add(level)
        elif node.left is None or node.right is None:
            return False
        else:
            stack.append((node.left, level + 1))
            stack.append((node.right, level + 1))
    return len(leaf_depths) == 1


def is_complete(tree: Node | None) -> bool:
    """Return True if every level is filled except possibly the last, filled left."""
    if tree is None:
        return False
    queue = deque([tree])
    gap_seen = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap_seen = True
            elif gap_seen:
                return False
            else:
                queue.append(child)
    return True


def lowest_common_ancestor(first: Node | None, second: Node | None) -> Node | None:
    """Return the deepest node that is an ancestor of both nodes, or None."""
    if first is None or second is None:
        return None
    ancestors = set()
    node: Node | None = second
    while node is not None:
        ancestors.add(id(node))
        node = node.parent
    node = first
    while node is not None:
        if id(node) in ancestors:
            return node
        node = node.parent
    return None