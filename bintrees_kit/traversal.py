"""Depth-first and breadth-first traversals yielding node values."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from .node import Node


def preorder(tree: Node | None) -> Iterator[int]:
    """Yield values in pre-order: node, left subtree, right subtree."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node.n
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(tree: Node | None) -> Iterator[int]:
    """Yield values in in-order: left subtree, node, right subtree."""
    stack: list[Node] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.n
        node = node.right


def postorder(tree: Node | None) -> Iterator[int]:
    """Yield values in post-order: left subtree, right subtree, node."""
    if tree is None:
        return
    stack = [tree]
    reversed_values = []
    while stack:
        node = stack.pop()
        reversed_values.append(node.n)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    yield from reversed(reversed_values)


def levelorder(tree: Node | None) -> Iterator[int]:
    """Yield values level by level, left to right."""
    queue = deque([tree] if tree is not None else [])
    while queue:
        node = queue.popleft()
        yield node.n
        queue.extend(child for child in (node.left, node.right) if child is not None)