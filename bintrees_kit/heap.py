"""Max binary heaps stored as linked binary trees."""

from __future__ import annotations

from collections.abc import Iterable

from .metrics import is_complete, size
from .node import Node


def is_heap(tree: Node | None) -> bool:
    """Return True if ``tree`` is a complete tree with no child above its parent."""
    if tree is None or not is_complete(tree):
        return False
    stack = [tree]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                if child.n > node.n:
                    return False
                stack.append(child)
    return True


def _node_at(root: Node, index: int) -> Node:
    """Return the node at level-order ``index`` of a complete tree."""
    node = root
    for bit in bin(index + 1)[3:]:
        child = node.left if bit == "0" else node.right
        if child is None:
            raise IndexError(index)
        node = child
    return node


def _swap_values(first: Node, second: Node) -> None:
    first.n, second.n = second.n, first.n


def heap_insert(root: Node | None, value: int) -> Node:
    """Insert ``value`` into the max heap and return its root.

    The new value takes the next free place in level order and then moves
    up while it is larger than its parent.
    """
    if root is None:
        return Node(value)
    count = size(root)
    parent = _node_at(root, (count - 1) // 2)
    node = Node(value, parent)
    if count % 2 == 1:
        parent.left = node
    else:
        parent.right = node
    while node.parent is not None and node.n > node.parent.n:
        _swap_values(node, node.parent)
        node = node.parent
    return root


def array_to_heap(values: Iterable[int]) -> Node | None:
    """Build a max heap by inserting ``values`` in order."""
    root: Node | None = None
    for value in values:
        root = heap_insert(root, value)
    return root


def heap_extract(root: Node | None) -> tuple[int, Node | None]:
    """Remove the largest value from the heap.

    Returns the extracted value and the root of the remaining heap, which is
    None once the heap is empty. Raises IndexError for an empty heap.
    """
    if root is None:
        raise IndexError("extract from an empty heap")
    largest = root.n
    count = size(root)
    if count == 1:
        return largest, None

    last = _node_at(root, count - 1)
    root.n = last.n
    parent = last.parent
    if parent.right is last:
        parent.right = None
    else:
        parent.left = None
    last.parent = None

    node = root
    while node.left is not None:
        child = node.left
        if node.right is not None and node.right.n > child.n:
            child = node.right
        if child.n <= node.n:
            break
        _swap_values(node, child)
        node = child
    return largest, root


def heap_to_sorted_array(heap: Node | None) -> list[int]:
    """Empty the heap and return its values from largest to smallest."""
    values: list[int] = []
    while heap is not None:
        value, heap = heap_extract(heap)
        values.append(value)
    return values