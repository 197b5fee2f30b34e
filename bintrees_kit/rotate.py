"""Single left and right rotations of binary tree nodes."""

from __future__ import annotations

from .node import Node


def _relink_parent(old: Node, new: Node) -> None:
    """Point ``old``'s parent at ``new`` in place of ``old``."""
    parent = old.parent
    new.parent = parent
    if parent is not None:
        if parent.left is old:
            parent.left = new
        elif parent.right is old:
            parent.right = new


def rotate_left(tree: Node | None) -> Node | None:
    """Rotate ``tree`` to the left and return the new subtree root.

    The right child becomes the subtree root and ``tree`` becomes its left
    child. Returns None for an empty tree; raises ValueError when there is
    no right child to rotate around.
    """
    if tree is None:
        return None
    pivot = tree.right
    if pivot is None:
        raise ValueError("cannot rotate left without a right child")
    tree.right = pivot.left
    if pivot.left is not None:
        pivot.left.parent = tree
    _relink_parent(tree, pivot)
    pivot.left = tree
    tree.parent = pivot
    return pivot


def rotate_right(tree: Node | None) -> Node | None:
    """Rotate ``tree`` to the right and return the new subtree root.

    The left child becomes the subtree root and ``tree`` becomes its right
    child. Returns None for an empty tree; raises ValueError when there is
    no left child to rotate around.
    """
    if tree is None:
        return None
    pivot = tree.left
    if pivot is None:
        raise ValueError("cannot rotate right without a left child")
    tree.left = pivot.right
    if pivot.right is not None:
        pivot.right.parent = tree
    _relink_parent(tree, pivot)
    pivot.right = tree
    tree.parent = pivot
    return pivot