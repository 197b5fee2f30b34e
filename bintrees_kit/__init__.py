"""Binary trees, binary search trees, AVL trees and max binary heaps on linked nodes."""

__version__ = "0.1.0"
__all__ = ["avl", "bst", "heap", "metrics", "node", "rotate", "traversal"]