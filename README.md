# bintrees_kit

Binary trees made of linked `Node` objects, and the usual tools that go with them:
building and inspecting trees, traversals, measurements, rotations, binary search
trees, AVL trees and max binary heaps.

Every node is a `Node` with a value `n` and references to its `parent`, `left`
and `right` neighbours. The functions work on these nodes directly, so you can
build a tree by hand, reshape it with one function and inspect it with another.

## Installation

```
pip install bintrees_kit
```

To run the tests:

```
pip install "bintrees_kit[test]"
pytest
```

## Building a tree by hand (`bintrees_kit.node`)

```python
from bintrees_kit.node import Node, insert_left, insert_right, depth, sibling, uncle, is_leaf

root = Node(98)
left = insert_left(root, 12)
right = insert_right(root, 402)
leaf = insert_right(left, 54)

depth(leaf)        # 2
sibling(left)      # the node holding 402
uncle(leaf)        # the node holding 402
is_leaf(leaf)      # True
```

- `insert_left(parent, value)` / `insert_right(parent, value)` return the new
  node. An existing child on that side is pushed down and becomes the child of
  the new node. Passing `None` as the parent raises `ValueError`.
- `is_leaf(node)` and `is_root(node)` return `False` for `None`.
- `depth(node)` counts the edges up to the root (0 for a root or `None`).
- `sibling(node)` and `uncle(node)` return `None` when there is no such node.
- `delete(tree)` detaches `tree` from its parent and unlinks every node below it.

## Traversals (`bintrees_kit.traversal`)

```python
from bintrees_kit.traversal import preorder, inorder, postorder, levelorder

list(preorder(root))    # [98, 12, 54, 402]
list(inorder(root))     # [12, 54, 98, 402]
list(postorder(root))   # [54, 12, 402, 98]
list(levelorder(root))  # [98, 12, 402, 54]
```

Each traversal is a generator of node values; an empty tree (`None`) yields
nothing.

## Measurements and shape (`bintrees_kit.metrics`)

- `height(tree)`: edges on the longest downward path (0 for a single node or `None`).
- `size(tree)`: number of nodes.
- `leaves(tree)`: number of nodes without children.
- `nodes(tree)`: number of nodes with at least one child.
- `balance(tree)`: height of the left subtree minus height of the right.
- `is_full(tree)`: every node has zero or two children.
- `is_perfect(tree)`: full, with all leaves at the same depth.
- `is_complete(tree)`: every level filled except possibly the last, filled from the left.
- `lowest_common_ancestor(first, second)`: the deepest node that is an ancestor
  of both (a node counts as its own ancestor), or `None`.

The shape checks return `False` for an empty tree.

## Rotations (`bintrees_kit.rotate`)

`rotate_left(tree)` and `rotate_right(tree)` rotate a subtree, relink it into
its parent and return the new subtree root. They return `None` for an empty
tree and raise `ValueError` when the child to rotate around is missing.

## Binary search trees (`bintrees_kit.bst`)

```python
from bintrees_kit.bst import array_to_bst, bst_search, bst_insert, bst_remove, is_bst

root = array_to_bst([98, 402, 12, 46, 128, 256, 512, 50])
is_bst(root)                 # True
bst_search(root, 128).n      # 128
new_node = bst_insert(root, 7)
root = bst_remove(root, 98)  # returns the new root
```

- `bst_insert(root, value)` returns the inserted node (a new root when `root`
  is `None`) and raises `ValueError` if the value is already present.
- `array_to_bst(values)` inserts values in order and skips duplicates.
- `bst_search(tree, value)` returns the node or `None`.
- `bst_remove(root, value)` replaces a node with two children by its in-order
  successor, returns the new root, and raises `KeyError` for a missing value.

## AVL trees (`bintrees_kit.avl`)

- `avl_insert(root, value)` inserts with rebalancing rotations and returns the
  new root; a duplicate value raises `ValueError`.
- `array_to_avl(values)` builds a tree from values in order, skipping duplicates.
- `avl_remove(root, value)` removes a value (a missing value leaves the tree
  as it is), rebalances and returns the new root.
- `sorted_array_to_avl(values)` builds a balanced tree from a sorted sequence by
  taking middle elements.
- `is_avl(tree)` checks BST ordering and height balance at every node.

Always keep the root these functions give back; rotations may change it.

## Max binary heaps (`bintrees_kit.heap`)

```python
from bintrees_kit.heap import array_to_heap, heap_extract, heap_to_sorted_array, is_heap

heap = array_to_heap([79, 47, 68, 87, 84, 91, 21, 32, 34, 2])
is_heap(heap)                 # True
largest, heap = heap_extract(heap)   # 91, and the remaining heap
heap_to_sorted_array(heap)    # [87, 84, 79, 68, 47, 34, 32, 21, 2]
```

- `heap_insert(root, value)` adds a value in the next free level-order place,
  sifts it up and returns the root.
- `heap_extract(root)` returns a tuple of the largest value and the root of the
  remaining heap (`None` once empty); an empty heap raises `IndexError`.
- `heap_to_sorted_array(heap)` empties the heap and returns its values from
  largest to smallest.

## What it does not do

The package is a library only: it has no command-line tool, and it has no
function that draws or prints a tree. Use the traversals to look at a tree's
contents.