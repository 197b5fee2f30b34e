import pytest

from bintrees_kit.metrics import (
    balance,
    height,
    is_complete,
    is_full,
    is_perfect,
    leaves,
    lowest_common_ancestor,
    nodes,
    size,
)
from bintrees_kit.node import Node, insert_left, insert_right
from bintrees_kit.traversal import levelorder


def build_complete(values):
    """Build a complete tree filled level by level from ``values``."""
    built = []
    for index, value in enumerate(values):
        if index == 0:
            built.append(Node(value))
            continue
        parent = built[(index - 1) // 2]
        if index % 2:
            built.append(insert_left(parent, value))
        else:
            built.append(insert_right(parent, value))
    return built


@pytest.fixture
def perfect():
    return build_complete([98, 12, 402, 6, 56, 256, 512])


def test_empty_tree_measures():
    assert height(None) == 0
    assert size(None) == 0
    assert leaves(None) == 0
    assert nodes(None) == 0
    assert balance(None) == 0


def test_empty_tree_checks_are_false():
    assert not is_full(None)
    assert not is_perfect(None)
    assert not is_complete(None)


def test_single_node():
    root = Node(1)
    assert height(root) == 0
    assert size(root) == 1
    assert leaves(root) == 1
    assert nodes(root) == 0
    assert balance(root) == 0
    assert is_full(root)
    assert is_perfect(root)
    assert is_complete(root)


def test_height_grows_by_one_per_level(perfect):
    root = perfect[0]
    assert height(root) == height(root.left) + 1
    assert height(root.left) == height(root.left.left) + 1
    assert height(root.left.left) == 0


def test_size_counts_every_node(perfect):
    assert size(perfect[0]) == len(perfect)
    assert size(perfect[0]) == len(list(levelorder(perfect[0])))


def test_leaves_and_nodes_partition_size(perfect):
    root = perfect[0]
    assert leaves(root) + nodes(root) == size(root)


@pytest.mark.parametrize("levels", [1, 2, 3, 4])
def test_perfect_tree_shape(levels):
    root = build_complete(list(range(2**levels - 1)))[0]
    assert is_perfect(root)
    assert is_full(root)
    assert is_complete(root)
    assert height(root) == levels - 1
    assert leaves(root) == 2 ** (levels - 1)
    assert balance(root) == 0


def test_balance_sign(perfect):
    root = perfect[0]
    insert_left(root.left.left, 1)
    assert balance(root) > 0
    assert balance(root.left.left) == 1
    insert_right(root.right.right, 600)
    insert_right(root.right.right.right, 700)
    assert balance(root) < 0


def test_balance_counts_missing_side_as_empty():
    root = Node(10)
    insert_left(root, 5)
    assert balance(root) == 1
    assert -balance(root) == balance(_mirror_single_right())


def _mirror_single_right():
    root = Node(10)
    insert_right(root, 15)
    return root


def test_is_full_rejects_single_child(perfect):
    root = perfect[0]
    insert_left(root.left.left, 1)
    assert not is_full(root)
    assert not is_perfect(root)


def test_full_but_not_perfect():
    root = Node(98)
    left = insert_left(root, 12)
    insert_right(root, 402)
    insert_left(left, 6)
    insert_right(left, 56)
    assert is_full(root)
    assert not is_perfect(root)
    assert is_complete(root)


def test_perfect_subtree_is_perfect(perfect):
    assert is_perfect(perfect[1])


@pytest.mark.parametrize("count", [1, 2, 3, 5, 6, 8, 11])
def test_level_filled_trees_are_complete(count):
    root = build_complete(list(range(count)))[0]
    assert is_complete(root)


def test_gap_before_last_node_is_incomplete(perfect):
    root = perfect[0]
    insert_right(root.left.left, 1)
    assert not is_complete(root)


def test_missing_left_with_right_is_incomplete():
    root = Node(98)
    insert_right(root, 402)
    assert not is_complete(root)


def test_incomplete_when_later_node_has_children():
    root = Node(98)
    left = insert_left(root, 12)
    right = insert_right(root, 402)
    insert_left(right, 256)
    assert not is_complete(root)
    insert_left(left, 6)
    assert not is_complete(root)
    insert_right(left, 56)
    assert is_complete(root)


def test_lowest_common_ancestor(perfect):
    root, left, right, ll, lr, rl, rr = perfect
    assert lowest_common_ancestor(ll, lr) is left
    assert lowest_common_ancestor(ll, rr) is root
    assert lowest_common_ancestor(rl, right) is right
    assert lowest_common_ancestor(right, rl) is right
    assert lowest_common_ancestor(lr, lr) is lr


def test_lowest_common_ancestor_missing(perfect):
    assert lowest_common_ancestor(None, perfect[0]) is None
    assert lowest_common_ancestor(perfect[0], None) is None
    assert lowest_common_ancestor(perfect[3], Node(5)) is None