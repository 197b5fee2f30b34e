import pytest

from bintrees_kit.node import Node, insert_left, insert_right
from bintrees_kit.traversal import inorder, levelorder, postorder, preorder


@pytest.fixture
def tree():
    root = Node(98)
    left = insert_left(root, 12)
    right = insert_right(root, 402)
    insert_left(left, 6)
    insert_right(left, 56)
    insert_left(right, 256)
    insert_right(right, 512)
    return root


@pytest.mark.parametrize("func", [preorder, inorder, postorder, levelorder])
def test_empty_tree_yields_nothing(func):
    assert list(func(None)) == []


@pytest.mark.parametrize("func", [preorder, inorder, postorder, levelorder])
def test_single_node(func):
    assert list(func(Node(7))) == [7]


def test_preorder(tree):
    assert list(preorder(tree)) == [98, 12, 6, 56, 402, 256, 512]


def test_inorder_of_search_tree_is_sorted(tree):
    values = list(inorder(tree))
    assert values == sorted(values)
    assert values == [6, 12, 56, 98, 256, 402, 512]


def test_postorder(tree):
    assert list(postorder(tree)) == [6, 56, 12, 256, 512, 402, 98]


def test_levelorder(tree):
    assert list(levelorder(tree)) == [98, 12, 402, 6, 56, 256, 512]


@pytest.mark.parametrize("func", [preorder, inorder, postorder, levelorder])
def test_every_value_visited_once(tree, func):
    assert sorted(func(tree)) == sorted(preorder(tree))


def test_preorder_starts_and_postorder_ends_at_root(tree):
    assert next(preorder(tree)) == tree.n
    assert list(postorder(tree))[-1] == tree.n


def test_unbalanced_left_chain():
    root = Node(3)
    mid = insert_left(root, 2)
    insert_left(mid, 1)
    assert list(inorder(root)) == [1, 2, 3]
    assert list(preorder(root)) == [3, 2, 1]
    assert list(levelorder(root)) == [3, 2, 1]