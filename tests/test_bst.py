import random

import pytest

from dsakit.bst import (
    BinarySearchTree,
    DuplicateValueError,
    EmptyTreeError,
    Node,
    Traversal,
)

VALUES = [50, 30, 70, 20, 40, 60, 80, 35, 65, 10]


def _random_values(seed, count=40):
    rng = random.Random(seed)
    return rng.sample(range(-500, 500), count)


def _assert_shape_invariants(tree):
    n = len(tree)
    assert tree.count_leaves() + tree.count_one_child() + tree.count_both_children() == n
    assert tree.count_one_child() == tree.count_only_left_child() + tree.count_only_right_child()
    if n:
        assert tree.count_leaves() == tree.count_both_children() + 1
        assert tree.count_left_side() + tree.count_right_side() + 1 == n


@pytest.fixture
def tree():
    return BinarySearchTree(VALUES)


def test_inorder_is_sorted(tree):
    assert tree.inorder() == sorted(VALUES)
    assert list(tree) == sorted(VALUES)


def test_len_and_contains(tree):
    assert len(tree) == len(VALUES)
    assert all(v in tree for v in VALUES)
    assert 55 not in tree


def test_preorder_and_postorder_root_positions(tree):
    pre = tree.preorder()
    post = tree.postorder()
    assert pre[0] == VALUES[0]
    assert post[-1] == VALUES[0]
    assert sorted(pre) == sorted(post) == sorted(VALUES)


def test_preorder_pinned():
    t = BinarySearchTree([2, 1, 3])
    assert t.preorder() == [2, 1, 3]
    assert t.postorder() == [1, 3, 2]


def test_traverse_accepts_enum_and_string(tree):
    assert tree.traverse(Traversal.PREORDER) == tree.preorder()
    assert tree.traverse("postorder") == tree.postorder()
    assert tree.traverse() == tree.inorder()


def test_traverse_rejects_unknown_order(tree):
    with pytest.raises(ValueError):
        tree.traverse("levelorder")


def test_duplicate_insert_raises(tree):
    with pytest.raises(DuplicateValueError):
        tree.insert(40)
    assert len(tree) == len(VALUES)


def test_duplicate_in_constructor_raises():
    with pytest.raises(DuplicateValueError):
        BinarySearchTree([5, 5])


def test_counts_invariants(tree):
    _assert_shape_invariants(tree)
    assert tree.count_siblings() == 2 * tree.count_both_children()
    assert tree.count_with_parent() == len(VALUES) - 1


@pytest.mark.parametrize("seed", range(5))
def test_random_trees_invariants(seed):
    values = _random_values(seed)
    t = BinarySearchTree(values)
    assert t.inorder() == sorted(values)
    assert t.highest() == max(values)
    assert t.least() == min(values)
    assert t.height() == t.depth() + 1
    _assert_shape_invariants(t)


def test_highest_and_least(tree):
    assert tree.highest() == max(VALUES)
    assert tree.least() == min(VALUES)


def test_chain_height_and_counts():
    values = list(range(1, 8))
    t = BinarySearchTree(values)
    assert t.height() == len(values)
    assert t.depth() == len(values) - 1
    assert t.count_only_right_child() == len(values) - 1
    assert t.count_only_left_child() == 0
    assert t.count_left_side() == 0
    assert t.count_right_side() == len(values) - 1


def test_deep_chain_does_not_recurse():
    values = list(range(3000))
    t = BinarySearchTree(values)
    assert t.postorder() == values[::-1]
    assert t.height() == len(values)


def test_empty_tree():
    t = BinarySearchTree()
    assert len(t) == 0
    assert t.inorder() == []
    assert t.height() == 0
    assert t.depth() == -1
    assert t.count_leaves() == 0
    assert t.count_with_parent() == 0


@pytest.mark.parametrize(
    "method",
    ["highest", "least", "count_left_side", "count_right_side"],
)
def test_empty_tree_errors(method):
    with pytest.raises(EmptyTreeError):
        getattr(BinarySearchTree(), method)()


def test_find_parent(tree):
    assert tree.find_parent(30) == 50
    assert tree.find_parent(35) == 40
    assert tree.find_parent(65) == 60
    assert tree.find_parent(50) is None


def test_find_parent_missing(tree):
    with pytest.raises(KeyError):
        tree.find_parent(999)


def test_find_parent_empty():
    with pytest.raises(EmptyTreeError):
        BinarySearchTree().find_parent(1)


@pytest.mark.parametrize("victim", VALUES)
def test_delete_each_value(victim):
    t = BinarySearchTree(VALUES)
    t.delete(victim)
    remaining = [v for v in VALUES if v != victim]
    assert t.inorder() == sorted(remaining)
    assert victim not in t
    assert len(t) == len(remaining)
    _assert_shape_invariants(t)


def test_delete_root_replaced_by_right_subtree():
    t = BinarySearchTree([2, 1, 3])
    t.delete(2)
    assert t.root.value == 3
    assert t.find_parent(1) == 3


def test_delete_root_with_only_left_child():
    t = BinarySearchTree([5, 3, 1])
    t.delete(5)
    assert t.root.value == 3
    assert t.inorder() == [1, 3]


def test_delete_all_in_random_order():
    values = _random_values(11)
    t = BinarySearchTree(values)
    order = values[:]
    random.Random(3).shuffle(order)
    for v in order:
        t.delete(v)
        assert v not in t
    assert len(t) == 0
    assert t.root is None


def test_delete_missing_and_empty():
    t = BinarySearchTree([1, 2])
    with pytest.raises(KeyError):
        t.delete(7)
    assert t.inorder() == [1, 2]
    with pytest.raises(EmptyTreeError):
        BinarySearchTree().delete(1)


def test_node_is_leaf():
    assert Node(1).is_leaf() is True
    assert Node(1, left=Node(0)).is_leaf() is False


def test_reinsert_after_delete(tree):
    tree.delete(40)
    tree.insert(40)
    assert tree.inorder() == sorted(VALUES)