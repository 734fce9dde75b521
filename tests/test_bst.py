import random

import pytest

from algodrills.bst import BinarySearchTree

KEYS = [50, 30, 70, 20, 40, 60, 80, 35, 45]


def test_iteration_is_sorted():
    tree = BinarySearchTree(KEYS)
    assert list(tree) == sorted(KEYS)
    assert len(tree) == len(KEYS)


def test_duplicates_ignored():
    tree = BinarySearchTree([5, 3, 5, 3])
    assert list(tree) == [3, 5]
    assert tree.insert(3) is False
    assert len(tree) == 2


def test_contains():
    tree = BinarySearchTree(KEYS)
    assert all(k in tree for k in KEYS)
    assert 99 not in tree


@pytest.mark.parametrize("key", [20, 80, 60, 30, 50, 40])
def test_delete_each_case(key):
    tree = BinarySearchTree(KEYS)
    assert tree.delete(key) is True
    expected = sorted(k for k in KEYS if k != key)
    assert list(tree) == expected
    assert key not in tree
    assert len(tree) == len(expected)


def test_delete_missing():
    tree = BinarySearchTree(KEYS)
    assert tree.delete(99) is False
    assert list(tree) == sorted(KEYS)


def test_delete_everything():
    tree = BinarySearchTree(KEYS)
    for key in KEYS:
        assert tree.delete(key)
    assert list(tree) == []
    assert len(tree) == 0
    assert BinarySearchTree().delete(1) is False


def test_random_operations_match_set():
    rng = random.Random(7)
    tree = BinarySearchTree()
    model = set()
    for _ in range(2000):
        key = rng.randrange(200)
        if rng.random() < 0.6:
            assert tree.insert(key) is (key not in model)
            model.add(key)
        else:
            assert tree.delete(key) is (key in model)
            model.discard(key)
    assert list(tree) == sorted(model)
    assert len(tree) == len(model)