import random

import pytest

from dsakit.bplus import BPlusTree


def _sample_tree():
    tree = BPlusTree()
    for key in (5, 3, 8, 1, 9):
        tree.insert(key)
    return tree


def test_sample_walk():
    assert list(_sample_tree().walk()) == [5, 1, 3, 5, 8, 9]


def test_sample_search():
    tree = _sample_tree()
    assert tree.search(5) is True
    assert tree.search(7) is False


def test_contains():
    tree = _sample_tree()
    assert 9 in tree
    assert 2 not in tree


def test_empty_tree():
    tree = BPlusTree()
    assert tree.search(1) is False
    assert list(tree.walk()) == []


def test_single_key():
    tree = BPlusTree()
    tree.insert(42)
    assert list(tree.walk()) == [42]
    assert 42 in tree


def test_order_too_small():
    with pytest.raises(ValueError):
        BPlusTree(1)


@pytest.mark.parametrize("order", [2, 3, 4, 7])
def test_many_random_keys(order):
    rng = random.Random(order)
    keys = rng.sample(range(0, 2000, 2), 300)
    tree = BPlusTree(order)
    for key in keys:
        tree.insert(key)
    assert all(key in tree for key in keys)
    assert not any(key + 1 in tree for key in keys)
    assert set(tree.walk()) == set(keys)


@pytest.mark.parametrize("order", [2, 3])
def test_duplicates_are_found(order):
    tree = BPlusTree(order)
    for key in [4, 4, 4, 4, 4, 1, 7, 4]:
        tree.insert(key)
    assert 4 in tree
    assert 1 in tree
    assert 7 in tree
    assert 5 not in tree


def test_ascending_inserts():
    tree = BPlusTree()
    for key in range(100):
        tree.insert(key)
    assert all(key in tree for key in range(100))
    assert -1 not in tree
    assert 100 not in tree