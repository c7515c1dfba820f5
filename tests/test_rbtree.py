import random

import pytest

from litekit.rbtree import BLACK, RED, RBTree


def _black_height(node, parent=None):
    """Check the red-black rules below *node* and return its black height."""
    if node is None:
        return 1
    assert node.parent is parent
    assert node.color in (RED, BLACK)
    if node.color == RED:
        assert node.left is None or node.left.color == BLACK
        assert node.right is None or node.right.color == BLACK
    if node.left is not None:
        assert node.left.key < node.key
    if node.right is not None:
        assert node.key < node.right.key
    left = _black_height(node.left, node)
    right = _black_height(node.right, node)
    assert left == right
    return left + (1 if node.color == BLACK else 0)


def _check(tree):
    if tree._root is not None:
        assert tree._root.color == BLACK
    _black_height(tree._root)


def test_empty_tree():
    tree = RBTree()
    assert len(tree) == 0
    assert not tree
    assert tree.min() is None
    assert tree.max() is None
    assert tree.find(1) is None
    assert tree.nfind(1) is None
    assert tree.remove(1) is None
    assert list(tree) == []


def test_insert_iterates_in_order():
    tree = RBTree()
    values = [5, 3, 8, 1, 4, 7, 9, 2, 6]
    for v in values:
        assert tree.insert(v) is None
        _check(tree)
    assert list(tree) == sorted(values)
    assert list(reversed(tree)) == sorted(values, reverse=True)
    assert len(tree) == len(values)
    assert tree


def test_duplicate_insert_returns_existing():
    tree = RBTree(key=lambda pair: pair[0])
    first = (1, "a")
    assert tree.insert(first) is None
    assert tree.insert((1, "b")) is first
    assert len(tree) == 1
    assert list(tree) == [first]


def test_find_and_remove():
    tree = RBTree()
    for v in range(20):
        tree.insert(v)
    assert tree.find(7) == 7
    assert tree.find(42) is None
    assert tree.remove(7) == 7
    _check(tree)
    assert tree.find(7) is None
    assert tree.remove(7) is None
    assert len(tree) == 19
    assert list(tree) == [v for v in range(20) if v != 7]


def test_nfind():
    tree = RBTree()
    for v in (10, 20, 30):
        tree.insert(v)
    assert tree.nfind(20) == 20
    assert tree.nfind(15) == 20
    assert tree.nfind(5) == 10
    assert tree.nfind(31) is None


def test_next_prev_min_max():
    tree = RBTree()
    for v in (4, 2, 6, 1, 3, 5, 7):
        tree.insert(v)
    assert tree.min() == 1
    assert tree.max() == 7
    assert tree.next(3) == 4
    assert tree.prev(3) == 2
    assert tree.next(7) is None
    assert tree.prev(1) is None
    with pytest.raises(KeyError):
        tree.next(100)
    with pytest.raises(KeyError):
        tree.prev(100)


def test_key_function_orders_items():
    tree = RBTree(key=len)
    for word in ("ccc", "a", "bb", "dddd"):
        tree.insert(word)
    assert list(tree) == ["a", "bb", "ccc", "dddd"]
    assert tree.find("xx") == "bb"
    assert tree.remove("yyy") == "ccc"
    assert list(tree) == ["a", "bb", "dddd"]


def test_remove_during_iteration():
    tree = RBTree()
    for v in range(10):
        tree.insert(v)
    seen = []
    for v in tree:
        seen.append(v)
        if v % 2 == 0:
            tree.remove(v)
    assert seen == list(range(10))
    assert list(tree) == [1, 3, 5, 7, 9]
    _check(tree)


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_random_operations_keep_invariants(seed):
    rng = random.Random(seed)
    tree = RBTree()
    model = set()
    for _ in range(400):
        v = rng.randrange(100)
        if rng.random() < 0.6:
            result = tree.insert(v)
            assert (result == v) == (v in model)
            model.add(v)
        else:
            result = tree.remove(v)
            assert (result == v) == (v in model)
            model.discard(v)
        _check(tree)
        assert len(tree) == len(model)
    assert list(tree) == sorted(model)
    assert list(reversed(tree)) == sorted(model, reverse=True)


def test_remove_everything_empties_tree():
    tree = RBTree()
    values = list(range(50))
    for v in values:
        tree.insert(v)
    for v in reversed(values):
        assert tree.remove(v) == v
        _check(tree)
    assert len(tree) == 0
    assert not tree
    assert tree.min() is None