import random

from dsalgo.avl import AVLTree


def build(values):
    tree = AVLTree()
    for v in values:
        tree.insert(v)
    return tree


def test_sequential_insert_stays_balanced():
    tree = build(range(1, 11))
    assert list(tree.inorder()) == list(range(1, 11))
    assert tree.is_balanced()
    assert tree.height() == 4


def test_source_removal_sequence():
    tree = build(range(1, 11))
    for v in (9, 10, 6, 1, 2, 3):
        tree.remove(v)
        assert tree.is_balanced()
    assert list(tree.inorder()) == [4, 5, 7, 8]
    assert len(tree) == 4


def test_duplicates_ignored():
    tree = build([5, 3, 5, 3, 7])
    assert list(tree) == [3, 5, 7]
    assert len(tree) == 3


def test_contains():
    tree = build([10, 20, 30])
    assert 20 in tree
    assert 25 not in tree


def test_remove_missing_is_noop():
    tree = build([1, 2, 3])
    tree.remove(42)
    assert list(tree) == [1, 2, 3]


def test_empty_tree():
    tree = AVLTree()
    assert tree.height() == 0
    assert len(tree) == 0
    assert tree.is_balanced()
    tree.remove(1)
    assert list(tree) == []


def test_random_operations_match_set():
    rng = random.Random(7)
    tree = AVLTree()
    reference = set()
    for _ in range(500):
        v = rng.randrange(100)
        if rng.random() < 0.6:
            tree.insert(v)
            reference.add(v)
        else:
            tree.remove(v)
            reference.discard(v)
        assert tree.is_balanced()
    assert list(tree) == sorted(reference)


def test_height_logarithmic():
    tree = build(range(1000))
    assert tree.height() <= 15
    assert tree.is_balanced()