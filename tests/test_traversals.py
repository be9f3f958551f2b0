import random

import pytest

from taskbook.traversals import (
    is_inorder,
    is_postorder,
    is_preorder,
    traversals_consistent,
)


def _walks(values):
    """Build a BST from values and return its pre-, in- and post-order walks."""
    root = None
    for value in values:
        if root is None:
            root = [value, None, None]
            continue
        node = root
        while True:
            slot = 1 if value < node[0] else 2
            if node[slot] is None:
                node[slot] = [value, None, None]
                break
            node = node[slot]

    pre, ino, post = [], [], []

    def walk(node):
        if node is None:
            return
        pre.append(node[0])
        walk(node[1])
        ino.append(node[0])
        walk(node[2])
        post.append(node[0])

    walk(root)
    return pre, ino, post


@pytest.mark.parametrize("seed", range(8))
def test_real_walks_are_accepted(seed):
    rng = random.Random(seed)
    pre, ino, post = _walks(rng.sample(range(100), 30))
    assert is_preorder(pre)
    assert is_inorder(ino)
    assert is_postorder(post)
    assert traversals_consistent(pre, ino, post)


def test_invalid_preorder():
    assert is_preorder([2, 3, 1]) is False


def test_invalid_postorder():
    assert is_postorder([3, 1, 2]) is False


def test_unsorted_inorder_rejected():
    pre, ino, post = _walks([5, 2, 8])
    assert traversals_consistent(pre, list(reversed(ino)), post) is False


def test_sum_mismatch_rejected():
    pre, ino, post = _walks([5, 2, 8])
    shifted = [value + 1 for value in ino]
    assert traversals_consistent(pre, shifted, post) is False


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        traversals_consistent([1, 2], [1, 2], [1])


def test_empty_walks_are_consistent():
    assert traversals_consistent([], [], []) is True