import random

import pytest

from taskbook.order_stats import OrderStatisticTree, run_kth_commands


@pytest.mark.parametrize("seed", range(5))
def test_kth_largest_matches_sorted(seed):
    rng = random.Random(seed)
    values = [rng.randint(-100, 100) for _ in range(80)]
    tree = OrderStatisticTree(values)
    expected = sorted(set(values), reverse=True)
    assert len(tree) == len(expected)
    assert [tree.kth_largest(k) for k in range(1, len(expected) + 1)] == expected


@pytest.mark.parametrize("seed", range(5))
def test_sizes_survive_deletions(seed):
    rng = random.Random(seed)
    present = set(rng.sample(range(200), 70))
    tree = OrderStatisticTree(present)
    for value in rng.sample(sorted(present), 40):
        tree.delete(value)
        present.discard(value)
        expected = sorted(present, reverse=True)
        assert len(tree) == len(expected)
        assert [tree.kth_largest(k) for k in range(1, len(expected) + 1)] == expected


def test_duplicate_insert_ignored():
    tree = OrderStatisticTree([3, 3])
    assert tree.insert(3) is False
    assert len(tree) == 1


def test_delete_missing_raises():
    tree = OrderStatisticTree([1, 2])
    with pytest.raises(KeyError):
        tree.delete(5)


@pytest.mark.parametrize("k", [0, 3, -1])
def test_rank_out_of_range(k):
    tree = OrderStatisticTree([1, 2])
    with pytest.raises(IndexError):
        tree.kth_largest(k)


def test_run_kth_commands():
    commands = ["1 5", "1 3", "1 7", "0 1", "-1 7", "0 1", "0 2"]
    assert run_kth_commands(commands) == [7, 5, 3]


def test_run_kth_commands_incomplete():
    with pytest.raises(ValueError):
        run_kth_commands(["1"])