import random
import statistics

import pytest

from taskbook.heaps import (
    MergeableQueues,
    heap_sort,
    is_min_heap,
    run_queue_commands,
    running_medians,
    total_salary,
)


def test_queue_extracts_in_order_and_reports_empty():
    queues = MergeableQueues()
    q = queues.create()
    for value in (5, 3, 8):
        queues.insert(q, value)
    assert [queues.extract_min(q) for _ in range(4)] == [3, 5, 8, None]


def test_merge_creates_new_queue_and_keeps_originals():
    queues = MergeableQueues()
    a = queues.create()
    b = queues.create()
    for v in (4, 1):
        queues.insert(a, v)
    for v in (3, 2):
        queues.insert(b, v)
    merged = queues.merge(a, b)
    assert merged == 2
    assert [queues.extract_min(merged) for _ in range(4)] == [1, 2, 3, 4]
    assert queues.extract_min(a) == 1
    assert queues.extract_min(b) == 2


def test_decrease_key_moves_item_up():
    queues = MergeableQueues()
    q = queues.create()
    for v in (5, 7, 9):
        queues.insert(q, v)
    queues.decrease_key(q, 9, 1)
    assert queues.extract_min(q) == 1
    assert queues.extract_min(q) == 5


def test_decrease_key_missing_value_is_ignored():
    queues = MergeableQueues()
    q = queues.create()
    queues.insert(q, 5)
    queues.decrease_key(q, 42, 1)
    assert queues.extract_min(q) == 5
    assert queues.extract_min(q) is None


def test_unknown_queue_raises():
    queues = MergeableQueues()
    with pytest.raises(IndexError):
        queues.insert(0, 1)


def test_run_queue_commands():
    lines = [
        "create",
        "insert 0 5",
        "insert 0 3",
        "create",
        "insert 1 4",
        "merge 0 1",
        "extract-min 2",
        "decrease-key 2 5 1",
        "extract-min 2",
        "extract-min 2",
        "extract-min 2",
        "extract-min 0",
    ]
    assert run_queue_commands(lines) == ["3", "1", "4", "*", "3"]


def test_run_queue_commands_incomplete():
    with pytest.raises(ValueError):
        run_queue_commands(["create", "insert 0"])


def test_total_salary_single_order():
    assert total_salary([10, 2], [(0, 5)]) == 2 * 5


def test_total_salary_drops_order_when_all_busy():
    assert total_salary([10], [(0, 5), (1, 3)]) == total_salary([10], [(0, 5)])


def test_total_salary_worker_free_at_end_time():
    assert total_salary([10], [(0, 5), (5, 3)]) == 10 * 5 + 10 * 3


def test_total_salary_uses_cheapest_free_worker():
    assert total_salary([7, 2], [(0, 4), (1, 4)]) == 2 * 4 + 7 * 4


def test_is_min_heap_true_and_false():
    assert is_min_heap([1, 2, 3, 4, 5]) is True
    assert is_min_heap([1, 3, 2, 0, 5]) is False


def test_is_min_heap_ignores_single_child_parent():
    assert is_min_heap([5, 1]) is True


def test_heap_sort_matches_sorted():
    rng = random.Random(7)
    values = [rng.randint(-100, 100) for _ in range(60)]
    result = heap_sort(values)
    assert result == sorted(values)


def test_heap_sort_empty():
    assert heap_sort([]) == []


def test_running_medians_odd_prefixes_are_true_medians():
    rng = random.Random(3)
    values = [rng.randint(0, 1000) for _ in range(41)]
    medians = running_medians(values)
    assert len(medians) == len(values)
    for n in range(1, len(values) + 1, 2):
        assert medians[n - 1] == statistics.median(values[:n])


def test_running_medians_even_prefixes_truncate():
    rng = random.Random(11)
    values = [rng.randint(-50, 50) for _ in range(30)]
    medians = running_medians(values)
    for n in range(2, len(values) + 1, 2):
        assert medians[n - 1] == int(statistics.median(values[:n]))