"""Binary-heap tasks: mergeable priority queues, scheduling, checks, sorting and medians."""

from __future__ import annotations

import heapq
from itertools import chain, count
from typing import Iterable, Iterator


class _MinHeap:
    """Array-backed binary min-heap with sift-up insertion and sift-down removal."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in items:
            self.push(value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def push(self, value: int) -> None:
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def pop(self) -> int:
        if not self._items:
            raise IndexError("pop from an empty heap")
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return root

    def replace(self, old: int, new: int) -> None:
        """Replace the first stored occurrence of ``old`` and sift it up."""
        try:
            index = self._items.index(old)
        except ValueError:
            return
        self._items[index] = new
        self._sift_up(index)

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index:
            parent = (index - 1) // 2
            if items[parent] <= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child] < items[smallest]:
                    smallest = child
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest


class MergeableQueues:
    """A numbered collection of min-priority queues that can be merged into new ones."""

    def __init__(self) -> None:
        self._queues: list[_MinHeap] = []

    def __len__(self) -> int:
        return len(self._queues)

    def _get(self, queue: int) -> _MinHeap:
        if not 0 <= queue < len(self._queues):
            raise IndexError(f"no queue numbered {queue}")
        return self._queues[queue]

    def create(self) -> int:
        """Add an empty queue and return its number."""
        self._queues.append(_MinHeap())
        return len(self._queues) - 1

    def merge(self, first: int, second: int) -> int:
        """Add a queue holding the items of both queues; the originals stay intact."""
        merged = _MinHeap(chain(self._get(first), self._get(second)))
        self._queues.append(merged)
        return len(self._queues) - 1

    def insert(self, queue: int, value: int) -> None:
        self._get(queue).push(value)

    def decrease_key(self, queue: int, old: int, new: int) -> None:
        """Change one occurrence of ``old`` to ``new``; nothing happens if it is absent."""
        self._get(queue).replace(old, new)

    def extract_min(self, queue: int) -> int | None:
        """Remove and return the smallest item, or None if the queue is empty."""
        heap = self._get(queue)
        if not heap:
            return None
        return heap.pop()


_ARITY = {"create": 0, "merge": 2, "insert": 2, "decrease-key": 3, "extract-min": 1}


def run_queue_commands(lines: Iterable[str]) -> list[str]:
    """Execute whitespace-separated queue commands and return the extract-min output.

    An empty queue yields ``"*"``. Unknown words are skipped.
    """
    tokens = iter(chain.from_iterable(line.split() for line in lines))
    queues = MergeableQueues()
    output: list[str] = []
    for operation in tokens:
        arity = _ARITY.get(operation)
        if arity is None:
            continue
        try:
            args = [int(next(tokens)) for _ in range(arity)]
        except StopIteration:
            raise ValueError(f"incomplete command: {operation}") from None
        if operation == "create":
            queues.create()
        elif operation == "merge":
            queues.merge(*args)
        elif operation == "insert":
            queues.insert(*args)
        elif operation == "decrease-key":
            queues.decrease_key(*args)
        else:
            value = queues.extract_min(*args)
            output.append("*" if value is None else str(value))
    return output


def total_salary(salaries: Iterable[int], orders: Iterable[tuple[int, int]]) -> int:
    """Total pay when each order (start, duration) goes to the cheapest free worker.

    A worker becomes free again at ``start + duration``; orders arriving while no
    worker is free are dropped.
    """
    free = list(salaries)
    heapq.heapify(free)
    busy: list[tuple[int, int, int]] = []
    sequence = count()
    total = 0
    for start, duration in orders:
        while busy and busy[0][0] <= start:
            _, _, salary = heapq.heappop(busy)
            heapq.heappush(free, salary)
        if free:
            salary = heapq.heappop(free)
            heapq.heappush(busy, (start + duration, next(sequence), salary))
            total += salary * duration
    return total


def is_min_heap(values: list[int]) -> bool:
    """Check the min-heap order for every parent that has two children."""
    return all(
        values[i] <= values[2 * i + 1] and values[i] <= values[2 * i + 2]
        for i in range((len(values) - 1) // 2)
    )


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order using a binary min-heap."""
    heap = _MinHeap(values)
    return [heap.pop() for _ in range(len(heap))]


def _truncating_half(total: int) -> int:
    half = abs(total) // 2
    return half if total >= 0 else -half


def running_medians(values: Iterable[int]) -> list[int]:
    """Median of each prefix; for even lengths the mean of the middle two, truncated to zero."""
    lower: list[int] = []  # max-heap via negation
    upper: list[int] = []
    medians: list[int] = []
    for value in values:
        if not lower or value <= -lower[0]:
            heapq.heappush(lower, -value)
        else:
            heapq.heappush(upper, value)
        if len(lower) > len(upper) + 1:
            heapq.heappush(upper, -heapq.heappop(lower))
        elif len(upper) > len(lower):
            heapq.heappush(lower, -heapq.heappop(upper))
        if len(lower) > len(upper):
            medians.append(-lower[0])
        else:
            medians.append(_truncating_half(-lower[0] + upper[0]))
    return medians