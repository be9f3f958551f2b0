"""Sorting algorithms and the small tasks built on them."""

from __future__ import annotations

from typing import Iterable, Sequence


def anti_quicksort(size: int) -> list[int]:
    """A permutation of 1..size that drives middle-pivot quicksort to many comparisons."""
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= 1:
        return list(range(1, size + 1))
    permutation = [1, 2]
    for index in range(2, size):
        permutation.append(index + 1)
        half = index // 2
        permutation[half], permutation[index] = permutation[index], permutation[half]
    return permutation


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted by repeated adjacent swaps."""
    result: list[int] = []
    for value in values:
        result.append(value)
        position = len(result) - 1
        while position > 0 and result[position - 1] > result[position]:
            result[position - 1], result[position] = result[position], result[position - 1]
            position -= 1
    return result


def quicksort(values: Iterable[int]) -> list[int]:
    """Return the values sorted with Hoare partitioning around the middle element."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        left, right = low, high
        pivot = items[(low + high) // 2]
        while left <= right:
            while items[left] < pivot:
                left += 1
            while items[right] > pivot:
                right -= 1
            if left <= right:
                items[left], items[right] = items[right], items[left]
                left += 1
                right -= 1
        pending.append((low, right))
        pending.append((left, high))
    return items


def _sort_counting(items: list[int]) -> tuple[list[int], int]:
    if len(items) < 2:
        return items, 0
    middle = (len(items) + 1) // 2
    left, left_count = _sort_counting(items[:middle])
    right, right_count = _sort_counting(items[middle:])
    merged: list[int] = []
    inversions = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            inversions += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def count_inversions(values: Iterable[int]) -> int:
    """Number of pairs ``i < j`` with ``values[i] > values[j]``, by merge sort."""
    return _sort_counting(list(values))[1]


def radix_sort(words: Sequence[str], length: int, phases: int) -> list[str]:
    """Run ``phases`` stable passes of LSD radix sort on words of ``length`` characters."""
    if not 0 <= phases <= length:
        raise ValueError("phases must be between 0 and the word length")
    if any(len(word) < length for word in words):
        raise ValueError(f"every word needs at least {length} characters")
    result = list(words)
    for position in range(length - 1, length - phases - 1, -1):
        result.sort(key=lambda word: ord(word[position]))
    return result


def covered_length(segments: Iterable[tuple[int, int]]) -> int:
    """Number of integer points covered by the union of closed segments ``(l, r)``."""
    ordered = sorted(segments, key=lambda segment: segment[0])
    if not ordered:
        return 0
    first, last = ordered[0]
    total = 0
    for start, end in ordered[1:]:
        if start > first:
            if start > last:
                total += last - first + 1
                last = end
            else:
                total += start - first
            last = max(last, end)
            first = start
        elif end > last:
            last = end
    return total + last - first + 1


def rectangle_area(sticks: Iterable[int]) -> int:
    """Total area of rectangles built greedily from the longest sticks.

    Two sticks form a side when they are equal or differ by one; the side takes
    the shorter length.
    """
    ordered = sorted(sticks, reverse=True)
    size = len(ordered)

    def pairs_at(index: int) -> bool:
        return index + 1 < size and ordered[index] - ordered[index + 1] in (0, 1)

    length = width = total = 0
    index = 0
    while index < size - 1:
        if length == 0 and pairs_at(index):
            length = ordered[index + 1]
            index += 2
        if length > 0 and pairs_at(index):
            width = ordered[index + 1]
            index += 1
        if length > 0 and width > 0:
            total += length * width
            length = width = 0
        index += 1
    return total