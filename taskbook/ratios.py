"""Ratios of all ordered pairs in a list and the pairs that reach the k-th one."""

from __future__ import annotations

from itertools import combinations
from typing import Iterator, Sequence


def _pairs(values: Sequence[float]) -> Iterator[tuple[float, float]]:
    if len(set(values)) != len(values):
        raise ValueError("values must be distinct")
    return combinations(values, 2)


def pairwise_ratios(values: Sequence[float]) -> list[float]:
    """Ratios ``values[i] / values[j]`` for every ``i < j``, in ascending order."""
    return sorted(first / second for first, second in _pairs(values))


def pairs_with_kth_ratio(values: Sequence[float], k: int) -> list[tuple[float, float]]:
    """Pairs, in list order, whose ratio equals the ``k``-th smallest ratio (0-based)."""
    ratios = pairwise_ratios(values)
    if not 0 <= k < len(ratios):
        raise IndexError(f"ratio index {k} out of range")
    target = ratios[k]
    return [(first, second) for first, second in _pairs(values) if first / second == target]