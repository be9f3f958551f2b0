"""Binary search on the answer: spreading people over fixed seats."""

from __future__ import annotations

from typing import Sequence


def _fits(positions: Sequence[int], gap: int, people: int) -> bool:
    placed = 1
    last = positions[0]
    for position in positions[1:]:
        if position - last >= gap:
            placed += 1
            last = position
    return placed >= people


def max_min_distance(positions: Sequence[int], people: int) -> int:
    """Largest gap such that ``people`` can sit on the sorted ``positions`` that far apart.

    The first person always takes the first position; if even a gap of one
    cannot seat everybody the result is 0.
    """
    seats = list(positions)
    if not seats:
        raise ValueError("at least one position is required")
    low, high = 0, seats[-1] - seats[0] + 1
    while high - low > 1:
        middle = (low + high) // 2
        if _fits(seats, middle, people):
            low = middle
        else:
            high = middle
    return low