"""Water trapped between bars of given heights."""

from __future__ import annotations

from itertools import accumulate
from typing import Sequence


def trapped_water(heights: Sequence[int]) -> int:
    """Units of water held between the bars after rain."""
    bars = list(heights)
    left_max = accumulate(bars, max)
    right_max = reversed(list(accumulate(reversed(bars), max)))
    return sum(
        max(0, min(left, right) - height)
        for height, left, right in zip(bars, left_max, right_max)
    )