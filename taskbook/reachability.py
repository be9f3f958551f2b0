"""Counting floors reachable with three fixed upward steps."""

from __future__ import annotations

import heapq
from math import gcd


def reachable_floors(height: int, a: int, b: int, c: int) -> int:
    """Number of floors in ``1..height`` reachable from floor 1 by steps of ``a``, ``b`` or ``c``."""
    if height < 1:
        raise ValueError("height must be at least 1")
    if min(a, b, c) < 1:
        raise ValueError("steps must be positive")
    common = gcd(gcd(a, b), c)
    smallest, middle, largest = sorted(step // common for step in (a, b, c))
    limit = (height - 1) // common
    if smallest == 1:
        return limit + 1
    # lowest[r]: the smallest climb using the two larger steps with remainder r.
    lowest: list[int | None] = [None] * smallest
    lowest[0] = 0
    heap = [(0, 0)]
    while heap:
        climb, residue = heapq.heappop(heap)
        if climb != lowest[residue]:
            continue
        for step in (middle, largest):
            reached = climb + step
            target = reached % smallest
            known = lowest[target]
            if known is None or reached < known:
                lowest[target] = reached
                heapq.heappush(heap, (reached, target))
    return sum(
        1 + (limit - climb) // smallest
        for climb in lowest
        if climb is not None and climb <= limit
    )