"""Shortest flight through a box of space partly filled with plant columns."""

from __future__ import annotations

from collections import deque
from typing import Iterable

X_SIZE = 102
Y_SIZE = 102
Z_SIZE = 202

_MOVES = ((1, 0, 0), (-1, 0, 0), (0, -1, 0), (0, 1, 0), (0, 0, 1), (0, 0, -1))

Point = tuple[int, int, int]


def _inside(x: int, y: int, z: int) -> bool:
    return 0 <= x < X_SIZE and 0 <= y < Y_SIZE and 0 <= z < Z_SIZE


def _manhattan(a: Point, b: Point) -> int:
    return sum(abs(p - q) for p, q in zip(a, b))


def shortest_flight(
    plants: Iterable[tuple[int, int, int, int]],
    energy: int,
    start: Point,
    end: Point,
) -> int | None:
    """Fewest unit moves from ``start`` to ``end`` while avoiding plants.

    A plant ``(x, y, z, h)`` blocks cells ``(x, y, z..z+h-1)``, never the
    ground layer ``z = 0``. With no plants at all the straight distance must be
    strictly below ``energy``; otherwise a route of at most ``energy`` moves is
    accepted. None means the flight is impossible.
    """
    start = tuple(start)
    end = tuple(end)
    if start == end:
        return 0
    columns = list(plants)
    if not columns:
        distance = _manhattan(start, end)
        return distance if distance < energy else None

    for point in (start, end):
        if not _inside(*point):
            raise ValueError(f"point {point} lies outside the grid")
    blocked: set[Point] = set()
    for x, y, z, height in columns:
        if not (0 <= x < X_SIZE and 0 <= y < Y_SIZE):
            raise ValueError(f"plant at ({x}, {y}) lies outside the grid")
        bottom = max(z, 1)
        top = min(z + height - 1, Z_SIZE - 1)
        blocked.update((x, y, level) for level in range(bottom, top + 1))

    seen = {start}
    queue = deque([(start, 0)])
    while queue:
        cell, distance = queue.popleft()
        if cell == end:
            return None if distance > energy else distance
        x, y, z = cell
        for dx, dy, dz in _MOVES:
            neighbour = (x + dx, y + dy, z + dz)
            if not _inside(*neighbour) or neighbour in blocked or neighbour in seen:
                continue
            seen.add(neighbour)
            queue.append((neighbour, distance + 1))
    return None