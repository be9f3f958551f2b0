"""The widest band of heights that can pass from the first room to the last."""

from __future__ import annotations

import heapq
from typing import Iterable

MAX_HEIGHT = 1_000_000


def _check_room(room_count: int, room: int) -> int:
    if not 1 <= room <= room_count:
        raise ValueError(f"room {room} is outside 1..{room_count}")
    return room - 1


def widest_height_range(
    room_count: int, passages: Iterable[tuple[int, int, int, int]]
) -> int | None:
    """Largest number of consecutive heights that can all go from room 1 to the last room.

    Each passage ``(a, b, low, high)`` joins rooms ``a`` and ``b`` and admits
    heights ``low..high``; heights are capped at ``MAX_HEIGHT``. None means no
    height can make the trip.
    """
    if room_count < 1:
        raise ValueError("there must be at least one room")
    adjacency: list[list[tuple[int, int, int]]] = [[] for _ in range(room_count)]
    break_points = {1, MAX_HEIGHT + 1}
    for first, second, low, high in passages:
        u, v = _check_room(room_count, first), _check_room(room_count, second)
        adjacency[u].append((v, low, high))
        adjacency[v].append((u, low, high))
        break_points.update((low, high + 1))

    answer = 0
    for floor in sorted(break_points):
        if floor > MAX_HEIGHT:
            break
        best = [0] * room_count
        best[0] = MAX_HEIGHT
        heap = [(-MAX_HEIGHT, 0)]
        while heap:
            negative, room = heapq.heappop(heap)
            ceiling = -negative
            if ceiling != best[room]:
                continue
            for neighbour, low, high in adjacency[room]:
                if low > floor:
                    continue
                candidate = min(ceiling, high)
                if candidate > best[neighbour] and candidate >= floor:
                    best[neighbour] = candidate
                    heapq.heappush(heap, (-candidate, neighbour))
        if best[-1] >= floor:
            answer = max(answer, best[-1] - floor + 1)
    return answer or None