"""Eccentricities, diameter and radius of a weighted undirected graph."""

from __future__ import annotations

import heapq
import math
from typing import Sequence


def _adjacency(matrix: Sequence[Sequence[int]]) -> list[list[tuple[int, int]]]:
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("the matrix must be square")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(size)]
    for i, row in enumerate(rows):
        for j, weight in enumerate(row):
            if weight not in (0, -1):
                adjacency[i].append((j, weight))
                adjacency[j].append((i, weight))
    return adjacency


def _distances_from(adjacency: list[list[tuple[int, int]]], source: int) -> list[float]:
    distance: list[float] = [math.inf] * len(adjacency)
    distance[source] = 0
    heap = [(0, source)]
    while heap:
        current, vertex = heapq.heappop(heap)
        if current > distance[vertex]:
            continue
        for neighbour, weight in adjacency[vertex]:
            candidate = current + weight
            if distance[neighbour] > candidate:
                distance[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return distance


def eccentricities(matrix: Sequence[Sequence[int]]) -> list[float]:
    """Greatest shortest distance from each vertex.

    Every non-zero, non-(-1) entry is an undirected edge; ``math.inf`` marks a
    vertex from which some other vertex cannot be reached.
    """
    adjacency = _adjacency(matrix)
    return [max(_distances_from(adjacency, source)) for source in range(len(adjacency))]


def diameter_and_radius(matrix: Sequence[Sequence[int]]) -> tuple[float, float]:
    """The largest and the smallest eccentricity."""
    values = eccentricities(matrix)
    if not values:
        raise ValueError("the graph needs at least one vertex")
    return max(values), min(values)