"""Minimum spanning trees by Prim's algorithm, including a power-grid variant."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from itertools import count
from typing import Iterable, Sequence

# Edge weights at or above this bound never enter the tree.
_INF = 100_000_000
# Distances at or above this bound count as unreachable in the geometric variants.
_FAR = 1e9


def _index(vertex_count: int, vertex: int) -> int:
    if not 1 <= vertex <= vertex_count:
        raise ValueError(f"vertex {vertex} is outside 1..{vertex_count}")
    return vertex - 1


def mst_weight(vertex_count: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Weight of a minimum spanning tree of the part of the graph reachable from vertex 1.

    Edges are undirected ``(u, v, weight)`` triples with vertices numbered from 1.
    """
    if vertex_count < 1:
        raise ValueError("the graph needs at least one vertex")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for first, second, weight in edges:
        u, v = _index(vertex_count, first), _index(vertex_count, second)
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))

    best = [_INF] * vertex_count
    visited = [False] * vertex_count
    best[0] = 0
    heap = [(0, 0)]
    total = 0
    while heap:
        cost, vertex = heapq.heappop(heap)
        if visited[vertex]:
            continue
        visited[vertex] = True
        total += cost
        for neighbour, weight in adjacency[vertex]:
            if not visited[neighbour] and weight < best[neighbour]:
                best[neighbour] = weight
                heapq.heappush(heap, (weight, neighbour))
    return total


def _length(a: Sequence[int], b: Sequence[int]) -> float:
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    return math.sqrt(dx * dx + dy * dy)


def euclidean_mst(
    points: Iterable[tuple[int, int]],
) -> tuple[float, list[tuple[int, int]]]:
    """Minimum spanning tree of points joined by straight lines.

    Returns the total length and the tree edges as ``(parent, child)`` pairs of
    1-based point numbers, ordered by child.
    """
    coords = list(points)
    size = len(coords)
    best = [_FAR] * size
    parent: list[int | None] = [None] * size
    visited = [False] * size
    if size:
        best[0] = 0.0
    for _ in range(size):
        candidates = [j for j in range(size) if not visited[j] and best[j] < _FAR]
        if not candidates:
            break
        current = min(candidates, key=best.__getitem__)
        visited[current] = True
        for other in range(size):
            if not visited[other]:
                distance = _length(coords[current], coords[other])
                if distance < best[other]:
                    best[other] = distance
                    parent[other] = current
    total = sum(best[i] for i in range(size) if visited[i])
    tree = [(p + 1, child + 1) for child, p in enumerate(parent) if p is not None]
    return total, tree


def euclidean_mst_cost(points: Iterable[tuple[int, int]]) -> float:
    """Total length of the minimum spanning tree of the points."""
    return euclidean_mst(points)[0]


@dataclass(frozen=True)
class PowerPlan:
    """Cheapest way to power every city.

    ``stations`` lists cities that build their own station, in the order they
    were settled; ``connections`` lists ``(city, supplier)`` wires.
    """

    total_cost: int
    stations: tuple[int, ...]
    connections: tuple[tuple[int, int], ...]


def power_grid(
    points: Sequence[tuple[int, int]],
    station_costs: Sequence[int],
    wire_factors: Sequence[int],
) -> PowerPlan:
    """Power all cities by stations or wires at minimum total cost.

    A wire between cities ``i`` and ``j`` costs their Manhattan distance times
    ``wire_factors[i] + wire_factors[j]``.
    """
    coords = list(points)
    costs = list(station_costs)
    factors = list(wire_factors)
    if not len(coords) == len(costs) == len(factors):
        raise ValueError("points, station costs and wire factors must have equal lengths")
    size = len(coords)
    best = list(costs)
    visited = [False] * size
    sequence = count()
    heap: list[tuple[int, int, int, int | None]] = [
        (costs[i], next(sequence), i, None) for i in range(size)
    ]
    heapq.heapify(heap)
    total = 0
    stations: list[int] = []
    connections: list[tuple[int, int]] = []
    while heap:
        cost, _, city, supplier = heapq.heappop(heap)
        if visited[city] or cost != best[city]:
            continue
        visited[city] = True
        total += cost
        x, y = coords[city]
        for other in range(size):
            if visited[other]:
                continue
            ox, oy = coords[other]
            wire = (abs(x - ox) + abs(y - oy)) * (factors[city] + factors[other])
            if wire < best[other]:
                best[other] = wire
                heapq.heappush(heap, (wire, next(sequence), other, city + 1))
        if supplier is None:
            stations.append(city + 1)
        else:
            connections.append((city + 1, supplier))
    return PowerPlan(total, tuple(stations), tuple(connections))