"""Dijkstra's shortest paths on adjacency matrices and edge lists."""

from __future__ import annotations

import heapq
from typing import Iterable, Sequence

# Distances that reach this bound count as unreachable.
_INF = 100_000_000

_Adjacency = list[list[tuple[int, int]]]


def _index(vertex_count: int, vertex: int) -> int:
    if not 1 <= vertex <= vertex_count:
        raise ValueError(f"vertex {vertex} is outside 1..{vertex_count}")
    return vertex - 1


def _undirected(vertex_count: int, edges: Iterable[tuple[int, int, int]]) -> _Adjacency:
    adjacency: _Adjacency = [[] for _ in range(vertex_count)]
    for first, second, weight in edges:
        u, v = _index(vertex_count, first), _index(vertex_count, second)
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    return adjacency


def _dense_dijkstra(adjacency: _Adjacency, source: int) -> tuple[list[int], list[int | None]]:
    """Quadratic Dijkstra; ties go to the lowest-numbered vertex."""
    size = len(adjacency)
    distance = [_INF] * size
    parent: list[int | None] = [None] * size
    visited = [False] * size
    distance[source] = 0
    for _ in range(size):
        nearest = min(
            (v for v in range(size) if not visited[v]), key=distance.__getitem__
        )
        if distance[nearest] == _INF:
            break
        visited[nearest] = True
        for neighbour, weight in adjacency[nearest]:
            candidate = distance[nearest] + weight
            if distance[neighbour] > candidate:
                distance[neighbour] = candidate
                parent[neighbour] = nearest
    return distance, parent


def matrix_distance(matrix: Sequence[Sequence[int]], start: int, end: int) -> int | None:
    """Shortest distance in a directed graph given as a weight matrix.

    Entries of 0 or -1 mean there is no edge. Vertices are numbered from 1;
    None means ``end`` cannot be reached.
    """
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("the matrix must be square")
    source, target = _index(size, start), _index(size, end)
    adjacency: _Adjacency = [
        [(column, weight) for column, weight in enumerate(row) if weight not in (0, -1)]
        for row in rows
    ]
    distance, _ = _dense_dijkstra(adjacency, source)
    return None if distance[target] == _INF else distance[target]


def shortest_path(
    vertex_count: int, edges: Iterable[tuple[int, int, int]], start: int, end: int
) -> tuple[int, list[int]] | None:
    """Shortest distance and route between two vertices of an undirected graph.

    Edges are ``(u, v, weight)`` with vertices from 1. Returns None if ``end``
    cannot be reached.
    """
    adjacency = _undirected(vertex_count, edges)
    source, target = _index(vertex_count, start), _index(vertex_count, end)
    distance, parent = _dense_dijkstra(adjacency, source)
    if distance[target] == _INF:
        return None
    route: list[int] = []
    vertex: int | None = target
    while vertex is not None:
        route.append(vertex + 1)
        vertex = parent[vertex]
    route.reverse()
    return distance[target], route


def shortest_distance(
    vertex_count: int, edges: Iterable[tuple[int, int, int]], start: int, end: int
) -> int | None:
    """Shortest distance in an undirected graph using a binary heap, or None."""
    adjacency = _undirected(vertex_count, edges)
    source, target = _index(vertex_count, start), _index(vertex_count, end)
    distance = [_INF] * vertex_count
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
    return None if distance[target] == _INF else distance[target]