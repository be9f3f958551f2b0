"""Strongly connected components by Kosaraju's two-pass search."""

from __future__ import annotations

from typing import Iterable


def _check_vertex(vertex_count: int, vertex: int) -> int:
    if not 1 <= vertex <= vertex_count:
        raise ValueError(f"vertex {vertex} is outside 1..{vertex_count}")
    return vertex - 1


def _finish_order(adjacency: list[list[int]]) -> list[int]:
    seen = [False] * len(adjacency)
    order: list[int] = []
    for root in range(len(adjacency)):
        if seen[root]:
            continue
        seen[root] = True
        stack = [(root, iter(adjacency[root]))]
        while stack:
            vertex, neighbours = stack[-1]
            for neighbour in neighbours:
                if not seen[neighbour]:
                    seen[neighbour] = True
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                stack.pop()
                order.append(vertex)
    return order


def component_labels(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Component number of each vertex, numbered from 0 in topological order.

    Vertices are numbered from 1; the result is indexed from 0.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    forward: list[list[int]] = [[] for _ in range(vertex_count)]
    backward: list[list[int]] = [[] for _ in range(vertex_count)]
    for first, second in edges:
        u, v = _check_vertex(vertex_count, first), _check_vertex(vertex_count, second)
        forward[u].append(v)
        backward[v].append(u)
    labels: list[int | None] = [None] * vertex_count
    label = 0
    for root in reversed(_finish_order(forward)):
        if labels[root] is not None:
            continue
        labels[root] = label
        stack = [root]
        while stack:
            vertex = stack.pop()
            for neighbour in backward[vertex]:
                if labels[neighbour] is None:
                    labels[neighbour] = label
                    stack.append(neighbour)
        label += 1
    return [value for value in labels if value is not None]


def same_component(
    vertex_count: int,
    edges: Iterable[tuple[int, int]],
    queries: Iterable[tuple[int, int]],
) -> list[bool]:
    """For each query pair, whether both vertices share a strongly connected component."""
    labels = component_labels(vertex_count, edges)
    return [
        labels[_check_vertex(vertex_count, a)] == labels[_check_vertex(vertex_count, b)]
        for a, b in queries
    ]