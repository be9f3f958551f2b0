"""Breadth- and depth-first searches on small graphs."""

from __future__ import annotations

from collections import deque
from typing import Iterable

ARCHIMEDES = "ARCHIMEDES"
EUCLID = "EUCLID"


def _check_vertex(vertex_count: int, vertex: int) -> int:
    if not 1 <= vertex <= vertex_count:
        raise ValueError(f"vertex {vertex} is outside 1..{vertex_count}")
    return vertex - 1


def _adjacency(
    vertex_count: int, edges: Iterable[tuple[int, int]], *, directed: bool = False
) -> list[list[int]]:
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for first, second in edges:
        u = _check_vertex(vertex_count, first)
        v = _check_vertex(vertex_count, second)
        adjacency[u].append(v)
        if not directed:
            adjacency[v].append(u)
    return adjacency


def vertices_at_distance(
    vertex_count: int, edges: Iterable[tuple[int, int]], distance: int
) -> list[int]:
    """Vertices exactly ``distance`` edges away from vertex 1 in an undirected graph.

    Vertices are numbered from 1 and returned in ascending order.
    """
    if vertex_count < 1:
        raise ValueError("the graph needs at least one vertex")
    adjacency = _adjacency(vertex_count, edges)
    depth: list[int | None] = [None] * vertex_count
    depth[0] = 0
    queue = deque([0])
    while queue:
        vertex = queue.popleft()
        for neighbour in adjacency[vertex]:
            if depth[neighbour] is None:
                depth[neighbour] = depth[vertex] + 1
                queue.append(neighbour)
    return [vertex + 1 for vertex, d in enumerate(depth) if d == distance]


def count_components(vertex_count: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of connected components of an undirected graph."""
    adjacency = _adjacency(vertex_count, edges)
    seen = [False] * vertex_count
    components = 0
    for root in range(vertex_count):
        if seen[root]:
            continue
        components += 1
        seen[root] = True
        stack = [root]
        while stack:
            vertex = stack.pop()
            for neighbour in adjacency[vertex]:
                if not seen[neighbour]:
                    seen[neighbour] = True
                    stack.append(neighbour)
    return components


def _explore(adjacency: list[list[int]], root: int, seen: list[bool]) -> tuple[int, bool]:
    """Depth-first walk from ``root``: the number of vertices reached and whether a cycle was met.

    The edge back to the parent vertex is never followed, so a doubled edge is
    not a cycle while a self-loop is.
    """
    seen[root] = True
    size = 1
    cyclic = False
    stack = [(root, -1, iter(adjacency[root]))]
    while stack:
        vertex, parent, neighbours = stack[-1]
        for neighbour in neighbours:
            if neighbour == parent:
                continue
            if seen[neighbour]:
                cyclic = True
            else:
                seen[neighbour] = True
                size += 1
                stack.append((neighbour, vertex, iter(adjacency[neighbour])))
                break
        else:
            stack.pop()
    return size, cyclic


def has_cycle(vertex_count: int, edges: Iterable[tuple[int, int]]) -> bool:
    """True if the undirected graph has a cycle; parallel edges do not count as one."""
    adjacency = _adjacency(vertex_count, edges)
    seen = [False] * vertex_count
    return any(
        _explore(adjacency, root, seen)[1]
        for root in range(vertex_count)
        if not seen[root]
    )


def classify_hydra(heads: int, edges: Iterable[tuple[int, int]]) -> str:
    """``"ARCHIMEDES"`` if the graph is connected with one cycle through at least three vertices.

    The graph has ``heads`` vertices; it must have exactly as many edges.
    Anything else is ``"EUCLID"``.
    """
    necks = list(edges)
    if heads != len(necks) or heads < 1:
        return EUCLID
    adjacency = _adjacency(heads, necks)
    size, cyclic = _explore(adjacency, 0, [False] * heads)
    if size == heads and size >= 3 and cyclic:
        return ARCHIMEDES
    return EUCLID


def topological_labels(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Label each vertex of a directed graph so that every edge goes to a larger label.

    Labels run from 1 to ``vertex_count`` and are handed out in reverse
    depth-first finishing order; the result is indexed by vertex from 0.
    """
    adjacency = _adjacency(vertex_count, edges, directed=True)
    labels = [0] * vertex_count
    seen = [False] * vertex_count
    next_label = vertex_count
    for root in range(vertex_count):
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
                labels[vertex] = next_label
                next_label -= 1
    return labels