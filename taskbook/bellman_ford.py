"""Bellman-Ford relaxation: longest paths, shortest paths with cycles, and arbitrage."""

from __future__ import annotations

import operator
from enum import Enum
from typing import Callable, Iterable, Sequence, TypeVar

_Value = TypeVar("_Value", int, float)
_Arc = tuple


class Reach(Enum):
    """Why a vertex has no finite distance; the value is its printed marker."""

    UNREACHABLE = "*"
    UNBOUNDED = "-"


def _check_vertex(vertex_count: int, vertex: int) -> int:
    if not 1 <= vertex <= vertex_count:
        raise ValueError(f"vertex {vertex} is outside 1..{vertex_count}")
    return vertex - 1


def _zero_based(
    vertex_count: int, edges: Iterable[tuple[int, int, int]]
) -> list[tuple[int, int, int]]:
    return [
        (_check_vertex(vertex_count, first), _check_vertex(vertex_count, second), weight)
        for first, second, weight in edges
    ]


def _improves(
    values: list,
    arc: _Arc,
    extend: Callable[[object, _Arc], object],
    better: Callable[[object, object], bool],
) -> bool:
    start, end = arc[0], arc[1]
    if values[start] is None:
        return False
    return values[end] is None or better(extend(values[start], arc), values[end])


def _relax(
    rounds: int,
    arcs: Sequence[_Arc],
    values: list,
    extend: Callable[[object, _Arc], object],
    better: Callable[[object, object], bool],
) -> None:
    """Run up to ``rounds`` relaxation passes, stopping early once nothing changes."""
    for _ in range(rounds):
        updated = False
        for arc in arcs:
            if _improves(values, arc, extend, better):
                values[arc[1]] = extend(values[arc[0]], arc)
                updated = True
        if not updated:
            return


def _unbounded(
    vertex_count: int,
    arcs: Sequence[_Arc],
    values: list,
    extend: Callable[[object, _Arc], object],
    better: Callable[[object, object], bool],
) -> list[bool]:
    """Mark vertices that a still-improvable cycle can reach."""
    flags = [False] * vertex_count
    for _ in range(vertex_count - 1):
        for arc in arcs:
            start, end = arc[0], arc[1]
            if _improves(values, arc, extend, better):
                flags[end] = True
            if flags[start]:
                flags[end] = True
    return flags


def _add_weight(value: int, arc: _Arc) -> int:
    return value + arc[2]


def _resolve(values: list, flags: list[bool]) -> list[int | Reach]:
    return [
        Reach.UNBOUNDED if flag else Reach.UNREACHABLE if value is None else value
        for value, flag in zip(values, flags)
    ]


def longest_path(vertex_count: int, edges: Iterable[tuple[int, int, int]]) -> int | Reach:
    """Heaviest path weight from vertex 1 to the last vertex of a directed graph.

    Returns ``Reach.UNBOUNDED`` when a positive cycle lies on the way and
    ``Reach.UNREACHABLE`` when the last vertex cannot be reached.
    """
    if vertex_count < 1:
        raise ValueError("the graph needs at least one vertex")
    arcs = _zero_based(vertex_count, edges)
    values: list[int | None] = [None] * vertex_count
    values[0] = 0
    _relax(vertex_count - 1, arcs, values, _add_weight, operator.gt)
    flags = _unbounded(vertex_count, arcs, values, _add_weight, operator.gt)
    return _resolve(values, flags)[-1]


def distances_with_cycles(
    vertex_count: int, edges: Iterable[tuple[int, int, int]], start: int
) -> list[int | Reach]:
    """Shortest distance from ``start`` to every vertex of a directed graph.

    Vertices behind a negative cycle get ``Reach.UNBOUNDED``; vertices that
    cannot be reached get ``Reach.UNREACHABLE``.
    """
    arcs = _zero_based(vertex_count, edges)
    source = _check_vertex(vertex_count, start)
    values: list[int | None] = [None] * vertex_count
    values[source] = 0
    _relax(vertex_count - 1, arcs, values, _add_weight, operator.lt)
    flags = _unbounded(vertex_count, arcs, values, _add_weight, operator.lt)
    return _resolve(values, flags)


def _exchange(value: float, arc: _Arc) -> float:
    return (value - arc[3]) * arc[2]


def arbitrage_possible(
    currency_count: int,
    exchanges: Iterable[tuple[int, int, float, float, float, float]],
    currency: int,
    amount: float,
) -> bool:
    """True if repeated exchanges starting with ``amount`` of ``currency`` can grow it.

    Each exchange point is ``(a, b, rate_ab, fee_ab, rate_ba, fee_ba)``;
    converting ``x`` from ``a`` to ``b`` yields ``(x - fee_ab) * rate_ab``.
    """
    arcs: list[tuple[int, int, float, float]] = []
    for first, second, rate_there, fee_there, rate_back, fee_back in exchanges:
        a = _check_vertex(currency_count, first)
        b = _check_vertex(currency_count, second)
        arcs.append((a, b, rate_there, fee_there))
        arcs.append((b, a, rate_back, fee_back))
    source = _check_vertex(currency_count, currency)
    values: list[float | None] = [None] * currency_count
    values[source] = amount
    _relax(currency_count - 1, arcs, values, _exchange, operator.gt)
    if currency_count < 2:
        return False
    return any(_improves(values, arc, _exchange, operator.gt) for arc in arcs)