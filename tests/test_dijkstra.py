import random

import pytest

from taskbook.dijkstra import matrix_distance, shortest_distance, shortest_path


def _random_graph(seed, size=8, edge_count=14):
    rng = random.Random(seed)
    edges = []
    for _ in range(edge_count):
        a, b = rng.sample(range(1, size + 1), 2)
        edges.append((a, b, rng.randint(1, 20)))
    return edges


def _cheapest(edges):
    best = {}
    for a, b, w in edges:
        key = frozenset((a, b))
        best[key] = min(best.get(key, w), w)
    return best


MATRIX = [
    [0, 4, 1],
    [-1, 0, -1],
    [-1, 2, 0],
]


def test_matrix_distance_prefers_detour():
    assert matrix_distance(MATRIX, 1, 2) == 3


def test_matrix_distance_is_directed():
    assert matrix_distance(MATRIX, 2, 1) is None


def test_matrix_distance_to_itself_is_zero():
    assert matrix_distance(MATRIX, 3, 3) == 0


def test_matrix_distance_rejects_non_square():
    with pytest.raises(ValueError):
        matrix_distance([[0, 1], [1, 0], [1, 1]], 1, 2)


def test_matrix_distance_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        matrix_distance(MATRIX, 1, 4)


def test_shortest_path_small_graph():
    assert shortest_path(3, [(1, 2, 7), (1, 3, 2), (3, 2, 3)], 1, 2) == (5, [1, 3, 2])


def test_shortest_path_unreachable():
    assert shortest_path(4, [(1, 2, 1), (3, 4, 1)], 1, 4) is None


def test_shortest_path_start_is_end():
    result = shortest_path(2, [(1, 2, 6)], 2, 2)
    assert result == (0, [2])


def test_distance_at_bound_counts_as_unreachable():
    assert shortest_distance(2, [(1, 2, 100_000_000)], 1, 2) is None
    assert shortest_path(2, [(1, 2, 100_000_000)], 1, 2) is None


def test_shortest_distance_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        shortest_distance(2, [(1, 5, 1)], 1, 2)


@pytest.mark.parametrize("seed", range(8))
def test_path_is_consistent_with_distance(seed):
    edges = _random_graph(seed)
    cheapest = _cheapest(edges)
    result = shortest_path(8, edges, 1, 8)
    distance = shortest_distance(8, edges, 1, 8)
    if result is None:
        assert distance is None
    else:
        length, route = result
        assert route[0] == 1 and route[-1] == 8
        assert sum(cheapest[frozenset(pair)] for pair in zip(route, route[1:])) == length
        assert distance == length


@pytest.mark.parametrize("seed", range(8))
def test_undirected_distance_is_symmetric(seed):
    edges = _random_graph(seed + 100)
    assert shortest_distance(8, edges, 2, 7) == shortest_distance(8, edges, 7, 2)


@pytest.mark.parametrize("seed", range(5))
def test_matrix_agrees_with_edge_list(seed):
    edges = _random_graph(seed + 200, size=6, edge_count=9)
    matrix = [[0] * 6 for _ in range(6)]
    for (a, b), w in ((tuple(k), v) for k, v in _cheapest(edges).items()):
        matrix[a - 1][b - 1] = w
        matrix[b - 1][a - 1] = w
    for end in range(1, 7):
        assert matrix_distance(matrix, 1, end) == shortest_distance(6, edges, 1, end)