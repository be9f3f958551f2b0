import pytest

from taskbook.scc import component_labels, same_component


def test_cycle_forms_one_component():
    labels = component_labels(4, [(1, 2), (2, 3), (3, 1), (3, 4)])
    assert labels[0] == labels[1] == labels[2]
    assert labels[3] != labels[0]


def test_chain_has_distinct_components():
    labels = component_labels(5, [(1, 2), (2, 3), (3, 4), (4, 5)])
    assert len(set(labels)) == 5


def test_labels_follow_topological_order():
    edges = [(1, 2), (2, 1), (2, 3), (3, 4), (4, 3), (5, 1), (4, 6)]
    labels = component_labels(6, edges)
    for u, v in edges:
        assert labels[u - 1] <= labels[v - 1]


def test_labels_are_consecutive_from_zero():
    labels = component_labels(6, [(1, 2), (2, 1), (3, 4), (5, 6), (6, 5)])
    assert sorted(set(labels)) == list(range(len(set(labels))))


def test_same_component_queries():
    edges = [(1, 2), (2, 3), (3, 1), (3, 4)]
    assert same_component(4, edges, [(1, 3), (2, 4), (4, 4)]) == [True, False, True]


def test_long_cycle_does_not_hit_recursion_limit():
    size = 5000
    edges = [(i, i % size + 1) for i in range(1, size + 1)]
    assert set(component_labels(size, edges)) == {0}


def test_invalid_vertex_rejected():
    with pytest.raises(ValueError):
        component_labels(2, [(1, 3)])


def test_invalid_query_rejected():
    with pytest.raises(ValueError):
        same_component(2, [(1, 2)], [(1, 5)])