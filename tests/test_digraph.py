import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "solver"))

from digraph import (
    Graph,
    GraphError,
    IndexOutOfRange,
    InvalidVertexCount,
    InvalidVertexIndex,
)


@pytest.mark.parametrize("count", [0, -1, -10])
def test_initialize_rejects_non_positive_count(count):
    with pytest.raises(InvalidVertexCount):
        Graph(count)


def test_initialize_rejects_non_integer_count():
    with pytest.raises(InvalidVertexCount):
        Graph().initialize("3")


def test_initialize_creates_dense_isolated_vertices():
    graph = Graph(5)
    assert [v.id for v in graph.vertices()] == [0, 1, 2, 3, 4]
    assert graph.edge_count == 0
    assert not graph.adjacency_matrix().any()
    assert graph.adjacency_matrix().shape == (5, 5)


def test_reinitialize_discards_previous_edges():
    graph = Graph(3)
    graph.add_edge(0, 1)
    graph.initialize(2)
    assert graph.vertex_count == 2
    assert graph.edges() == ()
    assert not graph.has_edge_between(0, 1)
    assert graph.vertex(0).out_edges == []


def test_add_edge_keeps_all_views_in_agreement():
    graph = Graph(3)
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    graph.add_edge(0, 2)

    assert [(e.id, e.source, e.destination) for e in graph.edges()] == [
        (0, 0, 1), (1, 1, 2), (2, 0, 2),
    ]
    assert graph.vertex(0).out_edges == [0, 2]
    assert graph.vertex(2).in_edges == [1, 2]
    assert graph.vertex(1).in_edges == [0]
    for i in range(3):
        for j in range(3):
            listed = any(e.source == i and e.destination == j for e in graph.edges())
            assert graph.has_edge_between(i, j) == listed
    for e in graph.edges():
        assert e.id in graph.vertex(e.source).out_edges
        assert e.id in graph.vertex(e.destination).in_edges


@pytest.mark.parametrize("source, destination", [(-1, 0), (0, 3), (3, 3), (0, -2)])
def test_add_edge_rejects_out_of_range(source, destination):
    graph = Graph(3)
    with pytest.raises(InvalidVertexIndex):
        graph.add_edge(source, destination)
    assert graph.edge_count == 0


def test_add_edge_before_initialize():
    with pytest.raises(InvalidVertexCount):
        Graph().add_edge(0, 0)


@pytest.mark.parametrize("source, destination", [(-1, 0), (0, 4), (4, 0)])
def test_has_edge_between_rejects_out_of_range(source, destination):
    graph = Graph(4)
    with pytest.raises(IndexOutOfRange):
        graph.has_edge_between(source, destination)


def test_errors_are_value_errors():
    assert issubclass(GraphError, ValueError)
    assert issubclass(IndexOutOfRange, IndexError)


def test_set_adjacency_is_idempotent():
    graph = Graph(2)
    graph.set_adjacency(0, 1)
    graph.set_adjacency(0, 1)
    assert graph.edge_count == 1
    assert graph.has_edge_between(0, 1)


def test_successors_follow_insertion_order():
    graph = Graph(4)
    for v in (3, 1, 2):
        graph.add_edge(0, v)
    assert list(graph.successors(0)) == [3, 1, 2]


def test_views_are_read_only():
    graph = Graph(2)
    graph.add_edge(0, 1)
    assert isinstance(graph.vertices(), tuple)
    assert isinstance(graph.edges(), tuple)
    matrix = graph.adjacency_matrix()
    matrix[1, 0] = True
    assert not graph.has_edge_between(1, 0)


@pytest.mark.parametrize("edges, expected", [
    ([(0, 1), (1, 2)], True),
    ([(0, 1)], False),          # vertex 2 has no edges at all
    ([(0, 1), (2, 2)], True),   # a self-loop counts as a connection
    ([], False),
])
def test_necessary_degree_condition(edges, expected):
    graph = Graph(3)
    for u, v in edges:
        graph.add_edge(u, v)
    assert graph.has_necessary_degree_condition() is expected


def test_to_networkx_keeps_parallel_edges():
    graph = Graph(2)
    graph.add_edge(0, 1)
    graph.add_edge(0, 1)
    G = graph.to_networkx()
    assert G.number_of_nodes() == 2
    assert G.number_of_edges() == 2
    assert sorted(G.edges(keys=True)) == [(0, 1, 0), (0, 1, 1)]
