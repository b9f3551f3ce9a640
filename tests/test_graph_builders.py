import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "solver"))

from graph_builders import DigraphGenerators

GENERATOR_EXPECTATIONS = [
    ("tetrahedron", 4, 12),
    ("cube", 8, 24),
    ("octahedron", 6, 24),
    ("petersen", 10, 30),
]


@pytest.mark.parametrize("name, n_vertices, n_arcs", GENERATOR_EXPECTATIONS)
def test_symmetric_generators(name, n_vertices, n_arcs):
    graph = getattr(DigraphGenerators, name)()

    assert graph.vertex_count == n_vertices
    assert graph.edge_count == n_arcs

    arcs = [(e.source, e.destination) for e in graph.edges()]
    assert len(set(arcs)) == len(arcs)
    for u, v in arcs:
        assert u != v
        assert (v, u) in arcs  # every arc has its reverse
        assert graph.has_edge_between(u, v)


@pytest.mark.parametrize("n", [2, 3, 5, 8])
def test_complete_and_cycle_sizes(n):
    assert DigraphGenerators.complete(n).edge_count == n * (n - 1)
    assert DigraphGenerators.directed_cycle(n).edge_count == n
    assert DigraphGenerators.transitive_tournament(n).edge_count == n * (n - 1) // 2
    assert DigraphGenerators.path(n).edge_count == n - 1


def test_transitive_tournament_is_acyclic():
    graph = DigraphGenerators.transitive_tournament(6)
    for e in graph.edges():
        assert e.source < e.destination
