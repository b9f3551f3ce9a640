"""Generators for standard directed test graphs."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from digraph import Graph

Arc = Tuple[int, int]


class DigraphGenerators:
    """Build directed graphs as ``Graph`` instances (arcs added in the listed order)."""

    @staticmethod
    def _finalize(n: int, arcs: Iterable[Arc]) -> Graph:
        graph = Graph(n)
        for u, v in arcs:
            graph.add_edge(u, v)
        return graph

    @staticmethod
    def _symmetric(edges: Iterable[Arc]) -> List[Arc]:
        """Lift undirected edges to a pair of opposite arcs each, sorted."""
        arcs = set()
        for u, v in edges:
            arcs.add((u, v))
            arcs.add((v, u))
        return sorted(arcs)

    @staticmethod
    def complete(n: int) -> Graph:
        arcs = [(i, j) for i in range(n) for j in range(n) if i != j]
        return DigraphGenerators._finalize(n, arcs)

    @staticmethod
    def directed_cycle(n: int) -> Graph:
        arcs = [(i, (i + 1) % n) for i in range(n)]
        return DigraphGenerators._finalize(n, arcs)

    @staticmethod
    def transitive_tournament(n: int) -> Graph:
        """Acyclic: every arc goes from a lower to a higher id."""
        arcs = [(i, j) for i in range(n) for j in range(i + 1, n)]
        return DigraphGenerators._finalize(n, arcs)

    @staticmethod
    def path(n: int) -> Graph:
        arcs = [(i, i + 1) for i in range(n - 1)]
        return DigraphGenerators._finalize(n, arcs)

    @staticmethod
    def tetrahedron() -> Graph:
        edges = [(i, j) for i in range(4) for j in range(i + 1, 4)]
        return DigraphGenerators._finalize(4, DigraphGenerators._symmetric(edges))

    @staticmethod
    def cube() -> Graph:
        edges = set()
        for u in range(8):
            for bit in (1, 2, 4):
                v = u ^ bit
                edges.add((min(u, v), max(u, v)))
        return DigraphGenerators._finalize(8, DigraphGenerators._symmetric(edges))

    @staticmethod
    def octahedron() -> Graph:
        # opposite vertex pairs are the only non-adjacent ones
        forbidden = {(0, 1), (2, 3), (4, 5)}
        edges = [(u, v) for u in range(6) for v in range(u + 1, 6) if (u, v) not in forbidden]
        return DigraphGenerators._finalize(6, DigraphGenerators._symmetric(edges))

    @staticmethod
    def petersen() -> Graph:
        """3-regular, 10 vertices, famously without a Hamiltonian cycle."""
        outer = [(i, (i + 1) % 5) for i in range(5)]
        spokes = [(i, i + 5) for i in range(5)]
        inner = [(5 + i, 5 + (i + 2) % 5) for i in range(5)]
        return DigraphGenerators._finalize(10, DigraphGenerators._symmetric(outer + spokes + inner))
