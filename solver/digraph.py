"""
Directed graph with an adjacency matrix plus vertex/edge incidence lists.

Vertices and edges are plain records held in two lists owned by the graph.
Edges refer to their endpoints by vertex id, vertices refer to their incident
edges by edge id, so the three views (matrix, edge list, per-vertex lists)
never own each other.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import networkx as nx
import numpy as np

logger = logging.getLogger(__name__)


class GraphError(ValueError):
    """Base class for graph construction and query errors."""


class InvalidVertexCount(GraphError):
    pass


class InvalidVertexIndex(GraphError):
    pass


class IndexOutOfRange(GraphError, IndexError):
    pass


@dataclass
class Vertex:
    id: int
    out_edges: List[int] = field(default_factory=list)  # edge ids, insertion order
    in_edges: List[int] = field(default_factory=list)

    def out_degree(self) -> int:
        return len(self.out_edges)

    def in_degree(self) -> int:
        return len(self.in_edges)


@dataclass(frozen=True)
class Edge:
    id: int
    source: int
    destination: int


class Graph:
    def __init__(self, vertex_count: Optional[int] = None):
        self._vertices: List[Vertex] = []
        self._edges: List[Edge] = []
        self._matrix = np.zeros((0, 0), dtype=bool)
        if vertex_count is not None:
            self.initialize(vertex_count)

    def initialize(self, vertex_count: int) -> None:
        """(Re)create ``vertex_count`` isolated vertices and a zeroed matrix."""
        if isinstance(vertex_count, bool) or not isinstance(vertex_count, (int, np.integer)):
            raise InvalidVertexCount(f"vertex count must be an integer, got {vertex_count!r}")
        if vertex_count <= 0:
            raise InvalidVertexCount(f"vertex count must be positive, got {vertex_count}")
        n = int(vertex_count)
        self._vertices = [Vertex(i) for i in range(n)]
        self._edges = []
        self._matrix = np.zeros((n, n), dtype=bool)

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def _require_initialized(self) -> None:
        if not self._vertices:
            raise InvalidVertexCount("graph has no vertices; call initialize() first")

    def _in_range(self, index) -> bool:
        return 0 <= index < len(self._vertices)

    def add_edge(self, source: int, destination: int) -> Edge:
        self._require_initialized()
        for index in (source, destination):
            if not self._in_range(index):
                raise InvalidVertexIndex(
                    f"vertex index {index} outside [0, {self.vertex_count})"
                )
        edge = Edge(len(self._edges), source, destination)
        self._edges.append(edge)
        self._vertices[source].out_edges.append(edge.id)
        self._vertices[destination].in_edges.append(edge.id)
        self._matrix[source, destination] = True
        return edge

    def set_adjacency(self, source: int, destination: int) -> None:
        """Mark ``source -> destination`` as present, adding the edge if it is missing."""
        if not self.has_edge_between(source, destination):
            self.add_edge(source, destination)

    def has_edge_between(self, source: int, destination: int) -> bool:
        if not (self._in_range(source) and self._in_range(destination)):
            raise IndexOutOfRange(
                f"({source}, {destination}) outside [0, {self.vertex_count})"
            )
        return bool(self._matrix[source, destination])

    def vertices(self) -> Tuple[Vertex, ...]:
        return tuple(self._vertices)

    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    def vertex(self, index: int) -> Vertex:
        if not self._in_range(index):
            raise IndexOutOfRange(f"vertex {index} outside [0, {self.vertex_count})")
        return self._vertices[index]

    def edge(self, edge_id: int) -> Edge:
        return self._edges[edge_id]

    def successors(self, index: int) -> Iterator[int]:
        """Yield destinations of ``index``'s outgoing edges in insertion order."""
        for edge_id in self.vertex(index).out_edges:
            yield self._edges[edge_id].destination

    def has_necessary_degree_condition(self) -> bool:
        """
        Cheap necessary (not sufficient) test for a Hamiltonian cycle:
        every vertex must have at least one incoming or outgoing edge.
        """
        for v in self._vertices:
            if v.out_degree() < 1 and v.in_degree() < 1:
                logger.debug("vertex %d is isolated", v.id)
                return False
        return True

    def adjacency_matrix(self) -> np.ndarray:
        return self._matrix.copy()

    def to_networkx(self) -> nx.MultiDiGraph:
        G = nx.MultiDiGraph()
        G.add_nodes_from(range(self.vertex_count))
        for e in self._edges:
            G.add_edge(e.source, e.destination, key=e.id)
        return G

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count}, edges={self.edge_count})"
