"""
Load directed graphs from adjacency-matrix files and JSON models, and format
graphs and search results for the console.

Matrix file format: whitespace-separated integers, the vertex count n first,
then n*n cells row-major; a nonzero cell is an edge row -> col.

JSON models:
  {"name": "...", "vertices": [...] | "n": 4, "edges": [[u, v], ...]}
  {"name": "...", "matrix": [[0, 1], [1, 0]]}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

import numpy as np

from digraph import Graph

Matrix = List[List[bool]]


class MatrixFormatError(ValueError):
    pass


def parse_int(token: Any) -> int:
    # JSON floats and booleans would otherwise be truncated by int()
    if isinstance(token, (bool, float)):
        raise MatrixFormatError(f"not an integer: {token!r}")
    try:
        return int(token)
    except (TypeError, ValueError):
        raise MatrixFormatError(f"not an integer: {token!r}") from None


def parse_adjacency_matrix(text: str) -> Tuple[int, Matrix]:
    tokens = text.split()
    if not tokens:
        raise MatrixFormatError("empty input")
    n = parse_int(tokens[0])
    if n <= 0:
        raise MatrixFormatError(f"vertex count must be positive, got {n}")
    cells = tokens[1:]
    if len(cells) < n * n:
        raise MatrixFormatError(f"expected {n * n} matrix cells, found {len(cells)}")
    if len(cells) > n * n:
        raise MatrixFormatError(f"unexpected trailing data after {n * n} matrix cells")
    values = [parse_int(tok) != 0 for tok in cells]
    rows = [values[r * n:(r + 1) * n] for r in range(n)]
    return n, rows


def graph_from_matrix(rows: Sequence[Sequence[Any]]) -> Graph:
    """Build a graph, adding edges in row-major order of the nonzero cells."""
    if not isinstance(rows, (list, tuple, np.ndarray)):
        raise MatrixFormatError(f"matrix must be a list of rows, got {rows!r}")
    n = len(rows)
    if n == 0:
        raise MatrixFormatError("matrix has no rows")
    graph = Graph(n)
    for r, row in enumerate(rows):
        if not isinstance(row, (list, tuple, np.ndarray)):
            raise MatrixFormatError(f"row {r} is not a list: {row!r}")
        if len(row) != n:
            raise MatrixFormatError(f"row {r} has {len(row)} cells, expected {n}")
        for c, value in enumerate(row):
            if not isinstance(value, (bool, int, np.bool_, np.integer)):
                raise MatrixFormatError(f"cell ({r}, {c}) is not an integer: {value!r}")
            if value:
                graph.add_edge(r, c)
    return graph


def graph_from_edges(n: int, edges: Sequence[Sequence[Any]]) -> Graph:
    graph = Graph(n)
    for e in edges:
        if isinstance(e, dict):
            u, v = e.get("source", e.get("from")), e.get("target", e.get("to"))
        elif isinstance(e, (list, tuple)) and len(e) >= 2:
            u, v = e[0], e[1]
        else:
            raise MatrixFormatError(f"unsupported edge record: {e!r}")
        if u is None or v is None:
            raise MatrixFormatError(f"edge record missing endpoints: {e!r}")
        graph.add_edge(parse_int(u), parse_int(v))
    return graph


def load_json_model(path: Path) -> Tuple[str, Graph]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise MatrixFormatError(f"{path.name}: expected a JSON object")

    name = data.get("name") or path.stem
    if "matrix" in data:
        return name, graph_from_matrix(data["matrix"])

    verts = data.get("vertices")
    n = len(verts) if isinstance(verts, list) else parse_int(data.get("n"))
    edges = data.get("edges", [])
    if not isinstance(edges, list):
        raise MatrixFormatError(f"{path.name}: 'edges' must be a list")
    return name, graph_from_edges(n, edges)


def load_matrix_file(path: Path) -> Tuple[str, Graph]:
    text = Path(path).read_text(encoding="utf-8")
    _, rows = parse_adjacency_matrix(text)
    return Path(path).stem, graph_from_matrix(rows)


def load_model(path) -> Tuple[str, Graph]:
    """Load ``(name, graph)`` from a JSON model or a matrix text file."""
    path = Path(path)
    if path.suffix.lower() == ".json":
        return load_json_model(path)
    return load_matrix_file(path)


def format_matrix(graph: Graph) -> str:
    lines = []
    for row in graph.adjacency_matrix():
        lines.append("".join(" 1" if cell else " 0" for cell in row))
    return "\n".join(lines)


def format_cycle(cycle: Sequence[int]) -> str:
    """1-based ids joined by arrows, closed back at the first vertex."""
    closed = list(cycle) + list(cycle[:1])
    return " -> ".join(str(v + 1) for v in closed)


def result_to_dict(name: str, graph: Graph, result) -> Dict[str, Any]:
    return {
        "name": name,
        "n_vertices": graph.vertex_count,
        "n_edges": graph.edge_count,
        **result.to_dict(),
    }
