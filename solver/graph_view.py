"""
Draw a directed graph on a circular layout, optionally highlighting a
Hamiltonian cycle. Vertices are white circles labelled with 1-based ids.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Sequence, Set, Tuple

from matplotlib.figure import Figure
import networkx as nx

from digraph import Graph

EDGE_COLOR = "#5555aa"
CYCLE_COLOR = "#d1342b"


def cycle_arcs(cycle: Optional[Sequence[int]]) -> Set[Tuple[int, int]]:
    if not cycle:
        return set()
    closed = list(cycle) + [cycle[0]]
    return set(zip(closed, closed[1:]))


def draw_graph(ax: Any, graph: Graph, cycle: Optional[Sequence[int]] = None) -> None:
    G = nx.DiGraph()
    G.add_nodes_from(range(graph.vertex_count))
    G.add_edges_from((e.source, e.destination) for e in graph.edges())
    pos = nx.circular_layout(G)

    highlight = cycle_arcs(cycle)
    plain = [e for e in G.edges() if e not in highlight]
    if plain:
        nx.draw_networkx_edges(
            G, pos, ax=ax, edgelist=plain, edge_color=EDGE_COLOR,
            width=1.2, alpha=0.7, arrows=True, arrowsize=14, node_size=900,
        )
    if highlight:
        nx.draw_networkx_edges(
            G, pos, ax=ax, edgelist=sorted(highlight), edge_color=CYCLE_COLOR,
            width=2.5, arrows=True, arrowsize=18, node_size=900,
        )
    nx.draw_networkx_nodes(
        G, pos, ax=ax, node_color="white", edgecolors="black", node_size=900,
    )
    nx.draw_networkx_labels(G, pos, ax=ax, labels={v: str(v + 1) for v in G.nodes()})
    ax.set_axis_off()


def build_figure(graph: Graph, cycle: Optional[Sequence[int]] = None,
                 title: Optional[str] = None) -> Figure:
    fig = Figure(figsize=(6.5, 6.5))
    fig.patch.set_facecolor("white")
    ax = fig.add_subplot(111)
    draw_graph(ax, graph, cycle)
    if title:
        ax.set_title(title)
    fig.tight_layout()
    return fig


def save_figure(graph: Graph, path, cycle: Optional[Sequence[int]] = None,
                title: Optional[str] = None) -> Path:
    path = Path(path)
    fig = build_figure(graph, cycle, title)
    fig.savefig(path)
    return path


def show_graph(graph: Graph, cycle: Optional[Sequence[int]] = None,
               title: Optional[str] = None) -> None:
    """Open a Tk window with the drawing; returns when the window is closed."""
    import tkinter as tk
    from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

    root = tk.Tk()
    root.title(title or "Graph")
    fig = build_figure(graph, cycle, title)
    canvas = FigureCanvasTkAgg(fig, master=root)
    canvas.get_tk_widget().pack(fill=tk.BOTH, expand=True)
    canvas.draw()
    root.mainloop()
