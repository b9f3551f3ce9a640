#!/usr/bin/env python3
"""
Hamiltonian Cycle Finder

Loads a directed graph from an adjacency-matrix file (or a JSON model), prints
the matrix and reports a Hamiltonian cycle if one exists.

Usage:
  python find_cycle.py graph.txt
  python find_cycle.py graph.txt --show
  python find_cycle.py graphs_folder/ --json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from digraph import InvalidVertexIndex
from hamiltonian import CycleFound, PrerequisiteFailed, check_root, find_hamiltonian_cycle
from matrix_io import format_cycle, format_matrix, load_model, result_to_dict

SUPPORTED_EXTS = {".txt", ".json"}

_log_handler: Optional[logging.Handler] = None


class RootError(ValueError):
    pass


def configure_logging(verbose: bool) -> None:
    global _log_handler
    logger = logging.getLogger()
    if _log_handler is None:
        _log_handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s %(levelname)-8s %(message)s')
        _log_handler.setFormatter(formatter)
        logger.addHandler(_log_handler)
    else:
        _log_handler.setStream(sys.stderr)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def collect_inputs(path: Path) -> List[Path]:
    if path.is_dir():
        return [
            p for p in sorted(path.iterdir())
            if p.is_file() and p.suffix.lower() in SUPPORTED_EXTS
        ]
    return [path]


def describe_result(result) -> str:
    if isinstance(result, CycleFound):
        return "Hamiltonian cycle:\n" + format_cycle(result.cycle)
    if isinstance(result, PrerequisiteFailed):
        return ("The graph has no Hamiltonian cycle: the necessary condition "
                "(every vertex has at least one edge) does not hold.")
    return "The graph has no Hamiltonian cycle."


def process_model(path: Path, root: int = 0, quiet: bool = False,
                  as_json: bool = False, show: bool = False,
                  save: Optional[Path] = None) -> Dict[str, Any]:
    name, graph = load_model(path)
    try:
        check_root(graph, root)
    except InvalidVertexIndex:
        raise RootError(
            f"--root {root} is not a vertex of '{name}' (valid: 0..{graph.vertex_count - 1})"
        ) from None
    if not as_json:
        print(f"Graph '{name}' loaded ({graph.vertex_count} vertices, {graph.edge_count} edges).")
        if not quiet:
            print("Adjacency matrix:")
            print(format_matrix(graph))

    result = find_hamiltonian_cycle(graph, root)
    if not as_json:
        print(describe_result(result))

    if show or save:
        import graph_view

        cycle = result.cycle if result.found else None
        if save:
            graph_view.save_figure(graph, save, cycle, title=name)
            print(f"Saved drawing to {save}", file=sys.stderr)
        if show:
            graph_view.show_graph(graph, cycle, title=name)

    return result_to_dict(name, graph, result)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Find a Hamiltonian cycle in a directed graph")
    ap.add_argument("input", type=Path, help="Adjacency matrix file, JSON model, or folder of them")
    ap.add_argument("--root", type=int, default=0, help="Start vertex (0-based, default: 0)")
    ap.add_argument("--json", action="store_true", help="Print results as JSON")
    ap.add_argument("--quiet", "-q", action="store_true", help="Do not print the adjacency matrix")
    ap.add_argument("--show", action="store_true", help="Display the graph in a window")
    ap.add_argument("--save", type=Path, default=None, help="Save a drawing of the graph (single input only)")
    ap.add_argument("--verbose", "-v", action="store_true", help="Log search progress")
    args = ap.parse_args(argv)

    configure_logging(args.verbose)

    if not args.input.exists():
        print(f"File \"{args.input}\" does not exist.", file=sys.stderr)
        return 1

    files = collect_inputs(args.input)
    if not files:
        print(f"No graph files found in {args.input}", file=sys.stderr)
        return 1
    if args.save and len(files) > 1:
        print("--save needs a single input file", file=sys.stderr)
        return 1

    results = []
    failed = 0
    for path in files:
        if len(files) > 1:
            print(f"Processing {path.name}...", file=sys.stderr)
        try:
            results.append(process_model(
                path, root=args.root, quiet=args.quiet, as_json=args.json,
                show=args.show, save=args.save,
            ))
        except RootError as exc:
            failed += 1
            print(f"Invalid start vertex for {path.name}: {exc}", file=sys.stderr)
        except (OSError, ValueError) as exc:
            failed += 1
            print(f"Failed to load graph from {path.name}: {exc}. Check the file format.",
                  file=sys.stderr)

    if args.json:
        print(json.dumps(results[0] if len(files) == 1 and results else results, indent=2))

    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
