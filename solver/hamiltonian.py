"""
Hamiltonian cycle search (Roberts-Flores backtracking).

The search extends a simple path from a fixed root one vertex at a time.
For every depth it keeps the set of next vertices already tried from that
depth; a vertex abandoned at depth d is never tried again from the same
prefix, so each path prefix is explored at most once and the search always
terminates. The recursion of the textbook formulation is replaced by an
explicit stack of these exclusion sets, which makes the search a plain loop
over ``HamiltonianCycleFinder.step()``.

Usage:
  result = find_hamiltonian_cycle(graph)
  if result.found:
      print(result.cycle)
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Set, Tuple, Union

from digraph import Graph, InvalidVertexIndex

logger = logging.getLogger(__name__)


class SearchState(enum.Enum):
    EXTENDING = "extending"
    BACKTRACKING = "backtracking"
    SUCCESS = "success"
    FAILURE = "failure"

    @property
    def terminal(self) -> bool:
        return self in (SearchState.SUCCESS, SearchState.FAILURE)


@dataclass(frozen=True)
class CycleFound:
    cycle: Tuple[int, ...]  # root first, in visitation order
    found = True
    status = "found"

    def closed(self) -> Tuple[int, ...]:
        """Cycle with the root repeated at the end (includes the closing edge)."""
        return self.cycle + self.cycle[:1]

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status, "cycle": list(self.cycle)}


@dataclass(frozen=True)
class NoCycle:
    found = False
    status = "not_found"

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status, "cycle": None}


@dataclass(frozen=True)
class PrerequisiteFailed:
    """Some vertex has no edges at all, so the search was not run."""
    found = False
    status = "prerequisite_failed"

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status, "cycle": None}


SearchResult = Union[CycleFound, NoCycle, PrerequisiteFailed]


def check_root(graph: Graph, root: int) -> None:
    if not 0 <= root < graph.vertex_count:
        raise InvalidVertexIndex(f"root {root} outside [0, {graph.vertex_count})")


class HamiltonianCycleFinder:
    """
    Single-use search for a Hamiltonian cycle through ``root``.

    Candidates are taken from the current vertex's outgoing edges in
    insertion order, so the result is fully determined by the order in
    which edges were added to the graph. The graph is only read.
    """

    def __init__(self, graph: Graph, root: int = 0):
        check_root(graph, root)
        self.graph = graph
        self.root = root
        self.path: List[int] = [root]
        self.on_path: Set[int] = {root}
        # excluded[d]: vertices already tried as the successor of path[d]
        self.excluded: List[Set[int]] = [set()]
        self.current = root
        self.depth = 0
        self.state = SearchState.EXTENDING
        self.steps = 0
        self.backtracks = 0

    def _next_candidate(self) -> Optional[int]:
        tried = self.excluded[self.depth]
        for v in self.graph.successors(self.current):
            if v not in tried and v not in self.on_path:
                return v
        return None

    def _extend(self, vertex: int) -> None:
        self.path.append(vertex)
        self.on_path.add(vertex)
        self.excluded[self.depth].add(vertex)
        self.excluded.append(set())
        self.current = vertex
        self.depth += 1

    def _backtrack(self) -> None:
        self.path.pop()
        self.on_path.remove(self.current)
        self.excluded.pop()
        self.depth -= 1
        self.current = self.path[self.depth]
        self.backtracks += 1

    def _closes_cycle(self) -> bool:
        return (
            len(self.path) == self.graph.vertex_count
            and self.graph.has_edge_between(self.current, self.root)
        )

    def step(self) -> SearchState:
        """Advance the search by one tick and return the resulting state."""
        if self.state.terminal:
            return self.state
        self.steps += 1

        candidate = self._next_candidate()
        if candidate is not None:
            self._extend(candidate)
            self.state = SearchState.EXTENDING
        elif self._closes_cycle():
            self.state = SearchState.SUCCESS
        elif self.depth == 0:
            self.state = SearchState.FAILURE
        else:
            self._backtrack()
            self.state = SearchState.BACKTRACKING
        return self.state

    def result(self) -> Optional[SearchResult]:
        if self.state is SearchState.SUCCESS:
            return CycleFound(tuple(self.path))
        if self.state is SearchState.FAILURE:
            return NoCycle()
        return None

    def run(self) -> SearchResult:
        logger.debug("searching %r from root %d", self.graph, self.root)
        while not self.step().terminal:
            pass
        logger.debug(
            "search finished: %s after %d steps, %d backtracks",
            self.state.value, self.steps, self.backtracks,
        )
        return self.result()


def find_hamiltonian_cycle(graph: Graph, root: int = 0) -> SearchResult:
    """Check the degree precondition, then search from ``root``."""
    check_root(graph, root)
    if not graph.has_necessary_degree_condition():
        logger.debug("necessary degree condition fails; skipping search")
        return PrerequisiteFailed()
    return HamiltonianCycleFinder(graph, root).run()
