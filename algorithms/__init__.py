"""
algorithms/__init__.py — Algorithm Registry & Search Entry Point
==================================================================
Single source of truth for every search strategy the engine knows about.

    from algorithms import search, REGISTRY, get_algorithm

    trace = search("Dijkstra", adjacency, "0", "3")

REGISTRY is keyed by the public algorithm name ("BFS", "DFS",
"Dijkstra", "IDA*").  Each strategy is a generator of Steps; `search`
runs it to completion into a Trace, `iter_steps` hands back the raw
generator for callers that want to stop early.

An unknown name is not an error: `search` returns an empty Trace and
`iter_steps` an empty iterator.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional

from graph.adjacency import AdjacencyMap
from algorithms.bfs      import bfs      as _bfs,      PSEUDOCODE as _bfs_pc
from algorithms.dfs      import dfs      as _dfs,      PSEUDOCODE as _dfs_pc
from algorithms.dijkstra import dijkstra as _dijkstra, PSEUDOCODE as _dij_pc
from algorithms.ida_star import ida_star as _ida,      PSEUDOCODE as _ida_pc
from algorithms.step  import Step, BfsStep, DfsStep, UniformCostStep, IdaStep
from algorithms.trace import Trace
from algorithms.path  import reconstruct_path

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # public name, e.g. "BFS"
    label:             str                    # human label, e.g. "Breadth-First Search"
    fn:                Callable               # the generator function
    pseudocode:        List[str]              # Step.line indexes this (1-based)
    tags:              List[str] = field(default_factory=list)
    complexity_time:   str      = ""
    complexity_space:  str      = ""
    description:       str      = ""

    def to_dict(self) -> dict:
        return {
            "key":              self.key,
            "label":            self.label,
            "pseudocode":       list(self.pseudocode),
            "tags":             list(self.tags),
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "BFS": AlgoInfo(
        key="BFS", label="Breadth-First Search", fn=_bfs, pseudocode=_bfs_pc,
        tags=["unweighted", "shortest-path", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer by layer. Finds the path with the fewest edges.",
    ),

    "DFS": AlgoInfo(
        key="DFS", label="Depth-First Search", fn=_dfs, pseudocode=_dfs_pc,
        tags=["unweighted", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep before backtracking. Does NOT guarantee a shortest path.",
    ),

    "Dijkstra": AlgoInfo(
        key="Dijkstra", label="Dijkstra (Uniform-Cost)", fn=_dijkstra, pseudocode=_dij_pc,
        tags=["weighted", "shortest-path"],
        complexity_time="O((V + E) log V)", complexity_space="O(V + E)",
        description="Always expands the cheapest frontier node. Optimal for non-negative weights.",
    ),

    "IDA*": AlgoInfo(
        key="IDA*", label="Iterative-Deepening A*", fn=_ida, pseudocode=_ida_pc,
        tags=["weighted", "iterative-deepening", "heuristic"],
        complexity_time="O(b^d) per iteration", complexity_space="O(d)",
        description="Repeated cost-bounded depth-first probes; h = 0 makes it iterative-deepening uniform-cost.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


# ---------------------------------------------------------------------------
# Running
# ---------------------------------------------------------------------------
def iter_steps(algorithm: str, adjacency: AdjacencyMap, start: str, goal: str) -> Iterator[Step]:
    """Lazy step generator for `algorithm`; empty for unknown names."""
    info = get_algorithm(algorithm)
    if info is None:
        logger.warning(f"Unknown algorithm '{algorithm}', nothing to run")
        return iter(())
    return info.fn(adjacency, start, goal)


def search(algorithm: str, adjacency: AdjacencyMap, start: str, goal: str) -> Trace:
    """Run `algorithm` from `start` to `goal` to completion and return its Trace."""
    trace = Trace(iter_steps(algorithm, adjacency, start, goal))
    logger.debug(
        f"{algorithm} {start} → {goal}: {len(trace)} steps, "
        f"{'path ' + ' → '.join(trace.final_path) if trace.succeeded else 'no path'}"
    )
    return trace


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "iter_steps",
    "search",
    "reconstruct_path",
    "Trace",
    "Step",
    "BfsStep",
    "DfsStep",
    "UniformCostStep",
    "IdaStep",
]
