"""
dijkstra.py — Uniform-Cost Search (Dijkstra)
==============================================
Generator-based Dijkstra using a min-heap (heapq) with lazy deletion.

Yields a Step at:
  1. Initialise distances (∞ everywhere, 0 at start), push start
  2. Loop check  →  is the priority queue non-empty?
  3. Pop the minimum-distance unvisited node  →  ACTIVE, now final
  4. Goal popped  →  path found, reconstruct, report accumulated cost
  5. Scan neighbours
  6. Each unvisited neighbour  →  compute candidate distance
  7. Candidate is better  →  update distance & parent, push

Heap entries are (dist, seq, node).  `seq` is an insertion counter, so
equal distances come out in insertion order and every run of the same
input pops in the same order.  Improved distances are pushed as NEW
entries; the outdated ones are discarded when popped (their node is
already visited) without emitting a Step.

Correctness note: requires non-negative weights.
"""

import heapq
import itertools
from typing import Dict, Generator, List, Tuple

from graph.adjacency import AdjacencyMap, neighbours
from algorithms.path import reconstruct_path
from algorithms.step import UniformCostStep, format_cost


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "dist[start] ← 0, pq ← [(0, start)]",            # 1
    "while pq is not empty:",                         # 2
    "    current ← pq.pop_min()",                     # 3
    "    if current == goal: return path",            # 4
    "    for (neighbour, w) in adj(current):",        # 5
    "        new_dist ← dist[current] + w",           # 6
    "        if new_dist < dist[neighbour]:",         # 7
    "            update dist & parent, pq.push",      # 8
    "return NOT FOUND",                               # 9
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dijkstra(adj: AdjacencyMap, start: str, goal: str) -> Generator[UniformCostStep, None, None]:

    INF = float("inf")

    dist:    Dict[str, float] = {nid: INF for nid in adj}
    dist[start] = 0
    parent:  Dict[str, str]   = {}
    visited: List[str]        = []
    done:    set              = set()
    seq = itertools.count()
    pq: List[Tuple[float, int, str]] = [(0, next(seq), start)]

    def open_list() -> List[Tuple[str, float]]:
        return [(n, d) for d, _, n in sorted(pq)]

    yield UniformCostStep(
        active=start,
        line=1,
        open_list=open_list(),
        distances=dict(dist),
        description=f"Initialising distances: node '{start}' = 0, every other node = ∞.",
    )

    while pq:
        yield UniformCostStep(
            line=2,
            visited=list(visited),
            open_list=open_list(),
            distances=dict(dist),
            description="Checking the priority queue.",
        )

        d, _, current = heapq.heappop(pq)
        if current in done:
            continue

        done.add(current)
        visited.append(current)

        yield UniformCostStep(
            active=current,
            line=3,
            visited=list(visited),
            open_list=open_list(),
            distances=dict(dist),
            description=(
                f"Processing node '{current}' with the smallest accumulated distance {format_cost(d)}. "
                f"This distance is now final."
            ),
        )

        if current == goal:
            path = reconstruct_path(parent, goal)
            yield UniformCostStep(
                active=current,
                line=4,
                visited=list(visited),
                open_list=open_list(),
                distances=dict(dist),
                final_path=path,
                success=True,
                cost=d,
                description=f"Reached goal '{goal}' with total cost {format_cost(d)}. Path: {' → '.join(path)}",
            )
            return

        yield UniformCostStep(
            active=current,
            line=5,
            visited=list(visited),
            open_list=open_list(),
            distances=dict(dist),
            description=f"Reviewing the neighbours of node '{current}'.",
        )

        for nbr, w in neighbours(adj, current):
            if nbr in done:
                continue
            new_dist = d + w
            old_dist = dist.get(nbr, INF)

            yield UniformCostStep(
                active=current,
                looking_at=nbr,
                line=6,
                visited=list(visited),
                open_list=open_list(),
                distances=dict(dist),
                description=(
                    f"New distance for '{nbr}': {format_cost(d)} + {format_cost(w)} = {format_cost(new_dist)} "
                    f"(current best {format_cost(old_dist)})."
                ),
            )

            if new_dist < old_dist:
                dist[nbr]   = new_dist
                parent[nbr] = current
                heapq.heappush(pq, (new_dist, next(seq), nbr))

                yield UniformCostStep(
                    active=current,
                    looking_at=nbr,
                    line=8,
                    visited=list(visited),
                    open_list=open_list(),
                    distances=dict(dist),
                    description=(
                        f"Updating distance of '{nbr}' to {format_cost(new_dist)}: "
                        f"smaller than the previous {format_cost(old_dist)}."
                    ),
                )

    yield UniformCostStep(
        line=9,
        visited=list(visited),
        distances=dict(dist),
        description=f"Priority queue is empty. No path exists from '{start}' to '{goal}'.",
    )
