"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS.  Yields a Step at every meaningful event:
  1. Initialise  →  queue = [start], start marked visited
  2. Loop check  →  is the queue non-empty?
  3. Dequeue a node  →  it becomes ACTIVE
  4. Goal reached  →  reconstruct the fewest-edges path, stop
  5. Scan neighbours  →  one Step per newly discovered neighbour
  6. Queue empty  →  NOT FOUND

Nodes are marked visited when enqueued, so each node enters the queue
at most once.  Neighbours are examined in stored adjacency order.
"""

from collections import deque
from typing import Dict, Generator, List

from graph.adjacency import AdjacencyMap, neighbours
from algorithms.path import path_cost, reconstruct_path
from algorithms.step import BfsStep


# ---------------------------------------------------------------------------
# Pseudocode: Step.line is the 1-based index into this list
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "queue ← [start], visited ← {start}",            # 1
    "while queue is not empty:",                     # 2
    "    current ← queue.dequeue()",                 # 3
    "    if current == goal: return path",           # 4
    "    for neighbour in adj(current):",            # 5
    "        if neighbour not visited:",             # 6
    "            mark visited, set parent, enqueue", # 7
    "return NOT FOUND",                              # 8
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs(adj: AdjacencyMap, start: str, goal: str) -> Generator[BfsStep, None, None]:
    """
    Yields BfsStep snapshots for every event during BFS execution.

    Args:
        adj   : Adjacency map from build_adjacency.
        start : Starting node id.
        goal  : Goal node id.
    """
    queue   = deque([start])
    visited: List[str]      = [start]       # discovery order, for display
    seen:    set            = {start}
    parent:  Dict[str, str] = {}

    yield BfsStep(
        line=1,
        visited=list(visited),
        open_list=list(queue),
        description=f"Starting BFS: queue initialised with node '{start}'.",
    )

    while queue:
        yield BfsStep(
            line=2,
            visited=list(visited),
            open_list=list(queue),
            description="Checking whether the queue still has nodes.",
        )

        current = queue.popleft()

        yield BfsStep(
            active=current,
            line=3,
            visited=list(visited),
            open_list=list(queue),
            description=f"Dequeue node '{current}' for processing (FIFO: earliest discovered first).",
        )

        if current == goal:
            path = reconstruct_path(parent, goal)
            yield BfsStep(
                active=current,
                line=4,
                visited=list(visited),
                open_list=list(queue),
                final_path=path,
                success=True,
                cost=path_cost(adj, path),
                description=(
                    f"Goal '{goal}' found. Fewest-edges path has {len(path) - 1} edge(s): "
                    f"{' → '.join(path)}"
                ),
            )
            return

        yield BfsStep(
            active=current,
            line=5,
            visited=list(visited),
            open_list=list(queue),
            description=f"Looking at the neighbours of node '{current}'.",
        )

        for nbr, _ in neighbours(adj, current):
            if nbr in seen:
                continue
            seen.add(nbr)
            visited.append(nbr)
            parent[nbr] = current
            queue.append(nbr)

            yield BfsStep(
                active=current,
                looking_at=nbr,
                line=7,
                visited=list(visited),
                open_list=list(queue),
                description=f"Neighbour '{nbr}' not visited yet: mark it and add it to the queue (parent = '{current}').",
            )

    yield BfsStep(
        line=8,
        visited=list(visited),
        description=f"Queue is empty. No path exists from '{start}' to '{goal}'.",
    )
