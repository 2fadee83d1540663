"""
dfs.py — Depth-First Search
=============================
Generator-based DFS using an explicit stack (no Python recursion limit issues).

Yields a Step at:
  1. Push start onto the stack
  2. Loop check  →  is the stack non-empty?
  3. Pop an unvisited node  →  mark VISITED, ACTIVE
  4. Goal reached  →  reconstruct via parent map, stop
  5. Scan neighbours; one Step per neighbour pushed
  6. Stack empty  →  NOT FOUND

Visited is checked on pop, not on push, so a node may sit on the stack
more than once.  A popped node that is already visited is dropped
silently: no Step, it never reached the "processing" stage.

Neighbours are pushed in REVERSE adjacency order so the first-listed
neighbour ends up on top and is explored first.  No shortest-path
guarantee of any kind.
"""

from typing import Dict, Generator, List

from graph.adjacency import AdjacencyMap, neighbours
from algorithms.path import path_cost, reconstruct_path
from algorithms.step import DfsStep


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "stack ← [start], visited ← {}",                  # 1
    "while stack is not empty:",                      # 2
    "    current ← stack.pop(); mark visited",        # 3
    "    if current == goal: return path",            # 4
    "    for neighbour in reversed(adj(current)):",   # 5
    "        if neighbour not visited:",              # 6
    "            set parent, stack.push(neighbour)",  # 7
    "return NOT FOUND",                               # 8
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dfs(adj: AdjacencyMap, start: str, goal: str) -> Generator[DfsStep, None, None]:
    stack:   List[str]      = [start]
    visited: List[str]      = []        # visit order, for display
    done:    set            = set()
    parent:  Dict[str, str] = {}

    yield DfsStep(
        line=1,
        visited=[],
        open_list=list(stack),
        description=f"Starting DFS: stack initialised with node '{start}'.",
    )

    while stack:
        yield DfsStep(
            line=2,
            visited=list(visited),
            open_list=list(stack),
            description="Checking that the stack is not empty.",
        )

        current = stack.pop()
        if current in done:
            continue

        done.add(current)
        visited.append(current)

        yield DfsStep(
            active=current,
            line=3,
            visited=list(visited),
            open_list=list(stack),
            description=f"Pop node '{current}' from the stack and mark it visited.",
        )

        if current == goal:
            path = reconstruct_path(parent, goal)
            yield DfsStep(
                active=current,
                line=4,
                visited=list(visited),
                open_list=list(stack),
                final_path=path,
                success=True,
                cost=path_cost(adj, path),
                description=f"Goal '{goal}' found. Path built: {' → '.join(path)} ({len(path) - 1} edge(s)).",
            )
            return

        yield DfsStep(
            active=current,
            line=5,
            visited=list(visited),
            open_list=list(stack),
            description=f"Analysing the neighbours of node '{current}'.",
        )

        for nbr, _ in reversed(neighbours(adj, current)):
            if nbr in done:
                continue
            # latest push wins: it is the copy that will be popped first
            parent[nbr] = current
            stack.append(nbr)

            yield DfsStep(
                active=current,
                looking_at=nbr,
                line=7,
                visited=list(visited),
                open_list=list(stack),
                description=f"Push neighbour '{nbr}' onto the stack (parent = '{current}').",
            )

    yield DfsStep(
        line=8,
        visited=list(visited),
        description=f"Stack is empty. No path exists from '{start}' to '{goal}'.",
    )
