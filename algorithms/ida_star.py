"""
ida_star.py — Iterative-Deepening A*
=====================================
Generator-based IDA* with the zero heuristic, i.e. iterative-deepening
uniform-cost search: each iteration is a depth-first probe that abandons
any branch whose cost f = g + h exceeds the current bound, and the next
bound is the smallest f that overshot.

Yields a Step at:
  1. Initialise  →  bound = h(start)
  2. Start of every iteration (with its bound)
  3. Every node the probe enters  (g, f, bound shown in the open list)
  4. Every pruned node (f > bound)
  5. Every backtrack out of a child
  6. Bound increase between iterations
  7. FOUND  →  one success Step with the path on the probe's stack
  8. Min overshoot is ∞  →  NOT FOUND

The probe is a recursive sub-generator driven with `yield from`; its
FOUND / overshoot result comes back as the sub-generator's return value.
The branch (`path` + `on_path`) is shared across recursion levels.  Every
push is paired with a pop in a `finally`, so the branch unwinds cleanly
on FOUND and when the consumer closes the generator mid-run.

Cycle avoidance is per branch only: a node can't appear twice on the
current path, but may be revisited via another branch.
"""

from typing import Generator, List, NamedTuple, Union

from graph.adjacency import AdjacencyMap, neighbours
from algorithms.step import IdaStep, format_cost


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "bound ← h(start)",                                          # 1
    "while not found:",                                          # 2
    "    t ← search(start, 0, bound)",                           # 3
    "    if t == FOUND: return path",                            # 4
    "    if t == ∞: return NOT FOUND",                           # 5
    "    bound ← t",                                             # 6
    "search(node, g, bound): f ← g + h(node); if f > bound: return f",  # 7
    "    if node == goal: return FOUND",                         # 8
    "    for (nbr, w) in adj(node) sorted by w, nbr not on path:",  # 9
    "        push nbr; t ← search(nbr, g + w, bound); pop nbr",  # 10
    "    return min(t)",                                         # 11
]


def zero(node: str) -> float:
    """h = 0 for every node: IDA* degrades to iterative-deepening uniform-cost search."""
    return 0


class _Found(NamedTuple):
    path: List[str]
    cost: float


_ProbeResult = Union[_Found, float]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def ida_star(adj: AdjacencyMap, start: str, goal: str) -> Generator[IdaStep, None, None]:

    INF = float("inf")
    h   = zero

    path:    List[str] = [start]
    on_path: set       = {start}

    def probe(node: str, g: float, bound: float) -> Generator[IdaStep, None, _ProbeResult]:
        f = g + h(node)

        yield IdaStep(
            active=node,
            line=7,
            path=list(path),
            threshold=bound,
            g=g,
            f=f,
            description=(
                f"Exploring '{node}': cost g={format_cost(g)}, total f={format_cost(f)}, "
                f"bound={format_cost(bound)}."
            ),
        )

        if f > bound:
            yield IdaStep(
                active=node,
                line=7,
                path=list(path),
                threshold=bound,
                g=g,
                f=f,
                description=f"f={format_cost(f)} exceeds the bound {format_cost(bound)}: prune '{node}'.",
            )
            return f

        if node == goal:
            return _Found(path=list(path), cost=g)

        minimum = INF
        for nbr, w in sorted(neighbours(adj, node), key=lambda entry: entry[1]):
            if nbr in on_path:
                continue

            path.append(nbr)
            on_path.add(nbr)
            try:
                t = yield from probe(nbr, g + w, bound)
            finally:
                path.pop()
                on_path.discard(nbr)

            if isinstance(t, _Found):
                return t
            minimum = min(minimum, t)

            yield IdaStep(
                active=node,
                line=10,
                path=list(path),
                threshold=bound,
                description=f"Backtracking from '{nbr}' to '{node}'.",
            )

        return minimum

    threshold = h(start)

    yield IdaStep(
        active=start,
        line=1,
        path=list(path),
        threshold=threshold,
        description=f"Initialising the bound to h('{start}') = {format_cost(threshold)}.",
    )

    while True:
        yield IdaStep(
            active=start,
            line=2,
            path=[],
            threshold=threshold,
            description=f"Starting a new iteration with bound {format_cost(threshold)}.",
        )

        t = yield from probe(start, 0, threshold)

        if isinstance(t, _Found):
            yield IdaStep(
                active=goal,
                line=4,
                path=list(t.path),
                threshold=threshold,
                final_path=list(t.path),
                success=True,
                cost=t.cost,
                description=(
                    f"Goal '{goal}' found within bound {format_cost(threshold)}. "
                    f"Path: {' → '.join(t.path)} (cost {format_cost(t.cost)})."
                ),
            )
            return

        if t == INF:
            yield IdaStep(
                line=5,
                threshold=threshold,
                description=f"No node exceeded the bound: no path exists from '{start}' to '{goal}'.",
            )
            return

        yield IdaStep(
            active=start,
            line=6,
            threshold=t,
            description=f"Raising the bound from {format_cost(threshold)} to {format_cost(t)}.",
        )
        threshold = t
