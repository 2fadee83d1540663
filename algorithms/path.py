"""
path.py — Path Reconstruction
==============================
Shared by every strategy that keeps a parent map.
"""

from typing import Dict, List, Tuple


def reconstruct_path(parent: Dict[str, str], goal: str) -> List[str]:
    """
    Walk back from `goal` along child → parent links.

    The start node is the one node with no parent entry, so a lookup miss
    is how the walk ends.  At most len(parent) + 1 nodes are collected.

    Returns:
        [start, …, goal]
    """
    path = [goal]
    cur  = goal
    for _ in range(len(parent)):
        if cur not in parent:
            break
        cur = parent[cur]
        path.append(cur)
    path.reverse()
    return path


def path_cost(adj: Dict[str, List[Tuple[str, float]]], path: List[str]) -> float:
    """Sum of edge weights along `path`, using the first matching adjacency entry per hop."""
    total = 0
    for u, v in zip(path, path[1:]):
        total += next((w for n, w in adj.get(u) or [] if n == v), 0)
    return total
