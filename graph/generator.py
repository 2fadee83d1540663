"""
generator.py — Graph Generators
================================
Factory for the three graph families the explorer offers:

  • complete      – every pair of nodes connected
  • random        – Erdős–Rényi style, each pair kept with probability `density`
  • preferential  – growth model where well-connected nodes attract new links

Nodes are "0" … "n-1" (labels "N0" …), edges are "u-v" with an integer
weight drawn uniformly from config.WEIGHT_RANGE.
"""

import logging
import random
from typing import Optional, Tuple

import config
from graph.graph import Graph

logger = logging.getLogger(__name__)


def generate_graph(
    num_nodes: int = config.DEFAULT_NUM_NODES,
    density: float = config.DEFAULT_DENSITY,
    kind: str = config.DEFAULT_GRAPH_TYPE,
    directed: bool = False,
    seed: Optional[int] = None,
    weight_range: Tuple[int, int] = config.WEIGHT_RANGE,
) -> Graph:
    """
    Args:
        num_nodes    : Number of nodes (>= 0).
        density      : Edge probability for "random" (ignored otherwise).
        kind         : One of config.GRAPH_TYPES.
        directed     : Also emit reverse edges ("complete" / "random").
        seed         : Makes the draw reproducible.
        weight_range : Inclusive (low, high) integer weight bounds.

    Raises:
        ValueError – unknown kind or negative node count.
    """
    if kind not in config.GRAPH_TYPES:
        raise ValueError(f"Unknown graph type: {kind!r} (expected one of {', '.join(config.GRAPH_TYPES)})")
    if num_nodes < 0:
        raise ValueError("num_nodes must be >= 0")

    rng = random.Random(seed)
    g   = Graph()

    for i in range(num_nodes):
        g.create_node(str(i), label=f"N{i}")

    def link(source: int, target: int) -> None:
        w = rng.randint(*weight_range)
        g.create_edge(str(source), str(target), weight=w, label=str(w))

    if kind == "complete":
        for i in range(num_nodes):
            for j in range(i + 1, num_nodes):
                link(i, j)
                if directed:
                    link(j, i)

    elif kind == "random":
        for i in range(num_nodes):
            for j in range(i + 1, num_nodes):
                if rng.random() < density:
                    link(i, j)
                    if directed and rng.random() < density:
                        link(j, i)

    else:  # preferential
        if num_nodes > 1:
            link(0, 1)
        for i in range(2, num_nodes):
            added = False
            for j in range(i):
                sj     = str(j)
                degree = sum(1 for e in g.edges if e.source == sj or e.target == sj)
                prob   = (degree + 1) / (g.edge_count() + 1)
                # the last candidate is forced so every new node gets a link
                if rng.random() < prob or (not added and j == i - 1):
                    link(i, j)
                    added = True

    logger.info(f"Generated {kind} graph: {g.node_count()} nodes, {g.edge_count()} edges")
    return g
