"""
metrics.py — Structural Graph Metrics
======================================
The numbers shown in the graph summary card: node / edge counts,
density and average degree.
"""

from dataclasses import dataclass
from typing import Optional

from graph.graph import Graph


@dataclass(frozen=True)
class GraphMetrics:
    node_count: int
    edge_count: int
    density:    float       # |E| / possible edges
    avg_degree: float       # 2|E| / |V|
    directed:   bool = False

    def to_dict(self) -> dict:
        return {
            "node_count": self.node_count,
            "edge_count": self.edge_count,
            "density":    round(self.density, 4),
            "avg_degree": round(self.avg_degree, 2),
            "directed":   self.directed,
        }


def calculate_metrics(graph: Graph, directed: bool = False) -> Optional[GraphMetrics]:
    """Metrics for `graph`, or None when it has no nodes."""
    n = graph.node_count()
    m = graph.edge_count()
    if n == 0:
        return None

    possible = n * (n - 1)
    density  = 0.0
    if possible > 0:
        density = m / possible if directed else (2 * m) / possible

    return GraphMetrics(
        node_count=n,
        edge_count=m,
        density=density,
        avg_degree=(2 * m) / n,
        directed=directed,
    )
