"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge
    from graph import build_adjacency, generate_graph, calculate_metrics
"""

from graph.node      import Node
from graph.edge      import Edge
from graph.adjacency import AdjacencyMap, build_adjacency, neighbours
from graph.graph     import Graph
from graph.generator import generate_graph
from graph.metrics   import GraphMetrics, calculate_metrics

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "AdjacencyMap",
    "build_adjacency",
    "neighbours",
    "generate_graph",
    "GraphMetrics",
    "calculate_metrics",
]
