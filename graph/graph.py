"""
graph.py — Graph Container
===========================
Holds a graph in exactly the shape the outside world exchanges it:

    {"nodes": [{"id": "0", …}], "edges": [{"source": "0", "target": "1", "weight": 4}]}

Responsibilities:
  1. Parse / validate the JSON shape            (from_dict)
  2. Serialisation round-trip                   (to_dict)
  3. Lookup helpers                             (has_node, node_ids, …)
  4. Hand the search engine its adjacency view  (adjacency)

Design decisions:
  - Nodes & edges stored in insertion-ordered containers; the adjacency
    adapter depends on edge order for neighbour order.
  - The graph is treated as immutable once built: a search never writes
    back into it, so one Graph can back any number of runs.
"""

from typing import Dict, List, Optional

from graph.node import Node
from graph.edge import Edge
from graph.adjacency import AdjacencyMap, build_adjacency


class Graph:
    """
    Attributes:
        nodes : {node_id: Node}  (insertion order preserved)
        edges : [Edge]           (insertion order preserved)
    """

    def __init__(self):
        self.nodes: Dict[str, Node] = {}
        self.edges: List[Edge]      = []

    # ==================================================================
    # BUILDING
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        self.nodes[node.id] = node
        return node

    def create_node(self, node_id: str, label: Optional[str] = None, **extra) -> Node:
        """Convenience: create + add in one call."""
        return self.add_node(Node(node_id=node_id, label=label, extra=extra))

    def add_edge(self, edge: Edge) -> Edge:
        self.edges.append(edge)
        return edge

    def create_edge(self, source: str, target: str, weight: Optional[float] = None, **extra) -> Edge:
        return self.add_edge(Edge(source=source, target=target, weight=weight, extra=extra))

    # ==================================================================
    # QUERIES
    # ==================================================================
    def has_node(self, node_id: str) -> bool:
        return node_id in self.nodes

    def get_node(self, node_id: str) -> Optional[Node]:
        return self.nodes.get(node_id)

    def get_edge_between(self, a: str, b: str) -> Optional[Edge]:
        """First edge linking a and b, either direction."""
        for e in self.edges:
            if e.connects(a, b):
                return e
        return None

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def adjacency(self) -> AdjacencyMap:
        """Fresh adjacency map for one search run."""
        return build_adjacency(self.nodes.values(), self.edges)

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes.values()],
            "edges": [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        """
        Raises:
            ValueError – when "nodes" / "edges" are missing or malformed.
        """
        if not isinstance(data, dict):
            raise ValueError("graph JSON must be an object")
        nodes = data.get("nodes")
        edges = data.get("edges")
        if not isinstance(nodes, list) or not isinstance(edges, list):
            raise ValueError("graph JSON must contain 'nodes' and 'edges' lists")

        g = cls()
        for nd in nodes:
            g.add_node(Node.from_dict(nd))
        for ed in edges:
            g.add_edge(Edge.from_dict(ed))
        return g

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
