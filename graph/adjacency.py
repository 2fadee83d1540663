"""
adjacency.py — Edge List → Adjacency Map
=========================================
The only view of the graph the search strategies ever see:

    {node_id: [(neighbour_id, weight), …]}

Neighbour order is insertion order from the edge list.

Symmetrisation:
  Edges are treated as undirected unless the list also declares the
  reverse edge explicitly.  For edge (u, v, w) we always append (v, w)
  to u's list, and append (u, w) to v's list ONLY when no (v, u) edge
  exists anywhere in the input.  If it does, that explicit reverse edge
  supplies v's entry with its own weight, so asymmetric pairs such as
  (A, B, 5) + (B, A, 2) are preserved rather than overwritten.

Never raises: an edge pointing at an undeclared node never creates a
list for it.  The node stays absent from the map, so strategies see it as
isolated ("no neighbours") and cannot route through it.
"""

from typing import Dict, List, Tuple, Iterable, Any, Set

from graph.edge import Edge

NodeId       = str
AdjacencyMap = Dict[NodeId, List[Tuple[NodeId, float]]]


def build_adjacency(nodes: Iterable[Any], edges: Iterable[Any]) -> AdjacencyMap:
    """
    Args:
        nodes : node dicts with an "id", Node objects, or bare ids.
        edges : edge dicts (source / target / optional weight) or Edge objects.

    Returns:
        AdjacencyMap with an entry for every declared node.
    """
    adj: AdjacencyMap = {}
    for node in nodes:
        adj[_node_id(node)] = []

    triples = [_edge_triple(e) for e in edges]
    declared: Set[Tuple[NodeId, NodeId]] = {(u, v) for u, v, _ in triples}

    for u, v, w in triples:
        if u in adj:
            adj[u].append((v, w))
        if v in adj and (v, u) not in declared:
            adj[v].append((u, w))

    return adj


def neighbours(adj: AdjacencyMap, node_id: NodeId) -> List[Tuple[NodeId, float]]:
    """Neighbour list of `node_id`, empty for nodes the map doesn't know."""
    return adj.get(node_id) or []


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _node_id(node: Any) -> NodeId:
    if isinstance(node, dict):
        return str(node["id"])
    if hasattr(node, "id"):
        return node.id
    return str(node)


def _edge_triple(edge: Any) -> Tuple[NodeId, NodeId, float]:
    if isinstance(edge, Edge):
        return edge.source, edge.target, edge.cost
    weight = edge.get("weight")
    return str(edge["source"]), str(edge["target"]), 1 if weight is None else _number(weight)


def _number(value: Any) -> float:
    if isinstance(value, (int, float)):
        return value
    value = float(value)
    return int(value) if value.is_integer() else value
