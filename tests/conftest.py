"""Shared fixtures for the search tracer tests."""

import pytest

from graph import Graph, build_adjacency

ALGORITHMS = ["BFS", "DFS", "Dijkstra", "IDA*"]


def make_graph(node_ids, edges) -> Graph:
    """Graph from ids and (source, target, weight) triples."""
    return Graph.from_dict({
        "nodes": [{"id": n} for n in node_ids],
        "edges": [{"source": u, "target": v, "weight": w} for u, v, w in edges],
    })


@pytest.fixture
def diamond_graph() -> Graph:
    """0-1-2-3 chain of weight 1 plus a direct 0-3 shortcut of weight 5."""
    return make_graph(
        ["0", "1", "2", "3"],
        [("0", "1", 1), ("1", "2", 1), ("2", "3", 1), ("0", "3", 5)],
    )


@pytest.fixture
def diamond_adj(diamond_graph):
    return diamond_graph.adjacency()


@pytest.fixture
def disconnected_adj():
    """A-B connected, C isolated."""
    return build_adjacency(
        [{"id": "A"}, {"id": "B"}, {"id": "C"}],
        [{"source": "A", "target": "B", "weight": 2}],
    )


@pytest.fixture
def single_node_adj():
    return build_adjacency([{"id": "X"}], [])
