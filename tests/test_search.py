"""Tests for the four search strategies and their traces."""

import inspect
import itertools
import math

import pytest

from graph import build_adjacency, generate_graph
from algorithms import search, iter_steps, reconstruct_path, REGISTRY
from algorithms.step import BfsStep, DfsStep, UniformCostStep, IdaStep
from tests.conftest import ALGORITHMS


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def simple_paths(adj, start, goal):
    """Every simple path start → goal as (nodes, cost), by exhaustive enumeration."""
    results = []

    def walk(node, nodes, cost):
        if node == goal:
            results.append((list(nodes), cost))
            return
        for nbr, w in adj.get(node, []):
            if nbr not in nodes:
                nodes.append(nbr)
                walk(nbr, nodes, cost + w)
                nodes.pop()

    walk(start, [start], 0)
    return results


def assert_valid_path(adj, path, start, goal):
    assert path[0] == start
    assert path[-1] == goal
    for u, v in zip(path, path[1:]):
        assert v in [n for n, _ in adj[u]]


def sample_graphs():
    graphs = [generate_graph(6, density=0.4, kind="random", seed=s) for s in range(8)]
    graphs.append(generate_graph(5, kind="complete", seed=11))
    graphs.append(generate_graph(7, kind="preferential", seed=12))
    return [g.adjacency() for g in graphs]


SAMPLE_GRAPHS = sample_graphs()


def node_pairs(adj):
    return list(itertools.permutations(sorted(adj), 2))


# ---------------------------------------------------------------------------
# Shared contract
# ---------------------------------------------------------------------------
class TestSharedContract:
    """Invariants every strategy keeps."""

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_success_step_is_unique_and_last(self, algorithm):
        for adj in SAMPLE_GRAPHS:
            for start, goal in node_pairs(adj):
                trace = search(algorithm, adj, start, goal)
                successes = [s for s in trace if s.success]
                if trace.succeeded:
                    assert len(successes) == 1
                    assert successes[0] is trace[-1]
                    assert trace[-1].final_path
                else:
                    assert successes == []

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_final_path_is_valid(self, algorithm):
        for adj in SAMPLE_GRAPHS:
            for start, goal in node_pairs(adj):
                trace = search(algorithm, adj, start, goal)
                reachable = bool(simple_paths(adj, start, goal))
                assert trace.succeeded == reachable
                if reachable:
                    assert_valid_path(adj, trace.final_path, start, goal)

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_only_final_step_has_final_path(self, algorithm, diamond_adj):
        trace = search(algorithm, diamond_adj, "0", "3")
        assert all(not s.final_path for s in trace[:-1])

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_rerun_is_identical(self, algorithm):
        adj = SAMPLE_GRAPHS[0]
        start, goal = node_pairs(adj)[0]
        first  = search(algorithm, adj, start, goal).to_list()
        second = search(algorithm, adj, start, goal).to_list()
        assert first == second

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_unreachable_goal(self, algorithm, disconnected_adj):
        trace = search(algorithm, disconnected_adj, "A", "C")
        assert len(trace) > 0
        assert not trace.succeeded
        assert not any(s.success or s.final_path for s in trace)
        assert "no path" in trace[-1].description.lower()

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_start_equals_goal_single_node(self, algorithm, single_node_adj):
        trace = search(algorithm, single_node_adj, "X", "X")
        assert trace.succeeded
        assert trace.final_path == ["X"]
        assert trace.cost == 0

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_every_step_has_description(self, algorithm, diamond_adj):
        assert all(s.description for s in search(algorithm, diamond_adj, "0", "3"))

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_undeclared_node_is_not_a_route(self, algorithm):
        """Z is only referenced by edges, never declared: nothing passes through it."""
        adj = build_adjacency(
            ["A", "C"],
            [{"source": "A", "target": "Z"}, {"source": "C", "target": "Z"}],
        )
        trace = search(algorithm, adj, "A", "C")
        assert not trace.succeeded
        assert trace.final_path == []
        assert not any(s.success for s in trace)

    def test_unknown_algorithm_gives_empty_trace(self, diamond_adj):
        trace = search("A*", diamond_adj, "0", "3")
        assert len(trace) == 0
        assert not trace.succeeded
        assert list(iter_steps("nope", diamond_adj, "0", "3")) == []

    def test_step_variants(self, diamond_adj):
        expected = {"BFS": BfsStep, "DFS": DfsStep, "Dijkstra": UniformCostStep, "IDA*": IdaStep}
        for algorithm, cls in expected.items():
            assert all(type(s) is cls for s in search(algorithm, diamond_adj, "0", "3"))

    def test_registry_keys(self):
        assert list(REGISTRY) == ALGORITHMS


class TestReconstructPath:
    """Parent-map walk."""

    def test_walks_back_to_start(self):
        assert reconstruct_path({"B": "A", "C": "B"}, "C") == ["A", "B", "C"]

    def test_goal_without_parent(self):
        assert reconstruct_path({}, "A") == ["A"]


# ---------------------------------------------------------------------------
# BFS
# ---------------------------------------------------------------------------
class TestBFS:

    def test_diamond_takes_fewest_edges(self, diamond_adj):
        trace = search("BFS", diamond_adj, "0", "3")
        assert trace.final_path == ["0", "3"]
        assert trace.cost == 5

    def test_diamond_step_sequence(self, diamond_adj):
        trace = search("BFS", diamond_adj, "0", "3")
        assert [s.line for s in trace] == [1, 2, 3, 5, 7, 7, 2, 3, 5, 7, 2, 3, 4]
        discovered = [s.looking_at for s in trace if s.line == 7]
        assert discovered == ["1", "3", "2"]
        assert trace[5].open_list == ["1", "3"]
        assert trace[-1].visited == ["0", "1", "3", "2"]

    def test_dequeued_node_is_active(self, diamond_adj):
        trace = search("BFS", diamond_adj, "0", "3")
        assert [s.active for s in trace if s.line == 3] == ["0", "1", "3"]

    def test_path_has_minimum_hops(self):
        for adj in SAMPLE_GRAPHS:
            for start, goal in node_pairs(adj):
                paths = simple_paths(adj, start, goal)
                if not paths:
                    continue
                trace = search("BFS", adj, start, goal)
                assert len(trace.final_path) - 1 == min(len(p) - 1 for p, _ in paths)


# ---------------------------------------------------------------------------
# DFS
# ---------------------------------------------------------------------------
class TestDFS:

    def test_diamond_explores_first_listed_neighbour_first(self, diamond_adj):
        trace = search("DFS", diamond_adj, "0", "3")
        assert trace.final_path == ["0", "1", "2", "3"]
        assert [s.active for s in trace if s.line == 3] == ["0", "1", "2", "3"]

    def test_diamond_step_sequence(self, diamond_adj):
        trace = search("DFS", diamond_adj, "0", "3")
        assert [s.line for s in trace] == [1, 2, 3, 5, 7, 7, 2, 3, 5, 7, 2, 3, 5, 7, 2, 3, 4]
        # pushed in reverse, so the first neighbour sits on top
        assert trace[5].open_list == ["3", "1"]

    def test_already_visited_pop_is_silent(self):
        adj = build_adjacency(
            ["A", "B", "C", "D"],
            [
                {"source": "A", "target": "B"},
                {"source": "A", "target": "C"},
                {"source": "B", "target": "C"},
            ],
        )
        trace = search("DFS", adj, "A", "D")
        assert [s.active for s in trace if s.line == 3] == ["A", "B", "C"]
        assert len([s for s in trace if s.line == 2]) == 4
        assert trace[-1].line == 8


# ---------------------------------------------------------------------------
# Dijkstra
# ---------------------------------------------------------------------------
class TestDijkstra:

    def test_diamond_prefers_cheaper_detour(self, diamond_adj):
        trace = search("Dijkstra", diamond_adj, "0", "3")
        assert trace.final_path == ["0", "1", "2", "3"]
        assert trace.cost == 3
        assert trace[-1].distances == {"0": 0, "1": 1, "2": 2, "3": 3}

    def test_diamond_relaxations(self, diamond_adj):
        trace = search("Dijkstra", diamond_adj, "0", "3")
        updates = [(s.looking_at, s.distances[s.looking_at]) for s in trace if s.line == 8]
        assert updates == [("1", 1), ("3", 5), ("2", 2), ("3", 3)]
        assert [s for s in trace if s.line == 8][-1].open_list == [("3", 3), ("3", 5)]

    def test_initial_distances(self, diamond_adj):
        first = search("Dijkstra", diamond_adj, "0", "3")[0]
        assert first.active == "0"
        assert first.distances["0"] == 0
        assert all(math.isinf(first.distances[n]) for n in ("1", "2", "3"))
        assert first.open_list == [("0", 0)]

    def test_stale_entries_discarded_silently(self, diamond_graph):
        diamond_graph.create_node("4")
        trace = search("Dijkstra", diamond_graph.adjacency(), "0", "4")
        assert [s.active for s in trace if s.line == 3] == ["0", "1", "2", "3"]
        assert trace[-1].line == 9

    def test_cost_matches_brute_force(self):
        for adj in SAMPLE_GRAPHS:
            for start, goal in node_pairs(adj):
                paths = simple_paths(adj, start, goal)
                if not paths:
                    continue
                trace = search("Dijkstra", adj, start, goal)
                assert trace.cost == min(c for _, c in paths)

    def test_equal_distances_pop_in_insertion_order(self):
        adj = build_adjacency(
            ["S", "A", "B", "G"],
            [
                {"source": "S", "target": "A", "weight": 1},
                {"source": "S", "target": "B", "weight": 1},
                {"source": "A", "target": "G", "weight": 1},
                {"source": "B", "target": "G", "weight": 1},
            ],
        )
        trace = search("Dijkstra", adj, "S", "G")
        assert [s.active for s in trace if s.line == 3] == ["S", "A", "B", "G"]
        assert trace.final_path == ["S", "A", "G"]


# ---------------------------------------------------------------------------
# IDA*
# ---------------------------------------------------------------------------
class TestIDAStar:

    def test_diamond(self, diamond_adj):
        trace = search("IDA*", diamond_adj, "0", "3")
        assert trace.final_path == ["0", "1", "2", "3"]
        assert trace.cost == 3
        assert trace[-1].path == ["0", "1", "2", "3"]

    def test_threshold_rises_to_path_cost(self, diamond_adj):
        trace = search("IDA*", diamond_adj, "0", "3")
        assert trace[0].threshold == 0
        assert [s.threshold for s in trace if s.line == 6] == [1, 2, 3]

    def test_branch_stays_consistent(self, diamond_adj):
        """Entered and backtracked-to nodes are always on top of the branch."""
        trace = search("IDA*", diamond_adj, "0", "3")
        for s in trace:
            if s.line in (7, 10):
                assert s.path[-1] == s.active
                assert len(set(s.path)) == len(s.path)

    def test_backtracking_emitted(self, diamond_adj):
        trace = search("IDA*", diamond_adj, "0", "3")
        assert any(s.line == 10 and "Backtracking" in s.description for s in trace)

    def test_unreachable_ends_with_infinite_overshoot(self, disconnected_adj):
        trace = search("IDA*", disconnected_adj, "A", "C")
        assert [s.threshold for s in trace if s.line == 6] == [2]
        assert trace[-1].line == 5

    def test_open_list_shows_costs(self, diamond_adj):
        step = next(s for s in search("IDA*", diamond_adj, "0", "3") if s.line == 7)
        assert step.open_list == ["g=0", "f=0", "bound=0"]

    def test_adjacency_not_reordered(self):
        adj = build_adjacency(
            ["A", "B", "C"],
            [{"source": "A", "target": "B", "weight": 9}, {"source": "A", "target": "C", "weight": 1}],
        )
        search("IDA*", adj, "A", "B")
        assert adj["A"] == [("B", 9), ("C", 1)]

    def test_closing_mid_run_unwinds(self, diamond_adj):
        steps = iter_steps("IDA*", diamond_adj, "0", "3")
        seen = [next(steps) for _ in range(6)]
        assert any(len(s.path) > 1 for s in seen)

        steps.close()
        assert inspect.getgeneratorstate(steps) == inspect.GEN_CLOSED
        with pytest.raises(StopIteration):
            next(steps)

        trace = search("IDA*", diamond_adj, "0", "3")
        assert trace.final_path == ["0", "1", "2", "3"]
        assert diamond_adj == {
            "0": [("1", 1), ("3", 5)],
            "1": [("0", 1), ("2", 1)],
            "2": [("1", 1), ("3", 1)],
            "3": [("2", 1), ("0", 5)],
        }

    def test_valid_path_on_samples(self):
        for adj in SAMPLE_GRAPHS[:4]:
            for start, goal in node_pairs(adj):
                trace = search("IDA*", adj, start, goal)
                if trace.succeeded:
                    assert_valid_path(adj, trace.final_path, start, goal)
                    # h = 0 and thresholds rise to the next overshoot, so the cost is optimal
                    assert trace.cost == min(c for _, c in simple_paths(adj, start, goal))
