# tests/test_algorithms.py
import pytest

from graph import Graph
from algorithms import (
    REGISTRY,
    algorithms_by_tag,
    list_algorithms,
    normalize_algorithm,
    normalize_difficulty,
    solve_by_algorithm,
)
from algorithms.astar import HEURISTIC_SCALE, straight_line
from algorithms.bellman_ford import bellman_ford
from algorithms.bfs import bfs
from algorithms.dfs import dfs
from algorithms.dijkstra import dijkstra
from scoring import check_correctness, compute_path_cost


ALL_KEYS = ["bfs", "dfs", "dijkstra", "astar", "bellmanFord"]


# ---- registry ----
def test_registry_order_and_keys():
    assert [a.key for a in list_algorithms()] == ALL_KEYS
    assert set(REGISTRY) == set(ALL_KEYS)


def test_algorithms_by_tag():
    weighted = {a.key for a in algorithms_by_tag("weighted")}
    assert weighted == {"dijkstra", "astar", "bellmanFord"}


def test_unknown_algorithm_raises(triangle):
    with pytest.raises(ValueError, match="Unknown algorithm: greedy"):
        solve_by_algorithm("greedy", triangle, "A", "C")


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("BFS", "bfs"),
        (" dfs ", "dfs"),
        ("Dijisktra", "dijkstra"),
        ("djikstra", "dijkstra"),
        ("A*", "astar"),
        ("Bellman-Ford", "bellmanFord"),
        ("bellmanford", "bellmanFord"),
        ("greedy", None),
        ("", None),
        (None, None),
    ],
)
def test_normalize_algorithm(raw, expected):
    assert normalize_algorithm(raw) == expected


def test_normalize_difficulty():
    assert normalize_difficulty("HARD") == "hard"
    assert normalize_difficulty("expert") is None


# ---- shared edge cases ----
@pytest.mark.parametrize("key", ALL_KEYS)
def test_start_equals_goal(key, triangle):
    assert solve_by_algorithm(key, triangle, "B", "B").path == ["B"]


@pytest.mark.parametrize("key", ALL_KEYS)
@pytest.mark.parametrize("start,goal", [("A", "Q"), ("Q", "A")])
def test_missing_endpoint(key, start, goal, triangle):
    result = solve_by_algorithm(key, triangle, start, goal)
    assert result.to_dict() == {"path": [start], "visitedNodes": [], "stepsCount": 0}


@pytest.mark.parametrize("key", ALL_KEYS)
def test_unreachable_goal_falls_back_to_start(key, chain):
    chain.create_node("Z", 9, 9)
    result = solve_by_algorithm(key, chain, "A", "Z")
    assert result.path == ["A"]
    assert result.visited_nodes
    assert result.steps_count == len(result.visited_nodes)


@pytest.mark.parametrize("key", ALL_KEYS)
def test_blocked_road_is_ignored(key):
    g = Graph()
    g.create_node("A", 0, 0)
    g.create_node("B", 1, 0)
    g.create_node("C", 0, 1)
    g.create_edge("A", "B", blocked=True)
    g.create_edge("A", "C")
    g.create_edge("C", "B")
    assert solve_by_algorithm(key, g, "A", "B").path == ["A", "C", "B"]


# ---- per-algorithm behaviour ----
def test_dijkstra_prefers_direct_road(triangle):
    result = dijkstra(triangle, "A", "C")
    assert result.path == ["A", "C"]
    assert compute_path_cost(triangle, result.path) == 3


def test_dijkstra_without_direct_road(chain):
    result = dijkstra(chain, "A", "C")
    assert result.path == ["A", "B", "C"]
    assert compute_path_cost(chain, result.path) == 6


def test_dijkstra_stops_when_goal_closed(chain):
    chain.create_node("D", 3, 0)
    chain.create_edge("C", "D")
    assert dijkstra(chain, "A", "B").visited_nodes == ["A", "B"]


def test_bfs_ignores_cost(chain):
    chain.create_edge("A", "C", cost=100)
    assert bfs(chain, "A", "C").path == ["A", "C"]


def test_dfs_dives_down_later_roads(detour):
    result = dfs(detour, "A", "B")
    assert result.path == ["A", "C", "D", "B"]
    assert result.visited_nodes == ["A", "C", "D", "B"]
    assert bfs(detour, "A", "B").path == ["A", "B"]


def test_bellman_ford_visited_is_reached_set(chain):
    chain.create_node("Z", 5, 5)
    result = bellman_ford(chain, "A", "B")
    assert result.path == ["A", "B"]
    # every node with a finite distance, in graph order, not exploration order
    assert result.visited_nodes == ["A", "B", "C"]
    assert dijkstra(chain, "A", "B").visited_nodes == ["A", "B"]


def test_heuristic_scale():
    assert HEURISTIC_SCALE == 120
    assert straight_line(0, 0, 360, 0) == pytest.approx(3.0)


# ---- cross-algorithm properties ----
def _property_graphs(triangle, chain, detour):
    return [(triangle, "A", "C"), (chain, "A", "C"), (detour, "A", "B")]


def test_every_path_is_valid(triangle, chain, detour):
    for g, s, t in _property_graphs(triangle, chain, detour):
        for key in ALL_KEYS:
            assert check_correctness(g, solve_by_algorithm(key, g, s, t).path, s, t), key


def test_bfs_has_fewest_roads(triangle, chain, detour):
    for g, s, t in _property_graphs(triangle, chain, detour):
        shortest = bfs(g, s, t).edge_count
        for key in ALL_KEYS:
            assert shortest <= solve_by_algorithm(key, g, s, t).edge_count


def test_astar_matches_dijkstra_cost_when_admissible(triangle, chain, detour):
    # coordinates are a few pixels apart, so h() is far below any road cost
    for g, s, t in _property_graphs(triangle, chain, detour):
        a = compute_path_cost(g, solve_by_algorithm("astar", g, s, t).path)
        d = compute_path_cost(g, solve_by_algorithm("dijkstra", g, s, t).path)
        assert a == d
