# tests/test_evaluator.py
import math

from scoring import check_correctness, compute_path_cost, find_optimal_solution


def test_check_correctness(triangle):
    assert check_correctness(triangle, ["A", "C"], "A", "C")
    assert check_correctness(triangle, ("A", "B", "C"), "A", "C")
    assert not check_correctness(triangle, ["A"], "A", "A")
    assert not check_correctness(triangle, ["B", "C"], "A", "C")
    assert not check_correctness(triangle, ["A", "B"], "A", "C")
    assert not check_correctness(triangle, "AC", "A", "C")


def test_blocked_road_breaks_path(chain):
    chain.edges[0].blocked = True
    assert not check_correctness(chain, ["A", "B", "C"], "A", "C")
    assert compute_path_cost(chain, ["A", "B", "C"]) == math.inf


def test_compute_path_cost(chain):
    assert compute_path_cost(chain, ["A", "B", "C"]) == 6
    assert compute_path_cost(chain, ["C", "B"]) == 5
    assert compute_path_cost(chain, ["A"]) == math.inf
    assert compute_path_cost(chain, ["A", "C"]) == math.inf


def test_optimal_solution(triangle):
    opt = find_optimal_solution(triangle, "A", "C")
    assert opt.path == ["A", "C"]
    assert opt.cost == 3
    assert opt.visited_nodes == ["A", "B", "C"]
    assert opt.steps_count == 3
    assert compute_path_cost(triangle, opt.path) == opt.cost


def test_optimal_solution_unreachable(chain):
    chain.create_node("Z", 0, 0)
    opt = find_optimal_solution(chain, "A", "Z")
    assert opt.path == []
    assert not opt.reachable
    assert opt.to_dict()["cost"] is None
