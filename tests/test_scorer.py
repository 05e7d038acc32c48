# tests/test_scorer.py
import math

from algorithms import SearchResult
from scoring import calculate_score, find_optimal_solution, normalize_solution, round_half_up


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(84.49) == 84


def test_optimal_scores_full_marks(triangle):
    opt = find_optimal_solution(triangle, "A", "C")
    card = calculate_score(triangle, {"path": opt.path, "visitedNodes": opt.visited_nodes}, opt, "A", "C")
    assert card.valid
    assert (card.correctness_score, card.optimality_score, card.efficiency_score) == (100, 100, 100)
    assert card.total_score == 100


def test_wrong_endpoints_score_zero(triangle):
    opt = find_optimal_solution(triangle, "A", "C")
    card = calculate_score(triangle, {"path": ["B", "C"], "visitedNodes": ["B", "C"]}, opt, "A", "C")
    assert not card.valid
    assert card.to_dict()["totalScore"] == 0
    assert card.optimality_score == 0
    assert card.efficiency_score == 0


def test_dearer_route_keeps_optimality_floor(triangle):
    opt = find_optimal_solution(triangle, "A", "C")
    card = calculate_score(triangle, {"path": ["A", "B", "C"], "visitedNodes": ["A", "B", "C"]}, opt, "A", "C")
    assert card.student_cost == 6
    assert card.optimality_score == 50


def test_efficiency_ratio(triangle):
    opt = find_optimal_solution(triangle, "A", "C")
    wasteful = calculate_score(triangle, {"path": ["A", "C"], "visitedNodes": list("ABCABC")}, opt, "A", "C")
    assert wasteful.efficiency_score == 50
    assert wasteful.total_score == 85

    lucky = calculate_score(triangle, {"path": ["A", "C"], "visitedNodes": ["A"]}, opt, "A", "C")
    assert lucky.efficiency_score == 100


def test_normalize_solution():
    empty = normalize_solution(None)
    assert empty == SearchResult(path=[], visited_nodes=[], steps_count=0)

    messy = normalize_solution({"path": "AB", "visitedNodes": ["A", "B"], "stepsCount": "lots"})
    assert messy.path == []
    assert messy.steps_count == 2

    result = SearchResult.of(["A"], ["A"])
    assert normalize_solution(result) is result


def test_unreachable_goal_scores_zero(chain):
    chain.create_node("Z", 9, 9)
    opt = find_optimal_solution(chain, "A", "Z")
    card = calculate_score(chain, {"path": ["A"]}, opt, "A", "Z")
    assert card.total_score == 0
    assert card.to_dict()["studentCost"] is None


def test_non_finite_step_count_falls_back_to_visited():
    for bad in (math.inf, -math.inf, math.nan):
        result = normalize_solution({"path": ["A"], "visitedNodes": ["A", "B"], "stepsCount": bad})
        assert result.steps_count == 2

    assert normalize_solution({"visitedNodes": [], "stepsCount": True}).steps_count == 0
    assert normalize_solution({"visitedNodes": [], "stepsCount": 7.0}).steps_count == 7
