"""
scoring/
--------
Evaluation & scoring layer.

    from scoring import find_optimal_solution, calculate_score, score_attempt
"""

from scoring.evaluator import (
    OptimalSolution,
    check_correctness,
    compute_path_cost,
    find_optimal_solution,
)
from scoring.scorer  import ScoreCard, calculate_score, normalize_solution, round_half_up
from scoring.attempt import DriveAttempt, ScoreReport, trace_attempt, score_attempt

__all__ = [
    "OptimalSolution",
    "check_correctness",
    "compute_path_cost",
    "find_optimal_solution",
    "ScoreCard",
    "calculate_score",
    "normalize_solution",
    "round_half_up",
    "DriveAttempt",
    "ScoreReport",
    "trace_attempt",
    "score_attempt",
]
