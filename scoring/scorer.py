"""
scorer.py — Solution Scorer
===========================
Turns a student's route into the score card shown next to the map.

    total = 0.4 · correctness + 0.3 · optimality + 0.3 · efficiency

  • correctness – 100 if the route is drivable start → goal, else 0
  • optimality  – 100 when it matches the optimal cost; a valid but
                  dearer route never drops below 50
  • efficiency  – how many intersections the reference solver needed
                  vs. how many the student explored (capped at 100)

Student output comes from user-written code and is not trusted:
`normalize_solution` turns whatever came back into a SearchResult.
"""

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from graph import Graph
from algorithms.result import SearchResult
from scoring.evaluator import OptimalSolution, check_correctness, compute_path_cost


CORRECTNESS_WEIGHT = 0.4
OPTIMALITY_WEIGHT  = 0.3
EFFICIENCY_WEIGHT  = 0.3
OPTIMALITY_FLOOR   = 50


# ---------------------------------------------------------------------------
# Score card: what the score panel renders
# ---------------------------------------------------------------------------
@dataclass
class ScoreCard:
    valid:             bool  = False
    correctness_score: int   = 0
    optimality_score:  int   = 0
    efficiency_score:  int   = 0
    total_score:       int   = 0
    student_cost:      float = math.inf
    optimal_cost:      float = math.inf

    def zeroed(self) -> "ScoreCard":
        """Same costs, every sub-score 0 (a crashed run)."""
        return ScoreCard(
            valid=self.valid,
            student_cost=self.student_cost,
            optimal_cost=self.optimal_cost,
        )

    def to_dict(self) -> dict:
        return {
            "valid":            self.valid,
            "correctnessScore": self.correctness_score,
            "optimalityScore":  self.optimality_score,
            "efficiencyScore":  self.efficiency_score,
            "totalScore":       self.total_score,
            "studentCost":      _finite_or_none(self.student_cost),
            "optimalCost":      _finite_or_none(self.optimal_cost),
        }


def _finite_or_none(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


def round_half_up(value: float) -> int:
    """Browser-style rounding: 2.5 → 3 (Python's round() would give 2)."""
    return int(math.floor(value + 0.5))


# ---------------------------------------------------------------------------
# Untrusted input
# ---------------------------------------------------------------------------
def _is_step_count(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, int) or (isinstance(value, float) and math.isfinite(value))


def normalize_solution(raw: Any) -> SearchResult:
    """
    Coerce a solver's return value into a SearchResult.

    Accepts a mapping with camelCase keys, anything exposing
    path / visited_nodes attributes (a SearchResult), or None.
    Non-list fields become empty; a missing or non-finite stepsCount is derived
    from the visited list.
    """
    if isinstance(raw, SearchResult):
        return raw

    if isinstance(raw, Mapping):
        path    = raw.get("path")
        visited = raw.get("visitedNodes", raw.get("visited_nodes"))
        steps   = raw.get("stepsCount", raw.get("steps_count"))
    else:
        path    = getattr(raw, "path", None)
        visited = getattr(raw, "visited_nodes", None)
        steps   = getattr(raw, "steps_count", None)

    path    = list(path) if isinstance(path, (list, tuple)) else []
    visited = list(visited) if isinstance(visited, (list, tuple)) else []
    if not _is_step_count(steps):
        steps = len(visited)

    return SearchResult(path=path, visited_nodes=visited, steps_count=int(steps))


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------
def calculate_score(
    graph: Graph,
    student_solution: Any,
    optimal_solution: OptimalSolution,
    start_id: str,
    goal_id: str,
) -> ScoreCard:
    student = normalize_solution(student_solution)

    valid        = check_correctness(graph, student.path, start_id, goal_id)
    student_cost = compute_path_cost(graph, student.path)
    optimal_cost = optimal_solution.cost

    correctness = 100 if valid else 0

    optimality = 0
    if valid and math.isfinite(student_cost) and math.isfinite(optimal_cost):
        if student_cost == optimal_cost:
            optimality = 100
        else:
            optimality = max(OPTIMALITY_FLOOR, round_half_up(optimal_cost / student_cost * 100))

    student_visited = max(1, len(student.visited_nodes))
    optimal_visited = max(1, len(optimal_solution.visited_nodes or []))
    efficiency = 0
    if valid:
        efficiency = max(0, min(100, round_half_up(optimal_visited / student_visited * 100)))

    total = round_half_up(
        correctness * CORRECTNESS_WEIGHT
        + optimality * OPTIMALITY_WEIGHT
        + efficiency * EFFICIENCY_WEIGHT
    )

    return ScoreCard(
        valid=valid,
        correctness_score=correctness,
        optimality_score=optimality,
        efficiency_score=efficiency,
        total_score=total,
        student_cost=student_cost,
        optimal_cost=optimal_cost,
    )
