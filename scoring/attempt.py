"""
attempt.py — Drive Attempt
==========================
Before the renderer animates a student's route it needs to know how
far the car can actually get:

    1. The route must start at the start node.
    2. Each hop must land on a known intersection over an open road;
       the car stops at the first bad hop.
    3. A car that drives into an intersection holding a traffic car
       crashes there, and a crashed run scores zero across the board.

`trace_attempt` answers (1)–(3) and `score_attempt` combines it with
the evaluator and the scorer into the full report for one run.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional

from graph import Graph
from scoring.evaluator import OptimalSolution, find_optimal_solution
from scoring.scorer import ScoreCard, calculate_score, normalize_solution


logger = logging.getLogger(__name__)


@dataclass
class DriveAttempt:
    """
    Attributes:
        anim_path     : Drivable prefix of the route, always starting at start.
        reached_goal  : True if anim_path ends at the goal.
        issue         : First problem found, "" when the route is clean.
        crashed       : True if the car ran into traffic.
        crash_node_id : Where it crashed.
    """

    anim_path:     List[str]     = field(default_factory=list)
    reached_goal:  bool          = False
    issue:         str           = ""
    crashed:       bool          = False
    crash_node_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "animPath":    list(self.anim_path),
            "reachedGoal": self.reached_goal,
            "issue":       self.issue,
            "crashed":     self.crashed,
            "crashNodeId": self.crash_node_id,
        }


@dataclass
class ScoreReport:
    score:   ScoreCard
    attempt: DriveAttempt
    optimal: OptimalSolution

    def to_dict(self) -> dict:
        return {
            "score":   self.score.to_dict(),
            "attempt": self.attempt.to_dict(),
            "optimal": self.optimal.to_dict(),
        }


def _first_traffic_hit(anim_path: List[str], traffic: set) -> Optional[str]:
    # the car starts parked on the start node; only arrivals count
    for node_id in anim_path[1:]:
        if node_id in traffic:
            return node_id
    return None


def trace_attempt(
    graph: Graph,
    path,
    start_id: str,
    goal_id: str,
    traffic_cars: Iterable[str] = (),
) -> DriveAttempt:
    if not isinstance(path, (list, tuple)) or len(path) == 0:
        return DriveAttempt(anim_path=[start_id], issue="Invalid path: return at least one node.")

    if path[0] != start_id:
        return DriveAttempt(anim_path=[start_id], issue=f"Path must start at {start_id}.")

    anim_path = [path[0]]
    issue = ""
    for prev, nxt in zip(path, path[1:]):
        if not isinstance(nxt, str) or not graph.has_node(nxt):
            issue = f'Node "{nxt}" does not exist in this map.'
            break
        if graph.get_edge_between(prev, nxt) is None:
            issue = f"Invalid move: {prev} -> {nxt} is not a road."
            break
        anim_path.append(nxt)

    reached_goal = anim_path[-1] == goal_id
    if not issue and not reached_goal:
        issue = f"Car did not reach the finish ({goal_id})."

    traffic = {car for car in traffic_cars if isinstance(car, str)}
    crash_node = _first_traffic_hit(anim_path, traffic)
    return DriveAttempt(
        anim_path=anim_path,
        reached_goal=reached_goal,
        issue=issue,
        crashed=crash_node is not None,
        crash_node_id=crash_node,
    )


def score_attempt(
    graph: Graph,
    student_solution: Any,
    start_id: str,
    goal_id: str,
    traffic_cars: Iterable[str] = (),
) -> ScoreReport:
    """Normalise, trace, solve the reference and score one student run."""
    student = normalize_solution(student_solution)
    attempt = trace_attempt(graph, student.path, start_id, goal_id, traffic_cars)
    optimal = find_optimal_solution(graph, start_id, goal_id)
    score   = calculate_score(graph, student, optimal, start_id, goal_id)

    if attempt.crashed:
        logger.info("student run crashed into traffic at %s", attempt.crash_node_id)
        score = score.zeroed()
    elif attempt.issue:
        logger.debug("student run rejected: %s", attempt.issue)

    return ScoreReport(score=score, attempt=attempt, optimal=optimal)
