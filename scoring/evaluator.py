"""
evaluator.py — Path Evaluator
=============================
Judges a candidate route on a road map:

    check_correctness     – does the route drive from start to goal on open roads?
    compute_path_cost     – what does it cost?
    find_optimal_solution – the reference answer every score is measured against

find_optimal_solution is a separate, dict-keyed Dijkstra.  It shares no
code with the `algorithms` package on purpose: the baseline must stay
right even if the algorithm under test is wrong.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from graph import Graph, Edge


# ---------------------------------------------------------------------------
# Reference answer
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class OptimalSolution:
    path:          List[str] = field(default_factory=list)
    visited_nodes: List[str] = field(default_factory=list)
    cost:          float     = math.inf
    steps_count:   int       = 0

    @property
    def reachable(self) -> bool:
        return math.isfinite(self.cost)

    def to_dict(self) -> dict:
        return {
            "path":         list(self.path),
            "visitedNodes": list(self.visited_nodes),
            "cost":         self.cost if self.reachable else None,
            "stepsCount":   self.steps_count,
        }


# ---------------------------------------------------------------------------
# Road lookups
# ---------------------------------------------------------------------------
def _find_road(graph: Graph, a: str, b: str) -> Optional[Edge]:
    """First open road a ↔ b in edge-list order."""
    for edge in graph.edges:
        if not edge.blocked and edge.connects(a, b):
            return edge
    return None


def check_correctness(graph: Graph, path, start_id: str, goal_id: str) -> bool:
    if not isinstance(path, (list, tuple)) or len(path) < 2:
        return False
    if path[0] != start_id or path[-1] != goal_id:
        return False
    for prev, nxt in zip(path, path[1:]):
        if _find_road(graph, prev, nxt) is None:
            return False
    return True


def compute_path_cost(graph: Graph, path) -> float:
    """Sum of road costs along the path; inf if a hop has no road or the path is too short."""
    if not isinstance(path, (list, tuple)) or len(path) < 2:
        return math.inf

    cost = 0
    for prev, nxt in zip(path, path[1:]):
        edge = _find_road(graph, prev, nxt)
        if edge is None:
            return math.inf
        cost += 1 if edge.cost is None else edge.cost
    return cost


# ---------------------------------------------------------------------------
# Independent Dijkstra
# ---------------------------------------------------------------------------
def _road_map(graph: Graph) -> Dict[str, List[tuple]]:
    roads: Dict[str, List[tuple]] = {nid: [] for nid in graph.nodes}
    for edge in graph.edges:
        if edge.blocked:
            continue
        cost = 1 if edge.cost is None else edge.cost
        if edge.source in roads:
            roads[edge.source].append((edge.target, cost))
        if edge.target in roads:
            roads[edge.target].append((edge.source, cost))
    return roads


def find_optimal_solution(graph: Graph, start_id: str, goal_id: str) -> OptimalSolution:
    roads     = _road_map(graph)
    dist:  Dict[str, float] = {nid: math.inf for nid in graph.nodes}
    prev:  Dict[str, str]   = {}
    unvisited = dict.fromkeys(graph.nodes)
    visited: List[str] = []

    dist[start_id] = 0

    while unvisited:
        current, current_dist = None, math.inf
        for nid in unvisited:
            d = dist.get(nid, math.inf)
            if d < current_dist:
                current, current_dist = nid, d

        if current is None:
            break

        del unvisited[current]
        visited.append(current)
        if current == goal_id:
            break

        for nxt, cost in roads.get(current, []):
            if nxt not in unvisited:
                continue
            alt = current_dist + cost
            if alt < dist.get(nxt, math.inf):
                dist[nxt] = alt
                prev[nxt] = current

    goal_cost = dist.get(goal_id, math.inf)
    path: List[str] = []
    if math.isfinite(goal_cost):
        cursor: Optional[str] = goal_id
        while cursor is not None:
            path.append(cursor)
            cursor = prev.get(cursor)
        path.reverse()

    return OptimalSolution(
        path=path,
        visited_nodes=visited,
        cost=goal_cost,
        steps_count=len(visited),
    )
