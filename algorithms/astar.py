"""
astar.py — A* Search
=====================
Dijkstra plus a straight-line heuristic:

    h(n) = euclidean(n, goal) / HEURISTIC_SCALE

HEURISTIC_SCALE converts canvas pixels into "cost units".  The value
120 is part of the contract with the browser runtime: A* is only
admissible while every road costs at least its pixel length / 120, and
generated maps do not promise that.  Keep the constant; changing it
changes which paths A* returns.

The open set is an insertion-ordered dict used as an ordered set, and
the next node is found by a linear scan for the smallest f-score (first
inserted wins ties).  There is no closed set: a node whose g-score
improves is put back into the open set and may be expanded again.
"""

import math
from typing import Dict

from graph import Graph
from algorithms.adjacency import build_adjacency, rebuild_path
from algorithms.result import SearchResult


HEURISTIC_SCALE = 120


def straight_line(ax: float, ay: float, bx: float, by: float) -> float:
    return math.hypot(ax - bx, ay - by) / HEURISTIC_SCALE


def astar(graph: Graph, start_id: str, goal_id: str) -> SearchResult:
    """
    Args:
        graph    : The road map.  Node coordinates drive the heuristic.
        start_id : Start node id.
        goal_id  : Goal node id.
    """
    view  = build_adjacency(graph)
    start = view.lookup(start_id)
    goal  = view.lookup(goal_id)
    if start is None or goal is None:
        return SearchResult.missing_endpoint(start_id)

    coords = [(n.x, n.y) for n in graph.nodes.values()]
    gx, gy = coords[goal]

    def h(i: int) -> float:
        return straight_line(coords[i][0], coords[i][1], gx, gy)

    INF     = math.inf
    n       = len(view.nodes)
    g_score = [INF] * n
    f_score = [INF] * n
    parent  = [-1] * n
    open_set: Dict[int, None] = {start: None}
    visited_nodes = []

    g_score[start] = 0
    f_score[start] = h(start)

    while open_set:
        current, best = -1, INF
        for idx in open_set:
            if f_score[idx] < best:
                best = f_score[idx]
                current = idx

        if current == -1:
            break
        del open_set[current]
        visited_nodes.append(view.nodes[current])
        if current == goal:
            break

        for nxt, cost in view.adj[current]:
            tentative = g_score[current] + cost
            if tentative < g_score[nxt]:
                parent[nxt]  = current
                g_score[nxt] = tentative
                f_score[nxt] = tentative + h(nxt)
                open_set[nxt] = None

    idx_path = rebuild_path(parent, start, goal) if math.isfinite(g_score[goal]) else []
    return SearchResult.of(view.ids(idx_path) or [start_id], visited_nodes)
