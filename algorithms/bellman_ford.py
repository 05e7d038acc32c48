"""
bellman_ford.py — Bellman–Ford
===============================
Relaxes every road in both directions, round after round:

    for round in 1 .. V-1:
        for (u, v, w) in directed_edges:
            if dist[u] + w < dist[v]: relax
        if nothing changed: stop early

Costs on a city map are always positive, so there is no negative-cycle
pass.

NOTE on `visited_nodes`: Bellman–Ford has no exploration order to
report.  Its visited list is every node that ended up with a finite
distance, in graph order.  That is deliberately not the same meaning
as for the other four algorithms, and the efficiency score relies on
it staying that way.
"""

import math
from typing import List, Tuple

from graph import Graph
from algorithms.adjacency import build_adjacency, rebuild_path, usable_edges
from algorithms.result import SearchResult


def bellman_ford(graph: Graph, start_id: str, goal_id: str) -> SearchResult:
    view  = build_adjacency(graph)
    start = view.lookup(start_id)
    goal  = view.lookup(goal_id)
    if start is None or goal is None:
        return SearchResult.missing_endpoint(start_id)

    directed: List[Tuple[int, int, float]] = []
    for a, b, cost in usable_edges(graph, view.index_of):
        directed.append((a, b, cost))
        directed.append((b, a, cost))

    n      = len(view.nodes)
    dist   = [math.inf] * n
    parent = [-1] * n
    dist[start] = 0

    for _ in range(n - 1):
        changed = False
        for u, v, w in directed:
            if not math.isfinite(dist[u]):
                continue
            alt = dist[u] + w
            if alt < dist[v]:
                dist[v]   = alt
                parent[v] = u
                changed   = True
        if not changed:
            break

    visited_nodes = [view.nodes[i] for i in range(n) if math.isfinite(dist[i])]

    idx_path = rebuild_path(parent, start, goal) if math.isfinite(dist[goal]) else []
    return SearchResult.of(view.ids(idx_path) or [start_id], visited_nodes)
