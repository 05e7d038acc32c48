"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Array-indexed Dijkstra with a LINEAR SCAN for the next node instead of
a heap: O(V² + E), which is nothing for a teaching map of a dozen
intersections and keeps tie-breaking obvious.  When two open nodes
share the minimum distance the one that comes first in graph order
wins, which keeps results deterministic.

A node is CLOSED the moment it is selected and never reopened.  The
search stops once the goal is closed.

Correctness note: Dijkstra requires non-negative costs.  Generated maps
only ever use positive ones.
"""

import math

from graph import Graph
from algorithms.adjacency import build_adjacency, rebuild_path
from algorithms.result import SearchResult


def dijkstra(graph: Graph, start_id: str, goal_id: str) -> SearchResult:
    view  = build_adjacency(graph)
    start = view.lookup(start_id)
    goal  = view.lookup(goal_id)
    if start is None or goal is None:
        return SearchResult.missing_endpoint(start_id)

    INF    = math.inf
    n      = len(view.nodes)
    dist   = [INF] * n
    parent = [-1] * n
    closed = [False] * n
    visited_nodes = []

    dist[start] = 0

    while True:
        current, best = -1, INF
        for i in range(n):
            if not closed[i] and dist[i] < best:
                best = dist[i]
                current = i

        if current == -1:
            break
        closed[current] = True
        visited_nodes.append(view.nodes[current])
        if current == goal:
            break

        for nxt, cost in view.adj[current]:
            alt = dist[current] + cost
            if alt < dist[nxt]:
                dist[nxt] = alt
                parent[nxt] = current

    idx_path = rebuild_path(parent, start, goal) if math.isfinite(dist[goal]) else []
    return SearchResult.of(view.ids(idx_path) or [start_id], visited_nodes)
