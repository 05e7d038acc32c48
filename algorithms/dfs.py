"""
dfs.py — Depth-First Search
============================
Explicit stack holding whole partial paths rather than bare node ids,
so the answer is simply the partial path that first reaches the goal;
no parent array is needed.

Neighbours are pushed in adjacency order, which means the LAST road
added to a node is popped first: the search dives down later-added
branches before earlier ones.  The returned path is the one DFS
actually drove, not necessarily a short one.
"""

from typing import List

from graph import Graph
from algorithms.adjacency import build_adjacency
from algorithms.result import SearchResult


def dfs(graph: Graph, start_id: str, goal_id: str) -> SearchResult:
    view  = build_adjacency(graph)
    start = view.lookup(start_id)
    goal  = view.lookup(goal_id)
    if start is None or goal is None:
        return SearchResult.missing_endpoint(start_id)

    stack: List[List[int]] = [[start]]
    seen: set = set()
    visited_nodes = []

    while stack:
        path = stack.pop()
        node = path[-1]
        if node in seen:
            continue

        seen.add(node)
        visited_nodes.append(view.nodes[node])

        if node == goal:
            return SearchResult.of(view.ids(path), visited_nodes)

        for nxt, _cost in view.adj[node]:
            if nxt not in seen:
                stack.append(path + [nxt])

    return SearchResult.of([start_id], visited_nodes)
