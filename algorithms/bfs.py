"""
bfs.py — Breadth-First Search
==============================
FIFO frontier over the per-call adjacency list.  Nodes are recorded as
visited when they are DEQUEUED, and the search stops as soon as the
goal is dequeued (not when it is first enqueued).

Finds the path with the fewest roads; costs are ignored.
"""

from collections import deque

from graph import Graph
from algorithms.adjacency import build_adjacency, rebuild_path
from algorithms.result import SearchResult


def bfs(graph: Graph, start_id: str, goal_id: str) -> SearchResult:
    """
    Args:
        graph    : The road map.
        start_id : Starting node id.
        goal_id  : Goal node id.

    Returns:
        SearchResult – hop-count shortest path, or [start_id] if unreachable.
    """
    view  = build_adjacency(graph)
    start = view.lookup(start_id)
    goal  = view.lookup(goal_id)
    if start is None or goal is None:
        return SearchResult.missing_endpoint(start_id)

    seen   = [False] * len(view.nodes)
    parent = [-1] * len(view.nodes)
    queue  = deque([start])
    visited_nodes = []
    seen[start] = True

    while queue:
        current = queue.popleft()
        visited_nodes.append(view.nodes[current])
        if current == goal:
            break

        for nxt, _cost in view.adj[current]:
            if not seen[nxt]:
                seen[nxt] = True
                parent[nxt] = current
                queue.append(nxt)

    idx_path = rebuild_path(parent, start, goal) if seen[goal] else []
    return SearchResult.of(view.ids(idx_path) or [start_id], visited_nodes)
