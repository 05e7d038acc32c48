"""
adjacency.py — Per-call Index Adjacency
=======================================
Each algorithm builds its own index-based view of the graph once per
call, so a search never depends on (or disturbs) the Graph object's
own incremental adjacency.

    nodes     – node ids in graph order; index i ↔ nodes[i]
    index_of  – {node_id: index}
    adj       – adj[i] = [(j, cost), …] over open roads, both directions

Blocked roads and roads with an unknown endpoint are skipped silently.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from graph import Graph


@dataclass
class Adjacency:
    nodes:    List[str]
    index_of: Dict[str, int]
    adj:      List[List[Tuple[int, float]]]

    def lookup(self, node_id: str) -> Optional[int]:
        return self.index_of.get(node_id)

    def ids(self, indices: List[int]) -> List[str]:
        return [self.nodes[i] for i in indices]


def usable_edges(graph: Graph, index_of: Dict[str, int]) -> List[Tuple[int, int, float]]:
    """(from_index, to_index, cost) for every open road with known endpoints."""
    out = []
    for edge in graph.edges:
        if edge.blocked:
            continue
        a = index_of.get(edge.source)
        b = index_of.get(edge.target)
        if a is None or b is None:
            continue
        cost = 1 if edge.cost is None else edge.cost
        out.append((a, b, cost))
    return out


def build_adjacency(graph: Graph) -> Adjacency:
    nodes    = list(graph.nodes.keys())
    index_of = {nid: i for i, nid in enumerate(nodes)}
    adj: List[List[Tuple[int, float]]] = [[] for _ in nodes]

    for a, b, cost in usable_edges(graph, index_of):
        adj[a].append((b, cost))
        adj[b].append((a, cost))

    return Adjacency(nodes=nodes, index_of=index_of, adj=adj)


def rebuild_path(parent: List[int], start: int, goal: int) -> List[int]:
    """Walk parent pointers goal → start, then reverse.  [] if goal has no parent."""
    if start == goal:
        return [start]
    if parent[goal] == -1:
        return []

    path = []
    cur = goal
    while cur != -1:
        path.append(cur)
        cur = parent[cur]
    path.reverse()
    return path
