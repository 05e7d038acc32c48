"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for the five search strategies the trainer
knows about.

    from algorithms import REGISTRY, solve_by_algorithm

REGISTRY is a dict keyed by the names the browser runtime uses:
    {
        "bfs": AlgoInfo(key, label, fn, tags, …),
        …
        "bellmanFord": AlgoInfo(…),
    }

Every `fn` has the same signature, `(graph, start_id, goal_id) ->
SearchResult`, so the map generator can run all of them side by side
when it picks a distractor.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Dict, Optional

from graph import Graph
from algorithms.result       import SearchResult
from algorithms.bfs          import bfs          as _bfs
from algorithms.dfs          import dfs          as _dfs
from algorithms.dijkstra     import dijkstra     as _dijkstra
from algorithms.astar        import astar        as _astar
from algorithms.bellman_ford import bellman_ford as _bf


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # registry key, e.g. "bfs"
    label:            str                    # human label, e.g. "BFS"
    fn:               Callable[[Graph, str, str], SearchResult]
    tags:             List[str] = field(default_factory=list)   # e.g. ["unweighted", "shortest-path"]
    complexity_time:  str       = ""          # e.g. "O(V + E)"
    complexity_space: str       = ""          # e.g. "O(V)"
    description:      str       = ""          # one-liner for the UI card

    def to_dict(self) -> dict:
        return {
            "key":             self.key,
            "label":           self.label,
            "tags":            list(self.tags),
            "complexityTime":  self.complexity_time,
            "complexitySpace": self.complexity_space,
            "description":     self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bfs": AlgoInfo(
        key="bfs", label="BFS", fn=_bfs,
        tags=["unweighted", "shortest-path", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer-by-layer. Finds the route with the fewest roads.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="DFS", fn=_dfs,
        tags=["unweighted", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V²)",
        description="Dives down the newest road first. Does NOT guarantee a short route.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra", fn=_dijkstra,
        tags=["weighted", "shortest-path"],
        complexity_time="O(V² + E)", complexity_space="O(V)",
        description="Always expands the closest open intersection. Cheapest route for positive costs.",
    ),

    "astar": AlgoInfo(
        key="astar", label="A*", fn=_astar,
        tags=["weighted", "shortest-path", "heuristic"],
        complexity_time="O(V² + E)", complexity_space="O(V)",
        description="Dijkstra steered by straight-line distance to the finish.",
    ),

    "bellmanFord": AlgoInfo(
        key="bellmanFord", label="Bellman-Ford", fn=_bf,
        tags=["weighted", "shortest-path"],
        complexity_time="O(V · E)", complexity_space="O(V)",
        description="Relaxes every road V-1 times. Slower than Dijkstra, same answer.",
    ),
}

DIFFICULTIES = ("easy", "medium", "hard")

_ALIASES: Dict[str, str] = {
    "bfs":          "bfs",
    "dfs":          "dfs",
    "dijkstra":     "dijkstra",
    "dijisktra":    "dijkstra",
    "djikstra":     "dijkstra",
    "a*":           "astar",
    "astar":        "astar",
    "bellmanford":  "bellmanFord",
    "bellman-ford": "bellmanFord",
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


def normalize_algorithm(raw) -> Optional[str]:
    """Map user input ("A*", " Bellman-Ford ", "djikstra") to a registry key."""
    value = str(raw or "").strip().lower()
    if not value:
        return None
    return _ALIASES.get(value)


def normalize_difficulty(raw) -> Optional[str]:
    value = str(raw or "").strip().lower()
    return value if value in DIFFICULTIES else None


def solve_by_algorithm(name: str, graph: Graph, start_id: str, goal_id: str) -> SearchResult:
    """Run a registered algorithm by key.  Unknown keys are a programming error."""
    info = get_algorithm(name)
    if info is None:
        raise ValueError(f"Unknown algorithm: {name}")
    return info.fn(graph, start_id, goal_id)


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "DIFFICULTIES",
    "SearchResult",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
    "normalize_algorithm",
    "normalize_difficulty",
    "solve_by_algorithm",
]
