"""
result.py — Search Result
=========================
Every algorithm returns one of these.  It is the uniform shape the
evaluator, the scorer, the map generator and the renderer all consume:

    • path          – start→goal node ids, or the fallback [start]
    • visited_nodes – exploration order (Bellman–Ford: reached set)
    • steps_count   – always len(visited_nodes)

Design decisions:
  - Frozen dataclass.  It is a SNAPSHOT; nothing downstream mutates it.
  - `to_dict` speaks the camelCase wire names the browser runtime and
    user-written solvers use ("visitedNodes", "stepsCount").
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class SearchResult:
    """
    Attributes:
        path          : Ordered node ids from start to goal (or [start]).
        visited_nodes : Node ids in the order the algorithm settled them.
        steps_count   : Number of visited nodes.
    """

    path:          List[str] = field(default_factory=list)
    visited_nodes: List[str] = field(default_factory=list)
    steps_count:   int       = 0

    @classmethod
    def of(cls, path: List[str], visited_nodes: List[str]) -> "SearchResult":
        return cls(path=list(path), visited_nodes=list(visited_nodes), steps_count=len(visited_nodes))

    @classmethod
    def missing_endpoint(cls, start_id: str) -> "SearchResult":
        """Start or goal is not on the map, so nothing was explored."""
        return cls(path=[start_id], visited_nodes=[], steps_count=0)

    @property
    def edge_count(self) -> int:
        return max(len(self.path) - 1, 0)

    def to_dict(self) -> dict:
        return {
            "path":         list(self.path),
            "visitedNodes": list(self.visited_nodes),
            "stepsCount":   self.steps_count,
        }
