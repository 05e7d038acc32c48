"""
edge.py — Road Segment
======================
Connects two intersections.  Roads are two-way: every traversal treats
an edge as usable in both directions, even though it is stored once
with a `source` and a `target`.

Design decisions:
  - `source` and `target` are node-id strings, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - Cost defaults to 1 so hand-written fixtures can leave it out.
  - `blocked` roads stay in the edge list (the renderer draws them) but
    every algorithm and geometry check ignores them.
  - The wire form uses the keys "from" / "to", which is what the
    browser runtime and user-supplied solvers expect.
"""

from typing import Optional


class Edge:
    """
    Attributes:
        source  : ID of one endpoint (wire key "from").
        target  : ID of the other endpoint (wire key "to").
        cost    : Positive travel cost (default 1).
        blocked : Closed road, excluded from traversal.
    """

    __slots__ = ("source", "target", "cost", "blocked")

    def __init__(
        self,
        source: str,
        target: str,
        cost: float = 1,
        blocked: bool = False,
    ):
        self.source:  str   = source
        self.target:  str   = target
        self.cost:    float = cost
        self.blocked: bool  = blocked

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def connects(self, node_a: str, node_b: str) -> bool:
        """True if this edge links node_a ↔ node_b in either direction."""
        return (
            (self.source == node_a and self.target == node_b)
            or (self.source == node_b and self.target == node_a)
        )

    def touches(self, node_id: str) -> bool:
        return self.source == node_id or self.target == node_id

    def other_end(self, node_id: str) -> Optional[str]:
        """Given one endpoint, return the other. None if node_id isn't an endpoint."""
        if node_id == self.source:
            return self.target
        if node_id == self.target:
            return self.source
        return None

    def key(self) -> frozenset:
        """Direction-free identity, used to mark backbone roads."""
        return frozenset((self.source, self.target))

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "from":    self.source,
            "to":      self.target,
            "cost":    self.cost,
            "blocked": self.blocked,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        cost = data.get("cost")
        return cls(
            source=str(data["from"]),
            target=str(data["to"]),
            cost=1 if cost is None else cost,
            blocked=bool(data.get("blocked", False)),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        flag = ", blocked" if self.blocked else ""
        return f"Edge({self.source} ↔ {self.target}, cost={self.cost}{flag})"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Edge)
            and self.key() == other.key()
            and self.cost == other.cost
            and self.blocked == other.blocked
        )

    def __hash__(self) -> int:
        return hash((self.key(), self.cost, self.blocked))
