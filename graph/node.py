"""
node.py — Road Intersection
===========================
A node is an intersection (or dead end) on the city map.

Design decisions:
  - Identity is the `id` string only.  Two nodes with the same id are
    equal no matter where they sit on the canvas.
  - `x` / `y` are canvas pixels.  They feed the A* heuristic and the
    map generator's geometry checks, nothing else.
"""


class Node:
    """
    Attributes:
        id   : Unique identifier within a graph (e.g. "A").
        x, y : Canvas coordinates in pixels.
    """

    __slots__ = ("id", "x", "y")

    def __init__(self, node_id: str, x: float = 0.0, y: float = 0.0):
        self.id: str  = node_id
        self.x: float = x
        self.y: float = y

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"id": self.id, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        return cls(node_id=str(data["id"]), x=data.get("x", 0.0), y=data.get("y", 0.0))

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, pos=({self.x:.1f},{self.y:.1f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
