"""
graph.py — Road Graph Container
===============================
Single source of truth for a city map's topology.  The map generator
builds it; the search algorithms, the evaluator and the renderer only
read it.

Responsibilities:
  1. Building nodes & edges                 (add / create)
  2. Adjacency queries                      (neighbours, degree, edge lookup)
  3. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Nodes are stored in an insertion-ordered dict keyed by id.  The
    order matters: search algorithms index nodes in this order and
    break ties on it.
  - Edges are a plain list, again in insertion order, because the
    evaluator uses "first matching road" semantics.
  - A separate adjacency dict  `_adj[node_id] → [Edge, …]` is maintained
    incrementally so neighbour queries are O(degree), not O(E).
  - Edges whose endpoints are unknown are kept (malformed input is
    tolerated) but never reported as neighbours.
"""

from typing import Dict, List, Tuple, Optional

from graph.node import Node
from graph.edge import Edge


class Graph:
    """
    Attributes:
        nodes : {node_id: Node}   (insertion ordered)
        edges : [Edge, …]         (insertion ordered)
        _adj  : {node_id: [Edge, …]}
    """

    def __init__(self):
        self.nodes: Dict[str, Node]       = {}
        self.edges: List[Edge]            = []
        self._adj:  Dict[str, List[Edge]] = {}

    # ==================================================================
    # NODES
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        self.nodes[node.id] = node
        self._adj.setdefault(node.id, [])
        return node

    def create_node(self, node_id: str, x: float, y: float) -> Node:
        """Convenience: create + add in one call."""
        return self.add_node(Node(node_id=node_id, x=x, y=y))

    def has_node(self, node_id: str) -> bool:
        return node_id in self.nodes

    # ==================================================================
    # EDGES
    # ==================================================================
    def add_edge(self, edge: Edge) -> Edge:
        self.edges.append(edge)
        self._adj.setdefault(edge.source, []).append(edge)
        if edge.target != edge.source:
            self._adj.setdefault(edge.target, []).append(edge)
        return edge

    def create_edge(self, source: str, target: str, cost: float = 1, blocked: bool = False) -> Edge:
        return self.add_edge(Edge(source=source, target=target, cost=cost, blocked=blocked))

    def get_edge_between(self, a: str, b: str) -> Optional[Edge]:
        """First open road connecting a and b (either direction)."""
        for e in self._adj.get(a, []):
            if not e.blocked and e.connects(a, b):
                return e
        return None

    def open_edges(self) -> List[Edge]:
        """Edges that are not blocked and join two known nodes."""
        return [
            e for e in self.edges
            if not e.blocked and e.source in self.nodes and e.target in self.nodes
        ]

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: str) -> List[Tuple[str, Edge]]:
        """Return [(neighbour_id, edge)] over open roads, in insertion order."""
        result = []
        for e in self._adj.get(node_id, []):
            if e.blocked:
                continue
            nbr = e.other_end(node_id)
            if nbr is not None and nbr in self.nodes:
                result.append((nbr, e))
        return result

    def degree(self, node_id: str) -> int:
        return len(self.neighbours(node_id))

    # ==================================================================
    # COPY / SERIALISATION
    # ==================================================================
    def copy(self) -> "Graph":
        """Deep-enough copy: fresh Node / Edge objects, same ids."""
        return Graph.from_dict(self.to_dict())

    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes.values()],
            "edges": [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        g = cls()
        for nd in data.get("nodes", []):
            g.add_node(Node.from_dict(nd))
        for ed in data.get("edges", []):
            g.add_edge(Edge.from_dict(ed))
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
