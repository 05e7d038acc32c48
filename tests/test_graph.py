# tests/test_graph.py
from graph import Edge, Graph, Node


def test_neighbours_skip_blocked_and_unknown_endpoints():
    g = Graph()
    g.create_node("A", 0, 0)
    g.create_node("B", 10, 0)
    g.create_node("C", 0, 10)
    g.create_edge("A", "B")
    g.create_edge("A", "C", blocked=True)
    g.create_edge("A", "ghost")

    assert [nbr for nbr, _ in g.neighbours("A")] == ["B"]
    assert g.degree("A") == 1
    assert g.get_edge_between("A", "C") is None
    assert g.get_edge_between("B", "A") is not None
    assert len(g.open_edges()) == 1


def test_edge_wire_form_uses_from_and_to():
    e = Edge("A", "B", cost=4)
    assert e.to_dict() == {"from": "A", "to": "B", "cost": 4, "blocked": False}

    back = Edge.from_dict({"from": "B", "to": "A"})
    assert back.cost == 1
    assert back.blocked is False
    assert back.key() == e.key()


def test_graph_round_trip_keeps_node_order():
    g = Graph()
    for nid in ("Z", "A", "M"):
        g.create_node(nid, 1.0, 2.0)
    g.create_edge("Z", "M", cost=2)

    copy = Graph.from_dict(g.to_dict())
    assert copy.node_ids() == ["Z", "A", "M"]
    assert copy.edges[0].cost == 2
    assert copy.nodes["A"] == Node("A")


def test_copy_is_independent():
    g = Graph()
    g.create_node("A", 0, 0)
    dup = g.copy()
    dup.nodes["A"].x = 50
    assert g.nodes["A"].x == 0
