# tests/conftest.py
import random

import pytest

from graph import Graph


def line_graph(with_shortcut: bool) -> Graph:
    """A(0,0) - B(1,0) - C(2,0), optionally with a direct A-C road."""
    g = Graph()
    g.create_node("A", 0, 0)
    g.create_node("B", 1, 0)
    g.create_node("C", 2, 0)
    g.create_edge("A", "B", cost=1)
    g.create_edge("B", "C", cost=5)
    if with_shortcut:
        g.create_edge("A", "C", cost=3)
    return g


@pytest.fixture
def triangle():
    return line_graph(with_shortcut=True)


@pytest.fixture
def chain():
    return line_graph(with_shortcut=False)


@pytest.fixture
def detour():
    """
    A - B is direct, but the later road A - C leads round to B via D,
    so DFS takes the long way.
    """
    g = Graph()
    for nid, x, y in (("A", 0, 0), ("B", 1, 0), ("C", 0, 1), ("D", 1, 1)):
        g.create_node(nid, x, y)
    g.create_edge("A", "B")
    g.create_edge("A", "C")
    g.create_edge("C", "D")
    g.create_edge("D", "B")
    return g


@pytest.fixture
def rng():
    return random.Random(1234)
