"""
templates.py — City Layout Templates
====================================
Hand-drawn street skeletons the generator starts from.  Each template
is a handful of intersections on a loose grid of LANES (shared x or y
coordinates) plus:

  • roads           – always present
  • optional_roads  – candidates the generator may add, subject to its
                      degree / diagonal / crossing / scenery rules
  • start, goal     – the goal is always a dead end (one road)
  • houses, trees   – scenery the roads must stay clear of

Canvas is 1280 × 860.  Roads live between y = 200 and y = 700; houses
and trees sit in the strips above and below, or in the middle of a
block that no optional road cuts through, at least 41px from every
lane so lane jitter can never push a road into them.
"""

from dataclasses import dataclass
from typing import Tuple

from graph import Graph


CANVAS_WIDTH  = 1280
CANVAS_HEIGHT = 860


@dataclass(frozen=True)
class LayoutTemplate:
    name:           str
    tiers:          Tuple[str, ...]
    nodes:          Tuple[Tuple[str, float, float], ...]
    roads:          Tuple[Tuple[str, str], ...]
    optional_roads: Tuple[Tuple[str, str], ...]
    start:          str
    goal:           str
    houses:         Tuple[Tuple[float, float, float, float], ...] = ()
    trees:          Tuple[Tuple[float, float], ...] = ()

    def build(self) -> Graph:
        """Fresh graph with the mandatory roads only (cost 1 until costs are assigned)."""
        g = Graph()
        for node_id, x, y in self.nodes:
            g.create_node(node_id, x, y)
        for a, b in self.roads:
            g.create_edge(a, b)
        return g


_TOP_HOUSES = ((120, 40, 300, 120), (700, 50, 260, 110))
_BOTTOM_HOUSES = ((140, 700, 320, 110), (760, 710, 260, 110))
_STRIP_TREES = ((540, 130), (1060, 140), (620, 790), (1200, 780))


MAIN_STREET = LayoutTemplate(
    name="main_street",
    tiers=("easy", "medium"),
    nodes=(
        ("A", 120, 420), ("B", 320, 420), ("C", 610, 420), ("D", 900, 420), ("E", 1140, 420),
        ("F", 1140, 250),
        ("H", 320, 250), ("I", 610, 250), ("J", 900, 250),
        ("K", 320, 600), ("L", 610, 600), ("M", 900, 600),
    ),
    roads=(
        ("A", "B"), ("B", "C"), ("C", "D"), ("D", "E"), ("E", "F"),
        ("B", "H"), ("H", "I"), ("I", "J"), ("J", "D"),
        ("B", "K"), ("K", "L"), ("L", "M"), ("M", "D"),
    ),
    optional_roads=(
        ("C", "I"), ("C", "L"), ("H", "C"), ("C", "M"), ("J", "E"), ("M", "E"),
    ),
    start="A",
    goal="F",
    houses=_TOP_HOUSES + _BOTTOM_HOUSES + ((365, 465, 200, 90),),
    trees=_STRIP_TREES + ((755, 335),),
)

RING_ROAD = LayoutTemplate(
    name="ring_road",
    tiers=("medium", "hard"),
    nodes=(
        ("A", 120, 600), ("B", 320, 600), ("C", 320, 420), ("D", 320, 250),
        ("E", 610, 250), ("F", 900, 250), ("G", 900, 420), ("H", 900, 600),
        ("I", 610, 600), ("J", 610, 420), ("K", 1140, 420),
    ),
    roads=(
        ("A", "B"), ("B", "C"), ("C", "D"), ("D", "E"), ("E", "F"), ("F", "G"),
        ("G", "H"), ("H", "I"), ("I", "B"), ("C", "J"), ("J", "G"), ("G", "K"),
    ),
    optional_roads=(
        ("E", "J"), ("J", "I"), ("D", "J"), ("B", "J"), ("J", "H"),
    ),
    start="A",
    goal="K",
    houses=_TOP_HOUSES + _BOTTOM_HOUSES + ((655, 295, 200, 80),),
    trees=_STRIP_TREES + ((1040, 300),),
)

TWIN_AVENUES = LayoutTemplate(
    name="twin_avenues",
    tiers=("medium", "hard"),
    nodes=(
        ("A", 120, 250), ("B", 320, 250), ("C", 610, 250), ("D", 900, 250), ("E", 1140, 250),
        ("F", 1140, 420), ("G", 1140, 600),
        ("H", 320, 420), ("I", 610, 420), ("J", 900, 420),
        ("K", 320, 600), ("L", 610, 600), ("M", 900, 600),
    ),
    roads=(
        ("A", "B"), ("B", "C"), ("C", "D"), ("D", "E"), ("E", "F"), ("F", "G"),
        ("B", "H"), ("H", "I"), ("I", "J"), ("J", "F"),
        ("H", "K"), ("K", "L"), ("L", "M"), ("M", "J"),
    ),
    optional_roads=(
        ("C", "I"), ("D", "J"), ("I", "L"), ("C", "J"), ("I", "M"), ("D", "I"),
    ),
    start="A",
    goal="G",
    houses=_TOP_HOUSES + _BOTTOM_HOUSES + ((365, 465, 200, 90),),
    trees=_STRIP_TREES + ((1020, 520),),
)

CUL_DE_SAC = LayoutTemplate(
    name="cul_de_sac",
    tiers=("easy",),
    nodes=(
        ("A", 120, 420), ("B", 320, 420), ("C", 610, 420), ("D", 900, 420), ("H", 1140, 420),
        ("G", 320, 250), ("F", 610, 250), ("E", 900, 250),
        ("K", 320, 600), ("L", 610, 600),
    ),
    roads=(
        ("A", "B"), ("B", "C"), ("C", "D"), ("D", "H"),
        ("B", "G"), ("G", "F"), ("F", "E"), ("E", "D"),
        ("B", "K"), ("K", "L"), ("L", "C"),
    ),
    optional_roads=(
        ("F", "C"), ("G", "C"), ("E", "C"), ("L", "D"),
    ),
    start="A",
    goal="H",
    houses=_TOP_HOUSES + _BOTTOM_HOUSES + ((365, 465, 200, 90), (960, 480, 160, 110)),
    trees=_STRIP_TREES,
)


TEMPLATES: Tuple[LayoutTemplate, ...] = (MAIN_STREET, RING_ROAD, TWIN_AVENUES, CUL_DE_SAC)


def templates_for(difficulty: str) -> Tuple[LayoutTemplate, ...]:
    matching = tuple(t for t in TEMPLATES if difficulty in t.tiers)
    return matching or (MAIN_STREET,)
