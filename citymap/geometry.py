"""
geometry.py — Road Geometry Predicates
======================================
Small planar helpers the map generator uses to keep a city readable:

  • segments_cross          – do two roads cross (orientation test)?
  • segment_hits_rect       – does a road run through a house lot?
  • point_segment_distance  – how close does a road pass to a tree?
  • is_diagonal             – is a road neither horizontal nor vertical?

Points are plain (x, y) tuples; rectangles are (x, y, w, h).
"""

import math
from typing import Tuple

Point = Tuple[float, float]
Rect  = Tuple[float, float, float, float]

EPS = 1e-6


def orient(a: Point, b: Point, c: Point) -> int:
    """Sign of the turn a → b → c: 1 counter-clockwise, -1 clockwise, 0 collinear."""
    val = (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])
    if abs(val) < EPS:
        return 0
    return 1 if val > 0 else -1


def on_segment(a: Point, p: Point, b: Point) -> bool:
    """p lies inside the bounding box of a–b (call only when collinear)."""
    return (
        min(a[0], b[0]) - EPS <= p[0] <= max(a[0], b[0]) + EPS
        and min(a[1], b[1]) - EPS <= p[1] <= max(a[1], b[1]) + EPS
    )


def segments_cross(p1: Point, p2: Point, q1: Point, q2: Point) -> bool:
    o1 = orient(p1, p2, q1)
    o2 = orient(p1, p2, q2)
    o3 = orient(q1, q2, p1)
    o4 = orient(q1, q2, p2)

    if o1 != o2 and o3 != o4:
        return True

    if o1 == 0 and on_segment(p1, q1, p2):
        return True
    if o2 == 0 and on_segment(p1, q2, p2):
        return True
    if o3 == 0 and on_segment(q1, p1, q2):
        return True
    if o4 == 0 and on_segment(q1, p2, q2):
        return True
    return False


def expand_rect(rect: Rect, margin: float) -> Rect:
    x, y, w, h = rect
    return (x - margin, y - margin, w + 2 * margin, h + 2 * margin)


def point_in_rect(p: Point, rect: Rect) -> bool:
    x, y, w, h = rect
    return x <= p[0] <= x + w and y <= p[1] <= y + h


def segment_hits_rect(a: Point, b: Point, rect: Rect) -> bool:
    x, y, w, h = rect
    if max(a[0], b[0]) < x or min(a[0], b[0]) > x + w:
        return False
    if max(a[1], b[1]) < y or min(a[1], b[1]) > y + h:
        return False
    if point_in_rect(a, rect) or point_in_rect(b, rect):
        return True

    corners = [(x, y), (x + w, y), (x + w, y + h), (x, y + h)]
    for i in range(4):
        if segments_cross(a, b, corners[i], corners[(i + 1) % 4]):
            return True
    return False


def point_segment_distance(p: Point, a: Point, b: Point) -> float:
    dx, dy = b[0] - a[0], b[1] - a[1]
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return math.hypot(p[0] - a[0], p[1] - a[1])
    t = ((p[0] - a[0]) * dx + (p[1] - a[1]) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return math.hypot(p[0] - (a[0] + t * dx), p[1] - (a[1] + t * dy))


def is_diagonal(a: Point, b: Point) -> bool:
    return abs(a[0] - b[0]) > EPS and abs(a[1] - b[1]) > EPS
