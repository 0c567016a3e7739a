"""
Geometry primitives shared by the simplifier, hit tester and recognizer.

All functions take Points in world coordinates and never raise on degenerate
input. NaN and infinite coordinates propagate through the arithmetic.
"""

import math


def distance(p1, p2):
    """Euclidean distance between two points."""
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return math.sqrt(dx * dx + dy * dy)


def distance_to_segment(p, v, w):
    """
    Shortest distance from p to the closed segment [v, w].

    The projection of p onto the line through v and w is clamped to the
    segment, so points beyond either end measure to that endpoint. A
    zero-length segment measures to v.
    """
    l2 = (w.x - v.x) ** 2 + (w.y - v.y) ** 2
    if l2 == 0:
        return distance(p, v)

    t = ((p.x - v.x) * (w.x - v.x) + (p.y - v.y) * (w.y - v.y)) / l2
    t = max(0.0, min(1.0, t))

    px = v.x + t * (w.x - v.x)
    py = v.y + t * (w.y - v.y)
    return math.sqrt((p.x - px) ** 2 + (p.y - py) ** 2)


def path_length(points):
    """Sum of distances between consecutive points."""
    return sum(distance(points[i - 1], points[i]) for i in range(1, len(points)))


def bounding_box(points):
    """
    Axis-aligned bounding box of a point sequence.

    Returns (min_x, min_y, max_x, max_y); all zeros for an empty sequence.
    """
    if not points:
        return (0.0, 0.0, 0.0, 0.0)

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return (min(xs), min(ys), max(xs), max(ys))
