"""
Online shape recognition for freehand strokes.

Decides whether a finished or paused gesture was meant as a straight line,
triangle, rectangle, ellipse or polygon, and builds the clean replacement.
Recognition is a pure function of the full point sequence: callers may run
it any number of times while a stroke grows and always get the answer for
the points they pass.
"""

import math

import numpy as np

from inkboard.config import RecognitionConfig
from inkboard.geometry.primitives import bounding_box, distance, path_length
from inkboard.geometry.simplify import simplify
from inkboard.models import Point
from inkboard.tracer import get_tracer, trace


@trace(label="recognize_shape")
def recognize_shape(points, config=None):
    """
    Recognize the shape a freehand point sequence approximates.

    Open strokes that are nearly as short as their chord become a two-point
    line. Closed strokes are simplified with a tolerance proportional to
    their size and classified by vertex count: three vertices stay a
    triangle, four snap to the bounding rectangle, five or more become an
    ellipse when the vertices sit at a near-constant distance from the box
    center and stay a polygon otherwise.

    Args:
        points: sequence of Point in drawing order
        config: RecognitionConfig, defaults used when None

    Returns:
        list of Point for the corrected shape, or None to keep the stroke
    """
    config = config or RecognitionConfig()
    tracer = get_tracer()

    if len(points) < config.min_points:
        return None

    start = points[0]
    end = points[-1]
    total_length = path_length(points)
    direct_distance = distance(start, end)

    # Closed test runs first; a short loop is never treated as a line
    is_closed = direct_distance < total_length * config.closed_ratio

    if not is_closed:
        if total_length < direct_distance * config.line_straightness:
            tracer.event("Recognized line", length=total_length)
            return [start, end]
        return None

    min_x, min_y, max_x, max_y = bounding_box(points)
    width = max_x - min_x
    height = max_y - min_y
    diagonal = math.sqrt(width * width + height * height)

    simplified = simplify(points, diagonal * config.epsilon_factor)

    # A closed gesture simplifies to a loop whose last point repeats the first
    n = len(simplified) - 1

    if n == 3:
        tracer.event("Recognized triangle")
        return simplified[:3]

    if n == 4:
        tracer.event("Recognized rectangle")
        return [
            Point(x=min_x, y=min_y),
            Point(x=max_x, y=min_y),
            Point(x=max_x, y=max_y),
            Point(x=min_x, y=max_y),
        ]

    if n >= 5:
        center = Point(x=min_x + width / 2, y=min_y + height / 2)
        cv = _radial_variation(simplified[:n], center)
        if cv is None:
            return None

        if cv < config.circularity_cv:
            tracer.event("Recognized ellipse", vertices=n, cv=cv)
            return ellipse_points(center, width / 2, height / 2, config.ellipse_segments)

        tracer.event("Recognized polygon", vertices=n, cv=cv)
        return simplified[:n]

    return None


def correct_points(points, config=None):
    """
    Apply shape recognition to a point sequence.

    Returns:
        tuple of (points, is_shape): the replacement and True when a shape
        was recognized, else the input points unchanged and False
    """
    corrected = recognize_shape(points, config)
    if corrected is None:
        return list(points), False
    return corrected, True


def ellipse_points(center, rx, ry, segments=45):
    """
    Axis-aligned ellipse as a closed polyline.

    Returns segments + 1 points; the last repeats the first.
    """
    points = []
    for i in range(segments + 1):
        angle = (i / segments) * math.pi * 2
        points.append(Point(x=center.x + rx * math.cos(angle), y=center.y + ry * math.sin(angle)))
    return points


def _radial_variation(vertices, center):
    """
    Coefficient of variation of vertex distances from center.

    Uses the population standard deviation. Returns None when every vertex
    sits on the center.
    """
    dists = np.array([distance(p, center) for p in vertices])
    mean = float(dists.mean())
    if mean == 0:
        return None
    return float(dists.std()) / mean
