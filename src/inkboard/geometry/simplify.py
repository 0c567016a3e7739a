"""
Polyline simplification using the Ramer-Douglas-Peucker algorithm.

Reduces a dense stroke to the vertices needed to stay within a tolerance.
Used by the shape recognizer to count the corners of closed gestures.
"""

import numpy as np

from inkboard.tracer import get_tracer, trace


@trace(label="simplify")
def simplify(points, epsilon):
    """
    Simplify a point sequence with Ramer-Douglas-Peucker.

    The result is a subsequence of the input that keeps the first and last
    points. Within each range the interior point farthest from the segment
    joining the range ends is kept if it lies more than epsilon away, and
    the range is split there; otherwise the range collapses to its ends.
    Ties go to the earliest point. Points whose distance is NaN are never
    chosen as the split.

    Ranges are processed from an explicit stack, so very long strokes do
    not hit the recursion limit.

    Args:
        points: sequence of Point
        epsilon: maximum distance a dropped point may lie from the result

    Returns:
        list of Point
    """
    if len(points) < 3:
        return list(points)

    coords = np.array([[p.x, p.y] for p in points], dtype=float)
    keep = np.zeros(len(points), dtype=bool)
    keep[0] = keep[-1] = True

    stack = [(0, len(points) - 1)]
    while stack:
        first, last = stack.pop()
        if last - first < 2:
            continue

        distances = _segment_distances(coords[first + 1:last], coords[first], coords[last])
        # NaN distances never win the split
        distances = np.where(np.isnan(distances), -np.inf, distances)
        max_idx = int(np.argmax(distances))

        if distances[max_idx] > epsilon:
            split = first + 1 + max_idx
            keep[split] = True
            stack.append((split, last))
            stack.append((first, split))

    simplified = [p for p, k in zip(points, keep) if k]

    get_tracer().event(f"Simplified: {len(points)} -> {len(simplified)} points", level="DEBUG")

    return simplified


def _segment_distances(points, start, end):
    """
    Distance from each point to the closed segment start-end.

    Vectorized form of primitives.distance_to_segment.
    """
    seg = end - start
    l2 = float(np.dot(seg, seg))

    if l2 == 0:
        return np.linalg.norm(points - start, axis=1)

    t = np.clip(np.dot(points - start, seg) / l2, 0.0, 1.0)
    nearest = start + np.outer(t, seg)
    return np.linalg.norm(points - nearest, axis=1)
