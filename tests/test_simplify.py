"""Tests for polyline simplification."""

import numpy as np
import pytest

from inkboard.geometry.primitives import distance_to_segment
from inkboard.geometry.simplify import simplify
from inkboard.models import Point


def P(x, y):
    return Point(x=x, y=y)


def recursive_reference(points, epsilon):
    """Plain recursive Ramer-Douglas-Peucker for comparison."""
    if len(points) < 3:
        return list(points)

    dmax = 0
    index = 0
    end = len(points) - 1
    for i in range(1, end):
        d = distance_to_segment(points[i], points[0], points[end])
        if d > dmax:
            index = i
            dmax = d

    if dmax > epsilon:
        left = recursive_reference(points[:index + 1], epsilon)
        right = recursive_reference(points[index:], epsilon)
        return left[:-1] + right
    return [points[0], points[end]]


class TestSimplify:
    """Tests for Ramer-Douglas-Peucker simplification."""

    def test_short_inputs_unchanged(self):
        assert simplify([], 1.0) == []
        assert simplify([P(1, 2)], 1.0) == [P(1, 2)]
        assert simplify([P(0, 0), P(5, 5)], 1.0) == [P(0, 0), P(5, 5)]

    def test_collinear_collapses_to_endpoints(self):
        points = [P(i, 0) for i in range(100)]

        simplified = simplify(points, epsilon=1.0)

        assert simplified == [P(0, 0), P(99, 0)]

    def test_preserves_endpoints(self):
        points = [P(5.5, 10.2), P(10, 15), P(15, 10), P(20.3, 5.7)]

        simplified = simplify(points, epsilon=1.0)

        assert simplified[0] == points[0]
        assert simplified[-1] == points[-1]

    def test_preserves_corner(self):
        points = [P(0, y) for y in range(0, 60, 10)] + [P(x, 50) for x in range(10, 60, 10)]

        simplified = simplify(points, epsilon=1.0)

        assert simplified == [P(0, 0), P(0, 50), P(50, 50)]

    def test_epsilon_above_max_deviation_collapses(self):
        """With epsilon at or above every deviation only the endpoints remain."""
        points = [P(0, 0), P(10, 3), P(20, -2), P(30, 4), P(40, 0)]
        max_dev = max(distance_to_segment(p, points[0], points[-1]) for p in points)

        assert simplify(points, epsilon=max_dev) == [points[0], points[-1]]

    def test_result_is_subsequence(self):
        rng = np.random.RandomState(7)
        points = [P(float(x), float(y)) for x, y in rng.uniform(0, 100, size=(50, 2))]

        simplified = simplify(points, epsilon=5.0)

        it = iter(points)
        assert all(any(p == q for q in it) for p in simplified)

    @pytest.mark.parametrize("epsilon", [0.5, 3.0, 12.0])
    def test_matches_recursive_reference(self, epsilon):
        rng = np.random.RandomState(0)
        walk = np.cumsum(rng.normal(0, 4, size=(120, 2)), axis=0)
        points = [P(float(x), float(y)) for x, y in walk]

        assert simplify(points, epsilon) == recursive_reference(points, epsilon)

    def test_closed_loop_keeps_duplicate_end(self):
        """A loop ending on its start keeps both copies of that point."""
        points = [P(0, 0), P(50, 0), P(100, 0), P(100, 50), P(100, 100), P(50, 50), P(0, 0)]

        simplified = simplify(points, epsilon=1.0)

        assert simplified == [P(0, 0), P(100, 0), P(100, 100), P(0, 0)]

    def test_long_stroke_without_recursion_limit(self):
        """Strokes longer than the interpreter recursion limit still simplify."""
        points = [P(float(i), float(i % 2)) for i in range(5000)]

        simplified = simplify(points, epsilon=0.1)

        assert len(simplified) == 5000
        assert simplified[0] == points[0]
        assert simplified[-1] == points[-1]

    def test_nan_point_does_not_hide_real_vertex(self):
        """A NaN coordinate is skipped; the real outlier still splits the range."""
        points = [P(0, 0), P(float("nan"), 1), P(50, 40), P(100, 0)]

        simplified = simplify(points, epsilon=1.0)

        assert simplified == [P(0, 0), P(50, 40), P(100, 0)]

    @pytest.mark.parametrize("epsilon", [0.5, 3.0, 12.0])
    def test_nan_point_matches_recursive_reference(self, epsilon):
        rng = np.random.RandomState(3)
        walk = np.cumsum(rng.normal(0, 4, size=(60, 2)), axis=0)
        points = [P(float(x), float(y)) for x, y in walk]
        points[17] = P(float("nan"), points[17].y)

        simplified = simplify(points, epsilon)

        assert simplified == recursive_reference(points, epsilon)
        assert all(p.x == p.x for p in simplified)
