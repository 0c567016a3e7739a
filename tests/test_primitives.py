"""Tests for geometry primitives."""

import math

import pytest

from inkboard.geometry.primitives import bounding_box, distance, distance_to_segment, path_length
from inkboard.models import Point


def P(x, y):
    return Point(x=x, y=y)


class TestDistance:
    """Tests for point and segment distances."""

    def test_pythagorean_triple(self):
        assert distance(P(0, 0), P(3, 4)) == 5.0

    def test_symmetric(self):
        a, b = P(-2.5, 7), P(4, -1)
        assert distance(a, b) == distance(b, a)

    def test_nan_propagates(self):
        assert math.isnan(distance(P(float("nan"), 0), P(0, 0)))

    @pytest.mark.parametrize("p", [P(0, 0), P(3, -4), P(-10.5, 2.25)])
    def test_zero_length_segment_is_point_distance(self, p):
        """A degenerate segment measures straight to its single point."""
        v = P(1, 1)
        assert distance_to_segment(p, v, v) == distance(p, v)

    def test_perpendicular_projection(self):
        assert distance_to_segment(P(5, 3), P(0, 0), P(10, 0)) == pytest.approx(3.0)

    @pytest.mark.parametrize("p,nearest", [
        (P(-4, 3), P(0, 0)),
        (P(15, -2), P(10, 0)),
        (P(-1, -1), P(0, 0)),
    ])
    def test_projection_outside_segment_clamps_to_endpoint(self, p, nearest):
        """Points beyond either end measure to the nearer endpoint, not the line."""
        assert distance_to_segment(p, P(0, 0), P(10, 0)) == pytest.approx(distance(p, nearest))

    def test_diagonal_segment(self):
        d = distance_to_segment(P(0, 10), P(0, 0), P(10, 10))
        assert d == pytest.approx(10 / math.sqrt(2))


class TestPathHelpers:
    """Tests for path length and bounding box."""

    def test_path_length(self):
        assert path_length([P(0, 0), P(3, 4), P(3, 10)]) == pytest.approx(11.0)

    def test_path_length_short_inputs(self):
        assert path_length([]) == 0
        assert path_length([P(1, 1)]) == 0

    def test_bounding_box(self):
        assert bounding_box([P(3, -1), P(-2, 5), P(0, 0)]) == (-2, -1, 3, 5)

    def test_bounding_box_empty(self):
        assert bounding_box([]) == (0.0, 0.0, 0.0, 0.0)
