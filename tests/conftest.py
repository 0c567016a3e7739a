"""Pytest fixtures for inkboard tests."""

import math
import tempfile

import pytest

from inkboard.models import Point, Stroke, ToolType


def P(x, y):
    return Point(x=x, y=y)


def trace_polygon(vertices, step=10.0):
    """Walk a closed polygon at roughly uniform spacing, ending on the first vertex."""
    points = []
    for i, (x0, y0) in enumerate(vertices):
        x1, y1 = vertices[(i + 1) % len(vertices)]
        steps = max(1, int(round(math.hypot(x1 - x0, y1 - y0) / step)))
        for k in range(steps):
            t = k / steps
            points.append(P(x0 + t * (x1 - x0), y0 + t * (y1 - y0)))
    points.append(P(*vertices[0]))
    return points


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def default_config():
    from inkboard.config import BoardConfig
    return BoardConfig()


@pytest.fixture
def short_line_points():
    """Nine nearly collinear points from (0, 0) to (100, 0)."""
    jitter = [0, 1.2, -0.8, 1.5, -1.1, 0.6, -1.4, 0.9, 0]
    return [P(i * 12.5, j) for i, j in enumerate(jitter)]


@pytest.fixture
def diagonal_points():
    """Twelve points along the diagonal from (0, 0) to (100, 100)."""
    jitter = [0, 0.5, -0.4, 0.6, -0.5, 0.3, -0.6, 0.4, -0.3, 0.5, -0.4, 0]
    points = []
    for i, j in enumerate(jitter):
        v = i * 100 / 11
        points.append(P(v + j, v - j))
    return points


@pytest.fixture
def square_points():
    """Twenty points around a jittery square from (0, 0) to (100, 100)."""
    coords = [
        (0, 0), (20, 0.6), (40, 0.3), (60, 0.8), (80, 0.4),
        (100, 0), (99.5, 20), (99.2, 40), (99.7, 60), (99.4, 80),
        (100, 100), (80, 99.3), (60, 99.6), (40, 99.1), (20, 99.5),
        (0, 100), (0.5, 80), (0.8, 60), (0.3, 40), (0.6, 20),
    ]
    return [P(x, y) for x, y in coords]


@pytest.fixture
def circle_points():
    """Sixty points on a circle of radius 50 centered at (50, 50)."""
    return [
        P(50 + 50 * math.cos(2 * math.pi * i / 60), 50 + 50 * math.sin(2 * math.pi * i / 60))
        for i in range(60)
    ]


@pytest.fixture
def triangle_points():
    return trace_polygon([(0, 0), (100, 0), (50, 80)])


@pytest.fixture
def l_shape_points():
    """Closed L-shaped outline: six corners at uneven distances from the box center."""
    return trace_polygon([(0, 0), (100, 0), (100, 30), (30, 30), (30, 100), (0, 100)])


@pytest.fixture
def horizontal_stroke():
    """A 4-unit wide pen stroke from (0, 0) to (100, 0)."""
    return Stroke(points=(P(0, 0), P(50, 0), P(100, 0)), width=4.0, tool=ToolType.PEN)


@pytest.fixture
def reset_tracer():
    """Restore the global tracer to its disabled default after a test."""
    from inkboard.tracer import configure_tracer
    yield
    configure_tracer(enabled=False)
