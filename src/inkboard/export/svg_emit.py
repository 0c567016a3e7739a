"""
SVG preview export for inkboard.

Writes strokes the way the drawing surface renders them: recognized shapes
as closed outlines, freehand strokes as open polylines, round caps and
joins, per-stroke opacity.
"""

import svgwrite

from inkboard.geometry.primitives import bounding_box
from inkboard.models import ToolType
from inkboard.tracer import get_tracer, trace


@trace(label="emit_strokes_svg")
def emit_strokes_svg(strokes, width=None, height=None, background="#ffffff"):
    """
    Create an SVG document containing all strokes.

    Args:
        strokes: sequence of Stroke in drawing order
        width: canvas width in world units, fitted to the strokes when None
        height: canvas height in world units, fitted to the strokes when None
        background: fill color, or None for a transparent canvas

    Returns:
        svgwrite.Drawing object
    """
    tracer = get_tracer()

    if width is None or height is None:
        all_points = [p for s in strokes for p in s.points]
        _, _, max_x, max_y = bounding_box(all_points)
        margin = max((s.width for s in strokes), default=0.0)
        width = max_x + margin if width is None else width
        height = max_y + margin if height is None else height

    dwg = svgwrite.Drawing(size=(f"{width}px", f"{height}px"))
    dwg.viewbox(0, 0, width, height)

    if background:
        dwg.add(dwg.rect(insert=(0, 0), size=(width, height), fill=background))

    group = dwg.g(id="strokes", fill="none", stroke_linecap="round", stroke_linejoin="round")

    emitted = 0
    for stroke in strokes:
        # Erasing removes whole strokes; eraser tool paths are never drawn
        if stroke.tool == ToolType.ERASER or not stroke.points:
            continue

        coords = [p.as_tuple() for p in stroke.points]
        style = {
            "stroke": stroke.color,
            "stroke_width": stroke.width,
            "stroke_opacity": stroke.opacity,
        }

        if stroke.is_shape:
            element = dwg.polygon(points=coords, **style)
        else:
            element = dwg.polyline(points=coords, **style)

        group.add(element)
        emitted += 1

    dwg.add(group)

    tracer.event(f"SVG emitted with {emitted} strokes")

    return dwg
