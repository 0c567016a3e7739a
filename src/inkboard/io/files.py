"""
File helpers for inkboard.

Reads point lists and boards from JSON and writes JSON and SVG output.
Boards on disk use the SYNC_STATE payload shape: {"strokes": [...]}.
"""

import json
import os

from inkboard.board import Board
from inkboard.models import Stroke, to_points
from inkboard.tracer import get_tracer


def ensure_dir(path):
    """Create directory if it does not exist."""
    if path:
        os.makedirs(path, exist_ok=True)


def load_json(path):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def save_json(data, path, indent=2):
    """
    Save a dictionary or Pydantic model to JSON.
    """
    ensure_dir(os.path.dirname(path))

    if hasattr(data, "model_dump"):
        data = data.model_dump(mode="json")

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)

    get_tracer().event(f"Saved JSON: {path}")


def save_svg(svg_content, path):
    """
    Save SVG content to file.
    """
    ensure_dir(os.path.dirname(path))

    if hasattr(svg_content, "tostring"):
        content = svg_content.tostring()
    else:
        content = str(svg_content)

    with open(path, "w", encoding="utf-8") as f:
        f.write(content)

    get_tracer().event(f"Saved SVG: {path}")


def load_points(path):
    """
    Load a point sequence.

    The file holds either a list of points or an object with a "points"
    list; each point is [x, y] or {"x": ..., "y": ...}.
    """
    data = load_json(path)
    if isinstance(data, dict):
        data = data.get("points", [])
    return to_points(data)


def load_board(path, config=None):
    """Load a board saved with save_board."""
    data = load_json(path)
    strokes = [Stroke.model_validate(s) for s in data.get("strokes", [])]
    return Board(strokes, config=config)


def save_board(board, path):
    save_json(board.to_sync_state().payload, path)
