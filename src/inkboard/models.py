"""
Pydantic data models for inkboard.

Points and strokes are frozen: a corrected stroke is a new object, never a
partially edited one. Everything here dumps to plain JSON-able data for the
sync layer.
"""

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from inkboard.geometry.primitives import bounding_box


class ToolType(str, Enum):
    """Whiteboard tools."""
    PEN = "pen"
    HIGHLIGHTER = "highlighter"
    ERASER = "eraser"
    SELECT = "select"
    HAND = "hand"
    LASER = "laser"

    @property
    def draws(self):
        """Whether a gesture with this tool produces a stroke."""
        return self in (ToolType.PEN, ToolType.HIGHLIGHTER)


class SyncMessageType(str, Enum):
    """Kinds of messages exchanged with remote peers."""
    DRAW_STROKE = "DRAW_STROKE"
    CLEAR_BOARD = "CLEAR_BOARD"
    SYNC_STATE = "SYNC_STATE"


class Point(BaseModel):
    """A point in world coordinates."""
    x: float
    y: float

    model_config = ConfigDict(frozen=True, extra="forbid")

    def as_tuple(self):
        return (self.x, self.y)


class Stroke(BaseModel):
    """A freehand path or a recognized shape."""
    points: Tuple[Point, ...] = Field(default_factory=tuple)
    color: str = "#000000"
    width: float = Field(default=3.0, ge=0.0)
    tool: ToolType = ToolType.PEN
    opacity: float = Field(default=1.0, ge=0.0, le=1.0)
    is_shape: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("points", mode="before")
    @classmethod
    def _coerce_points(cls, value):
        return tuple(to_points(value))

    def with_points(self, points, is_shape=False):
        """Return a copy with the whole point sequence replaced."""
        return self.model_copy(update={"points": tuple(to_points(points)), "is_shape": is_shape})

    @property
    def bbox(self):
        """Bounding box as (min_x, min_y, max_x, max_y)."""
        return bounding_box(self.points)


class SyncMessage(BaseModel):
    """Plain-data envelope for board changes sent to peers."""
    type: SyncMessageType
    payload: Optional[Dict[str, Any]] = None

    model_config = ConfigDict(extra="forbid")


def to_points(coords):
    """
    Coerce a sequence of coordinates into a list of Points.

    Accepts Points, (x, y) pairs and {"x": ..., "y": ...} mappings.
    """
    points = []
    for c in coords:
        if isinstance(c, Point):
            points.append(c)
        elif isinstance(c, dict):
            points.append(Point(**c))
        else:
            x, y = c
            points.append(Point(x=x, y=y))
    return points
