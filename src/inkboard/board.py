"""
The board: the ordered collection of finalized strokes on one page.

Owns eraser, undo and clear, and converts between its state and the plain
sync messages exchanged with peers. Transport is left to the caller.
"""

from inkboard.config import BoardConfig
from inkboard.errors import InvalidMessageError, UnsupportedMessageError
from inkboard.geometry.hit_test import erase_at
from inkboard.models import Stroke, SyncMessage, SyncMessageType
from inkboard.tracer import get_tracer, trace


class Board:
    """Ordered strokes, oldest first."""

    def __init__(self, strokes=(), config=None):
        self.config = config or BoardConfig()
        self._strokes = list(strokes)

    def __len__(self):
        return len(self._strokes)

    @property
    def strokes(self):
        """Snapshot of the strokes in drawing order."""
        return tuple(self._strokes)

    def add(self, stroke):
        self._strokes.append(stroke)

    def extend(self, strokes):
        self._strokes.extend(strokes)

    def erase_at(self, point, threshold=None):
        """
        Remove every stroke the eraser at point touches.

        Args:
            point: eraser position in world coordinates
            threshold: world-unit tolerance, config default when None

        Returns:
            list of removed strokes
        """
        if threshold is None:
            threshold = self.config.eraser.threshold

        kept, removed = erase_at(self._strokes, point, threshold)
        if removed:
            self._strokes = kept
        return removed

    def erase_at_screen(self, point, scale):
        """
        Erase with a tolerance fixed in screen pixels.

        The configured screen threshold is divided by the view scale, so the
        eraser feels the same size at every zoom level. The scale is clamped
        to the zoom limits first.
        """
        eraser = self.config.eraser
        scale = min(max(scale, eraser.min_scale), eraser.max_scale)
        return self.erase_at(point, eraser.screen_threshold / scale)

    def undo(self):
        """Remove and return the newest stroke, or None if the board is empty."""
        if not self._strokes:
            return None
        return self._strokes.pop()

    def clear(self):
        self._strokes = []

    def draw_message(self, stroke):
        """Build the message announcing a finalized stroke."""
        return SyncMessage(type=SyncMessageType.DRAW_STROKE, payload=stroke.model_dump(mode="json"))

    def clear_message(self):
        return SyncMessage(type=SyncMessageType.CLEAR_BOARD)

    def to_sync_state(self):
        """Build the full-state message sent to a newly joined peer."""
        return SyncMessage(
            type=SyncMessageType.SYNC_STATE,
            payload={"strokes": [s.model_dump(mode="json") for s in self._strokes]},
        )

    @trace(label="apply_sync_message")
    def apply_sync_message(self, message):
        """
        Apply a message received from a peer.

        Accepts a SyncMessage or its dumped dict form. Message types this
        board does not handle, such as background changes, raise
        UnsupportedMessageError.
        """
        if not isinstance(message, SyncMessage):
            kind = message.get("type")
            if kind not in {t.value for t in SyncMessageType}:
                raise UnsupportedMessageError(f"Cannot apply message type {kind!r}")
            message = SyncMessage.model_validate(message)

        payload = message.payload or {}

        if message.type == SyncMessageType.DRAW_STROKE:
            if not message.payload:
                raise InvalidMessageError("DRAW_STROKE message has no stroke payload")
            self.add(Stroke.model_validate(payload))
        elif message.type == SyncMessageType.CLEAR_BOARD:
            self.clear()
        elif message.type == SyncMessageType.SYNC_STATE:
            self._strokes = [Stroke.model_validate(s) for s in payload.get("strokes", [])]

        get_tracer().event(f"Applied {message.type.value}", strokes=len(self._strokes))
