"""
Gesture sessions: one in-progress stroke and its recognition timer.

The drawing surface feeds pointer positions (already in world coordinates)
and timestamps into a GestureSession and polls it from its own timer. The
session keeps the raw points separately from any correction, so each
recognition run starts from the full raw gesture and can replace or revoke
an earlier correction.
"""

from inkboard.config import BoardConfig
from inkboard.errors import InvalidToolError, SessionClosedError
from inkboard.geometry.recognize import recognize_shape
from inkboard.models import Stroke, ToolType, to_points
from inkboard.tracer import get_tracer


class RecognitionDebouncer:
    """
    Fires once after input has been quiet for a delay.

    Time is supplied by the caller in seconds, so the debouncer owns no
    thread or timer and is driven entirely from the caller's event loop.
    """

    def __init__(self, delay):
        self.delay = delay
        self._deadline = None

    @property
    def armed(self):
        return self._deadline is not None

    def poke(self, now):
        """Restart the quiet period from now."""
        self._deadline = now + self.delay

    def cancel(self):
        self._deadline = None

    def is_due(self, now):
        return self._deadline is not None and now >= self._deadline

    def consume(self, now):
        """Return True and disarm if the quiet period has elapsed."""
        if not self.is_due(now):
            return False
        self._deadline = None
        return True


class GestureSession:
    """
    A single drawing gesture from pointer-down to pointer-up.

    Example:
        session = GestureSession(ToolType.PEN, start=p0, now=0.0)
        session.extend(p1, now=0.05)
        ...
        session.poll(now=0.7)   # runs recognition once input has paused
        stroke = session.finish()
    """

    def __init__(self, tool, start, color=None, width=None, now=0.0, config=None):
        config = config or BoardConfig()
        tool = ToolType(tool)

        if not tool.draws:
            raise InvalidToolError(f"Tool {tool.value!r} does not draw strokes")

        self.config = config
        self.tool = tool
        self.debouncer = RecognitionDebouncer(config.recognition.debounce_seconds)

        opacity = config.style.highlighter_opacity if tool == ToolType.HIGHLIGHTER else config.style.pen_opacity
        (start,) = to_points([start])

        self._raw = [start]
        self._stroke = Stroke(
            points=(start,),
            color=color or config.style.default_color,
            width=config.style.default_width if width is None else width,
            tool=tool,
            opacity=opacity,
        )
        self._closed = False

        self.debouncer.poke(now)

    @property
    def raw_points(self):
        """Points as drawn, ignoring any correction."""
        return tuple(self._raw)

    @property
    def current(self):
        """The stroke to render right now, corrected or raw."""
        return self._stroke

    @property
    def closed(self):
        return self._closed

    def extend(self, point, now=0.0):
        """Append a pointer position and restart the recognition timer."""
        self._check_open()
        (point,) = to_points([point])

        self._raw.append(point)
        self.debouncer.poke(now)

        if self._stroke.is_shape:
            get_tracer().event("Correction dropped, gesture continued", points=len(self._raw))

        # New ink is drawn over the raw gesture until the next recognition
        # run decides again
        self._stroke = self._stroke.with_points(self._raw, is_shape=False)

    def poll(self, now):
        """
        Run recognition if the input has paused long enough.

        Returns:
            True if recognition ran
        """
        self._check_open()
        if not self.debouncer.consume(now):
            return False
        self.recognize_now()
        return True

    def recognize_now(self):
        """
        Recompute the correction from the full raw gesture.

        Returns:
            True if the current stroke is a recognized shape afterwards
        """
        self._check_open()

        if len(self._raw) < self.config.recognition.min_session_points:
            return self._stroke.is_shape

        corrected = recognize_shape(self._raw, self.config.recognition)

        if corrected is not None:
            self._stroke = self._stroke.with_points(corrected, is_shape=True)
        else:
            self._stroke = self._stroke.with_points(self._raw, is_shape=False)

        return self._stroke.is_shape

    def finish(self):
        """End the gesture and return the finalized stroke."""
        self._check_open()
        self.debouncer.cancel()
        self._closed = True
        return self._stroke

    def _check_open(self):
        if self._closed:
            raise SessionClosedError("Gesture already finished")
