"""Exceptions raised by the stateful layers of inkboard."""


class InkboardError(Exception):
    """Base class for inkboard errors."""


class InvalidToolError(InkboardError):
    """A gesture was started with a tool that does not draw."""


class SessionClosedError(InkboardError):
    """Input arrived after the gesture was finished."""


class UnsupportedMessageError(InkboardError):
    """A sync message type the board cannot apply."""


class InvalidMessageError(InkboardError):
    """A sync message is missing data its type requires."""
