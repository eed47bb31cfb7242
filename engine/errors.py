"""
Errors raised by the move engine.
"""


class EngineError(Exception):
    """Base class for move engine errors."""


class InvalidState(EngineError):
    """The engine was asked to move on a board that is already won or full."""


class NoMoveAvailable(EngineError):
    """The search finished without a candidate cell."""
