"""
Per-axis travel direction flags and their boundary transitions.
"""

from enum import Enum


class DirectionX(Enum):
    """Horizontal travel direction."""

    RIGHT = "right"
    LEFT = "left"

    @property
    def sign(self) -> int:
        return 1 if self is DirectionX.RIGHT else -1

    def transition(self, x: float, left: float, right: float, margin: float) -> "DirectionX":
        """
        Return the direction after checking ``x`` against the side edges.

        Reaching the right edge (within ``margin``) turns the boid left,
        reaching the left edge turns it right, anywhere else keeps the
        current direction. The check is level-triggered and the right edge
        wins if both hold.
        """
        if x >= right - margin:
            return DirectionX.LEFT
        if x <= left + margin:
            return DirectionX.RIGHT
        return self


class DirectionY(Enum):
    """Vertical travel direction (y grows toward the top)."""

    TOP = "top"
    BOTTOM = "bottom"

    @property
    def sign(self) -> int:
        return 1 if self is DirectionY.TOP else -1

    def transition(self, y: float, bottom: float, top: float, margin: float) -> "DirectionY":
        """Same as ``DirectionX.transition`` for the top and bottom edges."""
        if y >= top - margin:
            return DirectionY.BOTTOM
        if y <= bottom + margin:
            return DirectionY.TOP
        return self
