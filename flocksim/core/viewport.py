"""
Axis-aligned viewport rectangle in world coordinates.
"""

from dataclasses import dataclass
from typing import Tuple

import pygame


@dataclass(frozen=True)
class Viewport:
    """
    Visible world area.

    World coordinates have the origin at the window center and y pointing
    up, so ``top > bottom``. Screen coordinates (pygame) have the origin at
    the top-left corner and y pointing down.
    """

    left: float
    right: float
    bottom: float
    top: float

    @classmethod
    def from_size(cls, width: float, height: float) -> "Viewport":
        """Viewport of the given size centered on the origin."""
        half_w = width / 2
        half_h = height / 2
        return cls(left=-half_w, right=half_w, bottom=-half_h, top=half_h)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    def contains(self, position: pygame.Vector2) -> bool:
        return self.left <= position.x <= self.right and self.bottom <= position.y <= self.top

    def to_screen(self, position: pygame.Vector2) -> Tuple[int, int]:
        """
        Map a world position to integer surface pixel coordinates.

        Args:
            position: World position

        Returns:
            (column, row) on a surface the size of this viewport
        """
        return int(position.x - self.left), int(self.top - position.y)
