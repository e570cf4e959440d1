"""
Boid agent with separation, speed clamping and boundary reflection.
"""

from typing import Sequence, Tuple

import pygame

from ..config import FlockParameters
from ..direction import DirectionX, DirectionY
from ..viewport import Viewport


class Boid:
    """
    A single flock member.

    Direction of travel is kept in two per-axis flags; ``velocity`` only
    holds the speed along each axis. Every tick the boid moves by
    ``velocity`` in the direction the flags point, whatever the sign of
    the velocity components.
    """

    def __init__(self, x: float, y: float, vx: float, vy: float,
                 direction_x: DirectionX = DirectionX.RIGHT,
                 direction_y: DirectionY = DirectionY.TOP):
        """
        Initialize a boid.

        Args:
            x: Initial x position
            y: Initial y position
            vx: Horizontal speed
            vy: Vertical speed
            direction_x: Initial horizontal direction
            direction_y: Initial vertical direction
        """
        self.position = pygame.Vector2(x, y)
        self.velocity = pygame.Vector2(vx, vy)
        self.direction_x = direction_x
        self.direction_y = direction_y

    def __repr__(self) -> str:
        return (f"Boid(position=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"velocity=({self.velocity.x:.2f}, {self.velocity.y:.2f}), "
                f"{self.direction_x.name}, {self.direction_y.name})")

    def to_dict(self) -> dict:
        """Convert boid state to a JSON-serialisable dictionary."""
        return {
            "position": [self.position.x, self.position.y],
            "velocity": [self.velocity.x, self.velocity.y],
            "direction_x": self.direction_x.value,
            "direction_y": self.direction_y.value,
        }

    def separation_offset(self, positions: Sequence[pygame.Vector2], index: int,
                          protected_range: float) -> pygame.Vector2:
        """
        Sum the displacements from every peer that is too close.

        A peer counts as too close when it is within ``protected_range`` on
        either axis, so the trigger region is a cross rather than a circle.
        The entry at ``index`` is this boid's own slot and is skipped.

        Args:
            positions: Positions of the whole flock at the start of the tick
            index: This boid's slot in ``positions``
            protected_range: Per-axis proximity threshold

        Returns:
            Accumulated (close_dx, close_dy)
        """
        close = pygame.Vector2(0, 0)
        for i, other in enumerate(positions):
            if i == index:
                continue
            diff = self.position - other
            if abs(diff.x) < protected_range or abs(diff.y) < protected_range:
                close += diff
        return close

    def separate(self, positions: Sequence[pygame.Vector2], index: int,
                 params: FlockParameters) -> None:
        """Nudge the position away from close peers by ``avoid_factor``."""
        close = self.separation_offset(positions, index, params.protected_range)
        self.position.x += close.x * params.avoid_factor
        self.position.y += close.y * params.avoid_factor

    def clamp_speed(self, max_speed: float) -> None:
        """Cap each velocity axis at ``max_speed``. There is no lower bound."""
        if self.velocity.x > max_speed:
            self.velocity.x = max_speed
        if self.velocity.y > max_speed:
            self.velocity.y = max_speed

    def reflect(self, viewport: Viewport, margin: float) -> Tuple[bool, bool]:
        """
        Update the direction flags against the viewport edges.

        Returns:
            Whether the horizontal and vertical flags changed
        """
        new_x = self.direction_x.transition(self.position.x, viewport.left, viewport.right, margin)
        new_y = self.direction_y.transition(self.position.y, viewport.bottom, viewport.top, margin)
        flipped = (new_x is not self.direction_x, new_y is not self.direction_y)
        self.direction_x = new_x
        self.direction_y = new_y
        return flipped

    def advance(self) -> None:
        """Move one step along the current direction flags."""
        self.position.x += self.direction_x.sign * self.velocity.x
        self.position.y += self.direction_y.sign * self.velocity.y

    def draw(self, surface, viewport: Viewport, color, size: int = 20) -> None:
        """
        Draw the boid on the given surface.

        Args:
            surface: Pygame surface covering ``viewport``
            viewport: World rectangle the surface shows
            color: Fill color
            size: Marker diameter in pixels
        """
        pygame.draw.circle(surface, color, viewport.to_screen(self.position), size // 2)
