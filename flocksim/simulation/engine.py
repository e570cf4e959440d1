"""
Per-frame flock update.
"""

from dataclasses import dataclass
from typing import Tuple

import pygame

from ..core.config import BOUNDARY_MARGIN
from ..core.flock import Flock
from ..core.viewport import Viewport


@dataclass(frozen=True)
class TickContext:
    """Timing information handed to the update by the driving clock."""

    frame: int = 0
    elapsed: float = 0.0  # seconds since the run started
    delta: float = 0.0    # seconds since the previous tick


def snapshot_positions(flock: Flock) -> Tuple[pygame.Vector2, ...]:
    """Capture every position before anything in the tick moves."""
    return flock.positions()


def update_flock(flock: Flock, context: TickContext, viewport: Viewport,
                 margin: float = BOUNDARY_MARGIN) -> Tuple[int, int]:
    """
    Advance the flock by one time step.

    Each boid reacts to the positions all boids had at the start of the
    tick, never to a peer that has already moved this tick. Per boid the
    order is: separation, speed clamp, direction flags, movement.

    Args:
        flock: Flock to mutate in place
        context: Tick timing (not consumed by the current rules)
        viewport: Visible world rectangle for this tick
        margin: Edge distance at which boids turn around

    Returns:
        Number of horizontal and vertical direction flips this tick
    """
    params = flock.params
    snapshot = snapshot_positions(flock)
    flips_x = 0
    flips_y = 0

    for i, boid in enumerate(flock):
        boid.separate(snapshot, i, params)
        boid.clamp_speed(params.max_speed)

        flipped_x, flipped_y = boid.reflect(viewport, margin)
        flips_x += flipped_x
        flips_y += flipped_y

        boid.advance()

    return flips_x, flips_y
