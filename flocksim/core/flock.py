"""
Flock container: the ordered boids plus the shared tuning parameters.
"""

from typing import Iterator, List, Sequence, Tuple

import pygame

from .agents.boid import Boid
from .config import FlockParameters, SimulationConfig
from .direction import DirectionX, DirectionY


class Flock:
    """
    Ordered collection of boids and the parameters they share.

    The order never changes and is only used to tell a boid apart from its
    peers during separation.
    """

    def __init__(self, boids: List[Boid], params: FlockParameters):
        self.boids = boids
        self.params = params

    @classmethod
    def create(cls, count: int, params: FlockParameters,
               origin: Sequence[float] = (-100.0, 100.0),
               offset: Sequence[float] = (10.0, 30.0),
               velocity: Sequence[float] = (4.0, 3.0)) -> "Flock":
        """
        Lay out ``count`` boids along a diagonal.

        Boid ``i`` starts at ``origin + i * offset`` with its own copy of
        ``velocity``, heading right and up.

        Args:
            count: Number of boids (zero gives an empty flock)
            params: Shared tuning parameters
            origin: Position of the first boid
            offset: Per-index position step
            velocity: Initial per-axis speed

        Returns:
            The new flock
        """
        boids = [
            Boid(origin[0] + i * offset[0], origin[1] + i * offset[1],
                 velocity[0], velocity[1], DirectionX.RIGHT, DirectionY.TOP)
            for i in range(count)
        ]
        return cls(boids, params)

    @classmethod
    def from_config(cls, config: SimulationConfig) -> "Flock":
        """Build the starting flock described by a simulation config."""
        return cls.create(
            config.boidCount,
            config.to_parameters(),
            origin=config.spawnOrigin,
            offset=config.spawnOffset,
            velocity=config.initialVelocity,
        )

    def __len__(self) -> int:
        return len(self.boids)

    def __iter__(self) -> Iterator[Boid]:
        return iter(self.boids)

    def __getitem__(self, index: int) -> Boid:
        return self.boids[index]

    def positions(self) -> Tuple[pygame.Vector2, ...]:
        """Copies of every boid's position, in flock order."""
        return tuple(pygame.Vector2(boid.position) for boid in self.boids)

    def centroid(self) -> pygame.Vector2:
        """Mean position; the origin for an empty flock."""
        center = pygame.Vector2(0, 0)
        if not self.boids:
            return center
        for boid in self.boids:
            center += boid.position
        return center / len(self.boids)

    def spread(self) -> float:
        """Mean distance from each boid to the centroid."""
        if not self.boids:
            return 0.0
        center = self.centroid()
        return sum(b.position.distance_to(center) for b in self.boids) / len(self.boids)
