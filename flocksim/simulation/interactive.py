"""
Interactive simulation with pygame GUI.
"""

import json
from typing import Optional

import pygame

from ..core.config import SimulationConfig, DEFAULT_CONFIG
from ..core.flock import Flock
from ..core.viewport import Viewport
from .engine import TickContext, update_flock


class Simulation:
    """
    Interactive flock simulation with pygame visualization.

    The window is resizable; the viewport is re-read from the window size
    every frame so boids bounce off the edges that are actually visible.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        """
        Initialize the simulation.

        Args:
            config: Simulation configuration (uses defaults if None)
        """
        pygame.init()

        self.config = config if config else DEFAULT_CONFIG

        self.screen = pygame.display.set_mode(
            (self.config.screenWidth, self.config.screenHeight), pygame.RESIZABLE
        )
        pygame.display.set_caption("Flock Simulation")
        self.clock = pygame.time.Clock()

        self.flock = Flock.from_config(self.config)

        self.frame_count = 0
        self.elapsed = 0.0
        self.running = True
        self.paused = False
        self.show_stats = self.config.showStats

        self.stats = {
            "avg_speed": 0.0,
            "flock_spread": 0.0,
            "direction_flips_x": 0,
            "direction_flips_y": 0,
        }

    @property
    def viewport(self) -> Viewport:
        width, height = self.screen.get_size()
        return Viewport.from_size(width, height)

    def update(self, delta: float = 0.0) -> None:
        """Update simulation state for one frame."""
        self.elapsed += delta
        context = TickContext(frame=self.frame_count, elapsed=self.elapsed, delta=delta)

        flips_x, flips_y = update_flock(
            self.flock, context, self.viewport, self.config.boundaryMargin
        )
        self.stats["direction_flips_x"] += flips_x
        self.stats["direction_flips_y"] += flips_y

        self.frame_count += 1
        self._update_statistics()

    def _update_statistics(self) -> None:
        """Update simulation statistics."""
        if not len(self.flock):
            return

        total_speed = sum(b.velocity.length() for b in self.flock)
        self.stats["avg_speed"] = total_speed / len(self.flock)
        self.stats["flock_spread"] = self.flock.spread()

    def draw(self) -> None:
        """Render the current frame."""
        self.screen.fill(self.config.backgroundColor)

        viewport = self.viewport
        for boid in self.flock:
            boid.draw(self.screen, viewport, self.config.boidColor, self.config.markerSize)

        if self.show_stats:
            self._draw_stats()

        pygame.display.flip()

    def _draw_stats(self) -> None:
        """Draw statistics overlay."""
        font = pygame.font.Font(None, 24)
        y_offset = 10

        stats_text = [
            f"FPS: {int(self.clock.get_fps())}",
            f"Frame: {self.frame_count}",
            f"Boids: {len(self.flock)}",
            f"Avg Speed: {self.stats['avg_speed']:.2f}",
            f"Spread: {self.stats['flock_spread']:.1f}",
        ]
        if self.paused:
            stats_text.append("PAUSED")

        for text in stats_text:
            surface = font.render(text, True, (90, 90, 90))
            self.screen.blit(surface, (10, y_offset))
            y_offset += 25

    def state_snapshot(self) -> dict:
        """Current flock state as a JSON-serialisable dictionary."""
        return {
            "frame_count": self.frame_count,
            "boid_count": len(self.flock),
            "boids": [b.to_dict() for b in self.flock],
            "statistics": self.stats,
            "config": self.config.to_dict(),
        }

    def save_state(self) -> None:
        """Save the flock state to the configured JSON file."""
        try:
            with open(self.config.stateOutputFile, 'w') as f:
                json.dump(self.state_snapshot(), f, indent=4)
            print(f"State saved to {self.config.stateOutputFile}")
        except OSError as e:
            print(f"Error saving state: {e}")

    def run(self) -> None:
        """Run the simulation main loop."""
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.VIDEORESIZE:
                    self.screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
                elif event.type == pygame.KEYDOWN:
                    self._handle_keydown(event.key)

            delta = self.clock.tick(self.config.fpsTarget) / 1000.0
            if not self.paused:
                self.update(delta)
            self.draw()

        self.save_state()
        pygame.quit()

    def _handle_keydown(self, key: int) -> None:
        """Handle keyboard input."""
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_p:
            self.paused = not self.paused
            print(f"Simulation: {'PAUSED' if self.paused else 'RUNNING'}")
        elif key == pygame.K_v:
            self.show_stats = not self.show_stats
        elif key == pygame.K_SPACE:
            self.save_state()
