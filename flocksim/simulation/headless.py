"""
Headless simulation for fixed-length runs and data collection.
"""

import time
from typing import Any, Dict, Optional

import numpy as np
import pygame

try:
    import cv2
    VIDEO_SUPPORT = True
except ImportError:
    VIDEO_SUPPORT = False

from ..core.config import SimulationConfig, DEFAULT_CONFIG
from ..core.flock import Flock
from ..core.viewport import Viewport
from .engine import TickContext, update_flock


def _is_due(frame: int, interval: int) -> bool:
    """Whether a periodic task runs on this frame; intervals <= 0 never run."""
    return interval > 0 and frame % interval == 0


class HeadlessSimulation:
    """
    Flock simulation without a window.

    Runs on a synthetic clock at ``fpsTarget`` frames per second against a
    fixed viewport the size of the configured screen. Collects spread and
    speed samples, direction flip counts and the full trajectory. Frames
    can be rendered off-screen and written to a video with OpenCV.
    """

    def __init__(self, config: Optional[SimulationConfig] = None, enable_video: bool = False,
                 video_filename: Optional[str] = None, video_fps: int = 30):
        """
        Initialize headless simulation.

        Args:
            config: Simulation configuration (uses defaults if None)
            enable_video: Whether to record video
            video_filename: Output video filename
            video_fps: Video frame rate
        """
        pygame.init()

        self.config = config if config else DEFAULT_CONFIG
        width = self.config.screenWidth
        height = self.config.screenHeight

        self.viewport = Viewport.from_size(width, height)
        self.flock = Flock.from_config(self.config)
        self.delta = 1.0 / max(1, self.config.fpsTarget)

        # Video recording
        if enable_video and not VIDEO_SUPPORT:
            print("Warning: opencv-python not available. Video recording disabled.")
        elif enable_video and not video_filename:
            print("Warning: no video filename given. Video recording disabled.")
        self.enable_video = enable_video and VIDEO_SUPPORT and bool(video_filename)
        self.video_writer = None
        self.video_filename = video_filename
        self.frame_skip = max(1, self.config.fpsTarget // video_fps)
        self.surface = None

        if self.enable_video:
            self.surface = pygame.Surface((width, height))
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.video_writer = cv2.VideoWriter(
                self.video_filename, fourcc, video_fps, (width, height)
            )
            print(f"  Recording video to: {self.video_filename}")

        self.frame_count = 0
        self.start_time = time.time()
        self.trajectory = [self._positions_array()]

        # Statistics
        self.stats = {
            "direction_flips_x": 0,
            "direction_flips_y": 0,
            "speed_total": 0.0,
            "speed_samples": 0,
            "spread_samples": 0,
            "spread_total": 0.0,
            "spread_over_time": [],
        }

    def _positions_array(self) -> np.ndarray:
        return np.array([[b.position.x, b.position.y] for b in self.flock],
                        dtype=float).reshape(len(self.flock), 2)

    def update(self) -> None:
        """Update simulation state."""
        context = TickContext(
            frame=self.frame_count,
            elapsed=self.frame_count * self.delta,
            delta=self.delta,
        )
        flips_x, flips_y = update_flock(
            self.flock, context, self.viewport, self.config.boundaryMargin
        )
        self.stats["direction_flips_x"] += flips_x
        self.stats["direction_flips_y"] += flips_y

        self.frame_count += 1
        self.trajectory.append(self._positions_array())
        self._update_statistics()

    def _update_statistics(self) -> None:
        """Update tracking statistics."""
        if not len(self.flock):
            return

        frame_speed = sum(b.velocity.length() for b in self.flock) / len(self.flock)
        self.stats["speed_total"] += frame_speed
        self.stats["speed_samples"] += 1

        if _is_due(self.frame_count, self.config.statsInterval):
            spread = self.flock.spread()
            self.stats["spread_total"] += spread
            self.stats["spread_samples"] += 1
            self.stats["spread_over_time"].append({
                "frame": self.frame_count,
                "spread": spread,
                "avg_speed": frame_speed,
            })

    def run(self, max_frames: int) -> Dict[str, Any]:
        """
        Run for the specified number of frames.

        Args:
            max_frames: Number of frames to simulate

        Returns:
            Results dictionary with all statistics
        """
        print(f"Running headless simulation for {max_frames} frames...")

        while self.frame_count < max_frames:
            self.update()

            if self.enable_video and self.video_writer:
                if self.frame_count % self.frame_skip == 0:
                    self._render_frame()
                    self._capture_frame()

            if _is_due(self.frame_count, self.config.progressInterval):
                elapsed = time.time() - self.start_time
                progress = (self.frame_count / max_frames) * 100
                print(f"  Progress: {progress:.1f}% ({self.frame_count}/{max_frames} frames, "
                      f"{elapsed:.1f}s elapsed, spread {self.flock.spread():.1f})")

        if self.video_writer:
            self.video_writer.release()
            print("  Video saved successfully!")

        pygame.quit()
        return self.get_results()

    def _render_frame(self) -> None:
        """Render frame for video capture."""
        self.surface.fill(self.config.backgroundColor)
        for boid in self.flock:
            boid.draw(self.surface, self.viewport, self.config.boidColor, self.config.markerSize)

    def _capture_frame(self) -> None:
        """Capture frame to video."""
        if not self.video_writer or not VIDEO_SUPPORT:
            return

        frame = pygame.surfarray.array3d(self.surface)
        frame = np.transpose(frame, (1, 0, 2))
        frame = cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)
        self.video_writer.write(frame)

    def get_trajectory(self) -> np.ndarray:
        """Positions per frame, shape (frames + 1, boid_count, 2)."""
        return np.stack(self.trajectory)

    def get_results(self) -> Dict[str, Any]:
        """
        Get run results.

        Returns:
            Dictionary containing all statistics and derived metrics
        """
        elapsed = time.time() - self.start_time

        avg_spread = 0.0
        if self.stats["spread_samples"] > 0:
            avg_spread = self.stats["spread_total"] / self.stats["spread_samples"]

        avg_speed = 0.0
        if self.stats["speed_samples"] > 0:
            avg_speed = self.stats["speed_total"] / self.stats["speed_samples"]

        outside = sum(1 for b in self.flock if not self.viewport.contains(b.position))

        return {
            "frames": self.frame_count,
            "boid_count": len(self.flock),
            "elapsed_time_seconds": elapsed,
            "final_spread": self.flock.spread(),
            "avg_spread": avg_spread,
            "avg_speed": avg_speed,
            "final_outside_count": outside,
            "direction_flips_x": self.stats["direction_flips_x"],
            "direction_flips_y": self.stats["direction_flips_y"],
            "spread_over_time": self.stats["spread_over_time"],
            "final_positions": [[b.position.x, b.position.y] for b in self.flock],
        }
