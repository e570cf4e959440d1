"""
Configuration classes and defaults for the flock simulation.
"""

import json
from dataclasses import dataclass, field, fields
from typing import List


# Tuning defaults
TURN_FACTOR = 0.2            # How sharply boids may turn toward neighbors
VISUAL_RANGE = 40.0          # Neighbor detection radius
PROTECTED_RANGE = 15.0       # Per-axis distance below which a peer is too close
CENTERING_FACTOR = 0.0005    # Pull toward the flock center
AVOID_FACTOR = 0.005         # Push away from close peers
MATCHING_FACTOR = 0.05       # Velocity matching strength
MAX_SPEED = 6.0
MIN_SPEED = 3.0
MAX_BIAS = 0.01
BIAS_INCREMENT = 0.00004
DEFAULT_BIAS_VAL = 0.001

# Distance from the viewport edge at which boids reverse direction
BOUNDARY_MARGIN = 10.0


@dataclass(frozen=True)
class FlockParameters:
    """
    Immutable tuning values shared by every boid for a whole run.

    Only ``avoid_factor``, ``protected_range`` and ``max_speed`` are read by
    the update rules. Cohesion, alignment, minimum speed and bias values are
    carried so that runs can be configured and reported, but nothing steers
    with them yet.
    """

    turn_factor: float = TURN_FACTOR
    visual_range: float = VISUAL_RANGE
    protected_range: float = PROTECTED_RANGE
    centering_factor: float = CENTERING_FACTOR
    avoid_factor: float = AVOID_FACTOR
    matching_factor: float = MATCHING_FACTOR
    max_speed: float = MAX_SPEED
    min_speed: float = MIN_SPEED
    max_bias: float = MAX_BIAS
    bias_increment: float = BIAS_INCREMENT
    default_bias_val: float = DEFAULT_BIAS_VAL


@dataclass
class SimulationConfig:
    """Configuration for the flock simulation."""

    # Screen settings
    screenWidth: int = 1024
    screenHeight: int = 768

    # Flock layout
    boidCount: int = 10
    spawnOrigin: List[float] = field(default_factory=lambda: [-100.0, 100.0])
    spawnOffset: List[float] = field(default_factory=lambda: [10.0, 30.0])
    initialVelocity: List[float] = field(default_factory=lambda: [4.0, 3.0])
    boundaryMargin: float = BOUNDARY_MARGIN

    # Tuning
    turnFactor: float = TURN_FACTOR
    visualRange: float = VISUAL_RANGE
    protectedRange: float = PROTECTED_RANGE
    centeringFactor: float = CENTERING_FACTOR
    avoidFactor: float = AVOID_FACTOR
    matchingFactor: float = MATCHING_FACTOR
    maxSpeed: float = MAX_SPEED
    minSpeed: float = MIN_SPEED
    maxBias: float = MAX_BIAS
    biasIncrement: float = BIAS_INCREMENT
    defaultBiasVal: float = DEFAULT_BIAS_VAL

    # Visualization
    fpsTarget: int = 60
    markerSize: int = 20
    showStats: bool = False
    backgroundColor: List[int] = field(default_factory=lambda: [255, 255, 255])
    boidColor: List[int] = field(default_factory=lambda: [0, 0, 0])

    # Statistics
    statsInterval: int = 10
    progressInterval: int = 1000

    # Output
    stateOutputFile: str = "flock_state.json"

    def to_parameters(self) -> FlockParameters:
        """Build the immutable tuning bundle for the update rules."""
        return FlockParameters(
            turn_factor=self.turnFactor,
            visual_range=self.visualRange,
            protected_range=self.protectedRange,
            centering_factor=self.centeringFactor,
            avoid_factor=self.avoidFactor,
            matching_factor=self.matchingFactor,
            max_speed=self.maxSpeed,
            min_speed=self.minSpeed,
            max_bias=self.maxBias,
            bias_increment=self.biasIncrement,
            default_bias_val=self.defaultBiasVal,
        )

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "screenWidth": self.screenWidth,
            "screenHeight": self.screenHeight,
            "boidCount": self.boidCount,
            "spawnOrigin": list(self.spawnOrigin),
            "spawnOffset": list(self.spawnOffset),
            "initialVelocity": list(self.initialVelocity),
            "boundaryMargin": self.boundaryMargin,
            "turnFactor": self.turnFactor,
            "visualRange": self.visualRange,
            "protectedRange": self.protectedRange,
            "centeringFactor": self.centeringFactor,
            "avoidFactor": self.avoidFactor,
            "matchingFactor": self.matchingFactor,
            "maxSpeed": self.maxSpeed,
            "minSpeed": self.minSpeed,
            "maxBias": self.maxBias,
            "biasIncrement": self.biasIncrement,
            "defaultBiasVal": self.defaultBiasVal,
            "fpsTarget": self.fpsTarget,
            "markerSize": self.markerSize,
            "showStats": self.showStats,
            "backgroundColor": list(self.backgroundColor),
            "boidColor": list(self.boidColor),
            "statsInterval": self.statsInterval,
            "progressInterval": self.progressInterval,
            "stateOutputFile": self.stateOutputFile,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationConfig":
        """Create config from dictionary."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})


def load_config(path: str) -> SimulationConfig:
    """
    Load a configuration from a JSON file.

    Keys missing from the file keep their defaults and unknown keys are
    ignored. I/O and JSON errors propagate to the caller.

    Args:
        path: Path to a JSON object of config overrides

    Returns:
        The resulting configuration
    """
    with open(path, 'r') as f:
        data = json.load(f)
    return SimulationConfig.from_dict(data)


# Default configuration for interactive simulation
DEFAULT_CONFIG = SimulationConfig()
