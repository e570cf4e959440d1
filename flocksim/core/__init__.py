"""
Core module containing configuration, direction flags, viewport and the flock.
"""

from .config import SimulationConfig, FlockParameters, DEFAULT_CONFIG, load_config
from .direction import DirectionX, DirectionY
from .viewport import Viewport
from .flock import Flock

__all__ = [
    'SimulationConfig', 'FlockParameters', 'DEFAULT_CONFIG', 'load_config',
    'DirectionX', 'DirectionY', 'Viewport', 'Flock',
]
