"""
Boids flock simulation: separation steering with boundary reflection in a 2D viewport.
"""

__version__ = "0.1.0"
