"""
Agent classes for the flock simulation.
"""

from .boid import Boid

__all__ = ['Boid']
