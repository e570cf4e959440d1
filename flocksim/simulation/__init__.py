"""
Simulation module containing the flock update and the interactive and headless drivers.
"""

from .engine import TickContext, snapshot_positions, update_flock
from .interactive import Simulation
from .headless import HeadlessSimulation

__all__ = ['TickContext', 'snapshot_positions', 'update_flock', 'Simulation', 'HeadlessSimulation']
