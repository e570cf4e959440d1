"""
Analysis module for plotting and exporting simulation results.
"""

from .plotting import plot_trajectories, plot_spread_over_time
from .export import export_trajectory_to_csv, export_run_report, calculate_aggregate_stats

__all__ = [
    'plot_trajectories',
    'plot_spread_over_time',
    'export_trajectory_to_csv',
    'export_run_report',
    'calculate_aggregate_stats',
]
