"""
Export functions for saving run results to CSV and JSON.
"""

import csv
import json
import math
from typing import Any, Dict, List

import numpy as np


def export_trajectory_to_csv(trajectory: np.ndarray, filename: str = "flock_trajectory.csv") -> str:
    """
    Export per-frame boid positions to CSV format.

    Args:
        trajectory: Array of shape (frames, boid_count, 2)
        filename: Output filename

    Returns:
        Path to saved CSV file
    """
    trajectory = np.asarray(trajectory, dtype=float)

    with open(filename, 'w', newline='') as csvfile:
        fieldnames = ['frame', 'boid', 'x', 'y']
        writer = csv.DictWriter(csvfile, fieldnames=fieldnames)

        writer.writeheader()

        for frame, positions in enumerate(trajectory):
            for boid, (x, y) in enumerate(positions):
                writer.writerow({
                    'frame': frame,
                    'boid': boid,
                    'x': f"{x:.4f}",
                    'y': f"{y:.4f}",
                })

    print(f"\nTrajectory saved to: {filename}")
    return filename


def export_run_report(results: Dict[str, Any], filename: str = "flock_run_results.json") -> str:
    """
    Export a full run report to JSON.

    Args:
        results: Results dictionary from a headless run
        filename: Output filename

    Returns:
        Path to saved JSON file
    """
    with open(filename, 'w') as f:
        json.dump(results, f, indent=2)

    print(f"\nRun report saved to: {filename}")
    return filename


def calculate_aggregate_stats(run_results: List[Dict]) -> Dict[str, float]:
    """
    Calculate mean and standard deviation across runs.

    Args:
        run_results: List of result dictionaries from multiple runs

    Returns:
        Dictionary with mean and std for each metric
    """
    if not run_results:
        return {}

    metrics = [
        "final_spread", "avg_spread", "avg_speed",
        "direction_flips_x", "direction_flips_y", "elapsed_time_seconds",
    ]

    aggregates = {}

    for metric in metrics:
        values = [r[metric] for r in run_results if metric in r and r[metric] is not None]
        if values:
            mean = sum(values) / len(values)
            aggregates[f"{metric}_mean"] = mean
            if len(values) > 1:
                variance = sum((x - mean) ** 2 for x in values) / (len(values) - 1)
                aggregates[f"{metric}_std"] = math.sqrt(variance)
            else:
                aggregates[f"{metric}_std"] = 0

    return aggregates
