"""
Plotting functions for visualizing run results.
"""

from typing import Any, Dict, Optional

import matplotlib.pyplot as plt
import numpy as np

from ..core.viewport import Viewport


def plot_trajectories(trajectory: np.ndarray, output_file: str = "flock_trajectories.png",
                      viewport: Optional[Viewport] = None, show: bool = True) -> str:
    """
    Plot the path of every boid over a run.

    Args:
        trajectory: Array of shape (frames, boid_count, 2)
        output_file: Output filename for the plot
        viewport: Draw this rectangle as the arena outline if given
        show: Open the figure window after saving

    Returns:
        Path to saved plot file
    """
    trajectory = np.asarray(trajectory, dtype=float)

    fig, ax = plt.subplots(figsize=(10, 8))
    colors = plt.cm.viridis(np.linspace(0, 1, max(1, trajectory.shape[1])))

    for boid in range(trajectory.shape[1]):
        xs = trajectory[:, boid, 0]
        ys = trajectory[:, boid, 1]
        ax.plot(xs, ys, linewidth=1, color=colors[boid], alpha=0.8)
        ax.scatter(xs[-1], ys[-1], s=30, color=colors[boid], edgecolors='black', zorder=3)

    if viewport is not None:
        ax.add_patch(plt.Rectangle((viewport.left, viewport.bottom),
                                   viewport.width, viewport.height,
                                   fill=False, linestyle='--', color='gray'))
        ax.set_xlim(viewport.left, viewport.right)
        ax.set_ylim(viewport.bottom, viewport.top)

    ax.set_aspect('equal')
    ax.set_xlabel('x', fontsize=12, fontweight='bold')
    ax.set_ylabel('y', fontsize=12, fontweight='bold')
    ax.set_title(f'Flock Trajectories ({trajectory.shape[0] - 1} frames)',
                 fontsize=14, fontweight='bold', pad=20)
    ax.grid(True, alpha=0.3, linestyle='--')

    fig.tight_layout()
    fig.savefig(output_file, dpi=150, bbox_inches='tight')
    print(f"\nPlot saved to: {output_file}")

    if show:
        plt.show()
    plt.close(fig)
    return output_file


def plot_spread_over_time(results: Dict[str, Any], output_file: str = "flock_spread.png",
                          show: bool = True) -> str:
    """
    Plot flock spread and average speed against frame number.

    Args:
        results: Results dictionary from a headless run
        output_file: Output filename for the plot
        show: Open the figure window after saving

    Returns:
        Path to saved plot file
    """
    samples = results["spread_over_time"]
    frames = [d["frame"] for d in samples]
    spread = [d["spread"] for d in samples]
    speed = [d["avg_speed"] for d in samples]

    fig, ax = plt.subplots(figsize=(12, 7))
    ax.plot(frames, spread, label='Spread (avg dist to centroid)', linewidth=2, color='#4ECDC4')
    ax.set_xlabel('Frame Number', fontsize=12, fontweight='bold')
    ax.set_ylabel('Spread', fontsize=12, fontweight='bold')
    ax.grid(True, alpha=0.3, linestyle='--')

    speed_ax = ax.twinx()
    speed_ax.plot(frames, speed, label='Avg Speed', linewidth=1, color='#FF6B6B', alpha=0.7)
    speed_ax.set_ylabel('Avg Speed', fontsize=12, fontweight='bold')

    if spread:
        ax.annotate(f'{spread[-1]:.1f}', xy=(frames[-1], spread[-1]),
                    xytext=(5, 5), textcoords='offset points',
                    fontsize=9, color='#4ECDC4')

    lines = [*ax.get_lines(), *speed_ax.get_lines()]
    ax.legend(lines, [line.get_label() for line in lines], fontsize=11, loc='upper right')
    ax.set_title('Flock Spread Over Time', fontsize=14, fontweight='bold', pad=20)

    fig.tight_layout()
    fig.savefig(output_file, dpi=150, bbox_inches='tight')
    print(f"\nPlot saved to: {output_file}")

    if show:
        plt.show()
    plt.close(fig)
    return output_file
