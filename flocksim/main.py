"""
Main entry point for the flock simulation.

Run with:
    python -m flocksim.main                          # Interactive simulation
    python -m flocksim.main --headless --frames 600  # Headless run
    python -m flocksim.main --headless --plot out.png --report run.json
"""

import os
import sys
import json


# Set dummy video driver for headless runs
def set_headless():
    """Enable headless mode."""
    os.environ["SDL_VIDEODRIVER"] = "dummy"


def run_interactive(config):
    """Run the interactive simulation with GUI."""
    from .simulation.interactive import Simulation

    print("=" * 60)
    print("Flock Simulation")
    print("=" * 60)
    print("\nControls:")
    print("  ESC   - Quit")
    print("  P     - Pause / resume")
    print("  V     - Toggle stats overlay")
    print("  SPACE - Save flock state to JSON")
    print(f"\nBoids: {config.boidCount}")
    print("\nStarting simulation...")

    sim = Simulation(config)
    sim.run()


def run_headless(config, frames: int = 600, record_video: bool = False,
                 video_file: str = "flock_recording.mp4", trajectory_file: str = None,
                 report_file: str = None, plot_file: str = None):
    """
    Run a fixed number of frames without a window.

    Args:
        config: Simulation configuration
        frames: Number of frames to simulate
        record_video: Whether to record video
        video_file: Output video filename
        trajectory_file: CSV path for per-frame positions (skipped if None)
        report_file: JSON path for the run report (skipped if None)
        plot_file: PNG path for the trajectory plot (skipped if None)

    Returns:
        Results dictionary from the run
    """
    set_headless()

    from .simulation.headless import HeadlessSimulation
    from .analysis.export import export_trajectory_to_csv, export_run_report
    from .core.viewport import Viewport

    print("=" * 60)
    print("HEADLESS FLOCK RUN")
    print("=" * 60)
    print(f"Frames: {frames}")
    print(f"Boids: {config.boidCount}")
    print(f"Viewport: {config.screenWidth}x{config.screenHeight}")
    if record_video:
        print(f"Video recording: ENABLED ({video_file})")
    print()

    sim = HeadlessSimulation(config, enable_video=record_video, video_filename=video_file)
    results = sim.run(frames)
    results["config"] = config.to_dict()

    if trajectory_file:
        export_trajectory_to_csv(sim.get_trajectory(), trajectory_file)
    if report_file:
        export_run_report(results, report_file)
    if plot_file:
        from .analysis.plotting import plot_trajectories
        viewport = Viewport.from_size(config.screenWidth, config.screenHeight)
        plot_trajectories(sim.get_trajectory(), plot_file, viewport=viewport, show=False)

    print("\n" + "=" * 60)
    print("RUN SUMMARY")
    print("=" * 60)
    print(f"   Final Spread: {results['final_spread']:.2f}")
    print(f"   Avg Spread: {results['avg_spread']:.2f}")
    print(f"   Avg Speed: {results['avg_speed']:.2f}")
    print(f"   Direction Flips: x={results['direction_flips_x']}, y={results['direction_flips_y']}")

    return results


def main(argv=None):
    """Main entry point."""
    import argparse

    from .core.config import SimulationConfig, load_config

    parser = argparse.ArgumentParser(description="Boids Flock Simulation")
    parser.add_argument("--config", help="JSON file with config overrides")
    parser.add_argument("--headless", action="store_true", help="Run without a window")
    parser.add_argument("--frames", type=int, default=600, help="Headless duration in frames")
    parser.add_argument("--record-video", action="store_true", help="Record video during headless run")
    parser.add_argument("--video-file", default="flock_recording.mp4", help="Video output file")
    parser.add_argument("--export-trajectory", help="CSV file for per-frame positions")
    parser.add_argument("--report", help="JSON file for the run report")
    parser.add_argument("--plot", help="PNG file for the trajectory plot")

    args = parser.parse_args(argv)

    if args.config:
        try:
            config = load_config(args.config)
        except (OSError, json.JSONDecodeError) as e:
            print(f"Error loading config: {e}")
            sys.exit(1)
    else:
        config = SimulationConfig()

    if args.headless:
        run_headless(
            config,
            frames=args.frames,
            record_video=args.record_video,
            video_file=args.video_file,
            trajectory_file=args.export_trajectory,
            report_file=args.report,
            plot_file=args.plot,
        )
    else:
        run_interactive(config)


if __name__ == "__main__":
    main()
