#!/usr/bin/env python3
"""
Cave Percolation

Decides whether a square cave map can be crossed from its top row to its
bottom row, and estimates how often random caves can be crossed.

Modes:
    A  show which cells are reachable in a given map
    B  estimate the crossing probability for one accessibility value
    C  estimate it for every accessibility from 0.00 to 1.00

Usage:
    cave-percolation --config configs/default.yaml [options]

Examples:
    cave-percolation --mode A --size 3 < maps/example.txt
    cave-percolation --mode B --size 20 --accessibility 0.6 --samples 1000
    cave-percolation --mode C --size 30 --samples 500 --seed 42 --out-dir results/
    cave-percolation --interactive
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import (MODES, SimulationConfig, default_config, load_config,
                     validate_config)
from .model.engine import PercolationEngine
from .model.grid import Grid
from .model.state import SampleResult
from .export.csv_writer import CSVWriter
from .export.visualizer import Visualizer
from .export.reporter import (Reporter, estimate_threshold, format_estimate,
                              format_visualization)
from .prompt import collect_config, read_grid


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Site percolation on square cave maps',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    cave-percolation --mode A --size 3 < maps/example.txt
    cave-percolation --mode B --size 20 --accessibility 0.6 --samples 1000
    cave-percolation --mode C --size 30 --samples 500 --seed 42 --out-dir results/
    cave-percolation --interactive
        """
    )

    # Sources
    parser.add_argument('--config', type=Path, default=None,
                        help='Path to YAML configuration file')
    parser.add_argument('--interactive', action='store_true', default=False,
                        help='Prompt for mode and parameters')

    # Optional overrides
    parser.add_argument('--mode', type=str.upper, choices=MODES, default=None,
                        help='A = visualization, B = estimation, C = sweep')
    parser.add_argument('--size', type=int, default=None,
                        help='Cave size N (N x N grid)')
    parser.add_argument('--accessibility', type=float, default=None,
                        help='Probability that a cell is open, in [0, 1] (mode B)')
    parser.add_argument('--samples', type=int, default=None,
                        help='Number of random caves per estimate (modes B and C)')
    parser.add_argument('--step', type=float, default=None,
                        help='Accessibility increment for the sweep (default: 0.01)')
    parser.add_argument('--map', type=Path, default=None,
                        help='Map file for mode A (default: read from stdin)')
    parser.add_argument('--out-dir', type=Path, default=Path('./output'),
                        help='Output directory for exports (default: ./output)')

    # Export toggles
    parser.add_argument('--csv', dest='csv', action='store_true', default=None,
                        help='Enable CSV export (default)')
    parser.add_argument('--no-csv', dest='csv', action='store_false',
                        help='Disable CSV export')

    parser.add_argument('--plot', dest='plot', action='store_true', default=None,
                        help='Enable PNG export (default)')
    parser.add_argument('--no-plot', dest='plot', action='store_false',
                        help='Disable PNG export')

    parser.add_argument('--gif', action='store_true', default=False,
                        help='Enable GIF of the exploration (mode A)')

    parser.add_argument('--quiet', action='store_true', default=False,
                        help='Only print results')
    parser.add_argument('--verbose', action='store_true', default=False,
                        help='Enable debug logging')

    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducibility')

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> SimulationConfig:
    """Load or collect the configuration, then apply CLI overrides."""
    if args.config is not None:
        config = load_config(args.config)
    elif args.interactive:
        config = collect_config()
    else:
        config = default_config(args.mode or 'B', args.size or 20)

    if args.mode is not None:
        config.mode = args.mode
    if args.size is not None:
        config.grid.size = args.size
    if args.accessibility is not None:
        config.sampling.accessibility = args.accessibility
    if args.samples is not None:
        config.sampling.samples = args.samples
    if args.step is not None:
        config.sampling.step = args.step
    if args.map is not None:
        config.visualization.map_path = args.map
    if args.csv is not None:
        config.csv_enabled = args.csv
    if args.plot is not None:
        config.plot_enabled = args.plot
    if args.gif:
        config.gif_enabled = True
    config.quiet = args.quiet
    if args.seed is not None:
        config.seed = args.seed
    config.out_dir = args.out_dir

    validate_config(config)
    return config


def run_visualization(engine: PercolationEngine, config: SimulationConfig) -> None:
    if config.visualization.map_path is not None:
        grid = Grid.load(config.visualization.map_path)
    else:
        if not config.quiet and sys.stdin.isatty():
            print(f"Enter {config.grid.size}x{config.grid.size} map (1 = obstructed):")
        grid = read_grid(config.grid.size)

    result = engine.run_visualization(grid)
    print(format_visualization(result))

    visualizer = Visualizer()
    if config.plot_enabled:
        snapshot_path = config.out_dir / 'explored_map.png'
        visualizer.save_grid(grid, snapshot_path)
        if not config.quiet:
            print(f"\nMap saved: {snapshot_path}")

    if config.gif_enabled:
        gif_path = config.out_dir / 'exploration.gif'
        visualizer.buffer_traversal(grid, result.discovery_order)
        if not config.quiet:
            print(f"Generating GIF ({len(visualizer.frames)} frames)...")
        visualizer.generate_gif(gif_path, fps=10)
        if not config.quiet:
            print(f"Animation saved: {gif_path}")


def run_estimate(engine: PercolationEngine, config: SimulationConfig) -> None:
    result = engine.run_estimate()
    print(format_estimate(result))

    if config.csv_enabled:
        csv_path = config.out_dir / 'estimate.csv'
        with CSVWriter(csv_path) as writer:
            writer.append(result)
        if not config.quiet:
            print(f"CSV saved: {csv_path}")


def run_sweep(engine: PercolationEngine, config: SimulationConfig,
              config_path: Optional[Path]) -> None:
    csv_writer = None
    if config.csv_enabled:
        csv_writer = CSVWriter(config.out_dir / 'sweep.csv')
        csv_writer.open()

    def report_point(point: SampleResult) -> None:
        print(format_estimate(point))
        if csv_writer:
            csv_writer.append(point)

    try:
        sweep = engine.run_sweep(progress=report_point)
    finally:
        if csv_writer:
            csv_writer.close()

    if config.plot_enabled:
        Visualizer().save_curve(sweep, config.out_dir / 'percolation_curve.png',
                                threshold=estimate_threshold(sweep))

    if not config.quiet:
        reporter = Reporter(str(config_path) if config_path else None, config.seed)
        print(reporter.generate_summary(sweep, config.out_dir,
                                        config.csv_enabled, config.plot_enabled))


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(levelname)s %(name)s: %(message)s')

    # Load configuration
    try:
        config = build_config(args)
    except FileNotFoundError:
        print(f"Error: Configuration file not found: {args.config}", file=sys.stderr)
        return 1
    except EOFError:
        print("Error: input ended before the configuration was complete", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if not config.quiet:
        print(f"Mode {config.mode} ({config.mode_name}), "
              f"cave size {config.grid.size}x{config.grid.size}")

    engine = PercolationEngine(config)

    try:
        if config.mode == 'A':
            run_visualization(engine, config)
        elif config.mode == 'B':
            run_estimate(engine, config)
        else:
            run_sweep(engine, config, args.config)
    except KeyboardInterrupt:
        if not config.quiet:
            print("\nRun interrupted by user.")
        return 130
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
