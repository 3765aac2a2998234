"""Command line entry point for the fire display.

Usage:
    firefx
    firefx --width 60 --height 120 --seed 3
    firefx --no-render --frames 200
"""

import argparse
from typing import List, Optional

from firefx.exceptions import FireFXError
from firefx.fire_simulator.fire import FireSim
from firefx.fire_simulator.visualizer import RealTimeVisualizer
from firefx.utilities.data_classes import FireParams, HeatOverflow


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Display the FireFX fire effect")
    parser.add_argument("--width", "-W", type=int, default=30,
                        help="Grid width in cells (default: 30)")
    parser.add_argument("--height", "-H", type=int, default=100,
                        help="Grid height in cells (default: 100)")
    parser.add_argument("--seed", "-s", type=int, default=None,
                        help="Random seed for the bottom row")
    parser.add_argument("--overflow", choices=HeatOverflow.modes, default=HeatOverflow.WRAP,
                        help="How heat above 255 maps to the palette (default: wrap)")
    parser.add_argument("--interval", "-i", type=int, default=30,
                        help="Milliseconds between frames (default: 30)")
    parser.add_argument("--frames", "-n", type=int, default=None,
                        help="Stop after this many frames (default: run until closed)")
    parser.add_argument("--no-render", action="store_true",
                        help="Run headless on the Agg backend instead of opening a window")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    params = FireParams(width=args.width, height=args.height, seed=args.seed,
                        overflow=args.overflow, frame_interval_ms=args.interval)
    try:
        sim = FireSim(params)
    except FireFXError as e:
        print(f"Error: {e}")
        return 1

    viz = RealTimeVisualizer(sim, render=not args.no_render)

    if args.no_render:
        # No event loop on Agg, so step the display directly
        for frame in range(args.frames or 1):
            viz.update(frame)
        print(f"Rendered {sim.frame_count} frames")
        viz.close()
        return 0

    viz.start(num_frames=args.frames)
    return 0


if __name__ == "__main__":
    exit(main())
