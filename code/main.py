#!/usr/bin/env python3

from __future__ import annotations

import argparse
from typing import List, Optional

from maze_config import MazeConfig
from maze_constants import STARTUP_LEVEL_LENGTHS
from maze_level import load_level


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate an N-dimensional maze and print a two-dimensional slice of it."
    )
    parser.add_argument(
        "--lengths",
        type=int,
        nargs="+",
        default=list(STARTUP_LEVEL_LENGTHS),
        help="Length of each dimension (default: %(default)s)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the maze RNG; a random seed is picked and printed when omitted",
    )
    parser.add_argument(
        "--axes",
        type=int,
        nargs=2,
        default=None,
        metavar=("HORIZONTAL", "VERTICAL"),
        help="Dimensions spanning the printed slice (default: 0 and 1)",
    )
    parser.add_argument(
        "--metrics",
        action="store_true",
        help="Print generation timings and edge counters",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    try:
        config = MazeConfig(
            lengths=args.lengths,
            random_seed=args.seed,
            collect_metrics=args.metrics,
        )
        level = load_level(config)
    except ValueError as exc:
        raise SystemExit(str(exc))

    # Print the seed so a maze can be reproduced by passing it back with --seed.
    print(f"Using random seed {level.seed}")
    print(f"Maze {'x'.join(str(length) for length in level.maze.lengths)}: {level.maze.edge_count} walks")

    try:
        level.draw_to_grid(axes=args.axes)
    except ValueError as exc:
        raise SystemExit(str(exc))
    level.print_grid()

    if level.metrics is not None:
        snapshot = level.metrics.snapshot()
        print()
        for name, phase in snapshot["phases"].items():
            print(f"  {name}: {phase['total_time'] * 1000:.2f}ms ({phase['total_items']} items)")
        print(
            "  candidates={candidates}, merged={merged}, rejected={rejected},"
            " out_of_bounds={skipped}".format(
                candidates=snapshot["candidates"],
                merged=snapshot["merged"],
                rejected=snapshot["rejected_cycles"],
                skipped=snapshot["skipped_out_of_bounds"],
            )
        )


if __name__ == "__main__":
    main()
