#!/usr/bin/env python3

# Generates many mazes, checks each one is a spanning tree and reports timing and shape.

from __future__ import annotations

import argparse
import json
import random
import statistics
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import networkx as nx

from maze import Maze
from maze_config import MazeConfig
from maze_generator import MazeGenerator
from maze_geometry import iter_cells

DEFAULT_LENGTHS = (12, 12, 6, 4)
# Diameter is quadratic in the cell count, so it is skipped for large mazes.
DEFAULT_DIAMETER_CELL_LIMIT = 2000


@dataclass
class MazeRun:
    seed: int
    duration: float
    cell_count: int
    edge_count: int
    is_tree: bool
    dead_ends: int
    junctions: int
    rejected_cycles: int
    diameter: Optional[int]

    @property
    def dead_end_fraction(self) -> float:
        return self.dead_ends / self.cell_count

    @property
    def junction_fraction(self) -> float:
        return self.junctions / self.cell_count


def build_walk_graph(maze: Maze) -> nx.Graph:
    graph = nx.Graph()
    graph.add_nodes_from(iter_cells(maze.lengths))
    graph.add_edges_from(maze.walks)
    return graph


def measure_maze(lengths: Sequence[int], seed: int, diameter_cell_limit: int) -> MazeRun:
    """Generate one maze and inspect its walk graph."""
    generator = MazeGenerator(MazeConfig(lengths=lengths, random_seed=seed, collect_metrics=True))
    start = time.perf_counter()
    maze = generator.generate()
    duration = time.perf_counter() - start

    graph = build_walk_graph(maze)
    degrees = [degree for _, degree in graph.degree()]
    is_tree = nx.is_tree(graph)
    diameter = None
    if is_tree and 2 <= maze.cell_count <= diameter_cell_limit:
        diameter = nx.diameter(graph)

    assert generator.metrics is not None
    return MazeRun(
        seed=seed,
        duration=duration,
        cell_count=maze.cell_count,
        edge_count=maze.edge_count,
        is_tree=is_tree,
        dead_ends=degrees.count(1),
        junctions=sum(1 for degree in degrees if degree >= 3),
        rejected_cycles=generator.metrics.rejected_cycles,
        diameter=diameter,
    )


def run_benchmark(
    num_runs: int,
    seed: Optional[int],
    lengths: Sequence[int],
    diameter_cell_limit: int = DEFAULT_DIAMETER_CELL_LIMIT,
) -> List[MazeRun]:
    rng = random.Random(seed)
    return [
        measure_maze(lengths, rng.randint(0, 1_000_000), diameter_cell_limit)
        for _ in range(num_runs)
    ]


def summarize(values: Sequence[float]) -> Dict[str, float]:
    """Mean, spread and the median/p90 cut points of ``values``."""
    if not values:
        return {}
    summary = {"mean": statistics.mean(values), "min": min(values), "max": max(values)}
    if len(values) > 1:
        deciles = statistics.quantiles(values, n=10, method="inclusive")
        summary["p50"] = deciles[4]
        summary["p90"] = deciles[8]
    else:
        summary["p50"] = summary["p90"] = values[0]
    return summary


def summarize_runs(runs: Sequence[MazeRun]) -> Dict[str, Dict[str, float]]:
    diameters = [float(run.diameter) for run in runs if run.diameter is not None]
    return {
        "duration": summarize([run.duration for run in runs]),
        "dead_end_fraction": summarize([run.dead_end_fraction for run in runs]),
        "junction_fraction": summarize([run.junction_fraction for run in runs]),
        "rejected_cycles": summarize([float(run.rejected_cycles) for run in runs]),
        "diameter": summarize(diameters),
    }


def format_summary(name: str, summary: Dict[str, float]) -> str:
    if not summary:
        return f"{name}: (no data)"
    parts = ", ".join(f"{key} {value:.4g}" for key, value in summary.items())
    return f"{name}: {parts}"


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Run the maze generator repeatedly and report timing and shape statistics."
    )
    parser.add_argument("-n", "--runs", type=int, default=20, help="Number of mazes to generate (default: 20)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the harness RNG that picks run seeds")
    parser.add_argument(
        "--lengths",
        type=int,
        nargs="+",
        default=list(DEFAULT_LENGTHS),
        help="Length of each maze dimension (default: %(default)s)",
    )
    parser.add_argument(
        "--diameter-cell-limit",
        type=int,
        default=DEFAULT_DIAMETER_CELL_LIMIT,
        help="Skip diameter computation for mazes with more cells than this",
    )
    parser.add_argument("--output", type=Path, default=None, help="Write per-run results and the summary as JSON")
    args = parser.parse_args(argv)

    if args.runs <= 0:
        raise SystemExit("Number of runs must be a positive integer")
    try:
        lengths = MazeConfig(lengths=args.lengths).length_tuple
    except ValueError as exc:
        raise SystemExit(str(exc))

    runs = run_benchmark(args.runs, args.seed, lengths, args.diameter_cell_limit)
    for idx, run in enumerate(runs, start=1):
        print(
            f"Run {idx:02d}: {run.duration * 1000:.1f}ms (seed {run.seed}) |"
            f" {run.edge_count} walks over {run.cell_count} cells"
            f" ({'tree' if run.is_tree else 'NOT A TREE'}) |"
            f" dead ends {run.dead_end_fraction:.1%} | diameter {run.diameter if run.diameter is not None else '-'}"
        )

    summary = summarize_runs(runs)
    failures = sum(1 for run in runs if not run.is_tree)
    print()
    print(f"{len(runs)} mazes of {'x'.join(str(length) for length in lengths)}, {failures} not spanning trees")
    for name, values in summary.items():
        print(format_summary(name, values))

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        report = {
            "lengths": list(lengths),
            "seed": args.seed,
            "runs": [asdict(run) for run in runs],
            "summary": summary,
        }
        args.output.write_text(json.dumps(report, indent=2, sort_keys=True) + "\n", encoding="utf-8")
        print(f"\nSaved benchmark results to {args.output}")


if __name__ == "__main__":
    main()
