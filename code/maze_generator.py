"""MazeGenerator turns a MazeConfig into a generated Maze."""

from __future__ import annotations

import random
from typing import Optional

from maze import Maze
from maze_config import MazeConfig
from metrics import GenerationMetrics

SEED_UPPER_BOUND = 2**63 - 1


class MazeGenerator:
    """Manages seeding and instrumentation around a single maze generation."""

    def __init__(self, config: MazeConfig) -> None:
        self.config = config
        self.metrics: Optional[GenerationMetrics] = (
            GenerationMetrics() if config.collect_metrics else None
        )

    def ensure_seed(self) -> int:
        """Return the configured seed, picking and recording one if none was set."""
        if self.config.random_seed is None:
            # Record the picked seed so a run can be reproduced from the config.
            self.config.random_seed = random.randint(0, SEED_UPPER_BOUND)
        return self.config.random_seed

    def generate(self) -> Maze:
        self.ensure_seed()
        rng = self.config.make_rng()
        return Maze.new(self.config.length_tuple, rng, metrics=self.metrics)
