"""Configuration container for a maze generation request."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence, Tuple

from maze_constants import DEFAULT_LEVEL_LENGTHS, DEFAULT_RANDOM_SEED
from maze_geometry import validate_lengths


@dataclass
class MazeConfig:
    """Aggregates the parameters needed to generate one maze."""

    lengths: Sequence[int]
    # None picks a fresh seed at generation time; the chosen seed is written back here.
    random_seed: int | None = None
    collect_metrics: bool = False

    def __post_init__(self) -> None:
        self.lengths = validate_lengths(tuple(self.lengths))
        if self.random_seed is not None and self.random_seed < 0:
            raise ValueError("MazeConfig random_seed must be non-negative")

    @classmethod
    def default(cls) -> "MazeConfig":
        return cls(lengths=DEFAULT_LEVEL_LENGTHS, random_seed=DEFAULT_RANDOM_SEED)

    @property
    def dimensions(self) -> int:
        return len(self.lengths)

    @property
    def length_tuple(self) -> Tuple[int, ...]:
        return tuple(self.lengths)

    def make_rng(self) -> random.Random:
        return random.Random(self.random_seed)
