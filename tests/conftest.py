import random
import sys
from pathlib import Path
from typing import Callable, Sequence

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
CODE_DIR = ROOT_DIR / "code"
if str(CODE_DIR) not in sys.path:
    sys.path.insert(0, str(CODE_DIR))

from maze import Maze
from maze_level import MazeLevel

FIXED_SEED = 684153987


@pytest.fixture
def rng() -> random.Random:
    return random.Random(FIXED_SEED)


@pytest.fixture
def small_maze(rng: random.Random) -> Maze:
    return Maze.new((4, 3, 2), rng)


@pytest.fixture
def corridor_maze() -> Maze:
    # A single row 0-1-2 with one extra branch up from cell 1.
    return Maze(
        (3, 2),
        [((0, 0), (1, 0)), ((1, 0), (2, 0)), ((1, 0), (1, 1))],
    )


@pytest.fixture
def make_level() -> Callable[..., MazeLevel]:
    def _make_level(lengths: Sequence[int] = (4, 4), seed: int = FIXED_SEED) -> MazeLevel:
        return MazeLevel(Maze.new(lengths, random.Random(seed)), seed=seed)

    return _make_level
