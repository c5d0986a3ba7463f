"""Level state built around a generated maze: the current cell and the active axis."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union

from grid_renderer import GridRendererMixin
from maze import Maze
from maze_config import MazeConfig
from maze_constants import SUPPORTED_LEVEL_DIMENSIONS
from maze_generator import MazeGenerator
from maze_geometry import CellPos, origin, shifted
from metrics import GenerationMetrics


@dataclass(frozen=True)
class PositionChanged:
    position: CellPos


@dataclass(frozen=True)
class AxisChanged:
    axis: int


LevelEvent = Union[PositionChanged, AxisChanged]


class MazeLevel(GridRendererMixin):
    """A loaded maze plus the position and axis the player currently occupies."""

    def __init__(
        self,
        maze: Maze,
        seed: Optional[int] = None,
        metrics: Optional[GenerationMetrics] = None,
    ) -> None:
        self.maze = maze
        self.seed = seed
        self.metrics = metrics
        self.grid: List[List[str]] = []
        self._pos = origin(maze.lengths)
        self._axis = 0

    def pos(self) -> CellPos:
        return self._pos

    def axis(self) -> int:
        return self._axis

    def initial_events(self) -> List[LevelEvent]:
        """Events announcing the state a freshly loaded level starts in."""
        return [PositionChanged(position=self._pos), AxisChanged(axis=self._axis)]

    def set_axis(self, axis: int) -> AxisChanged:
        if not 0 <= axis < self.maze.dimensions:
            raise ValueError(f"Axis {axis} is out of range for {self.maze.dimensions} dimensions")
        self._axis = axis
        return AxisChanged(axis=axis)

    def next_axis(self) -> AxisChanged:
        return self.set_axis((self._axis + 1) % self.maze.dimensions)

    def step(self, forward: bool = True) -> Optional[PositionChanged]:
        """Move one cell along the current axis, or return None if a wall is in the way."""
        axis = self._axis
        if forward:
            if not self.maze.can_move(self._pos, axis):
                return None
            self._pos = shifted(self._pos, axis)
        else:
            if self._pos[axis] == 0:
                return None
            previous = shifted(self._pos, axis, -1)
            if not self.maze.can_move(previous, axis):
                return None
            self._pos = previous
        return PositionChanged(position=self._pos)


def load_level(config: MazeConfig) -> MazeLevel:
    """Generate the maze described by ``config`` and wrap it in a fresh level."""
    if config.dimensions not in SUPPORTED_LEVEL_DIMENSIONS:
        raise ValueError(
            f"Levels support {SUPPORTED_LEVEL_DIMENSIONS[0]} to {SUPPORTED_LEVEL_DIMENSIONS[-1]}"
            f" dimensions, got {config.dimensions}"
        )
    generator = MazeGenerator(config)
    maze = generator.generate()
    return MazeLevel(maze, seed=config.random_seed, metrics=generator.metrics)
