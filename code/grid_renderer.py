"""Render a two-dimensional slice of a maze level to an ASCII grid."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from maze import Maze
from maze_geometry import CellPos

WALL = "█"
OPEN = " "
PLAYER = "@"
# Markers for openings along dimensions that are not part of the drawn slice.
HIDDEN_FORWARD = "^"
HIDDEN_BACKWARD = "v"
HIDDEN_BOTH = "*"


class GridRendererMixin:
    """Provides drawing helpers for visualizing the maze around the current position."""

    maze: Maze
    grid: List[List[str]]

    def pos(self) -> CellPos:
        raise NotImplementedError

    def axis(self) -> int:
        raise NotImplementedError

    def slice_axes(self) -> Tuple[int, Optional[int]]:
        """The current axis and the one after it; a one-dimensional maze has no second axis."""
        dims = self.maze.dimensions
        if dims == 1:
            return (0, None)
        return (self.axis(), (self.axis() + 1) % dims)

    def draw_to_grid(self, axes: Optional[Sequence[Optional[int]]] = None) -> None:
        """Renders the slice spanned by ``axes`` through the current position onto the grid."""
        x_axis, y_axis = tuple(axes) if axes is not None else self.slice_axes()
        dims = self.maze.dimensions
        if x_axis is None or not 0 <= x_axis < dims:
            raise ValueError(f"Horizontal axis {x_axis} is out of range for {dims} dimensions")
        if y_axis is not None and (not 0 <= y_axis < dims or y_axis == x_axis):
            raise ValueError(f"Vertical axis {y_axis} is invalid for horizontal axis {x_axis}")

        lengths = self.maze.lengths
        width = lengths[x_axis]
        height = lengths[y_axis] if y_axis is not None else 1
        hidden = {dim for dim in range(dims) if dim not in (x_axis, y_axis)}

        self.grid = [[WALL] * (2 * width + 1) for _ in range(2 * height + 1)]
        base = list(self.pos())
        for j in range(height):
            for i in range(width):
                cell = list(base)
                cell[x_axis] = i
                if y_axis is not None:
                    cell[y_axis] = j
                pos = tuple(cell)
                gx, gy = 2 * i + 1, 2 * j + 1
                self.grid[gy][gx] = self._cell_char(pos, hidden)
                if self.maze.can_move(pos, x_axis):
                    self.grid[gy][gx + 1] = OPEN
                if y_axis is not None and self.maze.can_move(pos, y_axis):
                    self.grid[gy + 1][gx] = OPEN

    def _cell_char(self, pos: CellPos, hidden: set[int]) -> str:
        if pos == self.pos():
            return PLAYER
        steps = {step for dim, step in self.maze.open_directions(pos) if dim in hidden}
        if steps == {1, -1}:
            return HIDDEN_BOTH
        if 1 in steps:
            return HIDDEN_FORWARD
        if -1 in steps:
            return HIDDEN_BACKWARD
        return OPEN

    def grid_text(self, horizontal_sep: str = "") -> str:
        return "\n".join(horizontal_sep.join(row) for row in self.grid)

    def print_grid(self, horizontal_sep: str = "") -> None:
        """Prints the ASCII grid to the console."""
        print(self.grid_text(horizontal_sep))
