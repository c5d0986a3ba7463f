"""Maze generation over N-dimensional grids and adjacency queries on the result."""

from __future__ import annotations

import heapq
import random
from time import perf_counter
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple

from disjoint_set import DisjointSetForest
from maze_constants import MAX_DIMENSION_LENGTH, PRIORITY_BITS
from maze_geometry import (
    CellPos,
    cell_count,
    in_bounds,
    shifted,
    unwrap_index,
    validate_lengths,
    wrap_index,
)
from metrics import GenerationMetrics

Walk = Tuple[CellPos, CellPos]


class Maze:
    """A spanning tree over a grid of cells, stored as the set of walkable edges.

    Each walk ``(a, b)`` connects ``a`` to the cell ``b`` one step further along a single
    dimension. Only that forward direction is stored.
    """

    def __init__(self, lengths: Sequence[int], walks: Iterable[Walk]) -> None:
        self._lengths = validate_lengths(lengths)
        self._walks: FrozenSet[Walk] = frozenset(
            (tuple(a), tuple(b)) for a, b in walks
        )

    @classmethod
    def new(
        cls,
        lengths: Sequence[int],
        rng: random.Random,
        metrics: Optional[GenerationMetrics] = None,
    ) -> Maze:
        """Generate a maze over ``lengths`` using randomized Kruskal edge selection."""
        lengths = validate_lengths(lengths)
        dims = len(lengths)
        count = cell_count(lengths)

        # Step 1: one forest node per cell; the node id is the cell index.
        start = perf_counter()
        cells: List[CellPos] = []
        for index in range(count):
            pos = unwrap_index(lengths, index)
            assert pos is not None
            cells.append(pos)
        forest = DisjointSetForest(count)
        if metrics is not None:
            metrics.record_phase("cells", perf_counter() - start, count)

        # Step 2: every (cell, dimension) pair gets a random priority.
        # heapq is a min-heap, so priorities are negated to pop the highest first.
        start = perf_counter()
        pending_edges = [
            (-rng.getrandbits(PRIORITY_BITS), index, dim)
            for index in range(count)
            for dim in range(dims)
        ]
        heapq.heapify(pending_edges)
        if metrics is not None:
            metrics.candidates += len(pending_edges)
            metrics.record_phase("candidates", perf_counter() - start, len(pending_edges))

        # Step 3: accept edges that join two separate trees.
        start = perf_counter()
        walks: List[Walk] = []
        while pending_edges:
            _, index, dim = heapq.heappop(pending_edges)
            a = cells[index]
            # The last cell along a dimension has no forward neighbour.
            if a[dim] + 1 >= lengths[dim]:
                if metrics is not None:
                    metrics.skipped_out_of_bounds += 1
                continue
            b = shifted(a, dim)
            if forest.try_merge(index, wrap_index(lengths, b)):
                walks.append((a, b))
                if metrics is not None:
                    metrics.merged += 1
            elif metrics is not None:
                metrics.rejected_cycles += 1
        if metrics is not None:
            metrics.record_phase("merge", perf_counter() - start, len(walks))

        return cls(lengths, walks)

    @property
    def lengths(self) -> Tuple[int, ...]:
        return self._lengths

    @property
    def walks(self) -> FrozenSet[Walk]:
        return self._walks

    @property
    def dimensions(self) -> int:
        return len(self._lengths)

    @property
    def cell_count(self) -> int:
        return cell_count(self._lengths)

    @property
    def edge_count(self) -> int:
        return len(self._walks)

    def _check_pair(self, a: CellPos, b: CellPos) -> Optional[bool]:
        if not in_bounds(self._lengths, a) or not in_bounds(self._lengths, b):
            return None
        # Only one direction is stored, so look for both.
        return (a, b) in self._walks or (b, a) in self._walks

    def can_move(self, point: Sequence[int], dimension: int) -> Optional[bool]:
        """Whether a walk leads from ``point`` to its forward neighbour along ``dimension``.

        Returns None when the query makes no sense: the dimension is out of range, or
        ``point`` or its neighbour lies outside the grid.
        """
        if isinstance(dimension, bool) or not isinstance(dimension, int):
            return None
        if not 0 <= dimension < len(self._lengths) or not in_bounds(self._lengths, point):
            return None
        a = tuple(point)
        if a[dimension] >= MAX_DIMENSION_LENGTH:
            return None
        return self._check_pair(a, shifted(a, dimension))

    def open_directions(self, point: Sequence[int]) -> List[Tuple[int, int]]:
        """List every ``(dimension, step)`` along which a walk leaves ``point``.

        ``step`` is +1 for the forward neighbour and -1 for the backward one.
        """
        if not in_bounds(self._lengths, point):
            return []
        directions: List[Tuple[int, int]] = []
        for dim in range(len(self._lengths)):
            if self.can_move(point, dim):
                directions.append((dim, 1))
            if point[dim] > 0 and self.can_move(shifted(point, dim, -1), dim):
                directions.append((dim, -1))
        return directions

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maze):
            return NotImplemented
        return self._lengths == other._lengths and self._walks == other._walks

    def __hash__(self) -> int:
        return hash((self._lengths, self._walks))

    def __repr__(self) -> str:
        return f"Maze(lengths={self._lengths}, edges={len(self._walks)})"
