"""Geometry helpers for cell coordinates on an N-dimensional grid."""

from __future__ import annotations

import numbers
from typing import Iterator, Optional, Sequence, Tuple

from maze_constants import MAX_DIMENSION_LENGTH

CellPos = Tuple[int, ...]


def _is_integer(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate_lengths(lengths: Sequence[int]) -> Tuple[int, ...]:
    """Return ``lengths`` as a tuple, raising ``ValueError`` if the grid is malformed."""
    if len(lengths) < 1:
        raise ValueError("Maze requires at least one dimension")
    result = []
    for dim, length in enumerate(lengths):
        if not _is_integer(length):
            raise ValueError(f"Length of dimension {dim} must be an integer, got {length!r}")
        length = int(length)
        if not (1 <= length <= MAX_DIMENSION_LENGTH):
            raise ValueError(
                f"Length of dimension {dim} must lie within [1, {MAX_DIMENSION_LENGTH}], got {length}"
            )
        result.append(length)
    return tuple(result)


def cell_count(lengths: Sequence[int]) -> int:
    count = 1
    for length in lengths:
        count *= length
    return count


def unwrap_index(lengths: Sequence[int], index: int) -> Optional[CellPos]:
    """Decode a mixed-radix cell index; dimension 0 is the least significant digit.

    Returns None if ``index`` does not name a cell of the grid.
    """
    if index < 0:
        return None
    result = []
    remaining = index
    for length in lengths:
        result.append(remaining % length)
        remaining //= length
    if remaining != 0:
        return None
    return tuple(result)


def wrap_index(lengths: Sequence[int], pos: Sequence[int]) -> int:
    """Encode a cell coordinate as its mixed-radix index."""
    index = 0
    radix = 1
    for length, component in zip(lengths, pos):
        index += component * radix
        radix *= length
    return index


def in_bounds(lengths: Sequence[int], pos: Sequence[int]) -> bool:
    if len(pos) != len(lengths):
        return False
    return all(
        _is_integer(component) and 0 <= component < length
        for component, length in zip(pos, lengths)
    )


def shifted(pos: Sequence[int], dimension: int, step: int = 1) -> CellPos:
    """Return ``pos`` moved by ``step`` along ``dimension``."""
    result = list(pos)
    result[dimension] += step
    return tuple(result)


def iter_cells(lengths: Sequence[int]) -> Iterator[CellPos]:
    """Yield every cell coordinate in index order."""
    for index in range(cell_count(lengths)):
        pos = unwrap_index(lengths, index)
        assert pos is not None
        yield pos


def origin(lengths: Sequence[int]) -> CellPos:
    return (0,) * len(lengths)
