import itertools

import pytest

from maze_geometry import (
    cell_count,
    in_bounds,
    iter_cells,
    origin,
    shifted,
    unwrap_index,
    validate_lengths,
    wrap_index,
)


def test_unwrap_index_single_dimension():
    assert unwrap_index([2], 0) == (0,)
    assert unwrap_index([2], 1) == (1,)
    assert unwrap_index([2], 2) is None


def test_unwrap_index_treats_first_dimension_as_least_significant():
    assert unwrap_index((3, 4), 0) == (0, 0)
    assert unwrap_index((3, 4), 2) == (2, 0)
    assert unwrap_index((3, 4), 3) == (0, 1)
    assert unwrap_index((3, 4), 11) == (2, 3)
    assert unwrap_index((3, 4), 12) is None
    assert unwrap_index((3, 4), -1) is None


@pytest.mark.parametrize("lengths", [(1,), (5,), (2, 3), (4, 1, 3), (2, 2, 2, 2, 2), (3, 1, 2, 1, 2, 2)])
def test_index_round_trip_covers_every_cell(lengths):
    count = cell_count(lengths)
    seen = set()
    for index in range(count):
        pos = unwrap_index(lengths, index)
        assert pos is not None
        assert in_bounds(lengths, pos)
        assert wrap_index(lengths, pos) == index
        seen.add(pos)

    assert len(seen) == count
    assert unwrap_index(lengths, count) is None
    assert unwrap_index(lengths, count + 7) is None


def test_iter_cells_matches_product_of_ranges():
    lengths = (2, 3, 2)

    cells = set(iter_cells(lengths))

    assert cells == set(itertools.product(range(2), range(3), range(2)))


@pytest.mark.parametrize(
    "pos,expected",
    [
        ((0, 0), True),
        ((2, 3), True),
        ((3, 0), False),
        ((0, 4), False),
        ((-1, 0), False),
        ((0, 0, 0), False),
    ],
)
def test_in_bounds(pos, expected):
    assert in_bounds((3, 4), pos) is expected


def test_shifted_moves_one_component():
    assert shifted((1, 2, 3), 1) == (1, 3, 3)
    assert shifted((1, 2, 3), 2, -1) == (1, 2, 2)


def test_origin_is_all_zeros():
    assert origin((5, 5, 5)) == (0, 0, 0)


@pytest.mark.parametrize(
    "lengths", [(), (0,), (3, 0), (256,), (4, -2), (2.5,), (2, None), ("3",), (True, 2)]
)
def test_validate_lengths_rejects_malformed_grids(lengths):
    with pytest.raises(ValueError):
        validate_lengths(lengths)


def test_validate_lengths_normalizes_to_tuple():
    assert validate_lengths([1, 255, 3]) == (1, 255, 3)


def test_in_bounds_requires_integer_components():
    assert not in_bounds((3, 3), (0.5, 0))
    assert not in_bounds((3, 3), (1.0, 0))
    assert not in_bounds((3, 3), (None, 0))
