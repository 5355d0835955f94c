"""GridState storage tests."""

from __future__ import annotations

import numpy as np
import pytest

from heatplate.errors import InvalidDimensionError
from heatplate.grid import GridState


pytestmark = pytest.mark.unit


def test_allocate_shapes_and_dtype() -> None:
    grid = GridState.allocate(4, 7)
    assert grid.shape == (4, 7)
    assert grid.previous.shape == grid.current.shape == (4, 7)
    assert grid.dtype == np.float64
    assert grid.boundary_count == 2 * 4 + 2 * 7 - 4
    assert not np.shares_memory(grid.previous, grid.current)


@pytest.mark.parametrize("rows, cols", [(2, 5), (5, 2), (0, 0), (1, 10)])
def test_allocate_rejects_grids_without_interior(rows: int, cols: int) -> None:
    with pytest.raises(InvalidDimensionError):
        GridState.allocate(rows, cols)


def test_unknown_dtype_rejected() -> None:
    with pytest.raises(ValueError, match="dtype must be one of"):
        GridState.allocate(3, 3, dtype="float16")


def test_get_set_are_bounds_checked() -> None:
    grid = GridState.allocate(3, 4)
    grid.set(2, 3, 7.5)
    assert grid.get(2, 3) == 7.5

    for row, col in [(3, 0), (0, 4), (-1, 0), (0, -1)]:
        with pytest.raises(IndexError):
            grid.get(row, col)
        with pytest.raises(IndexError):
            grid.set(row, col, 1.0)


def test_snapshot_copies_every_cell_without_aliasing() -> None:
    grid = GridState.allocate(4, 5)
    grid.current[:] = np.arange(20, dtype=float).reshape(4, 5)
    grid.snapshot()
    np.testing.assert_array_equal(grid.previous, grid.current)

    grid.current[0, 0] = -1.0
    assert grid.previous[0, 0] == 0.0


def test_interior_is_writable_view() -> None:
    grid = GridState.allocate(4, 5)
    grid.interior()[...] = 3.0
    assert grid.current[1:-1, 1:-1].sum() == 3.0 * 2 * 3
    assert grid.current[0].sum() == 0.0


def test_from_array_copies_input() -> None:
    values = np.ones((3, 3))
    grid = GridState.from_array(values)
    values[1, 1] = 9.0
    assert grid.get(1, 1) == 1.0
    with pytest.raises(InvalidDimensionError):
        GridState.from_array(np.ones((2, 3)))
