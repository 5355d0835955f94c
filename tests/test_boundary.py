"""Edge stamping and initial interior tests."""

from __future__ import annotations

import numpy as np
import pytest

from heatplate.boundary import BoundaryValues, apply_boundary, boundary_mean, initialize_plate
from heatplate.grid import GridState


pytestmark = pytest.mark.unit


def test_default_values_are_one_cold_three_hot_edges() -> None:
    values = BoundaryValues()
    assert (values.north, values.south, values.east, values.west) == (0.0, 100.0, 100.0, 100.0)


@pytest.mark.parametrize("rows, cols", [(3, 3), (5, 5), (4, 9), (10, 3)])
def test_edges_hold_their_values_and_corners_follow_rows(rows: int, cols: int) -> None:
    values = BoundaryValues(north=1.0, south=2.0, east=3.0, west=4.0)
    grid = GridState.allocate(rows, cols)
    initialize_plate(grid, values)
    w = grid.current

    assert np.all(w[1:-1, 0] == 4.0)
    assert np.all(w[1:-1, -1] == 3.0)
    assert np.all(w[0, :] == 1.0)
    assert np.all(w[-1, :] == 2.0)
    assert w[0, 0] == w[0, -1] == 1.0
    assert w[-1, 0] == w[-1, -1] == 2.0


def test_mean_counts_each_boundary_cell_once() -> None:
    grid = GridState.allocate(4, 6)
    mean = initialize_plate(grid, BoundaryValues(north=1.0, south=2.0, east=3.0, west=4.0))
    # west 2*4 + east 2*3 + south 6*2 + north 6*1 = 32 over 16 cells
    assert mean == 2.0
    assert np.all(grid.interior() == 2.0)


def test_reference_mean_for_default_plate() -> None:
    grid = GridState.allocate(5, 5)
    mean = initialize_plate(grid)
    assert mean == 68.75
    assert np.all(grid.interior() == 68.75)


def test_mean_matches_sequential_sum_in_stamping_order() -> None:
    rows, cols = 7, 11
    grid = GridState.allocate(rows, cols)
    apply_boundary(grid, BoundaryValues(north=0.1, south=100.3, east=33.3, west=71.7))

    w = grid.current
    total = 0.0
    for i in range(1, rows - 1):
        total += w[i, 0]
    for i in range(1, rows - 1):
        total += w[i, cols - 1]
    for j in range(cols):
        total += w[rows - 1, j]
    for j in range(cols):
        total += w[0, j]
    assert boundary_mean(grid) == total / (2 * rows + 2 * cols - 4)


def test_stamping_leaves_interior_untouched() -> None:
    grid = GridState.allocate(4, 4, fill=-5.0)
    apply_boundary(grid, BoundaryValues())
    assert np.all(grid.interior() == -5.0)
