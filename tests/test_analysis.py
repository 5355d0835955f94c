"""Field diagnostics tests."""

from __future__ import annotations

import numpy as np
import pytest

from heatplate.analysis import field_summary, laplace_residual
from heatplate.relaxation import solve_plate


pytestmark = pytest.mark.unit


def test_linear_field_has_zero_residual() -> None:
    i, j = np.mgrid[0:6, 0:9]
    field = 2.0 * i + 3.0 * j
    residual = laplace_residual(field)
    assert residual.shape == (4, 7)
    np.testing.assert_allclose(residual, 0.0, atol=1.0e-12)


def test_residual_is_next_sweep_change() -> None:
    grid, report, _ = solve_plate(5, 5, 0.5)
    residual = laplace_residual(grid.current)
    assert float(np.max(np.abs(residual))) <= report.final_diff + 1.0e-12


def test_residual_rejects_degenerate_field() -> None:
    with pytest.raises(ValueError, match="at least 3x3"):
        laplace_residual(np.zeros((2, 5)))


def test_field_summary_keys() -> None:
    grid, _, _ = solve_plate(5, 5, 0.5)
    summary = field_summary(grid.current)
    assert summary["rows"] == 5
    assert summary["cols"] == 5
    assert summary["min"] == 0.0
    assert summary["max"] == 100.0
    assert summary["center"] == 73.828125
    assert 0.0 < summary["interior_mean"] < 100.0
    assert summary["max_abs_residual"] < 0.5
