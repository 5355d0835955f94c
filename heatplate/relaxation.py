"""Jacobi relaxation of the discrete Laplace equation.

Each sweep replaces every interior cell by the average of its four
neighbours, reading only from the snapshot taken at the start of the sweep:

    W[i, j] <- (U[i-1, j] + U[i+1, j] + U[i, j-1] + U[i, j+1]) / 4

The convergence metric of a sweep is ``max |W - U|`` over the interior.
Iteration continues while ``epsilon <= diff``; the loop is entered with
``diff = epsilon`` so at least one sweep always runs.

There is no implicit iteration cap. With ``epsilon == 0`` a run only stops
when ``max_sweeps`` is given, because a fixed point reports ``diff == 0``.
A non-finite diff (NaN or infinite edge values) ends the loop without
convergence and raises :class:`DidNotConvergeError`.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable
from typing import Optional

import numpy as np

from .boundary import BoundaryValues, initialize_plate
from .errors import DidNotConvergeError, InvalidToleranceError
from .grid import GridState
from .report import ConvergenceReport

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, float], None]
SweepFunction = Callable[[GridState], float]


def validate_epsilon(epsilon: float) -> float:
    """Return epsilon as float, rejecting negative or non-finite values."""
    try:
        eps = float(epsilon)
    except (TypeError, ValueError) as exc:
        raise InvalidToleranceError(f"epsilon must be a number, got {epsilon!r}.") from exc
    if not math.isfinite(eps):
        raise InvalidToleranceError(f"epsilon must be finite, got {eps}.")
    if eps < 0.0:
        raise InvalidToleranceError(f"epsilon must be >= 0, got {eps}.")
    return eps


def jacobi_sweep(grid: GridState) -> float:
    """Run one vectorised sweep in place and return its max change."""
    grid.snapshot()
    u = grid.previous
    # Summation order matches the pointwise update: north, south, west, east.
    new = (u[:-2, 1:-1] + u[2:, 1:-1] + u[1:-1, :-2] + u[1:-1, 2:]) / 4.0
    diff = float(np.max(np.abs(new - u[1:-1, 1:-1])))
    grid.current[1:-1, 1:-1] = new
    return diff


def interior_cells(grid: GridState) -> list[tuple[int, int]]:
    """Interior (row, col) pairs in row-major order."""
    return [(i, j) for i in range(1, grid.rows - 1) for j in range(1, grid.cols - 1)]


def jacobi_sweep_pointwise(
    grid: GridState,
    order: Optional[Iterable[tuple[int, int]]] = None,
) -> float:
    """Cell-by-cell sweep visiting interior cells in ``order``.

    Any permutation of the interior gives the same grid and diff as
    :func:`jacobi_sweep`; row-major order is used when ``order`` is None.
    """
    cells = interior_cells(grid) if order is None else list(order)
    for i, j in cells:
        if not (1 <= i <= grid.rows - 2 and 1 <= j <= grid.cols - 2):
            raise IndexError(f"cell ({i}, {j}) is not an interior cell of {grid.shape}")

    grid.snapshot()
    u = grid.previous
    w = grid.current
    diff = 0.0
    for i, j in cells:
        w[i, j] = (u[i - 1, j] + u[i + 1, j] + u[i, j - 1] + u[i, j + 1]) / 4.0
        change = float(abs(w[i, j] - u[i, j]))
        if diff < change:
            diff = change
    return diff


class RelaxationEngine:
    """Drive Jacobi sweeps until the change drops below ``epsilon``.

    ``progress`` is called with ``(iteration, diff)`` after sweeps 1, 2, 4,
    8, ... . ``max_sweeps`` bounds the run; reaching it without convergence
    raises :class:`DidNotConvergeError` carrying the partial report.
    """

    def __init__(
        self,
        epsilon: float,
        *,
        max_sweeps: Optional[int] = None,
        progress: Optional[ProgressCallback] = None,
        record_history: bool = False,
        sweep: SweepFunction = jacobi_sweep,
    ) -> None:
        self.epsilon = validate_epsilon(epsilon)
        if max_sweeps is not None:
            max_sweeps = int(max_sweeps)
            if max_sweeps < 1:
                raise ValueError(f"max_sweeps must be >= 1, got {max_sweeps}.")
        self.max_sweeps = max_sweeps
        self.progress = progress
        self.record_history = bool(record_history)
        self.sweep = sweep

    def solve(self, grid: GridState) -> ConvergenceReport:
        """Relax ``grid`` in place and return the convergence report."""
        epsilon = self.epsilon
        diff = epsilon
        iterations = 0
        iterations_print = 1
        history: list[tuple[int, float]] = []

        while epsilon <= diff:
            diff = self.sweep(grid)
            iterations += 1
            if self.record_history:
                history.append((iterations, diff))

            if iterations == iterations_print:
                logger.debug("sweep %d: diff=%.6g", iterations, diff)
                if self.progress is not None:
                    self.progress(iterations, diff)
                iterations_print *= 2

            if self.max_sweeps is not None and iterations >= self.max_sweeps and epsilon <= diff:
                report = ConvergenceReport(iterations, diff, epsilon, tuple(history))
                logger.warning("sweep cap reached: %s", report.to_text())
                raise DidNotConvergeError(report)

        report = ConvergenceReport(iterations, diff, epsilon, tuple(history))
        if not report.converged:
            # a NaN diff fails both loop tests
            logger.warning("relaxation stopped without converging: %s", report.to_text())
            raise DidNotConvergeError(report)
        logger.info("relaxation finished: %s", report.to_text())
        return report


def solve_plate(
    rows: int,
    cols: int,
    epsilon: float,
    boundary: Optional[BoundaryValues] = None,
    *,
    dtype: str = "float64",
    max_sweeps: Optional[int] = None,
    progress: Optional[ProgressCallback] = None,
    record_history: bool = False,
) -> tuple[GridState, ConvergenceReport, float]:
    """Allocate, initialise and relax a plate.

    Returns the final grid, the report and the boundary mean used as the
    initial interior value. Preconditions are checked before allocation.
    """
    engine = RelaxationEngine(
        epsilon,
        max_sweeps=max_sweeps,
        progress=progress,
        record_history=record_history,
    )
    grid = GridState.allocate(rows, cols, dtype=dtype)
    mean = initialize_plate(grid, boundary)
    logger.debug("plate %dx%d initialised, mean=%.6g", grid.rows, grid.cols, mean)
    report = engine.solve(grid)
    return grid, report, mean
