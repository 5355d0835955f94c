"""Steady-state heated plate solver."""

from .boundary import BoundaryValues, apply_boundary, boundary_mean, initialize_plate
from .errors import DeckError, DidNotConvergeError, InvalidDimensionError, InvalidToleranceError, PlateError
from .grid import GridState
from .relaxation import RelaxationEngine, jacobi_sweep, jacobi_sweep_pointwise, solve_plate
from .report import ConvergenceReport

__version__ = "0.1.0"

__all__ = [
    "BoundaryValues",
    "ConvergenceReport",
    "DeckError",
    "DidNotConvergeError",
    "GridState",
    "InvalidDimensionError",
    "InvalidToleranceError",
    "PlateError",
    "RelaxationEngine",
    "apply_boundary",
    "boundary_mean",
    "initialize_plate",
    "jacobi_sweep",
    "jacobi_sweep_pointwise",
    "solve_plate",
]
