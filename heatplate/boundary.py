"""Dirichlet edge stamping and interior initialisation."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .grid import GridState


@dataclass(frozen=True)
class BoundaryValues:
    """Constant temperature on each plate edge.

    Defaults reproduce the classic heated-plate setup: one cold edge (north)
    and three hot edges.
    """

    north: float = 0.0
    south: float = 100.0
    east: float = 100.0
    west: float = 100.0

    def as_dict(self) -> dict[str, float]:
        return {
            "north": float(self.north),
            "south": float(self.south),
            "east": float(self.east),
            "west": float(self.west),
        }


def apply_boundary(grid: GridState, values: BoundaryValues) -> None:
    """Stamp edge values onto ``grid.current``.

    West and east columns cover rows 1..M-2 only; south and north rows cover
    the full width, so the four corners always carry the south/north values.
    """
    w = grid.current
    w[1:-1, 0] = values.west
    w[1:-1, -1] = values.east
    w[-1, :] = values.south
    w[0, :] = values.north


def _edge_cells(grid: GridState) -> np.ndarray:
    w = grid.current
    return np.concatenate((w[1:-1, 0], w[1:-1, -1], w[-1, :], w[0, :]))


def boundary_mean(grid: GridState) -> float:
    """Average of all boundary cells, each counted once.

    Cells are accumulated one after another in stamping order (west, east,
    south, north); ``cumsum`` keeps that order where ``sum`` would pair them.
    """
    edges = _edge_cells(grid).astype(np.float64)
    total = float(np.cumsum(edges)[-1])
    return total / float(grid.boundary_count)


def initialize_plate(grid: GridState, values: BoundaryValues | None = None) -> float:
    """Stamp the edges, fill the interior with the boundary mean and return it."""
    if values is None:
        values = BoundaryValues()
    apply_boundary(grid, values)
    mean = boundary_mean(grid)
    grid.interior()[...] = mean
    return mean
