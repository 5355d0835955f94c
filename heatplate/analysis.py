"""Post-solve field diagnostics."""

from __future__ import annotations

from typing import Any

import numpy as np
from scipy import ndimage

_LAPLACE_KERNEL = np.array(
    [
        [0.0, 0.25, 0.0],
        [0.25, -1.0, 0.25],
        [0.0, 0.25, 0.0],
    ],
    dtype=float,
)


def laplace_residual(field: np.ndarray) -> np.ndarray:
    """Five-point residual ``avg(neighbours) - value`` on interior cells.

    Returned shape is ``(rows-2, cols-2)``. A converged plate has a residual
    of the order of epsilon everywhere.
    """
    arr = np.asarray(field, dtype=float)
    if arr.ndim != 2 or min(arr.shape) < 3:
        raise ValueError(f"field must be 2D with at least 3x3 cells, got {arr.shape}.")
    full = ndimage.convolve(arr, _LAPLACE_KERNEL, mode="nearest")
    return full[1:-1, 1:-1]


def field_summary(field: np.ndarray) -> dict[str, Any]:
    """Scalar summary of a temperature field."""
    arr = np.asarray(field, dtype=float)
    interior = arr[1:-1, 1:-1]
    residual = laplace_residual(arr)
    rows, cols = arr.shape
    return {
        "rows": int(rows),
        "cols": int(cols),
        "min": float(np.min(arr)),
        "max": float(np.max(arr)),
        "interior_mean": float(np.mean(interior)),
        "center": float(arr[rows // 2, cols // 2]),
        "max_abs_residual": float(np.max(np.abs(residual))),
    }
