"""Legacy VTK writer."""

from __future__ import annotations

from pathlib import Path

import numpy as np


def _ensure_outdir(outdir: str | Path) -> Path:
    path = Path(outdir)
    path.mkdir(parents=True, exist_ok=True)
    return path


def save_vtk_structured_points(
    field: np.ndarray,
    outdir: str | Path,
    filename: str = "plate.vtk",
    scalar_name: str = "temperature",
    spacing: float = 1.0,
) -> Path:
    """Save field as legacy VTK ASCII STRUCTURED_POINTS (x = column, y = row)."""
    arr = np.asarray(field, dtype=float)
    if arr.ndim != 2:
        raise ValueError(f"field must be 2D, got shape {arr.shape}.")
    rows, cols = arr.shape

    path = _ensure_outdir(outdir) / filename
    flat = arr.reshape(-1)
    with path.open("w", encoding="utf-8") as f:
        f.write("# vtk DataFile Version 3.0\n")
        f.write("heatplate scalar field\n")
        f.write("ASCII\n")
        f.write("DATASET STRUCTURED_POINTS\n")
        f.write(f"DIMENSIONS {cols} {rows} 1\n")
        f.write("ORIGIN 0 0 0\n")
        f.write(f"SPACING {spacing:.12g} {spacing:.12g} 1\n")
        f.write(f"POINT_DATA {rows * cols}\n")
        f.write(f"SCALARS {scalar_name} float 1\n")
        f.write("LOOKUP_TABLE default\n")
        for k, value in enumerate(flat):
            f.write(f"{float(value):.8e}")
            if (k + 1) % 6 == 0:
                f.write("\n")
            else:
                f.write(" ")
        if (flat.size % 6) != 0:
            f.write("\n")
    return path
