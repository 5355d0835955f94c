"""CSV writer for the full temperature field."""

from __future__ import annotations

import csv
from pathlib import Path

import numpy as np


def _ensure_outdir(outdir: str | Path) -> Path:
    path = Path(outdir)
    path.mkdir(parents=True, exist_ok=True)
    return path


def save_field_csv(field: np.ndarray, outdir: str | Path, filename: str = "plate.csv") -> Path:
    """Save field as CSV, one grid row per line, row 0 (north edge) first."""
    arr = np.asarray(field, dtype=float)
    if arr.ndim != 2:
        raise ValueError(f"field must be 2D, got shape {arr.shape}.")

    path = _ensure_outdir(outdir) / filename
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        for row in arr:
            writer.writerow([f"{float(v):.12g}" for v in row])
    return path
