"""NumPy field writer."""

from __future__ import annotations

from pathlib import Path

import numpy as np


def save_field_npy(field: np.ndarray, outdir: str | Path, filename: str = "plate.npy") -> Path:
    """Save temperature field as .npy."""
    out = Path(outdir)
    out.mkdir(parents=True, exist_ok=True)
    path = out / filename
    np.save(path, np.asarray(field))
    return path
