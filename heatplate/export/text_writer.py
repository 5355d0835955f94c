"""Plain-text plate format.

Layout::

    M
    N
      v00  v01 ...  v0(N-1)
    ...

Each value is preceded by two spaces and printed like a C++ stream with
default settings (``%g``, six significant digits).
"""

from __future__ import annotations

from pathlib import Path

import numpy as np


def _ensure_parent(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def format_plate_text(field: np.ndarray) -> str:
    """Serialise a field to the plate text layout."""
    arr = np.asarray(field)
    if arr.ndim != 2:
        raise ValueError(f"field must be 2D, got shape {arr.shape}.")
    rows, cols = arr.shape
    lines = [str(rows), str(cols)]
    for row in arr:
        lines.append("".join(f"  {float(v):g}" for v in row))
    return "\n".join(lines) + "\n"


def save_plate_text(field: np.ndarray, path: str | Path) -> Path:
    """Write ``field`` to ``path`` in plate text layout."""
    out = _ensure_parent(Path(path))
    out.write_text(format_plate_text(field), encoding="utf-8")
    return out


def read_plate_text(path: str | Path) -> np.ndarray:
    """Read a plate text file back into a float64 array."""
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    if len(lines) < 2:
        raise ValueError(f"{path}: missing dimension header.")
    try:
        rows = int(lines[0].strip())
        cols = int(lines[1].strip())
    except ValueError as exc:
        raise ValueError(f"{path}: dimension header must be two integers.") from exc

    body = [line for line in lines[2:] if line.strip()]
    if len(body) != rows:
        raise ValueError(f"{path}: expected {rows} data rows, found {len(body)}.")

    out = np.empty((rows, cols), dtype=float)
    for i, line in enumerate(body):
        values = line.split()
        if len(values) != cols:
            raise ValueError(f"{path}: row {i} has {len(values)} values, expected {cols}.")
        out[i, :] = [float(v) for v in values]
    return out
