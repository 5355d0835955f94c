"""PNG heatmap writer."""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg", force=True)
import matplotlib.pyplot as plt
import numpy as np


def _ensure_outdir(outdir: str | Path) -> Path:
    path = Path(outdir)
    path.mkdir(parents=True, exist_ok=True)
    return path


def save_heatmap_png(
    field: np.ndarray,
    outdir: str | Path,
    filename: str = "plate.png",
    plot_cfg: dict | None = None,
) -> Path:
    """Save 2D temperature heatmap as PNG."""
    path = _ensure_outdir(outdir) / filename

    cfg = dict(plot_cfg or {})
    vmin = cfg.get("vmin")
    vmax = cfg.get("vmax")

    arr = np.asarray(field, dtype=float)
    rows, cols = arr.shape
    fig, ax = plt.subplots(figsize=(6.0, 6.0 * rows / max(cols, 1) + 0.6), dpi=150)
    try:
        im = ax.imshow(
            arr,
            origin="upper",
            aspect="equal",
            cmap=str(cfg.get("cmap", "inferno")),
            vmin=float(vmin) if vmin is not None else None,
            vmax=float(vmax) if vmax is not None else None,
        )
        ax.set_xlabel("column j")
        ax.set_ylabel("row i")
        ax.set_title(f"Steady-state temperature ({rows} x {cols})")
        cbar = fig.colorbar(im, ax=ax)
        cbar.set_label("T")
        fig.tight_layout()
        fig.savefig(path)
    finally:
        plt.close(fig)
    return path
