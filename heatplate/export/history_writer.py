"""Convergence history writers."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Sequence

import matplotlib

matplotlib.use("Agg", force=True)
import matplotlib.pyplot as plt
import numpy as np


def _ensure_outdir(outdir: str | Path) -> Path:
    path = Path(outdir)
    path.mkdir(parents=True, exist_ok=True)
    return path


def save_history_csv(
    history: Sequence[tuple[int, float]],
    outdir: str | Path,
    filename: str = "convergence.csv",
) -> Path:
    """Save per-sweep (iteration, diff) pairs as CSV."""
    path = _ensure_outdir(outdir) / filename
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["iteration", "diff"])
        for iteration, diff in history:
            writer.writerow([int(iteration), f"{float(diff):.12g}"])
    return path


def save_history_png(
    history: Sequence[tuple[int, float]],
    outdir: str | Path,
    filename: str = "convergence.png",
    epsilon: float | None = None,
) -> Path:
    """Save diff vs sweep plot on a log scale."""
    if not history:
        raise ValueError("History is empty; nothing to plot.")

    it = np.asarray([int(row[0]) for row in history], dtype=float)
    diff = np.asarray([float(row[1]) for row in history], dtype=float)
    # log axis cannot show an exact fixed point
    diff = np.where(diff > 0.0, diff, np.nan)

    path = _ensure_outdir(outdir) / filename
    fig, ax = plt.subplots(figsize=(7.2, 3.6), dpi=140)
    ax.semilogy(it, diff, color="#1f77b4", lw=1.6, label="max |change|")
    if epsilon is not None and epsilon > 0.0:
        ax.axhline(float(epsilon), color="#d62728", lw=1.0, ls="--", label="epsilon")
    ax.set_xlabel("sweep")
    ax.set_ylabel("diff")
    ax.set_title("Relaxation convergence")
    ax.grid(alpha=0.3, which="both")
    ax.legend(loc="upper right")
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    return path
