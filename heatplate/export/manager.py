"""Export manager orchestrating format-specific writers."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import numpy as np

from ..report import ConvergenceReport
from .csv_writer import save_field_csv
from .history_writer import save_history_csv, save_history_png
from .metrics_writer import save_metrics_csv, save_metrics_json
from .npy_writer import save_field_npy
from .png_writer import save_heatmap_png
from .text_writer import save_plate_text
from .vtk_writer import save_vtk_structured_points

VALID_FORMATS = ("txt", "npy", "csv", "png", "vtk")


def export_results(
    field: np.ndarray,
    outdir: str | Path,
    formats: Iterable[str],
    basename: str = "plate",
    text_path: str | Path | None = None,
    report: ConvergenceReport | None = None,
    metrics: dict | None = None,
    plot_cfg: dict | None = None,
) -> list[Path]:
    """Export final field, history and metrics in the requested formats."""
    requested = [str(fmt).lower() for fmt in formats]
    unknown = set(requested) - set(VALID_FORMATS)
    if unknown:
        raise ValueError(f"Unsupported export format(s): {sorted(unknown)}")

    out = Path(outdir)
    written: list[Path] = []

    if "txt" in requested:
        txt_target = Path(text_path) if text_path is not None else out / f"{basename}.txt"
        written.append(save_plate_text(field, txt_target))
    if "npy" in requested:
        written.append(save_field_npy(field, out, filename=f"{basename}.npy"))
    if "csv" in requested:
        written.append(save_field_csv(field, out, filename=f"{basename}.csv"))
    if "png" in requested:
        written.append(save_heatmap_png(field, out, filename=f"{basename}.png", plot_cfg=plot_cfg))
    if "vtk" in requested:
        written.append(save_vtk_structured_points(field, out, filename=f"{basename}.vtk"))

    if report is not None and report.history:
        written.append(save_history_csv(report.history, out, filename="convergence.csv"))
        if "png" in requested:
            written.append(
                save_history_png(report.history, out, filename="convergence.png", epsilon=report.epsilon)
            )

    if metrics:
        written.append(save_metrics_json(metrics, out, filename="metrics.json"))
        written.append(save_metrics_csv(metrics, out, filename="metrics.csv"))

    return written
