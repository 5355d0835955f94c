"""Export manager and format-specific writers."""

from .csv_writer import save_field_csv
from .history_writer import save_history_csv, save_history_png
from .manager import VALID_FORMATS, export_results
from .metrics_writer import save_metrics_csv, save_metrics_json
from .npy_writer import save_field_npy
from .png_writer import save_heatmap_png
from .text_writer import format_plate_text, read_plate_text, save_plate_text
from .vtk_writer import save_vtk_structured_points

__all__ = [
    "VALID_FORMATS",
    "export_results",
    "format_plate_text",
    "read_plate_text",
    "save_field_csv",
    "save_field_npy",
    "save_heatmap_png",
    "save_history_csv",
    "save_history_png",
    "save_metrics_csv",
    "save_metrics_json",
    "save_plate_text",
    "save_vtk_structured_points",
]
