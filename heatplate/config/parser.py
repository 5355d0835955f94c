"""Config parsing and translation utilities."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, cast

from .deck_models import (
    EXPORT_FORMATS,
    BoundaryConfig,
    OutputConfig,
    PlateConfig,
    RunConfig,
    SolverConfig,
)
from .validators import ensure_choice, ensure_finite, ensure_nonnegative, opt_mapping, to_float, to_int

_SECTIONS = ("plate", "boundary", "solver", "output")
_PLOT_KEYS = ("cmap", "vmin", "vmax")


def parse_plate_config(deck: Mapping[str, Any]) -> PlateConfig:
    plate = opt_mapping(deck.get("plate"), "deck.plate")
    defaults = PlateConfig()
    rows = to_int(plate.get("rows", defaults.rows), "rows", "deck.plate")
    cols = to_int(plate.get("cols", defaults.cols), "cols", "deck.plate")
    return PlateConfig(rows=rows, cols=cols)


def parse_boundary_config(deck: Mapping[str, Any]) -> BoundaryConfig:
    boundary = opt_mapping(deck.get("boundary"), "deck.boundary")
    unknown = sorted(set(boundary) - {"north", "south", "east", "west"})
    if unknown:
        raise ValueError(f"deck.boundary has unknown edge(s): {', '.join(map(str, unknown))}.")
    defaults = BoundaryConfig()
    values: dict[str, float] = {}
    for edge in ("north", "south", "east", "west"):
        value = to_float(boundary.get(edge, getattr(defaults, edge)), edge, "deck.boundary")
        values[edge] = ensure_finite(f"deck.boundary.{edge}", value)
    return BoundaryConfig(**values)


def parse_solver_config(deck: Mapping[str, Any]) -> SolverConfig:
    solver = opt_mapping(deck.get("solver"), "deck.solver")
    defaults = SolverConfig()
    epsilon = to_float(solver.get("epsilon", defaults.epsilon), "epsilon", "deck.solver")
    ensure_nonnegative("deck.solver.epsilon", epsilon)

    max_sweeps_raw = solver.get("max_sweeps")
    max_sweeps: Optional[int] = None
    if max_sweeps_raw is not None:
        max_sweeps = to_int(max_sweeps_raw, "max_sweeps", "deck.solver")
        ensure_nonnegative("deck.solver.max_sweeps", max_sweeps, allow_zero=False)

    dtype = ensure_choice("deck.solver.dtype", solver.get("dtype", defaults.dtype), ("float64", "float32"))
    return SolverConfig(
        epsilon=epsilon,
        max_sweeps=max_sweeps,
        dtype=cast(Any, dtype),
        record_history=bool(solver.get("record_history", defaults.record_history)),
    )


def parse_plot_config(output: Mapping[str, Any]) -> dict[str, Any]:
    plot = opt_mapping(output.get("plot"), "deck.output.plot")
    unknown = sorted(set(plot) - set(_PLOT_KEYS))
    if unknown:
        raise ValueError(f"deck.output.plot has unknown key(s): {', '.join(map(str, unknown))}.")
    cfg: dict[str, Any] = {}
    if plot.get("cmap") is not None:
        cfg["cmap"] = str(plot["cmap"])
    for key in ("vmin", "vmax"):
        if plot.get(key) is not None:
            cfg[key] = ensure_finite(f"deck.output.plot.{key}", to_float(plot[key], key, "deck.output.plot"))
    if "vmin" in cfg and "vmax" in cfg and cfg["vmin"] >= cfg["vmax"]:
        raise ValueError("deck.output.plot.vmin must be < vmax.")
    return cfg


def parse_output_config(deck: Mapping[str, Any]) -> OutputConfig:
    output = opt_mapping(deck.get("output"), "deck.output")
    formats_raw = output.get("formats", ["txt"])
    if not isinstance(formats_raw, list) or not formats_raw:
        raise ValueError("deck.output.formats must be a non-empty list.")
    formats = [ensure_choice("deck.output.formats[]", fmt, EXPORT_FORMATS) for fmt in formats_raw]

    outdir = output.get("outdir")
    basename = str(output.get("basename", "plate"))
    if not basename or "/" in basename or "\\" in basename:
        raise ValueError(f"deck.output.basename must be a plain file stem, got {basename!r}.")
    text_path = output.get("text_path")
    return OutputConfig(
        outdir=None if outdir is None else str(outdir),
        basename=basename,
        text_path=None if text_path is None else str(text_path),
        formats=formats,
        metrics=bool(output.get("metrics", True)),
        plot=parse_plot_config(output),
    )


def parse_run_config(deck: Mapping[str, Any]) -> RunConfig:
    """Extract strongly typed run config from a deck payload."""
    unknown = sorted(set(deck) - set(_SECTIONS))
    if unknown:
        raise ValueError(
            f"deck has unknown section(s): {', '.join(map(str, unknown))}. "
            f"Use: {', '.join(_SECTIONS)}."
        )
    return RunConfig(
        plate=parse_plate_config(deck),
        boundary=parse_boundary_config(deck),
        solver=parse_solver_config(deck),
        output=parse_output_config(deck),
    )


def build_deck_from_args(
    *,
    epsilon: float,
    rows: int = 1000,
    cols: int = 1000,
    north: float = 0.0,
    south: float = 100.0,
    east: float = 100.0,
    west: float = 100.0,
    max_sweeps: Optional[int] = None,
    dtype: str = "float64",
    record_history: bool = False,
    outdir: Optional[str] = None,
    basename: str = "plate",
    text_path: Optional[str] = None,
    formats: Sequence[str] = ("txt",),
    metrics: bool = False,
) -> dict[str, Any]:
    """Convert flat command-line values into canonical deck payload."""
    return {
        "plate": {"rows": int(rows), "cols": int(cols)},
        "boundary": {
            "north": float(north),
            "south": float(south),
            "east": float(east),
            "west": float(west),
        },
        "solver": {
            "epsilon": float(epsilon),
            "max_sweeps": None if max_sweeps is None else int(max_sweeps),
            "dtype": str(dtype),
            "record_history": bool(record_history),
        },
        "output": {
            "outdir": outdir,
            "basename": str(basename),
            "text_path": text_path,
            "formats": [str(fmt).lower() for fmt in formats],
            "metrics": bool(metrics),
        },
    }
