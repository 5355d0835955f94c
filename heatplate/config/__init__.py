"""Typed config models and parsers."""

from .deck_models import EXPORT_FORMATS, BoundaryConfig, OutputConfig, PlateConfig, RunConfig, SolverConfig
from .parser import (
    build_deck_from_args,
    parse_boundary_config,
    parse_output_config,
    parse_plate_config,
    parse_run_config,
    parse_solver_config,
)
from .validators import (
    as_mapping,
    ensure_choice,
    ensure_finite,
    ensure_nonnegative,
    opt_mapping,
    to_float,
    to_int,
)

__all__ = [
    "EXPORT_FORMATS",
    "BoundaryConfig",
    "OutputConfig",
    "PlateConfig",
    "RunConfig",
    "SolverConfig",
    "as_mapping",
    "build_deck_from_args",
    "ensure_choice",
    "ensure_finite",
    "ensure_nonnegative",
    "opt_mapping",
    "parse_boundary_config",
    "parse_output_config",
    "parse_plate_config",
    "parse_run_config",
    "parse_solver_config",
    "to_float",
    "to_int",
]
