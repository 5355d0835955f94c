"""Typed models for deck-level configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Optional

from ..boundary import BoundaryValues

BoundaryConfig = BoundaryValues

EXPORT_FORMATS = ("txt", "npy", "csv", "png", "vtk")


@dataclass(frozen=True)
class PlateConfig:
    """Plate discretisation."""

    rows: int = 1000
    cols: int = 1000


@dataclass(frozen=True)
class SolverConfig:
    """Relaxation settings."""

    epsilon: float = 0.001
    max_sweeps: Optional[int] = None
    dtype: Literal["float64", "float32"] = "float64"
    record_history: bool = False


@dataclass(frozen=True)
class OutputConfig:
    """Where and how the final field is written."""

    outdir: Optional[str] = None
    basename: str = "plate"
    text_path: Optional[str] = None
    formats: list[str] = field(default_factory=lambda: ["txt"])
    metrics: bool = True
    plot: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RunConfig:
    """Complete, validated run description."""

    plate: PlateConfig = field(default_factory=PlateConfig)
    boundary: BoundaryConfig = field(default_factory=BoundaryConfig)
    solver: SolverConfig = field(default_factory=SolverConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
