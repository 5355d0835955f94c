"""YAML deck loader and run orchestration."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from .analysis import field_summary
from .boundary import initialize_plate
from .config import RunConfig, parse_run_config
from .errors import DeckError, PlateError
from .export import export_results
from .grid import GridState
from .relaxation import ProgressCallback, RelaxationEngine
from .report import ConvergenceReport

logger = logging.getLogger(__name__)

DEFAULT_OUTDIR = "outputs/run"


@dataclass
class SolveState:
    """Result of a deck run."""

    deck_path: Path
    config: RunConfig
    grid: GridState
    report: ConvergenceReport
    mean: float
    wall_time_s: float = 0.0
    cpu_time_s: float = 0.0
    metrics: dict[str, Any] | None = None
    exports: list[Path] = field(default_factory=list)


def load_deck(deck_path: str | Path) -> dict[str, Any]:
    """Load YAML deck from file."""
    path = Path(deck_path)
    if not path.exists():
        raise DeckError(f"Deck file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            payload = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise DeckError(f"Failed to parse YAML deck: {path}") from exc

    if payload is None:
        raise DeckError(f"Deck is empty: {path}")
    if not isinstance(payload, dict):
        raise DeckError("deck must be a mapping.")
    return payload


def resolve_outdir(deck_path: Path, outdir: str | None, out_override: str | Path | None) -> Path:
    """Resolve output directory from override/deck/default values."""
    if out_override is not None:
        path = Path(out_override)
        if not path.is_absolute():
            path = path.resolve()
        return path

    path = Path(DEFAULT_OUTDIR) if outdir is None else Path(outdir)
    if not path.is_absolute():
        path = (deck_path.parent / path).resolve()
    return path


def _resolve_text_path(deck_path: Path, text_path: str | None) -> Path | None:
    if text_path is None:
        return None
    path = Path(text_path)
    if not path.is_absolute():
        path = (deck_path.parent / path).resolve()
    return path


def _build_metrics(state: SolveState) -> dict[str, Any]:
    cfg = state.config
    return {
        "plate": {"rows": cfg.plate.rows, "cols": cfg.plate.cols, "dtype": cfg.solver.dtype},
        "boundary": cfg.boundary.as_dict(),
        "initial_mean": float(state.mean),
        "convergence": state.report.as_dict(),
        "timing": {"wall_time_s": float(state.wall_time_s), "cpu_time_s": float(state.cpu_time_s)},
        "field": field_summary(state.grid.current),
    }


def run_payload(
    deck: dict[str, Any],
    *,
    deck_path: str | Path | None = None,
    out_override: str | Path | None = None,
    progress: Optional[ProgressCallback] = None,
) -> SolveState:
    """Run a relaxation from an in-memory deck payload."""
    path = Path("__in_memory_deck__.yaml") if deck_path is None else Path(deck_path)
    if not path.is_absolute():
        path = (Path.cwd() / path).resolve()

    if not isinstance(deck, dict):
        raise DeckError("deck must be a mapping.")

    try:
        config = parse_run_config(deck)
        engine = RelaxationEngine(
            config.solver.epsilon,
            max_sweeps=config.solver.max_sweeps,
            progress=progress,
            record_history=config.solver.record_history,
        )
        grid = GridState.allocate(config.plate.rows, config.plate.cols, dtype=config.solver.dtype)
    except (TypeError, ValueError) as exc:
        raise DeckError(str(exc)) from exc

    mean = initialize_plate(grid, config.boundary)
    logger.info(
        "solving %dx%d plate, epsilon=%g, boundary=%s",
        grid.rows,
        grid.cols,
        config.solver.epsilon,
        config.boundary.as_dict(),
    )

    wall0 = time.perf_counter()
    cpu0 = time.process_time()
    try:
        report = engine.solve(grid)
    except PlateError as exc:
        raise DeckError(str(exc)) from exc
    wall_time_s = time.perf_counter() - wall0
    cpu_time_s = time.process_time() - cpu0

    state = SolveState(
        deck_path=path,
        config=config,
        grid=grid,
        report=report,
        mean=mean,
        wall_time_s=wall_time_s,
        cpu_time_s=cpu_time_s,
    )
    state.metrics = _build_metrics(state)

    output = config.output
    try:
        state.exports = export_results(
            grid.current,
            resolve_outdir(path, output.outdir, out_override),
            output.formats,
            basename=output.basename,
            text_path=_resolve_text_path(path, output.text_path),
            report=report,
            metrics=state.metrics if output.metrics else None,
            plot_cfg=dict(output.plot),
        )
    except (OSError, ValueError) as exc:
        raise DeckError(f"output failed: {exc}") from exc
    return state


def run_deck(
    deck_path: str | Path,
    out_override: str | Path | None = None,
    progress: Optional[ProgressCallback] = None,
) -> SolveState:
    """Run the relaxation described by a YAML deck."""
    deck_path = Path(deck_path).resolve()
    deck = load_deck(deck_path)
    return run_payload(deck, deck_path=deck_path, out_override=out_override, progress=progress)
