"""Deck parsing tests."""

from __future__ import annotations

import pytest

from heatplate.config import RunConfig, build_deck_from_args, parse_run_config


pytestmark = pytest.mark.unit


def test_empty_deck_uses_reference_defaults() -> None:
    cfg = parse_run_config({})
    assert cfg == RunConfig()
    assert (cfg.plate.rows, cfg.plate.cols) == (1000, 1000)
    assert cfg.boundary.north == 0.0
    assert cfg.boundary.south == cfg.boundary.east == cfg.boundary.west == 100.0
    assert cfg.solver.max_sweeps is None
    assert cfg.solver.dtype == "float64"
    assert cfg.output.formats == ["txt"]


def test_full_deck() -> None:
    cfg = parse_run_config(
        {
            "plate": {"rows": 20, "cols": 30},
            "boundary": {"north": 10, "east": 0.5},
            "solver": {"epsilon": 0.01, "max_sweeps": 500, "dtype": "FLOAT32", "record_history": True},
            "output": {"outdir": "out", "basename": "hp", "formats": ["TXT", "png"], "metrics": False},
        }
    )
    assert (cfg.plate.rows, cfg.plate.cols) == (20, 30)
    assert cfg.boundary.north == 10.0
    assert cfg.boundary.east == 0.5
    assert cfg.boundary.south == 100.0
    assert cfg.solver.epsilon == 0.01
    assert cfg.solver.max_sweeps == 500
    assert cfg.solver.dtype == "float32"
    assert cfg.solver.record_history is True
    assert cfg.output.formats == ["txt", "png"]
    assert cfg.output.basename == "hp"
    assert cfg.output.metrics is False


@pytest.mark.parametrize(
    "deck, message",
    [
        ({"solver": {"epsilon": -0.1}}, "epsilon must be >= 0"),
        ({"solver": {"epsilon": "tiny"}}, "deck.solver.epsilon must be a number"),
        ({"solver": {"max_sweeps": 0}}, "max_sweeps must be > 0"),
        ({"solver": {"dtype": "float16"}}, "dtype must be one of"),
        ({"plate": {"rows": 3.5}}, "deck.plate.rows must be an integer"),
        ({"plate": []}, "deck.plate must be a mapping"),
        ({"boundary": {"top": 1.0}}, "unknown edge"),
        ({"boundary": {"north": float("nan")}}, "deck.boundary.north must be a finite number"),
        ({"boundary": {"west": float("inf")}}, "deck.boundary.west must be a finite number"),
        ({"boundary": {"south": "-inf"}}, "deck.boundary.south must be a finite number"),
        ({"output": {"plot": {"colour": "red"}}}, "unknown key"),
        ({"output": {"plot": {"vmin": 50, "vmax": 10}}}, "vmin must be < vmax"),
        ({"output": {"plot": {"vmax": "nan"}}}, "vmax must be a finite number"),
        ({"output": {"formats": []}}, "non-empty list"),
        ({"output": {"formats": ["gif"]}}, "formats"),
        ({"output": {"basename": "a/b"}}, "plain file stem"),
        ({"domain": {}}, "unknown section"),
    ],
)
def test_invalid_decks(deck: dict, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        parse_run_config(deck)


def test_args_round_trip_through_parser() -> None:
    deck = build_deck_from_args(
        epsilon=0.25,
        rows=7,
        cols=9,
        north=5.0,
        max_sweeps=12,
        dtype="float32",
        record_history=True,
        text_path="/tmp/x.txt",
        formats=["txt", "NPY"],
    )
    cfg = parse_run_config(deck)
    assert cfg.solver.epsilon == 0.25
    assert (cfg.plate.rows, cfg.plate.cols) == (7, 9)
    assert cfg.boundary.north == 5.0
    assert cfg.solver.max_sweeps == 12
    assert cfg.output.text_path == "/tmp/x.txt"
    assert cfg.output.formats == ["txt", "npy"]
    assert cfg.output.metrics is False


def test_plot_section_reaches_output_config() -> None:
    cfg = parse_run_config({"output": {"formats": ["png"], "plot": {"cmap": "viridis", "vmin": 0, "vmax": 100}}})
    assert cfg.output.plot == {"cmap": "viridis", "vmin": 0.0, "vmax": 100.0}
    assert parse_run_config({}).output.plot == {}


def test_cli_args_with_nan_edge_are_rejected() -> None:
    deck = build_deck_from_args(epsilon=0.5, rows=5, cols=5, north=float("nan"))
    with pytest.raises(ValueError, match="deck.boundary.north must be a finite number"):
        parse_run_config(deck)
