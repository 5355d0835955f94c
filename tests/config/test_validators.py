"""Unit tests for config validators."""

from __future__ import annotations

import pytest

from heatplate.config.validators import (
    as_mapping,
    ensure_choice,
    ensure_finite,
    ensure_nonnegative,
    opt_mapping,
    to_float,
    to_int,
)


pytestmark = pytest.mark.unit


def test_mapping_helpers() -> None:
    assert as_mapping({"a": 1}, "ctx") == {"a": 1}
    assert opt_mapping(None, "ctx") == {}
    with pytest.raises(ValueError, match="ctx must be a mapping"):
        as_mapping([1], "ctx")


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_ensure_finite_rejects_non_finite(value: float) -> None:
    with pytest.raises(ValueError, match="edge must be a finite number"):
        ensure_finite("edge", value)


def test_ensure_finite_passes_numbers() -> None:
    assert ensure_finite("edge", -273.15) == -273.15


def test_numeric_converters_raise_contextual_error() -> None:
    with pytest.raises(ValueError, match="ctx.x must be a number"):
        to_float("abc", "x", "ctx")
    with pytest.raises(ValueError, match="ctx.y must be an integer"):
        to_int("abc", "y", "ctx")
    with pytest.raises(ValueError, match="ctx.y must be an integer"):
        to_int(2.5, "y", "ctx")
    with pytest.raises(ValueError, match="ctx.b must be a number"):
        to_float(True, "b", "ctx")


def test_choice_is_case_insensitive() -> None:
    assert ensure_choice("fmt", "NPY", ("npy", "txt")) == "npy"
    with pytest.raises(ValueError, match="fmt must be one of: npy, txt"):
        ensure_choice("fmt", "hdf5", ("npy", "txt"))


def test_ensure_nonnegative() -> None:
    assert ensure_nonnegative("eps", 0.0) == 0.0
    with pytest.raises(ValueError, match="eps must be >= 0"):
        ensure_nonnegative("eps", -1.0)
    with pytest.raises(ValueError, match="n must be > 0"):
        ensure_nonnegative("n", 0, allow_zero=False)
