"""Logging setup tests."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from heatplate.logging_config import LOGGER_NAME, setup_logging


pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def _reset_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def _file_handlers(logger: logging.Logger) -> list[logging.FileHandler]:
    return [h for h in logger.handlers if isinstance(h, logging.FileHandler)]


def test_file_handler_receives_records(tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"
    logger = setup_logging("INFO", str(log_file))
    logging.getLogger(f"{LOGGER_NAME}.deck").info("solving 5x5 plate")
    for handler in logger.handlers:
        handler.flush()
    assert "solving 5x5 plate" in log_file.read_text(encoding="utf-8")


def test_repeated_setup_closes_previous_handlers(tmp_path: Path) -> None:
    logger = setup_logging("DEBUG", str(tmp_path / "first.log"))
    (first,) = _file_handlers(logger)

    setup_logging("DEBUG", str(tmp_path / "second.log"))

    assert first.stream is None
    assert first not in logger.handlers
    assert len(logger.handlers) == 2
    assert [Path(h.baseFilename).name for h in _file_handlers(logger)] == ["second.log"]


def test_level_names_are_case_insensitive() -> None:
    assert setup_logging("debug").level == logging.DEBUG


def test_unknown_level_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        setup_logging("chatty")
