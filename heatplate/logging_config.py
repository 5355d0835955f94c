"""Logging configuration for the heatplate namespace."""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOGGER_NAME = "heatplate"


def setup_logging(level: int | str = logging.WARNING, log_file: Optional[str] = None) -> logging.Logger:
    """Configure the ``heatplate`` logger.

    Args:
        level: Logging level, as an int or a name such as ``"DEBUG"``.
        log_file: Optional path to also write log records to.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level!r}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate records when called more than once
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
