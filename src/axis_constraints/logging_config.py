"""Logging setup for the ``axis_constraints`` logger namespace."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "axis_constraints"


def setup_logging(level: int = logging.WARNING, log_file: str | None = None) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.WARNING).
        log_file: Optional path to also write log records to.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # replace handlers left by an earlier call
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized at level %s", logging.getLevelName(level))
    return logger
