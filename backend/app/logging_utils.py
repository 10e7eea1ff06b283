"""Shared logging helpers for backend components."""

from __future__ import annotations

import logging
import os
from typing import Final

_LOG_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_LEVELS: Final[dict[str, int]] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}


def parse_level(level_str: str | None, default: int = logging.INFO) -> int:
    if not level_str:
        return default
    return _LEVELS.get(level_str.strip().upper(), default)


def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """Return a configured logger that emits to stderr.

    Behavior:
    - If `level` is provided it takes precedence.
    - Otherwise the `LOG_LEVEL` environment variable is consulted (e.g. DEBUG, INFO).
    - Falls back to INFO when unspecified.
    """
    chosen_level = level if level is not None else parse_level(os.environ.get("LOG_LEVEL"))

    logger = logging.getLogger(name)
    # Re-create handlers to ensure consistent formatting and level
    if logger.handlers:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(chosen_level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(chosen_level)
    logger.propagate = False
    return logger
