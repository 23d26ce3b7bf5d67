"""Construction of the application's text logger."""

from __future__ import annotations

import logging
import sys

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def to_level(log_level: str) -> int:
    """Map a configured level name to a logging level; unknown names mean INFO."""
    return _LEVELS.get(log_level, logging.INFO)


def new_logger(log_level: str) -> logging.Logger:
    """Return the application logger writing key=value lines to standard output."""
    logger = logging.getLogger("mallbots")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("time=%(asctime)s level=%(levelname)s msg=%(message)s")
    )
    logger.addHandler(handler)
    logger.setLevel(to_level(log_level))
    logger.propagate = False
    return logger