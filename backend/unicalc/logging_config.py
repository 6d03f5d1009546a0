"""Console (and optional file) logging for the ``unicalc`` logger tree."""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(level: int | str = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """Attach handlers to the ``unicalc`` logger. Safe to call again on reload."""
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger("unicalc")
    logger.setLevel(level)
    logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    formatter = logging.Formatter(_FORMAT, datefmt="%H:%M:%S")
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
