"""Logging setup for the service process."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO", name: str = "jobapps") -> logging.Logger:
    """Attach a single stdout handler to the package logger.

    Calling this again only updates the level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not any(getattr(handler, "_jobapps_handler", False) for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        handler._jobapps_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
