"""
Logging setup shared by the Streamlit page and the command-line runner.

Usage:
    from .logging_config import setup_logging, get_logger

    setup_logging("DEBUG")
    logger = get_logger(__name__)
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
ROOT_LOGGER = "holiday_explorer"

_configured = False


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.

    Safe to call on every Streamlit rerun; the handler is only added once,
    later calls just update the level.
    """
    global _configured

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    if not _configured:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
        _configured = True

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace, whatever the import path."""
    short = name.rsplit(".", 1)[-1]
    return logging.getLogger(f"{ROOT_LOGGER}.{short}")
