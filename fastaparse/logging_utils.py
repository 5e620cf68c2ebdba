"""Logging helpers for the fastaparse CLI."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "fastaparse"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(verbose: bool = False, quiet: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    """Send log records to stderr (stdout carries FASTA output) and return the package logger."""

    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=stream or sys.stderr)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or one of its children."""

    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)
