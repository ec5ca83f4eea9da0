"""
Logging setup for the `loopover_core` namespace (core package, CLI and HTTP app).
"""
from __future__ import annotations

import logging
import sys

LOGGER_NAME = 'loopover_core'


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Sends `loopover_core` records at `level` and above to stdout; safe to call repeatedly."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s', datefmt='%H:%M:%S'))
    logger.addHandler(handler)
    return logger
