# SPDX-License-Identifier: Apache-2.0
"""Diagnostics output for tinylog's own warnings (bad log files, failed writes)."""

from typing import Optional
from loguru import logger
import sys

INTERNAL_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>tinylog</cyan> | <level>{message}</level>"
)


def init_logger(debug: bool = False, colorize: Optional[bool] = None) -> int:
    """Send internal diagnostics to stderr and return the loguru handler id.

    Colors follow whether stderr is a terminal unless ``colorize`` is given.
    """
    if colorize is None:
        colorize = sys.stderr.isatty()

    log_level = "DEBUG" if debug else "INFO"

    logger.remove()
    return logger.add(sys.stderr, format=INTERNAL_FORMAT, level=log_level, colorize=colorize)
