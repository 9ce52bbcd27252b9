"""Logging utilities built on top of :mod:`loguru`."""
from __future__ import annotations

import logging
import sys
from typing import Optional

from loguru import logger

LOG_FORMAT = "<level>{level: <8}</level> {message}"


def configure_logging(level: str = "INFO") -> None:
    """Configure loguru on stderr and bridge the standard logging module into it."""

    logger.remove()
    logger.add(lambda msg: sys.stderr.write(msg), level=level, format=LOG_FORMAT, colorize=False)

    class LoguruHandler(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            logger.opt(depth=6, exception=record.exc_info).log(record.levelname, record.getMessage())

    logging.basicConfig(handlers=[LoguruHandler()], level=level, force=True)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a standard-library logger tied to loguru."""

    return logging.getLogger(name or __name__)
