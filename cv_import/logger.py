"""Logging setup for the resume import service."""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a single stdout handler to the package logger."""
    logger = logging.getLogger("cv_import")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
    if level is not None:
        logger.setLevel(level)
    return logger
