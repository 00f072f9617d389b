"""Logger configuration for the lecture_master package."""

import logging
from typing import Optional

from ..config import config

PACKAGE_LOGGER = "lecture_master"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger if no handlers are present.

    The root logger is left alone so host applications keep control of it.

    Args:
        level: Log level name (defaults to config.logging.log_level)

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel((level or config.logging.log_level).upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(config.logging.log_format))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
