#!/usr/bin/env python3
"""Logging configuration for the Gravity Sandbox."""

import logging
from typing import Optional

from .config import LOG_FORMAT, LOG_LEVEL


def setup_logging(name: str = "gravity", level: Optional[str] = None) -> logging.Logger:
    """
    Set up console logging for the app.

    Args:
        name: Logger name; module loggers below it inherit the handler
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    if level is None:
        level = LOG_LEVEL

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)

    return logger
