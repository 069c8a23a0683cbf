"""Logging infrastructure for decimal geometry.

Library modules log through ``create_logger(__name__)`` and stay silent
unless the host application configures logging, e.g. via ``setup_logging``.
"""

from __future__ import annotations

import logging
import os
import sys

from .constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR


def setup_logging(
    level: int | str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """Configure logging for the application.

    Intended for scripts and tests that own the process. Every handler
    already attached to the root logger is removed and replaced by a single
    stdout handler, so an application that configures its own logging
    should not call this; the package's loggers propagate to whatever root
    configuration the application sets up.

    Args:
        level: Logging level (e.g., 'DEBUG', 'INFO', 'ERROR').
               Defaults to the DECIMAL_GEOMETRY_LOG_LEVEL env var or 'INFO'.
        format_string: Custom log format string. Defaults to a structured format.

    Returns:
        The root logger configured for the application.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)

    if format_string is None:
        format_string = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"

    logger = logging.getLogger()
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(format_string))
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name.

    Args:
        name: The module name (e.g., __name__).

    Returns:
        The named logger.
    """
    return logging.getLogger(name)


# Convenience function for creating module-level loggers
def create_logger(name: str) -> logging.Logger:
    """Create and return a logger for a module.

    Args:
        name: The module name (typically __name__).

    Returns:
        A logger instance.
    """
    return get_logger(name)
