"""
Centralized logging configuration for ulice.

This module provides functions for setting up logging in a consistent
way across the package. Log records go to stderr so that stdout carries
nothing but conversion results.
"""

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Track if logging has been configured
_logging_configured = False


def configure_logging(level: Optional[str] = None, format_str: Optional[str] = None):
    """
    Configure the package logger for ulice.

    Only the first call has any effect, later calls should use
    `update_log_level` instead.

    Args:
        level: The logging level as a string ('debug', 'info', etc.), defaults to 'warning'
        format_str: The log format string (defaults to DEFAULT_FORMAT)
    """
    global _logging_configured

    if _logging_configured:
        return

    if level is None:
        log_level = logging.WARNING
    else:
        log_level = _get_level_from_string(level)

    logger = logging.getLogger("ulice")
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(format_str or DEFAULT_FORMAT))
    logger.addHandler(handler)

    # Prevent propagation to the root logger to avoid double logging
    logger.propagate = False

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name, prefixed with 'ulice' if needed.

    Args:
        name: The name of the logger

    Returns:
        A logger instance
    """
    if not name.startswith("ulice"):
        name = f"ulice.{name}"

    return logging.getLogger(name)


def _get_level_from_string(level: str) -> int:
    """Convert a string log level to a logging level constant."""
    level = level.lower()
    if level == "debug":
        return logging.DEBUG
    elif level == "info":
        return logging.INFO
    elif level == "warning" or level == "warn":
        return logging.WARNING
    elif level == "error":
        return logging.ERROR
    elif level == "critical":
        return logging.CRITICAL
    else:
        return logging.WARNING


def update_log_level(level: str):
    """
    Update the log level of all ulice loggers.

    Args:
        level: The new log level as a string ('debug', 'info', etc.)
    """
    log_level = _get_level_from_string(level)

    logger = logging.getLogger("ulice")
    logger.setLevel(log_level)

    for handler in logger.handlers:
        handler.setLevel(log_level)
