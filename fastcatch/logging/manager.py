"""
Basic logging configuration for FastCatch.

This module provides a simple and consistent
logging setup driven by application settings.
"""

import logging
import sys
from typing import Optional

from fastcatch.config.base import BaseAppSettings
from fastcatch.logging.formatters import JsonFormatter

# Type alias for Python's standard logger
Logger = logging.Logger

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str,
    level: str = "INFO",
    format: str = DEFAULT_FORMAT,
    debug: bool = False,
    json_format: bool = False,
) -> logging.Logger:
    """
    Create and configure a logger instance.

    Args:
        name: Logger name (usually __name__)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Log message format (ignored if json_format=True)
        debug: If True, sets level to DEBUG regardless of level parameter
        json_format: If True, outputs logs in JSON format

    Returns:
        Configured logger instance
    """
    # Convert string level to logging constant
    log_level = getattr(logging, level.upper(), logging.INFO)
    if debug:
        log_level = logging.DEBUG

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Remove existing handlers
    logger.handlers.clear()

    formatter = JsonFormatter() if json_format else logging.Formatter(format)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


def get_logger(
    name: str, settings: Optional[BaseAppSettings] = None, json_format: bool = False
) -> logging.Logger:
    """
    Get a configured logger instance.

    Level and format are taken from ``settings`` (LOG_LEVEL, LOG_JSON_FORMAT,
    DEBUG) when given.

    Args:
        name: Logger name (usually __name__)
        settings: Optional application settings
        json_format: If True, outputs logs in JSON format

    Returns:
        Configured logger instance
    """
    level = getattr(settings, "LOG_LEVEL", "INFO") if settings else "INFO"
    debug = bool(getattr(settings, "DEBUG", False)) if settings else False
    if settings and getattr(settings, "LOG_JSON_FORMAT", False):
        json_format = True

    return setup_logger(name, level=level, debug=debug, json_format=json_format)


def ensure_logger(
    logger: Optional[logging.Logger] = None,
    name: str = None,
    settings: Optional[BaseAppSettings] = None,
    json_format: bool = False,
) -> logging.Logger:
    """
    Ensure a logger instance is available by either using the provided one or creating a new one.

    Args:
        logger: An existing logger instance to use if provided
        name: Module name (usually __name__) for creating a new logger if needed
        settings: Optional application settings
        json_format: If True, outputs logs in JSON format when creating a new logger

    Returns:
        Either the provided logger or a newly created one
    """
    if logger:
        return logger

    if not name:
        raise ValueError("Module name must be provided when logger is not specified")

    return get_logger(name, settings, json_format)
