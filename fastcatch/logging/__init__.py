"""
Logging module for FastCatch.

This module provides a simple logging interface
that integrates with application settings.

Limitations:
- Only console (stdout) logging is supported out of the box.
- No file logging, log rotation, or external service integration.
"""

from fastcatch.logging.formatters import JsonFormatter
from fastcatch.logging.manager import Logger, ensure_logger, get_logger, setup_logger

__all__ = ["Logger", "get_logger", "ensure_logger", "setup_logger", "JsonFormatter"]
