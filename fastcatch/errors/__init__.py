"""
Error handling module for FastAPI applications.

This module provides the exceptions raised by FastCatch itself and the
exception handler that serves aborted responses.

Limitations:
- No application error hierarchy is provided on purpose; handler code keeps
  its own error types and converts them with the pipeline functions.
"""

from fastcatch.errors.exceptions import Abort, FastCatchError, InvalidStatusCodeError
from fastcatch.errors.handlers import abort_handler, register_exception_handlers
from fastcatch.errors.manager import setup_errors

__all__ = [
    # Main setup function
    "setup_errors",
    # Handler registration
    "register_exception_handlers",
    "abort_handler",
    # Exception classes
    "FastCatchError",
    "InvalidStatusCodeError",
    "Abort",
]
