"""
Error-to-response pipeline.

This module provides ``catch`` and its two specializations ``stop`` and
``transparent_stop``, plus helpers wiring them into exception propagation.
"""

from fastcatch.pipeline.core import (
    ErrorHandler,
    Producer,
    catch,
    custom_response,
    never,
    stop,
    transparent_stop,
)
from fastcatch.pipeline.propagation import abort, attempt, rescue

__all__ = [
    # Pipeline
    "catch",
    "stop",
    "transparent_stop",
    # Producers
    "custom_response",
    "never",
    # Propagation
    "rescue",
    "abort",
    "attempt",
    # Types
    "ErrorHandler",
    "Producer",
]
