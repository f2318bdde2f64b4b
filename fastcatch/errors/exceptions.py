"""
Exception classes raised by FastCatch itself.

These are NOT meant to be a hierarchy for application errors. Handler code
keeps whatever error types it already has; the classes below only describe
misuse of this package (an invalid status code) and the ``Abort`` carrier
used to short-circuit a prepared response through the call stack.
"""

from typing import Any

from starlette.responses import Response


class FastCatchError(Exception):
    """Base exception for all errors raised by FastCatch."""


class InvalidStatusCodeError(FastCatchError, ValueError):
    """
    Exception raised when a value cannot be used as an HTTP status code.

    Attributes:
        value: The rejected value
        message: Human-readable error message
    """

    def __init__(self, value: Any, message: str = None):
        self.value = value
        self.message = message or f"invalid status code: {value!r}"
        super().__init__(self.message)


class Abort(FastCatchError):
    """
    Carries a fully prepared response up the call stack.

    Raised by :func:`fastcatch.pipeline.abort`. Once ``setup_errors`` has been
    applied to the application, the registered exception handler serves
    ``response`` as is.

    Attributes:
        response: The response to serve
    """

    def __init__(self, response: Response):
        self.response = response
        super().__init__(f"aborted with status {response.status_code}")
