"""
The catch pipeline: turn any error value into exactly one response.

Functions you are likely to need, in order:

- ``stop``: map the error, hide it from the user, set the status code.
- ``transparent_stop``: map the error, show its text to the user, set the status code.
- ``catch``: map the error, do custom handling, fall back to a status code.

Each returns a single-argument handler ``error -> Response`` so it can be
used wherever an error is at hand:

    try:
        user = load_user(user_id)
    except LookupError as exc:
        return stop(404)(exc)

Error values need no common base class. An error type can opt into
producing its own response by defining ``error_response(status)``; returning
``None`` from it defers to the default renderer.
"""

from typing import Any, Callable, Optional, TypeVar

from fastapi.responses import Response

from fastcatch.logging import get_logger
from fastcatch.responses.convert import into_response
from fastcatch.responses.render import DefaultRenderer, default_response, transparent
from fastcatch.responses.status import StatusLike, to_status_code

E = TypeVar("E")

Producer = Callable[[int, E], Optional[Any]]
ErrorHandler = Callable[[E], Response]

logger = get_logger(__name__)


def custom_response(status: int, error: Any) -> Optional[Any]:
    """
    Ask the error value for its own response.

    Calls ``error.error_response(status)`` when the error defines it and
    returns ``None`` (no opinion) otherwise. Classes passed as error values
    are never asked.

    Args:
        status: The suggested fallback status code
        error: Any error value

    Returns:
        A response-like value, or None to defer to the default renderer
    """
    if isinstance(error, type):
        return None
    producer = getattr(error, "error_response", None)
    if callable(producer):
        return producer(status)
    return None


def never(status: int, error: Any) -> None:
    """Producer with no opinion about any error."""
    return None


def catch(
    code: StatusLike,
    handle: Producer = custom_response,
    default: DefaultRenderer = default_response,
) -> ErrorHandler:
    """
    Return a handler that consumes an error and produces a response.

    The handler calls ``handle(status, error)``. If that produces a value, it
    is converted with ``into_response`` and served as is, whatever status and
    headers it carries. If it produces ``None``, ``default(status)`` is served.

    NOTE: ``code`` is only the status used when no custom response is
    produced. A producer that returns a response sets its own status.

    Args:
        code: Suggested fallback status code, validated immediately
        handle: Producer of an optional custom response
        default: Renderer used when the producer has no opinion

    Returns:
        Single-argument handler mapping an error value to a response

    Raises:
        InvalidStatusCodeError: If ``code`` is not a valid status code
    """
    status = to_status_code(code)

    def handler(error: Any) -> Response:
        result = handle(status, error)
        if result is not None:
            response = into_response(result)
            logger.debug(
                f"Custom response {response.status_code} produced for "
                f"{type(error).__name__} (suggested {status})"
            )
            return response

        logger.debug(f"Default response {status} used for {type(error).__name__}")
        return default(status)

    return handler


def stop(code: StatusLike, default: DefaultRenderer = default_response) -> ErrorHandler:
    """
    Return a handler that discards the error and serves the default response.

    Any value is accepted as the error, including ``None`` and objects that
    cannot be printed.

    Args:
        code: Status code of the response
        default: Renderer of the response

    Returns:
        Single-argument handler mapping an error value to a response
    """
    return catch(code, never, default)


def transparent_stop(code: StatusLike) -> ErrorHandler:
    """
    A variety of ``stop`` that shows the error's text instead of hiding it.

    Args:
        code: Status code of the response

    Returns:
        Single-argument handler mapping an error value to a response
    """
    return catch(code, transparent)
