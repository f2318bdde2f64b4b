"""
Helpers that connect error handlers to Python's exception propagation.

- ``rescue``: endpoint decorator, returns ``on_error(exc)`` for listed exceptions.
- ``abort``: raise a prepared response from anywhere below the endpoint.
- ``attempt``: call a function, returning ``on_error(exc)`` if it raises.

Example:
    ```python
    @app.get("/users/{user_id}")
    @rescue(stop(404), LookupError)
    @rescue(stop(500))
    def read_user(user_id: int):
        return repository.get(user_id)
    ```
"""

import functools
import inspect
import logging
from typing import Any, Callable, NoReturn, Optional, Tuple, Type

from starlette.exceptions import HTTPException

from fastcatch.config import get_settings
from fastcatch.errors.exceptions import Abort
from fastcatch.logging import ensure_logger
from fastcatch.pipeline.core import ErrorHandler


def rescue(
    on_error: ErrorHandler,
    *errors: Type[BaseException],
    log_level: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> Callable:
    """
    Decorate an endpoint so that listed exceptions become responses.

    Works for both ``def`` and ``async def`` endpoints. The wrapped function
    keeps its signature, so FastAPI dependency injection is unaffected.
    ``Abort`` is never intercepted; it always reaches the registered handler.
    ``HTTPException`` is left to the framework too, unless listed in ``errors``.

    Args:
        on_error: Handler built with stop, transparent_stop or catch
        *errors: Exception types to intercept (default: Exception)
        log_level: Level for logging intercepted exceptions
                   (default: ERROR_LOG_LEVEL from settings)
        logger: Optional logger to use instead of the module logger

    Returns:
        Decorator for endpoint functions
    """
    caught: Tuple[Type[BaseException], ...] = errors or (Exception,)
    passthrough = _passthrough(caught)
    settings = get_settings()
    level_name = log_level or settings.ERROR_LOG_LEVEL
    level = getattr(logging, level_name.upper(), logging.DEBUG)
    log = ensure_logger(logger, __name__, settings)

    def handle(func: Callable, exc: BaseException):
        log.log(level, f"{func.__name__} raised {type(exc).__name__}: {exc}")
        return on_error(exc)

    def decorator(func: Callable) -> Callable:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                try:
                    return await func(*args, **kwargs)
                except passthrough:
                    raise
                except caught as exc:
                    return handle(func, exc)

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except passthrough:
                raise
            except caught as exc:
                return handle(func, exc)

        return wrapper

    return decorator


def abort(on_error: ErrorHandler, error: Any) -> NoReturn:
    """
    Convert an error into a response and raise it as ``Abort``.

    Requires ``setup_errors`` on the application, which registers the handler
    serving ``Abort.response``.

    Args:
        on_error: Handler built with stop, transparent_stop or catch
        error: Any error value

    Raises:
        Abort: Always, carrying ``on_error(error)``
    """
    response = on_error(error)
    if isinstance(error, BaseException):
        raise Abort(response) from error
    raise Abort(response)


def attempt(
    func: Callable,
    *args: Any,
    on_error: ErrorHandler,
    errors: Tuple[Type[BaseException], ...] = (Exception,),
    **kwargs: Any,
) -> Any:
    """
    Call ``func`` and return its result, or ``on_error(exc)`` if it raises.

    Args:
        func: Function to call
        *args: Positional arguments for func
        on_error: Handler built with stop, transparent_stop or catch
        errors: Exception types to intercept
        **kwargs: Keyword arguments for func

    Returns:
        The function result, or the error response
    """
    try:
        return func(*args, **kwargs)
    except _passthrough(errors):
        raise
    except errors as exc:
        return on_error(exc)


def _passthrough(
    errors: Tuple[Type[BaseException], ...]
) -> Tuple[Type[BaseException], ...]:
    """Exceptions left to the framework: Abort, and HTTPException unless listed."""
    if any(issubclass(error, HTTPException) for error in errors):
        return (Abort,)
    return (Abort, HTTPException)
