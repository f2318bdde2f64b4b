"""
HTTP status code helpers.

Status codes are accepted as plain integers, ``http.HTTPStatus`` members or
numeric strings. Any code in the 100..999 range is valid, including codes
that ``http.HTTPStatus`` does not know about.
"""

from http import HTTPStatus
from typing import Union

from fastcatch.errors.exceptions import InvalidStatusCodeError

StatusLike = Union[int, str, HTTPStatus]

MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 999


def to_status_code(code: StatusLike) -> int:
    """
    Convert what could be a status code into an integer status code.

    Args:
        code: An int, HTTPStatus member or numeric string

    Returns:
        The status code as an int

    Raises:
        InvalidStatusCodeError: If the value is not a status code in 100..999
    """
    # bool is an int subclass; True must not silently become status 1
    if isinstance(code, bool):
        raise InvalidStatusCodeError(code)

    if isinstance(code, int):
        value = int(code)
    elif isinstance(code, str) and code.strip().isdigit():
        value = int(code.strip())
    else:
        raise InvalidStatusCodeError(code)

    if not MIN_STATUS_CODE <= value <= MAX_STATUS_CODE:
        raise InvalidStatusCodeError(code)

    return value


def reason_phrase(code: int) -> str:
    """Return the canonical reason phrase for a status code, or an empty string."""
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return ""


def reason_constant(code: int) -> str:
    """Return the status name (e.g. ``NOT_FOUND``), or ``ERROR`` for unknown codes."""
    try:
        return HTTPStatus(code).name
    except ValueError:
        return "ERROR"


def status_line(code: int) -> str:
    """Return ``"<code> <reason>"``, or just ``"<code>"`` when no reason is known."""
    phrase = reason_phrase(code)
    return f"{code} {phrase}" if phrase else str(code)
