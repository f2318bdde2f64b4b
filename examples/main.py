"""
Example FastAPI application using FastCatch.

Shows the three ways of turning errors into responses:

- ``stop``: hide the error, serve "<code> <reason>"
- ``transparent_stop``: show the error text as the body
- ``catch``: let a producer build a custom response

Run with:
    uvicorn examples.main:app --reload
"""

from http import HTTPStatus

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from fastcatch import (
    abort,
    attempt,
    catch,
    configure_app,
    rescue,
    stop,
    transparent,
    transparent_stop,
)

app = FastAPI(title="FastCatch Example")
configure_app(app)


def bad() -> str:
    raise ValueError("bad")


def good() -> str:
    return "good"


@app.get("/", response_class=PlainTextResponse)
def always_200():
    # The user sees "good" and the status code is 200.
    return attempt(good, on_error=stop(500))


@app.get("/500", response_class=PlainTextResponse)
@rescue(stop(500))
def always_500():
    # The user sees "500 Internal Server Error", never "bad".
    return bad()


class NumberError(BaseModel):
    err: str


def validate_length(number: str) -> str:
    if not number:
        raise ValueError("You must provide a number.")
    if len(number) > 5:
        raise ValueError("The number is too long. Try again with fewer digits.")
    return number


def validate_range(number: int) -> str:
    if number < 69:
        raise ValueError(f"The number {number} is too low. Try higher :)")
    if number > 69:
        raise ValueError(f"The number {number} is too high. Try lower :)")
    return f"Nice! You guessed the right number, which is {number}!!!"


def parse_number(number: str) -> int:
    # Optional sign and ASCII digits only; int() also takes "6_9" and " 69"
    digits = number[1:] if number[:1] in ("+", "-") else number
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"invalid literal for int() with base 10: {number!r}")
    return int(number)


def not_a_number(status: int, error: Exception):
    # JSON body plus a cookie, just for fun.
    return (
        status,
        [("Set-Cookie", "foo=bar; Max-Age=10; SameSite=Lax")],
        NumberError(err=str(error)),
    )


def error_with_custom_feedback(number: str):
    try:
        number = validate_length(number)
    except ValueError as exc:
        return catch(400, transparent)(exc)

    try:
        value = parse_number(number)
    except ValueError as exc:
        return catch(400, not_a_number)(exc)

    try:
        return validate_range(value)
    except ValueError as exc:
        return transparent_stop(HTTPStatus.BAD_REQUEST)(exc)


@app.get("/custom", response_class=PlainTextResponse)
def custom_without_number():
    return error_with_custom_feedback("")


@app.get("/custom/{number}", response_class=PlainTextResponse)
def custom_with_number(number: str):
    return error_with_custom_feedback(number)


class ItemLocked(Exception):
    """An error type that knows how it should be shown."""

    def __init__(self, item_id: int):
        self.item_id = item_id
        super().__init__(f"item {item_id} is locked")

    def error_response(self, status: int):
        return (HTTPStatus.CONFLICT, {"Retry-After": "30"}, str(self))


ITEMS = {1: "hammer", 2: "screwdriver"}
LOCKED_ITEMS = {7}


def load_item(item_id: int) -> str:
    if item_id in LOCKED_ITEMS:
        raise ItemLocked(item_id)
    return ITEMS[item_id]


def find_item(item_id: int) -> str:
    try:
        return load_item(item_id)
    except KeyError as exc:
        # Short-circuits straight to the client, past the endpoint's rescue.
        abort(stop(404), exc)


@app.get("/items/{item_id}", response_class=PlainTextResponse)
@rescue(catch(500))
def read_item(item_id: int):
    # ItemLocked produces its own 409; anything else is a plain 500.
    return find_item(item_id)
