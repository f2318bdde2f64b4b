import pytest
from fastapi import FastAPI


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    # Automatically clear settings-related environment variables before each test
    for name in (
        "APP_ENV",
        "APP_NAME",
        "DEBUG",
        "LOG_LEVEL",
        "LOG_JSON_FORMAT",
        "ERROR_RESPONSE_FORMAT",
        "ERROR_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def fastapi_app():
    from fastcatch.errors import setup_errors

    app = FastAPI()
    setup_errors(app)
    return app


class Marker:
    """Error value with no information content."""


class Unprintable:
    """Error value whose text representation cannot be produced."""

    def __str__(self):
        raise RuntimeError("no text for you")


class Conflict(Exception):
    """Error value that produces its own response."""

    def error_response(self, status):
        return (409, {"Retry-After": "30"}, "busy")


class Deferring(Exception):
    """Error value whose producer has no opinion."""

    def error_response(self, status):
        return None


@pytest.fixture
def marker():
    return Marker()


@pytest.fixture
def unprintable():
    return Unprintable()


@pytest.fixture
def conflict():
    return Conflict("row version mismatch")


@pytest.fixture
def deferring():
    return Deferring("nothing to say")
