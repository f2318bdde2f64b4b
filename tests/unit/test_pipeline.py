"""
Unit tests for the catch pipeline (fastcatch.pipeline.core).

Covers:
- catch: producer response served verbatim, deferring and absent producers
- stop: any error value, including markers, None and unprintable values
- transparent_stop: error text as body
- Equivalences between catch, stop, transparent_stop and the renderers
- Eager status validation and producer failures
"""
import pytest
from fastapi.responses import Response

from fastcatch.errors import InvalidStatusCodeError
from fastcatch.pipeline import (
    catch,
    custom_response,
    never,
    stop,
    transparent_stop,
)
from fastcatch.responses import default_response, json_response, transparent

STATUSES = [400, 401, 403, 404, 409, 422, 500, 502, 503, 599]


def assert_same_response(actual, expected):
    assert actual.status_code == expected.status_code
    assert actual.body == expected.body
    assert actual.headers.raw == expected.headers.raw


@pytest.mark.parametrize("status", STATUSES)
def test_stop_matches_default_response(status):
    assert_same_response(stop(status)(ValueError("hidden")), default_response(status))


@pytest.mark.parametrize("status", STATUSES)
def test_transparent_stop_matches_transparent(status):
    error = ValueError("shown")
    assert_same_response(transparent_stop(status)(error), transparent(status, error))


@pytest.mark.parametrize("status", STATUSES)
def test_catch_without_producer_capability_uses_default(status):
    assert_same_response(catch(status)(KeyError("x")), default_response(status))


@pytest.mark.parametrize("status", STATUSES)
def test_catch_with_deferring_producer_uses_default(status, deferring):
    assert_same_response(catch(status)(deferring), default_response(status))


@pytest.mark.parametrize("status", [400, 500, 503])
def test_catch_serves_producer_response_regardless_of_status(status, conflict):
    response = catch(status)(conflict)
    assert response.status_code == 409
    assert response.headers["retry-after"] == "30"
    assert response.body == b"busy"


def test_catch_returns_producer_response_object_unmodified():
    produced = Response("custom", status_code=418, headers={"X-Internal": "db-timeout"})
    response = catch(500, lambda status, error: produced)(RuntimeError("db"))
    assert response is produced
    assert response.headers["x-internal"] == "db-timeout"


def test_catch_passes_suggested_status_and_error_to_producer():
    seen = []
    error = RuntimeError("boom")

    def producer(status, err):
        seen.append((status, err))
        return None

    catch("500", producer)(error)
    assert seen == [(500, error)]


def test_catch_uses_given_default_renderer():
    rendered = []

    def default(status):
        rendered.append(status)
        return Response(status_code=status)

    response = catch(503, never, default)(object())
    assert response.status_code == 503
    assert rendered == [503]


def test_catch_with_never_ignores_error_capability(conflict):
    response = catch(500, never)(conflict)
    assert response.status_code == 500
    assert response.body == b"500 Internal Server Error"


def test_catch_validates_status_eagerly():
    with pytest.raises(InvalidStatusCodeError):
        catch(1000)
    with pytest.raises(InvalidStatusCodeError):
        stop("not a status")
    with pytest.raises(InvalidStatusCodeError):
        transparent_stop(None)


def test_catch_propagates_producer_failures():
    def broken(status, error):
        raise RuntimeError("producer bug")

    with pytest.raises(RuntimeError, match="producer bug"):
        catch(500, broken)(ValueError("x"))


def test_stop_500_hides_error():
    response = stop(500)(ValueError("password=hunter2"))
    assert response.status_code == 500
    assert response.body == b"500 Internal Server Error"


def test_stop_accepts_zero_information_marker(marker):
    response = stop(404)(marker)
    assert response.status_code == 404
    assert response.body == b"404 Not Found"


@pytest.mark.parametrize("error", [None, (), 0, ""])
def test_stop_accepts_any_value(error):
    assert stop(404)(error).status_code == 404


def test_stop_accepts_unprintable_value(unprintable):
    assert stop(500)(unprintable).status_code == 500


def test_stop_with_json_default():
    response = stop(404, default=json_response)(ValueError("x"))
    assert response.status_code == 404
    assert response.headers["content-type"] == "application/json"


def test_transparent_stop_shows_error_text():
    response = transparent_stop(400)(ValueError("missing field: name"))
    assert response.status_code == 400
    assert response.body == b"missing field: name"


def test_custom_response_without_capability():
    assert custom_response(500, object()) is None


def test_custom_response_ignores_non_callable_attribute():
    class Odd:
        error_response = "not callable"

    assert custom_response(500, Odd()) is None


def test_custom_response_calls_error_capability(conflict):
    assert custom_response(500, conflict) == (409, {"Retry-After": "30"}, "busy")


def test_custom_response_skips_error_classes():
    class Gone:
        def error_response(self, status):
            return 410

    assert custom_response(500, Gone) is None
    response = catch(404)(Gone)
    assert response.status_code == 404
    assert response.body == b"404 Not Found"


def test_never_has_no_opinion():
    assert never(500, ValueError("x")) is None
