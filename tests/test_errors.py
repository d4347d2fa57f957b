import pytest

from smartsheetkit.errors import (InvalidRequestError, NotFoundError, RateLimitedError, RestError,
                                  ServiceUnavailableError, UnauthorizedError, error_class,
                                  error_for_response)


@pytest.mark.parametrize("status,cls", [
    (400, InvalidRequestError),
    (401, UnauthorizedError),
    (403, UnauthorizedError),
    (404, NotFoundError),
    (405, RestError),
    (429, RateLimitedError),
    (500, ServiceUnavailableError),
    (504, ServiceUnavailableError),
    (302, RestError),
])
def test_error_class(status, cls):
    assert(error_class(status) is cls)


def test_error_for_response_parses_body():
    e = error_for_response(400, b'{"errorCode": 1004, "message": "You are not authorized.", "refId": "r1"}')
    assert(isinstance(e, InvalidRequestError))
    assert(e.error_code == 1004)
    assert(e.ref_id == "r1")
    assert(str(e) == "HTTP 400 [1004]: You are not authorized. (ref r1)")


def test_error_for_response_without_body():
    e = error_for_response(404, b"")
    assert(isinstance(e, NotFoundError))
    assert(e.message == "")
    assert(str(e) == "HTTP 404")


def test_error_for_response_odd_body():
    e = error_for_response(500, b'"just a string"')
    assert(e.message == '"just a string"')
    e = error_for_response(400, b'{"errorCode": "x"}')
    assert(e.error_code is None)
