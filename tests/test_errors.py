import httpx
import pytest

from app.utils.errors import (
    AppError,
    NO_RESPONSE_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
    UPSTREAM_ERROR_MESSAGE,
    handle_httpx_error,
)


def _status_error(status_code, **kwargs):
    request = httpx.Request("GET", "https://tmdb.test/3/movie/1")
    response = httpx.Response(status_code, request=request, **kwargs)
    return httpx.HTTPStatusError("error", request=request, response=response)


# --- upstream answered with an error status ---


def test_status_error_keeps_upstream_status_and_message():
    err = handle_httpx_error(_status_error(
        404, json={"status_code": 34, "status_message": "not found"}
    ))
    assert isinstance(err, AppError)
    assert err.status_code == 404
    assert err.message == "not found"


def test_status_error_without_status_message_uses_generic_message():
    err = handle_httpx_error(_status_error(401, json={"success": False}))
    assert err.status_code == 401
    assert err.message == UPSTREAM_ERROR_MESSAGE


def test_status_error_with_non_json_body():
    err = handle_httpx_error(_status_error(502, text="<html>Bad gateway</html>"))
    assert err.status_code == 502
    assert err.message == UPSTREAM_ERROR_MESSAGE


# --- no response ---


@pytest.mark.parametrize("exc_type", [
    httpx.ReadTimeout,
    httpx.ConnectTimeout,
    httpx.ConnectError,
    httpx.RemoteProtocolError,
])
def test_transport_errors_become_503(exc_type):
    request = httpx.Request("GET", "https://tmdb.test/3/movie/1")
    err = handle_httpx_error(exc_type("boom", request=request))
    assert err.status_code == 503
    assert err.message == NO_RESPONSE_MESSAGE


# --- everything else ---


def test_unsupported_protocol_is_a_local_failure():
    err = handle_httpx_error(httpx.UnsupportedProtocol("Request URL has an unsupported protocol 'ftp://'."))
    assert err.status_code == 500
    assert "unsupported protocol" in err.message


def test_other_exception_keeps_its_message():
    err = handle_httpx_error(ValueError("Expecting value: line 1 column 1"))
    assert err.status_code == 500
    assert err.message == "Expecting value: line 1 column 1"


def test_other_exception_without_message():
    err = handle_httpx_error(RuntimeError())
    assert err.status_code == 500
    assert err.message == UNKNOWN_ERROR_MESSAGE


def test_app_error_is_returned_unchanged():
    original = AppError("teapot", 418)
    assert handle_httpx_error(original) is original
