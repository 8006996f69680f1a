"""Unit tests for the exception hierarchy."""

from __future__ import annotations

import json

import httpx
import pytest

from authlete_bridge.errors import (
    REDACTED,
    AuthleteApiError,
    AuthleteBridgeError,
    BadRequestError,
    DetailedResponseError,
    ResponseError,
)

_REQUEST = httpx.Request("POST", "https://authlete.local/api/123/auth/introspection")


class _TrackingStream(httpx.AsyncByteStream):
    """Async body stream that counts how often it is consumed."""

    def __init__(self, content: bytes) -> None:
        self.content = content
        self.read_count = 0

    async def __aiter__(self):
        self.read_count += 1
        yield self.content


def _expected_message(**fields: object) -> str:
    return "ResponseError: " + json.dumps(fields, indent=2)


def test_response_error_initial_message_has_status_only() -> None:
    """The initial message summarizes status and status text."""
    response = httpx.Response(400, request=_REQUEST, json={"error": "invalid_request"})
    error = ResponseError(response, _REQUEST)

    assert isinstance(error, AuthleteBridgeError)
    assert error.message == _expected_message(status=400, statusText="Bad Request")
    assert str(error) == error.message
    assert error.body is None
    assert error.response is response
    assert error.request is _REQUEST


@pytest.mark.asyncio
async def test_with_body_returns_new_error_and_leaves_original_untouched() -> None:
    """Enrichment produces a DetailedResponseError without mutating the original."""
    response = httpx.Response(400, request=_REQUEST, json={"error": "invalid_request"})
    error = ResponseError(response, _REQUEST)
    original_message = error.message

    detailed = await error.with_body()

    assert isinstance(detailed, DetailedResponseError)
    assert detailed is not error
    assert detailed.body == {"error": "invalid_request"}
    assert detailed.message == _expected_message(
        status=400, statusText="Bad Request", body={"error": "invalid_request"}
    )
    assert str(detailed) == detailed.message
    assert error.body is None
    assert error.message == original_message
    assert await detailed.with_body() is detailed


@pytest.mark.asyncio
async def test_no_content_response_yields_empty_body() -> None:
    """A 204 response is enriched with an empty object without reading the stream."""
    stream = _TrackingStream(b"<html>not json</html>")
    response = httpx.Response(204, request=_REQUEST, stream=stream)
    error = ResponseError(response, _REQUEST)

    message = await error.build_message_with_body()

    assert message == _expected_message(status=204, statusText="No Content", body={})
    assert stream.read_count == 0


@pytest.mark.asyncio
async def test_non_json_body_falls_back_to_empty_object() -> None:
    """A body that is not JSON is recovered as an empty object."""
    response = httpx.Response(400, request=_REQUEST, content=b"<html>nope</html>")
    error = ResponseError(response, _REQUEST)

    detailed = await error.with_body()

    assert detailed.body == {}
    assert detailed.message == _expected_message(status=400, statusText="Bad Request", body={})


def test_authlete_api_error_redacts_authorization_header() -> None:
    """Credentials never appear in the API error message."""
    request = httpx.Request(
        "POST",
        "https://authlete.local/api/123/auth/authorization",
        headers={"Authorization": "Bearer secret-token"},
    )
    response = httpx.Response(500, request=request)

    error = AuthleteApiError(str(request.url), request, response=response)

    assert error.status_code == 500
    assert "secret-token" not in error.message
    assert REDACTED in error.message
    assert error.message.startswith(
        "Authlete API failure url: https://authlete.local/api/123/auth/authorization"
    )


def test_authlete_api_error_without_response_mentions_cause() -> None:
    """Transport failures carry the cause and no status."""
    cause = httpx.ConnectError("network down")

    error = AuthleteApiError("https://authlete.local/x", cause=cause)

    assert error.status_code is None
    assert error.cause is cause
    assert "network down" in error.message
    assert "response: undefined" in error.message


def test_bad_request_error_renders_oauth_error_json() -> None:
    """BadRequestError serializes to the OAuth error payload."""
    error = BadRequestError("invalid_credential_request", "User not found")

    assert str(error) == "User not found"
    assert json.loads(error.to_error_json()) == {
        "error": "invalid_credential_request",
        "error_description": "User not found",
    }
