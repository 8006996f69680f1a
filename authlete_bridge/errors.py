"""Exception hierarchy for Authlete integration failures."""

from __future__ import annotations

import json
from typing import Any

import httpx

from authlete_bridge.result import run_async_catching

NO_CONTENT = 204
REDACTED = "***REDACTED***"
SENSITIVE_HEADERS = {"authorization", "cookie", "dpop", "x-api-key"}


class AuthleteBridgeError(Exception):
    """Base class for all library-specific exceptions."""


def _summarize_response(response: httpx.Response, **extra: Any) -> str:
    """Render status, status text and optional extras as indented JSON."""
    summary: dict[str, Any] = {
        "status": response.status_code,
        "statusText": response.reason_phrase,
    }
    summary.update(extra)
    return json.dumps(summary, indent=2, default=str)


async def _read_json_body(response: httpx.Response) -> Any:
    """Return the parsed JSON body, or an empty object when unavailable."""
    if response.status_code == NO_CONTENT:
        return {}

    async def parse() -> Any:
        await response.aread()
        return response.json()

    result = await run_async_catching(parse)
    return result.get_or_default({})


class ResponseError(AuthleteBridgeError):
    """Raised for an unexpected HTTP response; carries the response and request."""

    def __init__(self, response: httpx.Response, request: httpx.Request) -> None:
        """Initialize with a status-only summary message."""
        self.message = f"ResponseError: {_summarize_response(response)}"
        super().__init__(self.message)
        self.response = response
        self.request = request
        self.body: Any = None

    async def with_body(self) -> DetailedResponseError:
        """Return a new error enriched with the parsed response body."""
        body = await _read_json_body(self.response)
        return DetailedResponseError(self.response, self.request, body)

    async def build_message_with_body(self) -> str:
        """Return the message including the parsed response body."""
        detailed = await self.with_body()
        return detailed.message


class DetailedResponseError(ResponseError):
    """ResponseError whose body has already been read and parsed."""

    def __init__(self, response: httpx.Response, request: httpx.Request, body: Any) -> None:
        """Initialize with a message that embeds the body."""
        super().__init__(response, request)
        self.body = body
        self.message = f"ResponseError: {_summarize_response(response, body=body)}"
        self.args = (self.message,)

    async def with_body(self) -> DetailedResponseError:
        """Return self; the body is already resolved."""
        return self


def _redact_headers(headers: httpx.Headers) -> dict[str, str]:
    """Redact credential-bearing request headers."""
    return {
        key: REDACTED if key.lower() in SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }


def _describe_request(request: httpx.Request | None) -> str:
    """Render a request as JSON with credentials redacted."""
    if request is None:
        return "undefined"
    return json.dumps(
        {"method": request.method, "headers": _redact_headers(request.headers)},
        indent=2,
    )


def _describe_response(response: httpx.Response | None) -> str:
    """Render a response summary, including headers, as JSON."""
    if response is None:
        return "undefined"
    return _summarize_response(response, headers=dict(response.headers))


class AuthleteApiError(AuthleteBridgeError):
    """Raised when an Authlete API call fails or returns an unusable response."""

    def __init__(
        self,
        url: str,
        request: httpx.Request | None = None,
        cause: Exception | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        """Initialize with URL, redacted request, optional cause and response."""
        self.url = url
        self.request = request
        self.cause = cause
        self.response = response
        self.status_code = response.status_code if response is not None else None
        self.message = (
            f"Authlete API failure url: {url}, request: {_describe_request(request)}, "
            f"cause: {cause!r}, response: {_describe_response(response)}"
        )
        super().__init__(self.message)


class BadRequestError(AuthleteBridgeError):
    """Raised when a client request is invalid; maps to an OAuth error response."""

    def __init__(self, error_code: str, description: str) -> None:
        """Initialize with OAuth error code and human readable description."""
        super().__init__(description)
        self.error_code = error_code
        self.description = description

    def to_error_json(self) -> str:
        """Render the OAuth ``error``/``error_description`` JSON payload."""
        return json.dumps({"error": self.error_code, "error_description": self.description})
