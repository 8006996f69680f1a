"""Bind an Authlete API path and response model into a request processor."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TypeVar

from pydantic import BaseModel

from authlete_bridge.api.client import ApiRequest, AuthleteApiClient

ResponseT = TypeVar("ResponseT", bound=BaseModel)

ProcessApiRequest = Callable[[ApiRequest], Awaitable[ResponseT]]


def create_process_api_request(
    path: str,
    response_model: type[ResponseT],
    api_client: AuthleteApiClient,
) -> ProcessApiRequest[ResponseT]:
    """Return a coroutine function that POSTs a request to ``path``."""

    async def process_api_request(request: ApiRequest) -> ResponseT:
        return await api_client.call_post_api(path, response_model, request)

    return process_api_request
