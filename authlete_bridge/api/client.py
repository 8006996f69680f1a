"""Async HTTP client for the Authlete API."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, TypeVar

import httpx
import structlog
from pydantic import BaseModel

from authlete_bridge.config import Settings
from authlete_bridge.errors import AuthleteApiError
from authlete_bridge.schemas import (
    AuthorizationRequest,
    AuthorizationResponse,
    CredentialSingleIssueRequest,
    CredentialSingleIssueResponse,
    CredentialSingleParseRequest,
    CredentialSingleParseResponse,
    IntrospectionRequest,
    IntrospectionResponse,
)
from authlete_bridge.schemas.base import ApiModel

DEFAULT_TIMEOUT = httpx.Timeout(connect=2.0, read=5.0, write=5.0, pool=5.0)
JSON_UTF8 = "application/json;charset=utf-8"

ResponseT = TypeVar("ResponseT", bound=BaseModel)
ApiRequest = ApiModel | Mapping[str, Any]

logger = structlog.get_logger(__name__)


def _to_payload(request: ApiRequest) -> dict[str, Any]:
    """Serialize a request model or mapping into its wire form."""
    if isinstance(request, ApiModel):
        return request.to_wire()
    return dict(request)


def _to_query_params(request: ApiRequest) -> list[tuple[str, str]]:
    """Encode request fields as query parameters; non-strings are JSON-encoded."""
    return [
        (key, value if isinstance(value, str) else json.dumps(value))
        for key, value in _to_payload(request).items()
    ]


class AuthleteApiClient:
    """Async client for Authlete API calls, validating responses with pydantic."""

    def __init__(
        self,
        base_url: str,
        auth: str,
        service_id: str,
        timeout: httpx.Timeout | float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Create client with sane defaults and optional injected transport."""
        self.base_url = base_url.rstrip("/")
        self.auth = auth
        self.service_id = service_id
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout or DEFAULT_TIMEOUT,
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, http_client: httpx.AsyncClient | None = None
    ) -> AuthleteApiClient:
        """Build a client from loaded settings."""
        authlete = settings.authlete
        return cls(
            base_url=authlete.base_url,
            auth=f"Bearer {authlete.service_access_token.get_secret_value()}",
            service_id=authlete.service_id,
            timeout=authlete.timeout_seconds,
            http_client=http_client,
        )

    @property
    def authorization_path(self) -> str:
        return f"/api/{self.service_id}/auth/authorization"

    @property
    def introspection_path(self) -> str:
        return f"/api/{self.service_id}/auth/introspection"

    @property
    def credential_single_parse_path(self) -> str:
        return f"/api/{self.service_id}/vci/single/parse"

    @property
    def credential_single_issue_path(self) -> str:
        return f"/api/{self.service_id}/vci/single/issue"

    async def call_post_api(
        self, path: str, response_model: type[ResponseT], request: ApiRequest
    ) -> ResponseT:
        """POST ``request`` as JSON and validate the response with ``response_model``."""
        http_request = self._client.build_request(
            "POST",
            self._url(path),
            json=_to_payload(request),
            headers=self._headers(),
        )
        return await self._call(http_request, response_model)

    async def call_get_api(
        self, path: str, response_model: type[ResponseT], request: ApiRequest
    ) -> ResponseT:
        """GET with ``request`` as query parameters and validate the response."""
        http_request = self._client.build_request(
            "GET",
            self._url(path),
            params=_to_query_params(request),
            headers=self._headers(),
        )
        return await self._call(http_request, response_model)

    async def authorization(self, request: AuthorizationRequest) -> AuthorizationResponse:
        """Call the authorization API."""
        return await self.call_post_api(self.authorization_path, AuthorizationResponse, request)

    async def introspection(self, request: IntrospectionRequest) -> IntrospectionResponse:
        """Call the introspection API."""
        return await self.call_post_api(self.introspection_path, IntrospectionResponse, request)

    async def credential_single_parse(
        self, request: CredentialSingleParseRequest
    ) -> CredentialSingleParseResponse:
        """Call the single credential parse API."""
        return await self.call_post_api(
            self.credential_single_parse_path, CredentialSingleParseResponse, request
        )

    async def credential_single_issue(
        self, request: CredentialSingleIssueRequest
    ) -> CredentialSingleIssueResponse:
        """Call the single credential issue API."""
        return await self.call_post_api(
            self.credential_single_issue_path, CredentialSingleIssueResponse, request
        )

    async def aclose(self) -> None:
        """Close underlying HTTP client if owned by this instance."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> AuthleteApiClient:
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        """Exit async context manager and close managed resources."""
        del exc_type, exc, tb
        await self.aclose()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _headers(self) -> dict[str, str]:
        return {"Content-Type": JSON_UTF8, "Authorization": self.auth}

    async def _call(self, request: httpx.Request, response_model: type[ResponseT]) -> ResponseT:
        """Send the request and normalize every failure into AuthleteApiError."""
        url = str(request.url)
        try:
            response = await self._client.send(request)
        except httpx.RequestError as exc:
            logger.warning("authlete_api_unavailable", url=url, error=str(exc))
            raise AuthleteApiError(url, request, cause=exc) from exc

        if not response.is_success:
            logger.warning("authlete_api_failed", url=url, status_code=response.status_code)
            raise AuthleteApiError(url, request, response=response)

        try:
            return response_model.model_validate(response.json())
        except ValueError as exc:
            logger.warning("authlete_api_invalid_response", url=url, error=str(exc))
            raise AuthleteApiError(url, request, cause=exc) from exc
