"""Payloads for the Authlete ``/auth/introspection`` API."""

from __future__ import annotations

from typing import Literal

from authlete_bridge.schemas.base import ApiModel, UrlString
from authlete_bridge.schemas.common import (
    ApiResponse,
    AuthzDetails,
    Grant,
    Pair,
    Property,
    Scope,
)

IntrospectionAction = Literal[
    "INTERNAL_SERVER_ERROR",
    "BAD_REQUEST",
    "UNAUTHORIZED",
    "FORBIDDEN",
    "OK",
]

IntrospectionGrantType = Literal[
    "AUTHORIZATION_CODE",
    "REFRESH_TOKEN",
    "CLIENT_CREDENTIALS",
    "PASSWORD",
    "JWT_BEARER",
    "SAML2_BEARER",
]


class IntrospectionRequest(ApiModel):
    """Access token introspection request."""

    token: str
    scopes: list[str] | None = None
    subject: str | None = None
    client_certificate: str | None = None
    dpop: str | None = None
    htm: str | None = None
    htu: str | None = None
    resources: list[UrlString] | None = None
    target_uri: UrlString | None = None
    headers: list[Pair] | None = None
    request_body_contained: bool | None = None
    acr_values: list[str] | None = None
    max_age: int | None = None
    dpop_nonce_required: bool | None = None


class IntrospectionResponse(ApiResponse):
    """Access token introspection response."""

    action: IntrospectionAction
    client_id: int
    subject: str | None = None
    scopes: list[str] | None = None
    scope_details: list[Scope] | None = None
    existent: bool | None = None
    usable: bool | None = None
    sufficient: bool | None = None
    refreshable: bool | None = None
    response_content: str | None = None
    expires_at: int | None = None
    properties: list[Property] | None = None
    client_id_alias: str | None = None
    client_id_alias_used: bool | None = None
    client_entity_id: UrlString | None = None
    client_entity_id_used: bool | None = None
    certificate_thumbprint: str | None = None
    resources: list[UrlString] | None = None
    access_token_resources: list[UrlString] | None = None
    authorization_details: AuthzDetails | None = None
    grant_id: str | None = None
    grant: Grant | None = None
    consented_claims: list[str] | None = None
    service_attributes: list[Pair] | None = None
    client_attributes: list[Pair] | None = None
    for_external_attachment: bool | None = None
    acr: str | None = None
    auth_time: int | None = None
    grant_type: IntrospectionGrantType | None = None
    for_credential_issuance: bool | None = None
    cnonce: str | None = None
    cnonce_expires_at: int | None = None
    issuable_credentials: str | None = None
    dpop_nonce: str | None = None
    response_signing_required: bool | None = None
