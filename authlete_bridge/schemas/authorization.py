"""Payloads for the Authlete ``/auth/authorization`` API and the authorization page."""

from __future__ import annotations

from typing import Literal

from authlete_bridge.schemas.base import ApiModel
from authlete_bridge.schemas.common import (
    ApiResponse,
    AuthzDetails,
    Client,
    DynamicScope,
    Pair,
    Prompt,
    Scope,
    Service,
    User,
)
from authlete_bridge.schemas.federation import FederationRegistry

AuthorizationAction = Literal[
    "INTERNAL_SERVER_ERROR",
    "BAD_REQUEST",
    "LOCATION",
    "FORM",
    "NO_INTERACTION",
    "INTERACTION",
]


class AuthorizationRequest(ApiModel):
    """Authorization request forwarded to Authlete."""

    parameters: str
    context: str | None = None


class AuthorizationResponse(ApiResponse):
    """Authorization response from Authlete."""

    action: AuthorizationAction
    response_content: str | None = None
    service: Service | None = None
    client: Client | None = None
    max_age: int | None = None
    scopes: list[Scope] | None = None
    dynamic_scopes: list[DynamicScope] | None = None
    claims: list[str] | None = None
    claims_at_user_info: list[str] | None = None
    acrs: list[str] | None = None
    subject: str | None = None
    login_hint: str | None = None
    prompts: list[Prompt] | None = None
    id_token_claims: str | None = None
    authorization_details: AuthzDetails | None = None
    purpose: str | None = None
    user_info_claims: str | None = None
    ticket: str | None = None
    claims_locales: list[str] | None = None
    requested_claims_for_tx: list[str] | None = None
    requested_verified_claims_for_tx: list[list[str]] | None = None


class AuthorizationPageModel(ApiModel):
    """Flat view model rendered by the authorization (consent) page."""

    authorization_response: AuthorizationResponse
    service_name: str | None = None
    client_name: str | None = None
    description: str | None = None
    logo_uri: str | None = None
    client_uri: str | None = None
    policy_uri: str | None = None
    tos_uri: str | None = None
    scopes: list[Scope] | None = None
    login_id: str | None = None
    login_id_read_only: str | None = None
    user: User | None = None
    authorization_details: str | None = None
    purpose: str | None = None
    verified_claims_for_id_token: list[Pair] | None = None
    all_verified_claims_for_id_token_requested: bool | None = None
    verified_claims_for_user_info: list[Pair] | None = None
    all_verified_claims_for_user_info_requested: bool | None = None
    identity_assurance_required: bool | None = None
    old_ida_format_used: bool | None = None
    claims_for_id_token: list[str] | None = None
    claims_for_user_info: list[str] | None = None
    federation_registry: FederationRegistry | None = None
