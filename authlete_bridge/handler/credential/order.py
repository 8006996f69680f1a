"""Conversion of a parsed credential request into a credential issuance order."""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from typing import Any

import structlog

from authlete_bridge.errors import BadRequestError
from authlete_bridge.handler.credential.constants import (
    INVALID_CREDENTIAL_REQUEST,
    INVALID_REQUEST,
    MSO_MDOC,
)
from authlete_bridge.handler.credential.mdoc import (
    BuildRequestedCredential,
    CheckPermissions,
    Claims,
    CollectClaims,
    ComputeCredentialDuration,
)
from authlete_bridge.handler.user import GetBySubject
from authlete_bridge.schemas import (
    CredentialIssuanceOrder,
    CredentialRequestInfo,
    IntrospectionResponse,
)

CreateOrder = Callable[[str, Claims | None], CredentialIssuanceOrder]
ToOrder = Callable[
    [str, CredentialRequestInfo, IntrospectionResponse], Awaitable[CredentialIssuanceOrder]
]
GetToOrder = Callable[[str], ToOrder]

logger = structlog.get_logger(__name__)


def create_create_order(compute_credential_duration: ComputeCredentialDuration) -> CreateOrder:
    """Create a factory for issuance orders; missing claims defer issuance."""

    def create_order(request_identifier: str, claims: Claims | None) -> CredentialIssuanceOrder:
        credential_payload = (
            json.dumps(claims, separators=(",", ":")) if claims is not None else None
        )
        return CredentialIssuanceOrder(
            request_identifier=request_identifier,
            credential_payload=credential_payload,
            issuance_deferred=credential_payload is None,
            credential_duration=compute_credential_duration(),
        )

    return create_order


def _parse_json(value: str, description: str) -> Any:
    try:
        return json.loads(value)
    except ValueError as exc:
        raise BadRequestError(
            INVALID_CREDENTIAL_REQUEST, f"{description} is not valid JSON"
        ) from exc


def create_to_order(
    get_by_subject: GetBySubject,
    check_permissions: CheckPermissions,
    build_requested_credential: BuildRequestedCredential,
    collect_claims: CollectClaims,
    create_order: CreateOrder,
) -> ToOrder:
    """Create the pipeline turning a credential request into an issuance order.

    The introspected access token supplies the subject and the issuable
    credentials; the parsed request supplies the requested credential.
    """

    async def to_order(
        credential_type: str,
        credential_request_info: CredentialRequestInfo,
        introspection_response: IntrospectionResponse,
    ) -> CredentialIssuanceOrder:
        subject = introspection_response.subject
        issuable_credentials_json = introspection_response.issuable_credentials
        details = credential_request_info.details

        if not subject:
            raise BadRequestError(INVALID_REQUEST, "Subject is required")

        user = await get_by_subject(subject)
        if user is None:
            raise BadRequestError(INVALID_CREDENTIAL_REQUEST, "User not found")
        if not issuable_credentials_json:
            raise BadRequestError(INVALID_CREDENTIAL_REQUEST, "Issuable credentials are required")
        if not details:
            raise BadRequestError(INVALID_CREDENTIAL_REQUEST, "Requested credential is required")

        issuable_credentials = _parse_json(issuable_credentials_json, "Issuable credentials")
        requested_credential = _parse_json(details, "Requested credential")

        issuable_credential = await check_permissions(
            issuable_credentials, requested_credential, credential_type
        )
        claims = await collect_claims(
            user,
            build_requested_credential(issuable_credential, requested_credential),
            credential_type,
        )
        order = create_order(credential_request_info.identifier, claims)
        logger.info(
            "credential_order_created",
            request_identifier=order.request_identifier,
            credential_type=credential_type,
            issuance_deferred=order.issuance_deferred,
        )
        return order

    return to_order


def create_get_to_order(mdoc_to_order: ToOrder) -> GetToOrder:
    """Create a lookup of the order pipeline for a credential format."""

    def get_to_order(credential_format: str) -> ToOrder:
        if credential_format == MSO_MDOC:
            return mdoc_to_order
        raise ValueError(f"Unsupported format: {credential_format}")

    return get_to_order
