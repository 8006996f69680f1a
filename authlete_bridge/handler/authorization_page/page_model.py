"""Assembly of the authorization page view model."""

from __future__ import annotations

from collections.abc import Callable

import structlog

from authlete_bridge.error_utils import get_error_message
from authlete_bridge.handler.authorization_page.claims import (
    ExtractRequestedClaims,
    extract_requested_claims,
)
from authlete_bridge.handler.authorization_page.scopes import ComputeScopes, compute_scopes
from authlete_bridge.result import run_catching
from authlete_bridge.schemas import (
    AuthorizationPageModel,
    AuthorizationResponse,
    AuthzDetails,
    FederationRegistry,
    User,
)

BuildAuthorizationPageModel = Callable[[AuthorizationResponse, User | None], AuthorizationPageModel]

logger = structlog.get_logger(__name__)


def _serialize_authorization_details(details: AuthzDetails | None) -> str | None:
    if details is None:
        return None
    return details.model_dump_json(by_alias=True, exclude_none=True)


def create_build_authorization_page_model(
    compute_scopes: ComputeScopes,
    extract_requested_claims: ExtractRequestedClaims,
    federation_registry: FederationRegistry | None = None,
) -> BuildAuthorizationPageModel:
    """Create a page model builder closed over its collaborators."""

    def build_authorization_page_model(
        response: AuthorizationResponse, user: User | None
    ) -> AuthorizationPageModel:
        service = response.service
        client = response.client

        purpose = response.purpose
        verified_claims_for_id_token = extract_requested_claims(response.id_token_claims)
        verified_claims_for_user_info = extract_requested_claims(response.user_info_claims)
        identity_assurance_required = (
            purpose is not None
            or verified_claims_for_id_token is not None
            or verified_claims_for_user_info is not None
        )

        details_result = run_catching(
            _serialize_authorization_details, response.authorization_details
        )
        details_result.on_failure(
            lambda exc: logger.error(
                "authorization_details_serialization_failed", error=get_error_message(exc)
            )
        )

        return AuthorizationPageModel(
            authorization_response=response,
            service_name=service.service_name if service else None,
            client_name=client.client_name if client else None,
            description=client.description if client else None,
            logo_uri=client.logo_uri if client else None,
            policy_uri=client.policy_uri if client else None,
            tos_uri=client.tos_uri if client else None,
            scopes=compute_scopes(response.scopes, response.dynamic_scopes),
            login_id=response.subject if response.subject is not None else response.login_hint,
            login_id_read_only="readonly" if response.subject else None,
            authorization_details=details_result.get_or_none(),
            user=user,
            purpose=purpose,
            verified_claims_for_id_token=verified_claims_for_id_token,
            verified_claims_for_user_info=verified_claims_for_user_info,
            identity_assurance_required=identity_assurance_required,
            claims_for_user_info=response.claims_at_user_info,
            federation_registry=federation_registry,
        )

    return build_authorization_page_model


default_build_authorization_page_model = create_build_authorization_page_model(
    compute_scopes=compute_scopes,
    extract_requested_claims=extract_requested_claims,
)
