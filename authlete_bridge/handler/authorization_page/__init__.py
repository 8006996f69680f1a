"""Authorization page model building."""

from authlete_bridge.handler.authorization_page.claims import (
    ExtractRequestedClaims,
    extract_claim_name_purpose_pair,
    extract_purpose,
    extract_requested_claims,
    extract_requested_claims_from_array,
    extract_requested_claims_from_object,
)
from authlete_bridge.handler.authorization_page.configuration import (
    AuthorizationPageHandlerConfigurationImpl,
)
from authlete_bridge.handler.authorization_page.page_model import (
    BuildAuthorizationPageModel,
    create_build_authorization_page_model,
    default_build_authorization_page_model,
)
from authlete_bridge.handler.authorization_page.scopes import ComputeScopes, compute_scopes

__all__ = [
    "AuthorizationPageHandlerConfigurationImpl",
    "BuildAuthorizationPageModel",
    "ComputeScopes",
    "ExtractRequestedClaims",
    "compute_scopes",
    "create_build_authorization_page_model",
    "default_build_authorization_page_model",
    "extract_claim_name_purpose_pair",
    "extract_purpose",
    "extract_requested_claims",
    "extract_requested_claims_from_array",
    "extract_requested_claims_from_object",
]
