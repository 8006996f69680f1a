"""Authorization page handler configuration."""

from __future__ import annotations

from authlete_bridge.handler.authorization_page.claims import (
    ExtractRequestedClaims,
    extract_requested_claims,
)
from authlete_bridge.handler.authorization_page.page_model import (
    create_build_authorization_page_model,
)
from authlete_bridge.handler.authorization_page.scopes import ComputeScopes, compute_scopes
from authlete_bridge.schemas import FederationRegistry


class AuthorizationPageHandlerConfigurationImpl:
    """Collaborators used to render the authorization page."""

    def __init__(
        self,
        *,
        compute_scopes: ComputeScopes = compute_scopes,
        extract_requested_claims: ExtractRequestedClaims = extract_requested_claims,
        federation_registry: FederationRegistry | None = None,
    ) -> None:
        self.compute_scopes = compute_scopes
        self.extract_requested_claims = extract_requested_claims
        self.federation_registry = federation_registry
        self.build_authorization_page_model = create_build_authorization_page_model(
            compute_scopes=self.compute_scopes,
            extract_requested_claims=self.extract_requested_claims,
            federation_registry=self.federation_registry,
        )
