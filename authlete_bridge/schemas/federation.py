"""Identity federation (OIDC and SAML 2.0 upstream IdP) configuration models."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field, StringConstraints

from authlete_bridge.schemas.base import ApiModel, UrlString

FederationProtocol = Literal["oidc", "saml2"]

NonEmptyString = Annotated[str, StringConstraints(min_length=1)]


class OidcClientConfig(ApiModel):
    """Client registration used against an upstream OpenID provider."""

    client_id: NonEmptyString
    client_secret: NonEmptyString
    redirect_uri: UrlString
    id_token_signed_response_alg: str | None = None
    scopes: list[str] = Field(default_factory=lambda: ["openid"])


class OidcServerConfig(ApiModel):
    """Upstream OpenID provider identity."""

    name: NonEmptyString
    issuer: UrlString


class Saml2ClientConfig(ApiModel):
    """Service provider settings used against an upstream SAML 2.0 IdP."""

    entity_id: NonEmptyString
    assertion_consumer_service_url: UrlString
    single_logout_service_url: UrlString | None = None
    signing_certificate: str | None = None
    encryption_certificate: str | None = None
    name_id_format: str | None = None


class Saml2ServerConfig(ApiModel):
    """Upstream SAML 2.0 IdP identity."""

    entity_id: NonEmptyString
    single_sign_on_service_url: UrlString
    single_logout_service_url: UrlString | None = None
    signing_certificate: NonEmptyString
    encryption_certificate: str | None = None


class FederationConfig(ApiModel):
    """One upstream identity provider and how this server talks to it."""

    id: NonEmptyString
    client: OidcClientConfig | Saml2ClientConfig
    server: OidcServerConfig | Saml2ServerConfig

    @property
    def protocol(self) -> FederationProtocol:
        """Return the federation protocol implied by the server config."""
        return "oidc" if isinstance(self.server, OidcServerConfig) else "saml2"


class FederationRegistry(ApiModel):
    """All configured federations."""

    federations: list[FederationConfig]
