"""Authlete API payload models."""

from authlete_bridge.schemas.authorization import (
    AuthorizationPageModel,
    AuthorizationRequest,
    AuthorizationResponse,
)
from authlete_bridge.schemas.common import (
    Address,
    ApiResponse,
    AuthzDetails,
    AuthzDetailsElement,
    Client,
    DynamicScope,
    Grant,
    GrantScope,
    Pair,
    Property,
    Scope,
    Service,
    TaggedValue,
    User,
)
from authlete_bridge.schemas.credential import (
    CredentialIssuanceOrder,
    CredentialRequestInfo,
    CredentialSingleIssueRequest,
    CredentialSingleIssueResponse,
    CredentialSingleParseRequest,
    CredentialSingleParseResponse,
)
from authlete_bridge.schemas.federation import (
    FederationConfig,
    FederationRegistry,
    OidcClientConfig,
    OidcServerConfig,
    Saml2ClientConfig,
    Saml2ServerConfig,
)
from authlete_bridge.schemas.introspection import IntrospectionRequest, IntrospectionResponse

__all__ = [
    "Address",
    "ApiResponse",
    "AuthorizationPageModel",
    "AuthorizationRequest",
    "AuthorizationResponse",
    "AuthzDetails",
    "AuthzDetailsElement",
    "Client",
    "CredentialIssuanceOrder",
    "CredentialRequestInfo",
    "CredentialSingleIssueRequest",
    "CredentialSingleIssueResponse",
    "CredentialSingleParseRequest",
    "CredentialSingleParseResponse",
    "DynamicScope",
    "FederationConfig",
    "FederationRegistry",
    "Grant",
    "GrantScope",
    "IntrospectionRequest",
    "IntrospectionResponse",
    "OidcClientConfig",
    "OidcServerConfig",
    "Pair",
    "Property",
    "Saml2ClientConfig",
    "Saml2ServerConfig",
    "Scope",
    "Service",
    "TaggedValue",
    "User",
]
