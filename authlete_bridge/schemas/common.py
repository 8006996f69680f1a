"""Common Authlete data types shared across API payloads."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import ConfigDict, Field

from authlete_bridge.schemas.base import ApiModel, Lowercased

Prompt = Annotated[Literal["none", "login", "consent", "select_account", "create"], Lowercased]
SubjectType = Annotated[Literal["public", "pairwise"], Lowercased]
GrantType = Annotated[
    Literal[
        "authorization_code",
        "implicit",
        "password",
        "client_credentials",
        "refresh_token",
        "urn:openid:params:grant-type:ciba",
        "urn:ietf:params:oauth:grant-type:device_code",
        "urn:ietf:params:oauth:grant-type:token-exchange",
        "urn:ietf:params:oauth:grant-type:jwt-bearer",
        "urn:ietf:params:oauth:grant-type:pre-authorized_code",
    ],
    Lowercased,
]
ClientAuthMethod = Annotated[
    Literal[
        "none",
        "client_secret_basic",
        "client_secret_post",
        "client_secret_jwt",
        "private_key_jwt",
        "tls_client_auth",
        "self_signed_tls_client_auth",
        "attest_jwt_client_auth",
    ],
    Lowercased,
]


class ApiResponse(ApiModel):
    """Result code and message present on every Authlete API response."""

    result_code: str | None = None
    result_message: str | None = None


class Pair(ApiModel):
    """Key/value pair."""

    key: str | None = None
    value: str | None = None


class Property(ApiModel):
    """Arbitrary property attached to a token or grant."""

    key: str | None = None
    value: str | None = None
    hidden: bool | None = None


class TaggedValue(ApiModel):
    """Value tagged with a language tag."""

    tag: str | None = None
    value: str | None = None


class Scope(ApiModel):
    """Scope declared by the service."""

    name: str | None = None
    default_entry: bool | None = None
    description: str | None = None
    descriptions: list[TaggedValue] | None = None
    attributes: list[Pair] | None = None


class DynamicScope(ApiModel):
    """Scope whose value is parameterized at request time."""

    name: str | None = None
    value: str | None = None


class Address(ApiModel):
    """OpenID Connect address claim."""

    formatted: str | None = None
    street_address: str | None = None
    locality: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country: str | None = None


class User(ApiModel):
    """End-user known to the authorization server; only the subject is required."""

    model_config = ConfigDict(extra="allow")

    subject: str
    login_id: str | None = None
    password: str | None = Field(default=None, repr=False)
    name: str | None = None
    email: str | None = None
    email_verified: bool | None = None
    phone_number: str | None = None
    phone_number_verified: bool | None = None
    address: Address | None = None
    given_name: str | None = None
    family_name: str | None = None
    middle_name: str | None = None
    nickname: str | None = None
    profile: str | None = None
    picture: str | None = None
    website: str | None = None
    gender: str | None = None
    zoneinfo: str | None = None
    locale: str | None = None
    preferred_username: str | None = None
    birthdate: str | None = None
    updated_at: str | None = None


class Client(ApiModel):
    """Client metadata shown on the authorization page."""

    client_name: str | None = None
    description: str | None = None
    logo_uri: str | None = None
    client_uri: str | None = None
    policy_uri: str | None = None
    tos_uri: str | None = None


class Service(ApiModel):
    """Service metadata shown on the authorization page."""

    service_name: str | None = None


class GrantScope(ApiModel):
    """Scope granted for a set of resources."""

    scope: str | None = None
    resource: list[str] | None = None


class AuthzDetailsElement(ApiModel):
    """RFC 9396 authorization details element; unknown members are kept."""

    model_config = ConfigDict(extra="allow")

    type: str | None = None
    locations: list[str] | None = None
    actions: list[str] | None = None
    datatypes: list[str] | None = None
    identifier: str | None = None
    privileges: list[str] | None = None


class AuthzDetails(ApiModel):
    """Container of authorization details elements."""

    elements: list[AuthzDetailsElement] | None = None


class Grant(ApiModel):
    """Grant associated with an access token."""

    scopes: list[GrantScope] | None = None
    claims: list[str] | None = None
    authorization_details: AuthzDetails | None = None
