"""OpenID4VCI credential payloads for the Authlete ``/vci/single/*`` APIs."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import StrictBool, StrictInt

from authlete_bridge.schemas.base import ApiModel, Lowercased
from authlete_bridge.schemas.common import ApiResponse

CREDENTIAL_FORMAT_VC_SD_JWT = "vc+sd-jwt"
CREDENTIAL_FORMAT_MSO_MDOC = "mso_mdoc"

CredentialFormat = Annotated[Literal["vc+sd-jwt", "mso_mdoc"], Lowercased]
CredentialType = Annotated[Literal["single", "batch", "deferred"], Lowercased]

CredentialSingleParseAction = Literal[
    "OK",
    "BAD_REQUEST",
    "UNAUTHORIZED",
    "FORBIDDEN",
    "INTERNAL_SERVER_ERROR",
]

CredentialSingleIssueAction = Literal[
    "OK",
    "OK_JWT",
    "ACCEPTED",
    "ACCEPTED_JWT",
    "BAD_REQUEST",
    "UNAUTHORIZED",
    "FORBIDDEN",
    "INTERNAL_SERVER_ERROR",
    "CALLER_ERROR",
]


class CredentialIssuanceOrder(ApiModel):
    """Instructions telling Authlete which credential to issue."""

    request_identifier: str
    credential_payload: str | None = None
    issuance_deferred: StrictBool | None = None
    credential_duration: StrictInt | None = None
    signing_key_id: str | None = None


class CredentialRequestInfo(ApiModel):
    """Parsed credential request."""

    identifier: str
    format: CredentialFormat
    binding_key: str | None = None
    binding_keys: list[str] | None = None
    details: str | None = None


class CredentialSingleParseRequest(ApiModel):
    """Request for ``/vci/single/parse``."""

    access_token: str
    request_content: str


class CredentialSingleParseResponse(ApiResponse):
    """Response from ``/vci/single/parse``."""

    action: CredentialSingleParseAction
    response_content: str | None = None
    info: CredentialRequestInfo | None = None


class CredentialSingleIssueRequest(ApiModel):
    """Request for ``/vci/single/issue``."""

    access_token: str
    order: CredentialIssuanceOrder


class CredentialSingleIssueResponse(ApiResponse):
    """Response from ``/vci/single/issue``."""

    action: CredentialSingleIssueAction
    response_content: str | None = None
    transaction_id: str | None = None
