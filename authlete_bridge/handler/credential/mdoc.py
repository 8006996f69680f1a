"""mso_mdoc credential steps: permission checks, claim collection and dates."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from datetime import UTC, datetime
from typing import Any

from authlete_bridge.errors import BadRequestError
from authlete_bridge.handler.credential.constants import (
    CLAIMS,
    DOCTYPE,
    EXPIRY_DATE,
    INVALID_CREDENTIAL_REQUEST,
    ISSUE_DATE,
    MSO_MDOC,
)
from authlete_bridge.handler.credential.matching import (
    ContainsRequestedMdocClaims,
    build_requested_claims,
    match_doctype,
    match_format,
)
from authlete_bridge.handler.user import GetMdocClaimsBySubjectAndDoctype
from authlete_bridge.schemas import User

Claims = dict[str, Any]
Clock = Callable[[], datetime]

CheckPermissions = Callable[..., Awaitable[Claims]]
BuildRequestedCredential = Callable[[Claims | None, Claims | None], Claims]
AddMdocDateClaims = Callable[[Claims, Claims | None, str], None]
BuildMdocSubClaims = Callable[[Claims, Claims | None, str], Claims]
BuildMdocClaims = Callable[[Claims, Claims | None, str], Awaitable[Claims]]
CollectClaims = Callable[..., Awaitable[Claims]]
ComputeCredentialDuration = Callable[[], int]


def utc_now() -> datetime:
    return datetime.now(UTC)


def format_cbor_date(value: datetime) -> str:
    """Render a date as a CBOR full-date (tag 1004) literal."""
    return f'cbor:1004("{value.date().isoformat()}")'


def next_year(value: datetime) -> datetime:
    """Return the same instant one year later; Feb 29 rolls over to Mar 1."""
    try:
        return value.replace(year=value.year + 1)
    except ValueError:
        return value.replace(year=value.year + 1, month=3, day=1)


def create_mdoc_check_permissions(
    contains_requested_mdoc_claims: ContainsRequestedMdocClaims,
) -> CheckPermissions:
    """Create a check that the access token may issue the requested mdoc."""

    async def mdoc_check_permissions(
        issuable_credentials: Any,
        requested_credential: Claims,
        credential_type: str | None = None,
    ) -> Claims:
        if not isinstance(issuable_credentials, list) or not issuable_credentials:
            raise BadRequestError(
                INVALID_CREDENTIAL_REQUEST,
                "No credential can be issued with the access token.",
            )

        matching = next(
            (
                issuable_credential
                for issuable_credential in issuable_credentials
                if match_format(issuable_credential, MSO_MDOC)
                and match_doctype(issuable_credential, requested_credential)
                and contains_requested_mdoc_claims(issuable_credential, requested_credential)
            ),
            None,
        )
        if matching is None:
            raise BadRequestError(
                INVALID_CREDENTIAL_REQUEST,
                "The access token does not have permissions to request the credential.",
            )
        return matching

    return mdoc_check_permissions


def default_mdoc_build_requested_credential(
    issuable_credential: Claims | None,
    requested_credential: Claims | None,
) -> Claims:
    """Fill in requested claims from the issuable credential when none were requested."""
    if issuable_credential is None and requested_credential is None:
        return {}
    if issuable_credential is None:
        return requested_credential or {}
    if requested_credential is None:
        return {CLAIMS: build_requested_claims(issuable_credential.get(CLAIMS))}

    issuable_claims = issuable_credential.get(CLAIMS)
    requested_claims = requested_credential.get(CLAIMS)
    if issuable_claims is None and requested_claims is None:
        return {}
    if requested_claims is None:
        return {**requested_credential, CLAIMS: build_requested_claims(issuable_claims)}
    return requested_credential


def create_add_mdoc_date_claims(now: Clock = utc_now) -> AddMdocDateClaims:
    """Create a step that adds issue/expiry dates when they were requested."""

    def add_mdoc_date_claims(
        sub_claims: Claims, requested_sub_claims: Claims | None, doctype: str
    ) -> None:
        if not requested_sub_claims:
            return
        issued_at = now()
        if ISSUE_DATE in requested_sub_claims:
            sub_claims[ISSUE_DATE] = format_cbor_date(issued_at)
        if EXPIRY_DATE in requested_sub_claims:
            sub_claims[EXPIRY_DATE] = format_cbor_date(next_year(issued_at))

    return add_mdoc_date_claims


def create_mdoc_compute_credential_duration(now: Clock = utc_now) -> ComputeCredentialDuration:
    """Create a function returning the seconds until the same instant next year."""

    def mdoc_compute_credential_duration() -> int:
        issued_at = now()
        return int((next_year(issued_at) - issued_at).total_seconds())

    return mdoc_compute_credential_duration


def create_build_mdoc_sub_claims(add_mdoc_date_claims: AddMdocDateClaims) -> BuildMdocSubClaims:
    """Create a step selecting the requested claims of one namespace."""

    def build_mdoc_sub_claims(
        user_sub_claims: Claims, requested_sub_claims: Claims | None, doctype: str
    ) -> Claims:
        if not requested_sub_claims:
            raise BadRequestError(INVALID_CREDENTIAL_REQUEST, "No requested sub-claims provided")

        sub_claims: Claims = {}
        add_mdoc_date_claims(sub_claims, requested_sub_claims, doctype)
        for claim_name in requested_sub_claims:
            if claim_name in user_sub_claims:
                sub_claims[claim_name] = user_sub_claims[claim_name]
        return sub_claims

    return build_mdoc_sub_claims


def create_build_mdoc_claims(build_mdoc_sub_claims: BuildMdocSubClaims) -> BuildMdocClaims:
    """Create a step selecting the requested claims across namespaces."""

    async def build_mdoc_claims(
        user_claims: Claims, requested_claims: Claims | None, doctype: str
    ) -> Claims:
        if not requested_claims:
            raise BadRequestError(INVALID_CREDENTIAL_REQUEST, "No requested claims provided")

        return {
            namespace: build_mdoc_sub_claims(user_claims[namespace], requested_sub_claims, doctype)
            for namespace, requested_sub_claims in requested_claims.items()
            if namespace in user_claims
        }

    return build_mdoc_claims


def create_mdoc_collect_claims(
    get_mdoc_claims_by_subject_and_doctype: GetMdocClaimsBySubjectAndDoctype,
    build_mdoc_claims: BuildMdocClaims,
) -> CollectClaims:
    """Create a step collecting the user's mdoc claims for a requested credential."""

    async def mdoc_collect_claims(
        user: User,
        requested_credential: Claims | None,
        credential_type: str | None = None,
    ) -> Claims:
        if not isinstance(requested_credential, Mapping):
            raise BadRequestError(INVALID_CREDENTIAL_REQUEST, "Requested credential is required")

        doctype = requested_credential.get(DOCTYPE)
        if not doctype:
            raise BadRequestError(
                INVALID_CREDENTIAL_REQUEST,
                "doctype field is required in the requested credential",
            )

        user_claims = await get_mdoc_claims_by_subject_and_doctype(user.subject, doctype)
        if user_claims is None:
            raise BadRequestError(
                INVALID_CREDENTIAL_REQUEST,
                f'No mdoc claims found for subject "{user.subject}" and doctype "{doctype}"',
            )

        claims = await build_mdoc_claims(user_claims, requested_credential.get(CLAIMS), doctype)
        return {DOCTYPE: doctype, CLAIMS: claims}

    return mdoc_collect_claims
