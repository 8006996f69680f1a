"""User lookup configuration."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from authlete_bridge.handler.user.mock_store import (
    mock_get_by_credentials,
    mock_get_by_subject,
    mock_get_mdoc_claims_by_subject_and_doctype,
)
from authlete_bridge.schemas import User

GetByCredentials = Callable[[str, str], Awaitable[User | None]]
GetBySubject = Callable[[str], Awaitable[User | None]]
GetMdocClaimsBySubjectAndDoctype = Callable[[str, str], Awaitable[dict[str, Any] | None]]


class UserHandlerConfiguration(Protocol):
    """User lookups needed by the authorization and credential handlers."""

    get_by_credentials: GetByCredentials
    get_by_subject: GetBySubject
    get_mdoc_claims_by_subject_and_doctype: GetMdocClaimsBySubjectAndDoctype


class UserHandlerConfigurationImpl:
    """User lookups defaulting to the in-memory mock store."""

    def __init__(
        self,
        *,
        get_by_credentials: GetByCredentials = mock_get_by_credentials,
        get_by_subject: GetBySubject = mock_get_by_subject,
        get_mdoc_claims_by_subject_and_doctype: GetMdocClaimsBySubjectAndDoctype = (
            mock_get_mdoc_claims_by_subject_and_doctype
        ),
    ) -> None:
        self.get_by_credentials = get_by_credentials
        self.get_by_subject = get_by_subject
        self.get_mdoc_claims_by_subject_and_doctype = get_mdoc_claims_by_subject_and_doctype
