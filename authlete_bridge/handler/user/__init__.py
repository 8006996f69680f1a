"""User lookup strategies."""

from authlete_bridge.handler.user.configuration import (
    GetByCredentials,
    GetBySubject,
    GetMdocClaimsBySubjectAndDoctype,
    UserHandlerConfiguration,
    UserHandlerConfigurationImpl,
)
from authlete_bridge.handler.user.mock_store import (
    MOCK_MDOCS,
    MOCK_USERS,
    mock_get_by_credentials,
    mock_get_by_subject,
    mock_get_mdoc_claims_by_subject_and_doctype,
)

__all__ = [
    "GetByCredentials",
    "GetBySubject",
    "GetMdocClaimsBySubjectAndDoctype",
    "MOCK_MDOCS",
    "MOCK_USERS",
    "UserHandlerConfiguration",
    "UserHandlerConfigurationImpl",
    "mock_get_by_credentials",
    "mock_get_by_subject",
    "mock_get_mdoc_claims_by_subject_and_doctype",
]
