"""Credential issuance order pipeline."""

from authlete_bridge.handler.credential.configuration import (
    CommonCredentialHandlerConfigurationImpl,
)
from authlete_bridge.handler.credential.matching import (
    build_requested_claims,
    contains_all_properties,
    create_contains_requested_mdoc_claims,
    match_doctype,
    match_format,
)
from authlete_bridge.handler.credential.mdoc import (
    create_add_mdoc_date_claims,
    create_build_mdoc_claims,
    create_build_mdoc_sub_claims,
    create_mdoc_check_permissions,
    create_mdoc_collect_claims,
    create_mdoc_compute_credential_duration,
    default_mdoc_build_requested_credential,
    format_cbor_date,
    next_year,
)
from authlete_bridge.handler.credential.order import (
    create_create_order,
    create_get_to_order,
    create_to_order,
)

__all__ = [
    "CommonCredentialHandlerConfigurationImpl",
    "build_requested_claims",
    "contains_all_properties",
    "create_add_mdoc_date_claims",
    "create_build_mdoc_claims",
    "create_build_mdoc_sub_claims",
    "create_contains_requested_mdoc_claims",
    "create_create_order",
    "create_get_to_order",
    "create_mdoc_check_permissions",
    "create_mdoc_collect_claims",
    "create_mdoc_compute_credential_duration",
    "create_to_order",
    "default_mdoc_build_requested_credential",
    "format_cbor_date",
    "match_doctype",
    "match_format",
    "next_year",
]
