"""Credential handler configuration wiring the mdoc pipeline together."""

from __future__ import annotations

from authlete_bridge.handler.credential.matching import create_contains_requested_mdoc_claims
from authlete_bridge.handler.credential.mdoc import (
    Clock,
    create_add_mdoc_date_claims,
    create_build_mdoc_claims,
    create_build_mdoc_sub_claims,
    create_mdoc_check_permissions,
    create_mdoc_collect_claims,
    create_mdoc_compute_credential_duration,
    default_mdoc_build_requested_credential,
    utc_now,
)
from authlete_bridge.handler.credential.order import (
    create_create_order,
    create_get_to_order,
    create_to_order,
)
from authlete_bridge.handler.user import UserHandlerConfiguration

MDOC_CLAIMS_MAX_DEPTH = 10


class CommonCredentialHandlerConfigurationImpl:
    """Default credential issuance steps, backed by the given user lookups."""

    def __init__(
        self,
        user_handler_configuration: UserHandlerConfiguration,
        *,
        now: Clock = utc_now,
    ) -> None:
        self.contains_requested_mdoc_claims = create_contains_requested_mdoc_claims(
            MDOC_CLAIMS_MAX_DEPTH
        )
        self.mdoc_check_permissions = create_mdoc_check_permissions(
            self.contains_requested_mdoc_claims
        )
        self.add_mdoc_date_claims = create_add_mdoc_date_claims(now)
        self.build_mdoc_sub_claims = create_build_mdoc_sub_claims(self.add_mdoc_date_claims)
        self.build_mdoc_claims = create_build_mdoc_claims(self.build_mdoc_sub_claims)
        self.build_requested_credential = default_mdoc_build_requested_credential
        self.mdoc_collect_claims = create_mdoc_collect_claims(
            user_handler_configuration.get_mdoc_claims_by_subject_and_doctype,
            self.build_mdoc_claims,
        )
        self.mdoc_compute_credential_duration = create_mdoc_compute_credential_duration(now)
        self.mdoc_create_order = create_create_order(self.mdoc_compute_credential_duration)
        self.mdoc_to_order = create_to_order(
            get_by_subject=user_handler_configuration.get_by_subject,
            check_permissions=self.mdoc_check_permissions,
            build_requested_credential=self.build_requested_credential,
            collect_claims=self.mdoc_collect_claims,
            create_order=self.mdoc_create_order,
        )
        self.get_to_order = create_get_to_order(self.mdoc_to_order)
