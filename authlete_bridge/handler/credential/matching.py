"""Matching requested credentials against issuable credentials."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from authlete_bridge.handler.credential.constants import CLAIMS, DOCTYPE, FORMAT

ContainsRequestedMdocClaims = Callable[[Mapping[str, Any], Mapping[str, Any] | None], bool]


def contains_all_properties(
    source: Mapping[str, Any],
    target: Mapping[str, Any],
    max_depth: int,
    current_depth: int = 1,
) -> bool:
    """Return True when every key of ``target`` exists in ``source``, down to ``max_depth``."""
    for key, target_value in target.items():
        if key not in source:
            return False
        if current_depth == max_depth or not isinstance(target_value, Mapping):
            continue
        source_value = source[key]
        if not isinstance(source_value, Mapping):
            return False
        if not contains_all_properties(source_value, target_value, max_depth, current_depth + 1):
            return False
    return True


def build_requested_claims(value: Any) -> dict[str, Any]:
    """Turn a claims structure into a request for the same claims with ``{}`` leaves."""
    if not isinstance(value, Mapping):
        return {}
    return {
        key: build_requested_claims(nested) if isinstance(nested, Mapping) else {}
        for key, nested in value.items()
    }


def match_format(credential: Mapping[str, Any] | None, credential_format: str) -> bool:
    if not isinstance(credential, Mapping):
        return False
    return credential.get(FORMAT) == credential_format


def match_doctype(
    issuable_credential: Mapping[str, Any] | None,
    requested_credential: Mapping[str, Any] | None,
) -> bool:
    """Return True when both credentials name the same, non-empty doctype."""
    if not isinstance(issuable_credential, Mapping):
        return False
    if not isinstance(requested_credential, Mapping):
        return False
    doctype = issuable_credential.get(DOCTYPE)
    return bool(doctype) and doctype == requested_credential.get(DOCTYPE)


def create_contains_requested_mdoc_claims(max_depth: int = 3) -> ContainsRequestedMdocClaims:
    """Create a check that the requested claims are a subset of the issuable ones."""

    def contains_requested_mdoc_claims(
        issuable_credential: Mapping[str, Any],
        requested_credential: Mapping[str, Any] | None,
    ) -> bool:
        issuable_claims = issuable_credential.get(CLAIMS) if issuable_credential else None
        requested_claims = requested_credential.get(CLAIMS) if requested_credential else None

        if not isinstance(issuable_claims, Mapping):
            return False
        if requested_claims is None:
            return True
        if not isinstance(requested_claims, Mapping):
            return False
        return contains_all_properties(issuable_claims, requested_claims, max_depth)

    return contains_requested_mdoc_claims
