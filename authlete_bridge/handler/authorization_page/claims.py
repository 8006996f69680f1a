"""Extraction of requested OpenID Connect verified claims."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import structlog

from authlete_bridge.error_utils import get_error_message
from authlete_bridge.result import run_catching
from authlete_bridge.schemas import Pair

ExtractRequestedClaims = Callable[[str | None], list[Pair] | None]

logger = structlog.get_logger(__name__)


def extract_purpose(container: Any) -> str | None:
    """Return the ``purpose`` of a claim request when it is a non-empty string."""
    if not isinstance(container, dict):
        return None
    purpose = container.get("purpose")
    return purpose if isinstance(purpose, str) and purpose else None


def extract_claim_name_purpose_pair(key: str, value: Any) -> Pair:
    return Pair(key=key, value=extract_purpose(value))


def extract_requested_claims_from_object(container: Any) -> list[Pair] | None:
    """Flatten ``{"claims": {...}}`` into pairs; ``None`` when ``claims`` is absent."""
    if not isinstance(container, dict):
        return None
    claims = container.get("claims")
    if not isinstance(claims, dict):
        return None
    return [extract_claim_name_purpose_pair(key, value) for key, value in claims.items()]


def extract_requested_claims_from_array(containers: list[Any]) -> list[Pair] | None:
    """Concatenate pairs from every element; ``None`` when nothing was found."""
    pairs: list[Pair] = []
    for container in containers:
        pairs_from_object = extract_requested_claims_from_object(container)
        if pairs_from_object:
            pairs.extend(pairs_from_object)
    return pairs or None


def _extract(claims_json: str | None) -> list[Pair] | None:
    if not claims_json:
        return None

    claims = json.loads(claims_json)
    if not isinstance(claims, dict):
        raise TypeError(f"Claims request must be a JSON object, got {type(claims).__name__}")

    verified_claims = claims.get("verified_claims")
    if isinstance(verified_claims, list):
        return extract_requested_claims_from_array(verified_claims)
    return extract_requested_claims_from_object(verified_claims)


def extract_requested_claims(claims_json: str | None = None) -> list[Pair] | None:
    """Extract verified-claims name/purpose pairs from a JSON claims request.

    ``None`` means no verified claims were requested, which differs from an
    empty list. Malformed JSON, or JSON that is not an object, is logged and
    yields ``None``.
    """
    result = run_catching(_extract, claims_json)
    result.on_failure(
        lambda exc: logger.error(
            "verified_claims_extraction_failed",
            error=get_error_message(exc),
            error_type=type(exc).__name__,
        )
    )
    return result.get_or_none()
