"""Unit tests for verified claims extraction."""

from __future__ import annotations

import json
from typing import Any

from authlete_bridge.handler.authorization_page import claims as claims_module
from authlete_bridge.handler.authorization_page import (
    extract_purpose,
    extract_requested_claims,
    extract_requested_claims_from_array,
    extract_requested_claims_from_object,
)
from authlete_bridge.schemas import Pair


class _CaptureLogger:
    """Capture structlog-like logger calls for assertions."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def error(self, event: str, **kwargs: Any) -> None:
        """Capture error-level calls."""
        self.calls.append(("error", event, kwargs))


def test_missing_input_returns_none() -> None:
    """No claims request means no verified claims requirement."""
    assert extract_requested_claims() is None
    assert extract_requested_claims("") is None
    assert extract_requested_claims(json.dumps({"id_token": {}})) is None


def test_object_form_yields_pairs_with_purpose() -> None:
    """Object-form verified claims become name/purpose pairs."""
    claims_json = json.dumps(
        {
            "verified_claims": {
                "verification": {"trust_framework": None},
                "claims": {
                    "given_name": {"purpose": "To greet you"},
                    "family_name": None,
                    "birthdate": {"purpose": ""},
                },
            }
        }
    )

    assert extract_requested_claims(claims_json) == [
        Pair(key="given_name", value="To greet you"),
        Pair(key="family_name", value=None),
        Pair(key="birthdate", value=None),
    ]


def test_empty_claims_map_returns_empty_list() -> None:
    """An empty claims map is an empty, defined result."""
    assert extract_requested_claims('{"verified_claims":{"claims":{}}}') == []


def test_array_form_concatenates_pairs() -> None:
    """Array-form verified claims are flattened in order."""
    claims_json = json.dumps(
        {
            "verified_claims": [
                {"claims": {"given_name": {"purpose": "p1"}}},
                {"claims": {"address": {}}},
            ]
        }
    )

    assert extract_requested_claims(claims_json) == [
        Pair(key="given_name", value="p1"),
        Pair(key="address", value=None),
    ]


def test_array_form_without_any_claims_returns_none() -> None:
    """Array-form entries with no claims report nothing."""
    claims_json = json.dumps({"verified_claims": [{"claims": {}}, {"verification": {}}]})

    assert extract_requested_claims(claims_json) is None


def test_malformed_json_returns_none_and_logs(monkeypatch) -> None:
    """Malformed JSON is logged and treated as no requirement."""
    capture = _CaptureLogger()
    monkeypatch.setattr(claims_module, "logger", capture)

    assert extract_requested_claims("{not json") is None
    assert len(capture.calls) == 1
    level, event, payload = capture.calls[0]
    assert level == "error"
    assert event == "verified_claims_extraction_failed"
    assert payload["error_type"] == "JSONDecodeError"


def test_helpers_tolerate_unexpected_shapes() -> None:
    """Non-object values are ignored rather than raising."""
    assert extract_purpose({"purpose": 5}) is None
    assert extract_purpose("purpose") is None
    assert extract_requested_claims_from_object({"claims": None}) is None
    assert extract_requested_claims_from_object(["claims"]) is None
    assert extract_requested_claims_from_array([None, {"claims": {"a": {}}}]) == [
        Pair(key="a", value=None)
    ]


def test_non_object_request_returns_none_and_logs(monkeypatch) -> None:
    """A claims request that is not a JSON object is logged and ignored."""
    capture = _CaptureLogger()
    monkeypatch.setattr(claims_module, "logger", capture)

    assert extract_requested_claims("null") is None
    assert extract_requested_claims("[1, 2]") is None
    assert [event for _, event, _ in capture.calls] == [
        "verified_claims_extraction_failed",
        "verified_claims_extraction_failed",
    ]
    assert capture.calls[0][2]["error_type"] == "TypeError"


def test_null_claims_in_object_form_returns_none() -> None:
    """A null claims member means nothing was requested, unlike an empty map."""
    assert extract_requested_claims('{"verified_claims":{"claims":null}}') is None


def test_array_form_skips_entries_with_empty_claims() -> None:
    """Entries with empty claims contribute nothing; the others are kept."""
    claims_json = json.dumps(
        {
            "verified_claims": [
                {"claims": {}},
                {"claims": {"birthdate": {"purpose": "Age check"}}},
                {"claims": {}},
            ]
        }
    )

    assert extract_requested_claims(claims_json) == [Pair(key="birthdate", value="Age check")]
