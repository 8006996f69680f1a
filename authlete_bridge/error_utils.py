"""Helpers for turning arbitrary raised or returned values into messages."""

from __future__ import annotations

import json
from typing import Any


def get_error_message(error: Any) -> str:
    """Return a best-effort human readable message for any error-like value.

    Exceptions yield ``str(exc)``, strings are returned unchanged and every
    other value is rendered as compact JSON. Circular structures raise
    ``ValueError`` from the JSON encoder.
    """
    if isinstance(error, BaseException):
        return str(error)
    if isinstance(error, str):
        return error
    return json.dumps(error, separators=(",", ":"), default=str)


def to_exception(error: Any) -> Exception:
    """Normalize any value into an ``Exception`` instance."""
    if isinstance(error, Exception):
        return error
    return Exception(get_error_message(error))
