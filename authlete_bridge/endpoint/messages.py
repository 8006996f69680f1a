"""Endpoint-scoped error message formatting."""

from __future__ import annotations

from collections.abc import Callable

from authlete_bridge.messages import BuildUnknownActionMessage

BuildEndpointErrorMessage = Callable[[str, str], str]


def default_build_endpoint_error_message(path: str, original_message: str) -> str:
    """Prefix ``original_message`` with the endpoint path.

    Raises:
        ValueError: if ``path`` or ``original_message`` is empty.
    """
    if not path or not original_message:
        raise ValueError("Path and original message must not be empty")
    return f"Endpoint({path}) API Failure: {original_message}"


def create_build_unknown_action_message(
    path: str,
    build_endpoint_error_message: BuildEndpointErrorMessage,
) -> BuildUnknownActionMessage:
    """Create a formatter for actions the endpoint does not recognize."""

    def build_unknown_action_message(action: str) -> str:
        return build_endpoint_error_message(path, f"Unknown action: {action}")

    return build_unknown_action_message
