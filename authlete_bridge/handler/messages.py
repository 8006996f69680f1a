"""API-scoped error message formatting for handlers."""

from __future__ import annotations

from collections.abc import Callable

from authlete_bridge.messages import BuildUnknownActionMessage

BuildApiErrorMessage = Callable[[str], str]


def default_build_api_error_message(path: str, error_message: str) -> str:
    """Prefix ``error_message`` with the API path.

    Raises:
        ValueError: if ``path`` or ``error_message`` is empty.
    """
    if not path:
        raise ValueError("Path must not be empty")
    if not error_message:
        raise ValueError("Error message must not be empty")
    return f"API({path}) failure: {error_message}"


def create_build_api_error_message(path: str) -> BuildApiErrorMessage:
    """Bind ``path`` into an API error message builder."""

    def build_api_error_message(error_message: str) -> str:
        return default_build_api_error_message(path, error_message)

    return build_api_error_message


def create_build_unknown_action_message(
    build_api_error_message: BuildApiErrorMessage,
) -> BuildUnknownActionMessage:
    """Create a formatter for actions the handler does not recognize."""

    def build_unknown_action_message(action: str) -> str:
        return build_api_error_message(f"Unknown action: {action}")

    return build_unknown_action_message
