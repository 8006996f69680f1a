"""Error message strategies shared by endpoints and handlers.

Each strategy is a plain callable so that integrators can swap any single
step (building, prefixing or emitting the message) without subclassing.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

import structlog

from authlete_bridge.error_utils import get_error_message
from authlete_bridge.errors import ResponseError
from authlete_bridge.result import run_async_catching, run_catching

BuildErrorMessage = Callable[[Any], Awaitable[str]]
OutputErrorMessage = Callable[[str], Awaitable[None]]
ProcessError = Callable[[Any], Awaitable[str]]
BuildUnknownActionMessage = Callable[[str], str]

logger = structlog.get_logger(__name__)


class ErrorReporter(Protocol):
    """Side channel for failures that happen while emitting an error message."""

    def report(self, error: Exception) -> None:
        """Report a secondary failure. Must not be relied on to raise."""


class LoggingErrorReporter:
    """Report secondary failures through structlog."""

    def report(self, error: Exception) -> None:
        """Log the failure at ERROR level."""
        logger.error(
            "error_output_failed",
            error=get_error_message(error),
            error_type=type(error).__name__,
        )


async def build_response_error_message(error: ResponseError) -> str:
    """Build a message including the response body, falling back to ``error.message``."""
    result = await run_async_catching(error.build_message_with_body)
    return result.get_or_default(error.message)


async def default_build_error_message(error: Any) -> str:
    """Build a message for any raised value."""
    if isinstance(error, ResponseError):
        return await build_response_error_message(error)
    return get_error_message(error)


async def default_output_error_message(message: str) -> None:
    """Log the message at ERROR level; empty messages are ignored."""
    if message:
        logger.error("error_message", error_message=message)


def fallback_error_message(error: Any) -> str:
    """Return the simplest available message for ``error`` without raising."""
    return run_catching(get_error_message, error).get_or_else(lambda _: repr(error))
