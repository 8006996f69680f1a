"""Error processing pipeline for handlers."""

from __future__ import annotations

from typing import Any

from authlete_bridge.handler.messages import BuildApiErrorMessage
from authlete_bridge.messages import (
    BuildErrorMessage,
    ErrorReporter,
    LoggingErrorReporter,
    OutputErrorMessage,
    ProcessError,
    default_build_error_message,
    default_output_error_message,
    fallback_error_message,
)
from authlete_bridge.result import run_async_catching, run_catching


def create_process_error(
    build_api_error_message: BuildApiErrorMessage,
    build_error_message: BuildErrorMessage = default_build_error_message,
    output_error_message: OutputErrorMessage = default_output_error_message,
    reporter: ErrorReporter | None = None,
) -> ProcessError:
    """Create a never-raising coroutine that formats, emits and returns an error message."""
    error_reporter = reporter or LoggingErrorReporter()

    async def process_error(error: Any) -> str:
        async def build() -> str:
            return build_api_error_message(await build_error_message(error))

        message_result = await run_async_catching(build)
        message = message_result.get_or_else(lambda _: fallback_error_message(error))

        output_result = await run_async_catching(output_error_message, message)
        output_result.on_failure(lambda exc: run_catching(error_reporter.report, exc))
        return message

    return process_error
