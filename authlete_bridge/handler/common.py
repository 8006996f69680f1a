"""Per-path bundles of handler error strategies."""

from __future__ import annotations

from typing import Protocol

from authlete_bridge.handler.messages import (
    BuildApiErrorMessage,
    create_build_api_error_message,
    create_build_unknown_action_message,
)
from authlete_bridge.handler.process_error import create_process_error
from authlete_bridge.messages import (
    BuildErrorMessage,
    BuildUnknownActionMessage,
    ErrorReporter,
    OutputErrorMessage,
    ProcessError,
    default_build_error_message,
    default_output_error_message,
)


class CommonHandlerConfiguration(Protocol):
    """Error strategies every handler configuration exposes."""

    path: str
    build_api_error_message: BuildApiErrorMessage
    output_error_message: OutputErrorMessage
    process_error: ProcessError
    build_unknown_action_message: BuildUnknownActionMessage


class CommonHandler:
    """Error strategies for one API path.

    Omitted strategies fall back to the defaults; ``process_error`` and
    ``build_unknown_action_message`` are derived from the resolved ones.
    """

    def __init__(
        self,
        path: str,
        *,
        build_error_message: BuildErrorMessage | None = None,
        build_api_error_message: BuildApiErrorMessage | None = None,
        output_error_message: OutputErrorMessage | None = None,
        process_error: ProcessError | None = None,
        build_unknown_action_message: BuildUnknownActionMessage | None = None,
        reporter: ErrorReporter | None = None,
    ) -> None:
        self.path = path
        self.build_error_message = build_error_message or default_build_error_message
        self.build_api_error_message = build_api_error_message or create_build_api_error_message(
            self.path
        )
        self.output_error_message = output_error_message or default_output_error_message
        self.process_error = process_error or create_process_error(
            build_api_error_message=self.build_api_error_message,
            build_error_message=self.build_error_message,
            output_error_message=self.output_error_message,
            reporter=reporter,
        )
        self.build_unknown_action_message = (
            build_unknown_action_message
            or create_build_unknown_action_message(self.build_api_error_message)
        )


class CommonHandlerConfigurationImpl(CommonHandler):
    """Default ``CommonHandlerConfiguration`` for one API path."""
