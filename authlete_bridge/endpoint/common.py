"""Per-path bundle of endpoint error strategies."""

from __future__ import annotations

from authlete_bridge.endpoint.messages import (
    BuildEndpointErrorMessage,
    create_build_unknown_action_message,
    default_build_endpoint_error_message,
)
from authlete_bridge.endpoint.process_error import create_process_error
from authlete_bridge.messages import (
    BuildErrorMessage,
    BuildUnknownActionMessage,
    ErrorReporter,
    OutputErrorMessage,
    ProcessError,
    default_build_error_message,
    default_output_error_message,
)


class CommonEndpoint:
    """Error strategies for one endpoint path.

    Every strategy falls back to its default when omitted. ``process_error`` and
    ``build_unknown_action_message`` are derived from the resolved strategies
    unless supplied explicitly.
    """

    def __init__(
        self,
        path: str,
        *,
        build_error_message: BuildErrorMessage | None = None,
        build_endpoint_error_message: BuildEndpointErrorMessage | None = None,
        output_error_message: OutputErrorMessage | None = None,
        process_error: ProcessError | None = None,
        build_unknown_action_message: BuildUnknownActionMessage | None = None,
        reporter: ErrorReporter | None = None,
    ) -> None:
        self.path = path
        self.build_error_message = build_error_message or default_build_error_message
        self.build_endpoint_error_message = (
            build_endpoint_error_message or default_build_endpoint_error_message
        )
        self.output_error_message = output_error_message or default_output_error_message
        self.process_error = process_error or create_process_error(
            path=self.path,
            build_error_message=self.build_error_message,
            build_endpoint_error_message=self.build_endpoint_error_message,
            output_error_message=self.output_error_message,
            reporter=reporter,
        )
        self.build_unknown_action_message = (
            build_unknown_action_message
            or create_build_unknown_action_message(self.path, self.build_endpoint_error_message)
        )
