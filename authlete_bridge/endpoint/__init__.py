"""Endpoint-flavoured error handling."""

from authlete_bridge.endpoint.common import CommonEndpoint
from authlete_bridge.endpoint.messages import (
    BuildEndpointErrorMessage,
    create_build_unknown_action_message,
    default_build_endpoint_error_message,
)
from authlete_bridge.endpoint.process_error import create_process_error

__all__ = [
    "BuildEndpointErrorMessage",
    "CommonEndpoint",
    "create_build_unknown_action_message",
    "create_process_error",
    "default_build_endpoint_error_message",
]
