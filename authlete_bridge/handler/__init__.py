"""Handler-flavoured error handling and Authlete request processing."""

from authlete_bridge.handler.common import (
    CommonHandler,
    CommonHandlerConfiguration,
    CommonHandlerConfigurationImpl,
)
from authlete_bridge.handler.messages import (
    BuildApiErrorMessage,
    create_build_api_error_message,
    create_build_unknown_action_message,
    default_build_api_error_message,
)
from authlete_bridge.handler.process_api_request import (
    ProcessApiRequest,
    create_process_api_request,
)
from authlete_bridge.handler.process_error import create_process_error

__all__ = [
    "BuildApiErrorMessage",
    "CommonHandler",
    "CommonHandlerConfiguration",
    "CommonHandlerConfigurationImpl",
    "ProcessApiRequest",
    "create_build_api_error_message",
    "create_build_unknown_action_message",
    "create_process_api_request",
    "create_process_error",
    "default_build_api_error_message",
]
