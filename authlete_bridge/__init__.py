"""Building blocks for OAuth 2.0, OpenID Connect and OpenID4VCI servers backed by Authlete."""

from authlete_bridge.api import AuthleteApiClient
from authlete_bridge.config import Settings, configure_structlog, get_settings
from authlete_bridge.endpoint import CommonEndpoint
from authlete_bridge.error_utils import get_error_message
from authlete_bridge.errors import (
    AuthleteApiError,
    AuthleteBridgeError,
    BadRequestError,
    DetailedResponseError,
    ResponseError,
)
from authlete_bridge.handler import CommonHandler, CommonHandlerConfigurationImpl
from authlete_bridge.messages import ErrorReporter, LoggingErrorReporter
from authlete_bridge.result import (
    Failure,
    Result,
    Success,
    failure,
    run_async_catching,
    run_catching,
    success,
)

__all__ = [
    "AuthleteApiClient",
    "AuthleteApiError",
    "AuthleteBridgeError",
    "BadRequestError",
    "CommonEndpoint",
    "CommonHandler",
    "CommonHandlerConfigurationImpl",
    "DetailedResponseError",
    "ErrorReporter",
    "Failure",
    "LoggingErrorReporter",
    "ResponseError",
    "Result",
    "Settings",
    "Success",
    "configure_structlog",
    "failure",
    "get_error_message",
    "get_settings",
    "run_async_catching",
    "run_catching",
    "success",
]
