"""Authlete API client."""

from authlete_bridge.api.client import AuthleteApiClient

__all__ = ["AuthleteApiClient"]
