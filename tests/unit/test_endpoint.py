"""Unit tests for endpoint error processing."""

from __future__ import annotations

from typing import Any

import pytest

from authlete_bridge.endpoint import (
    CommonEndpoint,
    create_build_unknown_action_message,
    create_process_error,
    default_build_endpoint_error_message,
)
from authlete_bridge.messages import default_build_error_message, default_output_error_message


class _RecordingReporter:
    """Collect errors passed to the reporter."""

    def __init__(self) -> None:
        self.errors: list[Exception] = []

    def report(self, error: Exception) -> None:
        """Record the reported error."""
        self.errors.append(error)


class _OutputSpy:
    """Async output strategy recording the messages it receives."""

    def __init__(self, fail_with: Exception | None = None) -> None:
        self.messages: list[str] = []
        self.fail_with = fail_with

    async def __call__(self, message: str) -> None:
        self.messages.append(message)
        if self.fail_with is not None:
            raise self.fail_with


def test_default_build_endpoint_error_message_prefixes_path() -> None:
    """The message is prefixed with the endpoint path."""
    assert (
        default_build_endpoint_error_message("/token", "Bad request")
        == "Endpoint(/token) API Failure: Bad request"
    )


@pytest.mark.parametrize(("path", "message"), [("", "Bad request"), ("/token", "")])
def test_default_build_endpoint_error_message_rejects_empty_arguments(
    path: str, message: str
) -> None:
    """Empty path or message is a configuration error."""
    with pytest.raises(ValueError, match="Path and original message must not be empty"):
        default_build_endpoint_error_message(path, message)


def test_build_unknown_action_message_uses_endpoint_prefix() -> None:
    """Unknown actions are formatted through the endpoint prefix."""
    build = create_build_unknown_action_message(
        "/authorization", default_build_endpoint_error_message
    )

    assert build("FOO") == "Endpoint(/authorization) API Failure: Unknown action: FOO"


@pytest.mark.asyncio
async def test_process_error_builds_outputs_and_returns_message() -> None:
    """The formatted message is output once and returned."""
    output = _OutputSpy()
    process_error = create_process_error(path="/test", output_error_message=output)

    message = await process_error(RuntimeError("Test error"))

    assert message == "Endpoint(/test) API Failure: Test error"
    assert output.messages == [message]


@pytest.mark.asyncio
async def test_process_error_falls_back_to_raw_message_when_building_fails() -> None:
    """A failing builder falls back to the error's own message."""

    async def broken_build(_: Any) -> str:
        raise RuntimeError("builder broke")

    output = _OutputSpy()
    process_error = create_process_error(
        path="/test", build_error_message=broken_build, output_error_message=output
    )

    assert await process_error(RuntimeError("Test error")) == "Test error"
    assert output.messages == ["Test error"]


@pytest.mark.asyncio
async def test_process_error_with_empty_path_falls_back_to_raw_message() -> None:
    """The prefix builder rejects an empty path, so the raw message is used."""
    output = _OutputSpy()
    process_error = create_process_error(path="", output_error_message=output)

    assert await process_error(RuntimeError("Test error")) == "Test error"


@pytest.mark.asyncio
async def test_process_error_reports_output_failures_without_raising() -> None:
    """Output failures go to the reporter and do not change the result."""
    output_failure = OSError("Output error")
    output = _OutputSpy(fail_with=output_failure)
    reporter = _RecordingReporter()
    process_error = create_process_error(
        path="/test", output_error_message=output, reporter=reporter
    )

    message = await process_error(RuntimeError("Test error"))

    assert message == "Endpoint(/test) API Failure: Test error"
    assert reporter.errors == [output_failure]


@pytest.mark.asyncio
async def test_process_error_survives_failing_reporter() -> None:
    """Even a failing reporter does not make process_error raise."""

    class _ExplodingReporter:
        def report(self, error: Exception) -> None:
            raise RuntimeError("reporter broke")

    output = _OutputSpy(fail_with=OSError("Output error"))
    process_error = create_process_error(
        path="/test", output_error_message=output, reporter=_ExplodingReporter()
    )

    assert await process_error("boom") == "Endpoint(/test) API Failure: boom"


def test_common_endpoint_uses_defaults() -> None:
    """Omitted strategies resolve to the defaults."""
    endpoint = CommonEndpoint("/test")

    assert endpoint.path == "/test"
    assert endpoint.build_error_message is default_build_error_message
    assert endpoint.build_endpoint_error_message is default_build_endpoint_error_message
    assert endpoint.output_error_message is default_output_error_message
    assert endpoint.build_unknown_action_message("X") == (
        "Endpoint(/test) API Failure: Unknown action: X"
    )


@pytest.mark.asyncio
async def test_common_endpoint_derives_process_error_from_overrides() -> None:
    """Derived strategies are built from the resolved overrides."""
    output = _OutputSpy()

    def build_endpoint_error_message(path: str, message: str) -> str:
        return f"[{path}] {message}"

    endpoint = CommonEndpoint(
        "/custom",
        build_endpoint_error_message=build_endpoint_error_message,
        output_error_message=output,
    )

    assert await endpoint.process_error(ValueError("bad")) == "[/custom] bad"
    assert output.messages == ["[/custom] bad"]
    assert endpoint.build_unknown_action_message("Y") == "[/custom] Unknown action: Y"


def test_common_endpoint_keeps_explicit_process_error() -> None:
    """An explicit process_error is used as given."""

    async def process_error(_: Any) -> str:
        return "custom"

    endpoint = CommonEndpoint("/test", process_error=process_error)

    assert endpoint.process_error is process_error
