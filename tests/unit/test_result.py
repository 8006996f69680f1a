"""Unit tests for the Result type."""

from __future__ import annotations

import dataclasses

import pytest

from authlete_bridge.result import (
    Failure,
    Result,
    Success,
    failure,
    run_async_catching,
    run_catching,
    success,
)


def test_success_returns_value_by_identity() -> None:
    """get_or_raise returns the wrapped value itself."""
    value = {"key": "value"}
    result = success(value)

    assert result.is_success is True
    assert result.is_failure is False
    assert result.get_or_raise() is value
    assert result.get_or_none() is value
    assert result.error_or_none() is None


def test_failure_reraises_original_exception() -> None:
    """get_or_raise re-raises the stored exception instance unchanged."""
    error = RuntimeError("boom")
    result = failure(error)

    assert result.is_failure is True
    with pytest.raises(RuntimeError) as exc_info:
        result.get_or_raise()
    assert exc_info.value is error
    assert result.error_or_none() is error
    assert result.get_or_none() is None


def test_failure_normalizes_non_exception_values() -> None:
    """Strings and other values are wrapped into an Exception with their message."""
    string_failure = failure("x")
    dict_failure = Result.failure({"code": 1})

    assert isinstance(string_failure.error_or_none(), Exception)
    assert str(string_failure.error_or_none()) == "x"
    assert str(dict_failure.error_or_none()) == '{"code":1}'


def test_variants_are_immutable() -> None:
    """Success and Failure are frozen dataclasses."""
    result = Success(1)

    with pytest.raises(dataclasses.FrozenInstanceError):
        result.value = 2  # type: ignore[misc]


def test_get_or_default_and_get_or_else() -> None:
    """Fallbacks apply to failures only."""
    assert success(1).get_or_default(2) == 1
    assert failure("x").get_or_default(2) == 2
    assert success(1).get_or_else(lambda _: 3) == 1
    assert failure("bad").get_or_else(lambda error: str(error)) == "bad"


def test_map_transforms_success_and_keeps_failure() -> None:
    """map applies only to successes."""
    error = ValueError("nope")

    assert success(2).map(lambda value: value * 3).get_or_raise() == 6
    mapped_failure = failure(error).map(lambda value: value * 3)
    assert mapped_failure.error_or_none() is error


def test_map_propagates_transform_errors() -> None:
    """Errors raised inside map escape the call."""

    def explode(_: int) -> int:
        raise KeyError("missing")

    with pytest.raises(KeyError):
        success(1).map(explode)


def test_map_catching_captures_transform_errors() -> None:
    """map_catching turns raised errors into a failure."""

    def explode(_: int) -> int:
        raise KeyError("missing")

    result = success(1).map_catching(explode)

    assert isinstance(result, Failure)
    assert isinstance(result.error, KeyError)


def test_recover_and_recover_catching() -> None:
    """recover only touches failures; recover_catching captures its own errors."""
    ok = success(1)

    assert ok.recover(lambda _: 5) is ok
    assert failure("x").recover(lambda _: 5).get_or_raise() == 5

    def explode(_: Exception) -> int:
        raise RuntimeError("again")

    recovered = failure("x").recover_catching(explode)
    assert isinstance(recovered.error_or_none(), RuntimeError)
    assert ok.recover_catching(explode) is ok


def test_on_success_and_on_failure_hooks() -> None:
    """Hooks run only for their case and return the same result."""
    seen: list[object] = []
    ok = success("value")
    failed = failure("error")

    assert ok.on_success(seen.append).on_failure(seen.append) is ok
    chained = failed.on_success(seen.append).on_failure(lambda error: seen.append(str(error)))
    assert chained is failed
    assert seen == ["value", "error"]


def test_run_catching_wraps_values_and_errors() -> None:
    """Plain return values become successes and raised exceptions failures."""
    assert run_catching(lambda: 42).get_or_raise() == 42
    assert run_catching(int, "7").get_or_raise() == 7

    result = run_catching(int, "not-a-number")
    assert isinstance(result.error_or_none(), ValueError)


def test_run_catching_does_not_double_wrap_results() -> None:
    """A Result returned by the callable is passed through unchanged."""
    inner = success(1)
    inner_failure = failure("x")

    assert run_catching(lambda: inner) is inner
    assert run_catching(lambda: inner_failure) is inner_failure


@pytest.mark.asyncio
async def test_run_async_catching_awaits_callable() -> None:
    """The async variant awaits the callable and captures its outcome."""

    async def fetch(value: int) -> int:
        return value + 1

    async def explode() -> int:
        raise RuntimeError("async boom")

    async def nested() -> Result[int]:
        return inner

    inner = success(10)

    assert (await run_async_catching(fetch, 1)).get_or_raise() == 2
    assert isinstance((await run_async_catching(explode)).error_or_none(), RuntimeError)
    assert await run_async_catching(nested) is inner
