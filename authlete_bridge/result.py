"""Success/failure result type used to keep exceptions inside call boundaries.

A ``Result`` is either ``Success(value)`` or ``Failure(error)``. The two cases
are separate classes, so a result can never carry both a value and an error.

Example:
    ```python
    result = run_catching(json.loads, raw)
    payload = result.get_or_default({})
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from authlete_bridge.error_utils import to_exception

T = TypeVar("T")
R = TypeVar("R")


class Result(Generic[T]):
    """Base class of the ``Success`` and ``Failure`` variants."""

    __slots__ = ()

    @staticmethod
    def success(value: T) -> Result[T]:
        """Create a successful result wrapping ``value``."""
        return Success(value)

    @staticmethod
    def failure(error: Any) -> Result[T]:
        """Create a failed result wrapping ``error``."""
        return Failure(to_exception(error))

    @property
    def is_success(self) -> bool:
        """Return True for the success variant."""
        return isinstance(self, Success)

    @property
    def is_failure(self) -> bool:
        """Return True for the failure variant."""
        return isinstance(self, Failure)

    def get_or_raise(self) -> T:
        """Return the value or re-raise the stored exception unchanged."""
        match self:
            case Success(value=value):
                return value
            case Failure(error=error):
                raise error
        raise TypeError(f"Unsupported result variant: {type(self).__name__}")

    def get_or_none(self) -> T | None:
        """Return the value, or None for a failure."""
        match self:
            case Success(value=value):
                return value
            case _:
                return None

    def get_or_default(self, default: T) -> T:
        """Return the value, or ``default`` for a failure."""
        match self:
            case Success(value=value):
                return value
            case _:
                return default

    def get_or_else(self, on_failure: Callable[[Exception], T]) -> T:
        """Return the value, or the result of ``on_failure(error)``."""
        match self:
            case Success(value=value):
                return value
            case Failure(error=error):
                return on_failure(error)
        raise TypeError(f"Unsupported result variant: {type(self).__name__}")

    def error_or_none(self) -> Exception | None:
        """Return the stored exception, or None for a success."""
        match self:
            case Failure(error=error):
                return error
            case _:
                return None

    def map(self, transform: Callable[[T], R]) -> Result[R]:
        """Transform a successful value. Errors raised by ``transform`` propagate."""
        match self:
            case Success(value=value):
                return Success(transform(value))
            case Failure(error=error):
                return Failure(error)
        raise TypeError(f"Unsupported result variant: {type(self).__name__}")

    def map_catching(self, transform: Callable[[T], R]) -> Result[R]:
        """Transform a successful value, capturing errors as a failure."""
        match self:
            case Success(value=value):
                return run_catching(transform, value)
            case Failure(error=error):
                return Failure(error)
        raise TypeError(f"Unsupported result variant: {type(self).__name__}")

    def recover(self, transform: Callable[[Exception], T]) -> Result[T]:
        """Turn a failure into a success using ``transform(error)``."""
        match self:
            case Failure(error=error):
                return Success(transform(error))
            case _:
                return self

    def recover_catching(self, transform: Callable[[Exception], T]) -> Result[T]:
        """Like ``recover`` but errors raised by ``transform`` become a failure."""
        match self:
            case Failure(error=error):
                return run_catching(transform, error)
            case _:
                return self

    def on_success(self, action: Callable[[T], Any]) -> Result[T]:
        """Run ``action`` with the value when successful, returning self."""
        match self:
            case Success(value=value):
                action(value)
        return self

    def on_failure(self, action: Callable[[Exception], Any]) -> Result[T]:
        """Run ``action`` with the error when failed, returning self."""
        match self:
            case Failure(error=error):
                action(error)
        return self


@dataclass(frozen=True, slots=True)
class Success(Result[T]):
    """Successful outcome carrying a value."""

    value: T


@dataclass(frozen=True, slots=True)
class Failure(Result[Any]):
    """Failed outcome carrying an exception."""

    error: Exception


def success(value: T) -> Result[T]:
    """Create a successful result."""
    return Success(value)


def failure(error: Any) -> Result[Any]:
    """Create a failed result, normalizing non-exception values."""
    return Failure(to_exception(error))


def run_catching(fn: Callable[..., T | Result[T]], *args: Any, **kwargs: Any) -> Result[T]:
    """Call ``fn`` and capture its outcome as a result.

    A ``Result`` returned by ``fn`` is passed through as is.
    """
    try:
        value = fn(*args, **kwargs)
    except Exception as exc:
        return Failure(exc)
    if isinstance(value, Result):
        return value
    return Success(value)


async def run_async_catching(
    fn: Callable[..., Awaitable[T | Result[T]]], *args: Any, **kwargs: Any
) -> Result[T]:
    """Await ``fn`` and capture its outcome as a result."""
    try:
        value = await fn(*args, **kwargs)
    except Exception as exc:
        return Failure(exc)
    if isinstance(value, Result):
        return value
    return Success(value)
