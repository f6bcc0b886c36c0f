r"""Contains asynchronous retry with a linearly growing delay."""

from __future__ import annotations

__all__ = ["linear_retry_async"]

from typing import TYPE_CHECKING, TypeVar

from aretry.core.config import DEFAULT_MAX_ATTEMPTS
from aretry.delay.linear import linear_delay
from aretry.retry_call_async import retry_call_async

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

T = TypeVar("T")


async def linear_retry_async(
    func: Callable[[], Awaitable[T]],
    *,
    initial_delay_millis: int,
    increment_millis: int,
    max_delay_millis: int | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retryable_exceptions: Iterable[type[BaseException]] = (),
) -> T:
    r"""Await a coroutine function, retrying it with a linear backoff.

    Args:
        func: The zero-argument callable returning an awaitable.
        initial_delay_millis: The delay after the first attempt in
            milliseconds.
        increment_millis: The amount added for each subsequent attempt
            in milliseconds.
        max_delay_millis: Optional maximum delay in milliseconds.
        max_attempts: Maximum number of attempts, including the first
            one. Must be >= 1.
        retryable_exceptions: Exception classes that trigger a retry.
            An empty iterable means every exception is retryable.

    Returns:
        The value returned by the first successful attempt.

    Raises:
        InvalidConfigurationError: If max_attempts is lower than 1.
        ValueError: If a delay parameter is invalid.
        Exception: The exception raised by the last attempt, unchanged.
        asyncio.CancelledError: If the task is cancelled.
    """
    return await retry_call_async(
        func,
        delay_strategy=linear_delay(initial_delay_millis, increment_millis, max_delay_millis),
        max_attempts=max_attempts,
        retryable_exceptions=retryable_exceptions,
    )
