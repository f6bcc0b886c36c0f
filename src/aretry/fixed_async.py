r"""Contains asynchronous retry with a fixed delay between attempts."""

from __future__ import annotations

__all__ = ["fixed_retry_async"]

from typing import TYPE_CHECKING, TypeVar

from aretry.core.config import DEFAULT_MAX_ATTEMPTS
from aretry.delay.fixed import fixed_delay
from aretry.retry_call_async import retry_call_async

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

T = TypeVar("T")


async def fixed_retry_async(
    func: Callable[[], Awaitable[T]],
    *,
    delay_millis: int,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retryable_exceptions: Iterable[type[BaseException]] = (),
) -> T:
    r"""Await a coroutine function, retrying it with a fixed delay.

    Args:
        func: The zero-argument callable returning an awaitable.
        delay_millis: The fixed delay between attempts in milliseconds.
            Must be >= 0.
        max_attempts: Maximum number of attempts, including the first
            one. Must be >= 1.
        retryable_exceptions: Exception classes that trigger a retry.
            An empty iterable means every exception is retryable.

    Returns:
        The value returned by the first successful attempt.

    Raises:
        InvalidConfigurationError: If max_attempts is lower than 1.
        ValueError: If delay_millis is negative.
        Exception: The exception raised by the last attempt, unchanged.
        asyncio.CancelledError: If the task is cancelled.
    """
    return await retry_call_async(
        func,
        delay_strategy=fixed_delay(delay_millis),
        max_attempts=max_attempts,
        retryable_exceptions=retryable_exceptions,
    )
