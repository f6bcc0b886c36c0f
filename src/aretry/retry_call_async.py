r"""Contains the asynchronous retry entry points."""

from __future__ import annotations

__all__ = ["retry_call_async", "with_retry_async"]

from typing import TYPE_CHECKING, TypeVar

from aretry.core.config import DEFAULT_MAX_ATTEMPTS
from aretry.retry.executor_async import AsyncRetryExecutor
from aretry.retry.policy import RetryPolicy

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

    from aretry.delay.base import BaseDelayStrategy
    from aretry.retry.policy import BaseRetryPolicy

T = TypeVar("T")


async def with_retry_async(policy: BaseRetryPolicy, func: Callable[[], Awaitable[T]]) -> T:
    r"""Await a coroutine function, retrying it according to a retry
    policy.

    The current task is suspended while waiting between attempts.

    Args:
        policy: The retry policy to use.
        func: The zero-argument callable returning an awaitable.

    Returns:
        The value returned by the first successful attempt.

    Raises:
        Exception: The exception raised by the last attempt, unchanged.
        asyncio.CancelledError: If the task is cancelled.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import RetryPolicy, fixed_delay, with_retry_async
        >>> async def answer():
        ...     return 42
        ...
        >>> policy = RetryPolicy(max_attempts=3, delay_strategy=fixed_delay(1))
        >>> asyncio.run(with_retry_async(policy, answer))
        42

        ```
    """
    return await AsyncRetryExecutor(policy).execute(func)


async def retry_call_async(
    func: Callable[[], Awaitable[T]],
    *,
    delay_strategy: BaseDelayStrategy,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retryable_exceptions: Iterable[type[BaseException]] = (),
) -> T:
    r"""Await a coroutine function with automatic retry logic.

    This is the asynchronous counterpart of ``aretry.retry_call``: the same
    state machine, but waits use ``asyncio.sleep()``.

    Args:
        func: The zero-argument callable returning an awaitable.
        delay_strategy: The strategy computing the delay after each
            failed attempt.
        max_attempts: Maximum number of attempts, including the first
            one. Must be >= 1.
        retryable_exceptions: Exception classes that trigger a retry.
            An empty iterable means every exception is retryable.

    Returns:
        The value returned by the first successful attempt.

    Raises:
        InvalidConfigurationError: If the policy parameters are invalid.
        Exception: The exception raised by the last attempt, unchanged.
        asyncio.CancelledError: If the task is cancelled.
    """
    policy = RetryPolicy(
        max_attempts=max_attempts,
        delay_strategy=delay_strategy,
        retryable_exceptions=retryable_exceptions,
    )
    return await with_retry_async(policy, func)
