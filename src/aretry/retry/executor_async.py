r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that awaits a
coroutine function with automatic retry logic, suspending the current
task between attempts.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import inspect
import logging
from typing import TYPE_CHECKING, TypeVar

from aretry.retry.executor_core import next_delay

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.retry.policy import BaseRetryPolicy

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes a coroutine function with automatic retry logic.

    This class implements the same attempt loop as ``RetryExecutor``
    but waits with ``asyncio.sleep()``, allowing other tasks to run
    during retry waits.

    If the task running ``execute`` is cancelled while waiting,
    ``asyncio.CancelledError`` propagates immediately and no further
    attempt is made. Cancellation raised by the awaited function itself
    is not treated as a failed attempt either.

    Args:
        policy: The retry policy deciding whether and when to retry.

    Attributes:
        policy: The retry policy.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.delay import fixed_delay
        >>> from aretry.retry import AsyncRetryExecutor, RetryPolicy
        >>> executor = AsyncRetryExecutor(RetryPolicy(max_attempts=3, delay_strategy=fixed_delay(1)))
        >>> calls = []
        >>> async def flaky():
        ...     calls.append(1)
        ...     if len(calls) < 2:
        ...         raise ConnectionError("boom")
        ...     return "ok"
        ...
        >>> asyncio.run(executor.execute(flaky))
        'ok'
        >>> len(calls)
        2

        ```
    """

    def __init__(self, policy: BaseRetryPolicy) -> None:
        self.policy = policy

    async def execute(self, func: Callable[[], Awaitable[T]]) -> T:
        """Execute a coroutine function with automatic retry logic.

        Args:
            func: The zero-argument callable returning an awaitable,
                typically a coroutine function.

        Returns:
            The value returned by the first successful attempt.

        Raises:
            Exception: The exception of the last attempt, unchanged,
                when it is not retryable or the attempts are exhausted.
            asyncio.CancelledError: If the task is cancelled.
            TypeError: If ``func`` returns something that is not
                awaitable. This misuse is never retried.
        """
        attempt = 1
        while True:
            try:
                awaitable = func()
                if inspect.isawaitable(awaitable):
                    result = await awaitable
            except Exception as exc:
                delay = next_delay(self.policy, attempt, exc)
                if delay is None:
                    raise
            else:
                if not inspect.isawaitable(awaitable):
                    msg = f"func must return an awaitable, got {type(awaitable).__qualname__}"
                    raise TypeError(msg)
                if attempt > 1:
                    logger.debug(f"Succeeded on attempt {attempt}")
                return result

            await asyncio.sleep(delay.total_seconds())
            attempt += 1
