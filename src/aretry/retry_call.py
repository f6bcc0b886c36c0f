r"""Contains the blocking retry entry points."""

from __future__ import annotations

__all__ = ["retry_call", "with_retry"]

from typing import TYPE_CHECKING, TypeVar

from aretry.core.config import DEFAULT_MAX_ATTEMPTS
from aretry.retry.executor import RetryExecutor
from aretry.retry.policy import RetryPolicy

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from aretry.delay.base import BaseDelayStrategy
    from aretry.retry.policy import BaseRetryPolicy

T = TypeVar("T")


def with_retry(policy: BaseRetryPolicy, func: Callable[[], T]) -> T:
    r"""Call a function, retrying it according to a retry policy.

    The calling thread is blocked while waiting between attempts.

    Args:
        policy: The retry policy to use.
        func: The zero-argument callable to execute.

    Returns:
        The value returned by the first successful attempt.

    Raises:
        Exception: The exception raised by the last attempt, unchanged.

    Example:
        ```pycon
        >>> from aretry import RetryPolicy, fixed_delay, with_retry
        >>> policy = RetryPolicy(max_attempts=3, delay_strategy=fixed_delay(1))
        >>> with_retry(policy, lambda: 42)
        42

        ```
    """
    return RetryExecutor(policy).execute(func)


def retry_call(
    func: Callable[[], T],
    *,
    delay_strategy: BaseDelayStrategy,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retryable_exceptions: Iterable[type[BaseException]] = (),
) -> T:
    r"""Call a function with automatic retry logic.

    This function builds a ``RetryPolicy`` from its arguments and runs
    ``func`` until it succeeds, raises a non-retryable exception, or
    ``max_attempts`` attempts have failed. The policy is validated
    before ``func`` is called for the first time.

    Args:
        func: The zero-argument callable to execute.
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

    Example:
        ```pycon
        >>> from aretry import linear_delay, retry_call
        >>> retry_call(lambda: "done", delay_strategy=linear_delay(1, 1), max_attempts=2)
        'done'

        ```
    """
    policy = RetryPolicy(
        max_attempts=max_attempts,
        delay_strategy=delay_strategy,
        retryable_exceptions=retryable_exceptions,
    )
    return with_retry(policy, func)
