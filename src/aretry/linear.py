r"""Contains blocking retry with a linearly growing delay."""

from __future__ import annotations

__all__ = ["linear_retry"]

from typing import TYPE_CHECKING, TypeVar

from aretry.core.config import DEFAULT_MAX_ATTEMPTS
from aretry.delay.linear import linear_delay
from aretry.retry_call import retry_call

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

T = TypeVar("T")


def linear_retry(
    func: Callable[[], T],
    *,
    initial_delay_millis: int,
    increment_millis: int,
    max_delay_millis: int | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retryable_exceptions: Iterable[type[BaseException]] = (),
) -> T:
    r"""Call a function, retrying it with a linear backoff.

    The wait after attempt ``n`` is
    initial_delay_millis + increment_millis * (n - 1), capped at
    max_delay_millis if set.

    Args:
        func: The zero-argument callable to execute.
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

    Example:
        ```pycon
        >>> from aretry import linear_retry
        >>> linear_retry(lambda: "ok", initial_delay_millis=10, increment_millis=10)
        'ok'

        ```
    """
    return retry_call(
        func,
        delay_strategy=linear_delay(initial_delay_millis, increment_millis, max_delay_millis),
        max_attempts=max_attempts,
        retryable_exceptions=retryable_exceptions,
    )
