r"""Contains blocking retry with an exponentially growing delay."""

from __future__ import annotations

__all__ = ["exponential_retry"]

from typing import TYPE_CHECKING, TypeVar

from aretry.core.config import (
    DEFAULT_EXPONENTIAL_FACTOR,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_DELAY_MILLIS,
)
from aretry.delay.exponential import exponential_delay
from aretry.retry_call import retry_call

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

T = TypeVar("T")


def exponential_retry(
    func: Callable[[], T],
    *,
    initial_delay_millis: int,
    factor: float = DEFAULT_EXPONENTIAL_FACTOR,
    max_delay_millis: int = DEFAULT_MAX_DELAY_MILLIS,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retryable_exceptions: Iterable[type[BaseException]] = (),
) -> T:
    r"""Call a function, retrying it with an exponential backoff.

    The wait after attempt ``n`` is
    initial_delay_millis * factor ** (n - 1), capped at
    max_delay_millis (five minutes by default).

    Args:
        func: The zero-argument callable to execute.
        initial_delay_millis: The delay after the first attempt in
            milliseconds.
        factor: The base of the exponential growth (default: 2.0).
        max_delay_millis: The maximum delay in milliseconds
            (default: 300000).
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
        >>> from aretry import exponential_retry
        >>> exponential_retry(
        ...     lambda: "ok",
        ...     initial_delay_millis=10,
        ...     max_attempts=5,
        ...     retryable_exceptions={TimeoutError},
        ... )
        'ok'

        ```
    """
    return retry_call(
        func,
        delay_strategy=exponential_delay(initial_delay_millis, factor, max_delay_millis),
        max_attempts=max_attempts,
        retryable_exceptions=retryable_exceptions,
    )
