r"""Retry policies deciding whether and when to retry a failed attempt.

This module provides the ``BaseRetryPolicy`` interface and the
``RetryPolicy`` implementation combining an attempt cap, an allow-list
of retryable exception types, and a delay strategy.
"""

from __future__ import annotations

__all__ = ["BaseRetryPolicy", "RetryPolicy"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from aretry.core.validation import validate_max_attempts, validate_retryable_exceptions

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import timedelta

    from aretry.delay.base import BaseDelayStrategy


class BaseRetryPolicy(ABC):
    """Abstract base class for retry policies.

    A retry policy is consulted by the retry executors after each failed
    attempt. It must not keep any state between calls: the attempt
    number is always passed in.
    """

    @abstractmethod
    def should_retry(self, attempt: int, exc: BaseException) -> bool:
        """Determine whether to retry after a failed attempt.

        Args:
            attempt: The number of the attempt that failed (1-indexed).
            exc: The exception raised by that attempt.

        Returns:
            ``True`` if another attempt should be made, ``False`` if the
            exception should be propagated to the caller.
        """

    @abstractmethod
    def get_delay(self, attempt: int) -> timedelta:
        """Get the delay to wait before the next attempt.

        Args:
            attempt: The number of the attempt that failed (1-indexed).

        Returns:
            The delay before attempt ``attempt + 1``.
        """


class RetryPolicy(BaseRetryPolicy):
    """Retry a fixed number of times with a delay strategy.

    Args:
        max_attempts: Maximum number of attempts, including the first
            one. Must be >= 1. A value of 1 means the callable is never
            retried.
        delay_strategy: The strategy computing the delay after each
            failed attempt. It is kept by reference, not copied.
        retryable_exceptions: Exception classes that trigger a retry.
            Subclasses of a listed class match too. An empty iterable
            (the default) means every exception is retryable.

    Raises:
        InvalidConfigurationError: If ``max_attempts`` is lower than 1
            or ``retryable_exceptions`` contains something that is not
            an exception class.

    Example:
        ```pycon
        >>> from aretry.delay import fixed_delay
        >>> from aretry.retry import RetryPolicy
        >>> policy = RetryPolicy(
        ...     max_attempts=3,
        ...     delay_strategy=fixed_delay(100),
        ...     retryable_exceptions={ConnectionError},
        ... )
        >>> policy.should_retry(1, ConnectionResetError())
        True
        >>> policy.should_retry(1, KeyError("missing"))
        False
        >>> policy.should_retry(3, ConnectionResetError())
        False
        >>> policy.get_delay(1)
        datetime.timedelta(microseconds=100000)

        ```
    """

    def __init__(
        self,
        max_attempts: int,
        delay_strategy: BaseDelayStrategy,
        retryable_exceptions: Iterable[type[BaseException]] = (),
    ) -> None:
        validate_max_attempts(max_attempts)
        self.max_attempts = max_attempts
        self.delay_strategy = delay_strategy
        self.retryable_exceptions = validate_retryable_exceptions(retryable_exceptions)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(max_attempts={self.max_attempts}, "
            f"delay_strategy={self.delay_strategy!r}, "
            f"retryable_exceptions={self.retryable_exceptions!r})"
        )

    def should_retry(self, attempt: int, exc: BaseException) -> bool:
        if attempt >= self.max_attempts:
            return False
        return not self.retryable_exceptions or isinstance(exc, self.retryable_exceptions)

    def get_delay(self, attempt: int) -> timedelta:
        return self.delay_strategy.calculate(attempt)
