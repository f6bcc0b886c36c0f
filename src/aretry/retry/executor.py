r"""Synchronous retry executor.

This module provides the RetryExecutor class that runs a callable with
automatic retry logic, blocking the calling thread between attempts.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import threading
import time
from typing import TYPE_CHECKING, TypeVar

from aretry.exceptions import RetryCancelledError
from aretry.retry.executor_core import next_delay

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import timedelta

    from aretry.retry.policy import BaseRetryPolicy

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes a callable with automatic retry logic, blocking between
    attempts.

    The executor drives the attempt loop: call the function, and on an
    exception consult the policy. When the policy gives up, the very
    exception raised by the last attempt is re-raised, never wrapped.
    Otherwise the executor sleeps for the policy's delay and tries
    again.

    Only ``Exception`` subclasses count as failed attempts.
    ``KeyboardInterrupt`` and other ``BaseException`` subclasses abort
    the loop at once, including while sleeping.

    The executor keeps no state between ``execute`` calls, so it can be
    shared between threads.

    Args:
        policy: The retry policy deciding whether and when to retry.
        cancel_event: Optional event used to interrupt the waits. When
            it is set, the loop stops at the next (or current) wait and
            ``RetryCancelledError`` is raised.

    Attributes:
        policy: The retry policy.
        cancel_event: The optional cancellation event.

    Example:
        ```pycon
        >>> from aretry.delay import fixed_delay
        >>> from aretry.retry import RetryExecutor, RetryPolicy
        >>> executor = RetryExecutor(RetryPolicy(max_attempts=3, delay_strategy=fixed_delay(1)))
        >>> calls = []
        >>> def flaky():
        ...     calls.append(1)
        ...     if len(calls) < 3:
        ...         raise ConnectionError("boom")
        ...     return "ok"
        ...
        >>> executor.execute(flaky)
        'ok'
        >>> len(calls)
        3

        ```
    """

    def __init__(
        self,
        policy: BaseRetryPolicy,
        cancel_event: threading.Event | None = None,
    ) -> None:
        self.policy = policy
        self.cancel_event = cancel_event

    def execute(self, func: Callable[[], T]) -> T:
        """Execute a callable with automatic retry logic.

        Args:
            func: The zero-argument callable to execute. Use
                ``functools.partial`` or a lambda to bind arguments.

        Returns:
            The value returned by the first successful attempt.

        Raises:
            Exception: The exception of the last attempt, unchanged,
                when it is not retryable or the attempts are exhausted.
            RetryCancelledError: If ``cancel_event`` is set while
                waiting between two attempts.
        """
        attempt = 1
        while True:
            try:
                result = func()
            except Exception as exc:
                delay = next_delay(self.policy, attempt, exc)
                if delay is None:
                    raise
                last_error = exc
            else:
                if attempt > 1:
                    logger.debug(f"Succeeded on attempt {attempt}")
                return result

            self._wait(delay, attempt, last_error)
            attempt += 1

    def _wait(self, delay: timedelta, attempt: int, last_error: Exception) -> None:
        # time.sleep and Event.wait reject timeouts above TIMEOUT_MAX
        seconds = min(delay.total_seconds(), threading.TIMEOUT_MAX)
        if self.cancel_event is None:
            time.sleep(seconds)
            return
        if self.cancel_event.wait(seconds):
            logger.debug(f"Retry loop cancelled while waiting after attempt {attempt}")
            raise RetryCancelledError(attempt) from last_error
