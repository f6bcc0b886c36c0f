r"""Shared core logic for retry executors.

The blocking and the suspending executors run the same state machine
and only differ in how they wait. The decision step that follows a
failed attempt lives here so both flavors stay identical.
"""

from __future__ import annotations

__all__ = ["next_delay"]

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import timedelta

    from aretry.retry.policy import BaseRetryPolicy

logger: logging.Logger = logging.getLogger(__name__)


def next_delay(policy: BaseRetryPolicy, attempt: int, exc: Exception) -> timedelta | None:
    """Decide what follows a failed attempt.

    Args:
        policy: The retry policy to consult.
        attempt: The number of the attempt that failed (1-indexed).
        exc: The exception raised by that attempt.

    Returns:
        The delay to wait before attempt ``attempt + 1``, or ``None`` if
        the exception must be propagated to the caller.

    Example:
        ```pycon
        >>> from aretry.delay import fixed_delay
        >>> from aretry.retry import RetryPolicy
        >>> from aretry.retry.executor_core import next_delay
        >>> policy = RetryPolicy(max_attempts=2, delay_strategy=fixed_delay(10))
        >>> next_delay(policy, 1, ValueError())
        datetime.timedelta(microseconds=10000)
        >>> next_delay(policy, 2, ValueError()) is None
        True

        ```
    """
    if not policy.should_retry(attempt, exc):
        logger.debug(f"Attempt {attempt} failed with {type(exc).__name__}, giving up")
        return None
    delay = policy.get_delay(attempt)
    logger.debug(
        f"Attempt {attempt} failed with {type(exc).__name__}, "
        f"retrying in {delay.total_seconds():.3f}s"
    )
    return delay
