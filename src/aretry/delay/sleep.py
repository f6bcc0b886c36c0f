r"""Helpers that wait for the delay computed by a strategy.

``wait`` blocks the calling thread with ``time.sleep`` while
``wait_async`` suspends the current task with ``asyncio.sleep``.
"""

from __future__ import annotations

__all__ = ["wait", "wait_async"]

import asyncio
import logging
import threading
import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.delay.base import BaseDelayStrategy

logger: logging.Logger = logging.getLogger(__name__)


def wait(strategy: BaseDelayStrategy, attempt: int) -> float:
    """Block the current thread for the delay of a given attempt.

    Args:
        strategy: The delay strategy.
        attempt: The attempt number (1-indexed).

    Returns:
        The number of seconds waited.

    Example:
        ```pycon
        >>> from aretry.delay import fixed_delay, wait
        >>> wait(fixed_delay(10), attempt=1)
        0.01

        ```
    """
    seconds = strategy.calculate(attempt).total_seconds()
    logger.debug(f"Waiting {seconds:.3f}s after attempt {attempt}")
    # time.sleep rejects timeouts above TIMEOUT_MAX
    time.sleep(min(seconds, threading.TIMEOUT_MAX))
    return seconds


async def wait_async(strategy: BaseDelayStrategy, attempt: int) -> float:
    """Suspend the current task for the delay of a given attempt.

    If the task is cancelled, ``asyncio.CancelledError`` is raised
    immediately.

    Args:
        strategy: The delay strategy.
        attempt: The attempt number (1-indexed).

    Returns:
        The number of seconds waited.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.delay import fixed_delay, wait_async
        >>> asyncio.run(wait_async(fixed_delay(10), attempt=1))
        0.01

        ```
    """
    seconds = strategy.calculate(attempt).total_seconds()
    logger.debug(f"Waiting {seconds:.3f}s after attempt {attempt}")
    await asyncio.sleep(seconds)
    return seconds
