r"""Retry policies and the executors driving the attempt loop.

Public API:
    - BaseRetryPolicy: Interface deciding whether and when to retry
    - RetryPolicy: Attempt cap, exception allow-list and delay strategy
    - RetryExecutor: Blocking retry executor
    - AsyncRetryExecutor: Suspending (asyncio) retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "BaseRetryPolicy",
    "RetryExecutor",
    "RetryPolicy",
]

from aretry.retry.executor import RetryExecutor
from aretry.retry.executor_async import AsyncRetryExecutor
from aretry.retry.policy import BaseRetryPolicy, RetryPolicy
