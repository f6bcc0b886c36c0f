r"""aretry - Retry fallible operations with configurable backoff.

This package runs a caller-supplied callable repeatedly until it
succeeds, governed by a retry policy that decides whether to retry and
how long to wait between attempts. Both blocking code and asyncio
coroutines are supported, sharing the exact same attempt loop.

Key Features:
    - Fixed, linear and exponential delay strategies with optional caps
    - Saturating arithmetic: huge attempt numbers never overflow
    - Attempt cap and allow-list of retryable exception types
    - Blocking (time.sleep) and suspending (asyncio.sleep) executors
    - Failures are propagated unchanged, never wrapped
    - Convenience functions taking raw milliseconds and a decorator

Example:
    ```pycon
    >>> from aretry import exponential_retry, fixed_delay, retrying
    >>> # One-off call with exponential backoff
    >>> exponential_retry(lambda: "ok", initial_delay_millis=100, max_attempts=5)
    'ok'
    >>> # Decorate a function
    >>> @retrying(delay_strategy=fixed_delay(50), retryable_exceptions={ConnectionError})
    ... def fetch():
    ...     return "data"
    ...
    >>> fetch()
    'data'

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_EXPONENTIAL_FACTOR",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MAX_DELAY_MILLIS",
    "MAX_DELAY",
    "AsyncRetryExecutor",
    "BaseDelayStrategy",
    "BaseRetryPolicy",
    "ExponentialDelay",
    "FixedDelay",
    "InvalidConfigurationError",
    "LinearDelay",
    "RetryCancelledError",
    "RetryConfig",
    "RetryExecutor",
    "RetryPolicy",
    "__version__",
    "exponential_delay",
    "exponential_delay_millis",
    "exponential_retry",
    "exponential_retry_async",
    "fixed_delay",
    "fixed_retry",
    "fixed_retry_async",
    "linear_delay",
    "linear_retry",
    "linear_retry_async",
    "retry_call",
    "retry_call_async",
    "retrying",
    "wait",
    "wait_async",
    "with_retry",
    "with_retry_async",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.core.config import (
    DEFAULT_EXPONENTIAL_FACTOR,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_DELAY_MILLIS,
    RetryConfig,
)
from aretry.decorator import retrying
from aretry.delay import (
    MAX_DELAY,
    BaseDelayStrategy,
    ExponentialDelay,
    FixedDelay,
    LinearDelay,
    exponential_delay,
    exponential_delay_millis,
    fixed_delay,
    linear_delay,
    wait,
    wait_async,
)
from aretry.exceptions import InvalidConfigurationError, RetryCancelledError
from aretry.exponential import exponential_retry
from aretry.exponential_async import exponential_retry_async
from aretry.fixed import fixed_retry
from aretry.fixed_async import fixed_retry_async
from aretry.linear import linear_retry
from aretry.linear_async import linear_retry_async
from aretry.retry import AsyncRetryExecutor, BaseRetryPolicy, RetryExecutor, RetryPolicy
from aretry.retry_call import retry_call, with_retry
from aretry.retry_call_async import retry_call_async, with_retry_async

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
