r"""Decorator adding retry behavior to plain and coroutine functions."""

from __future__ import annotations

__all__ = ["retrying"]

import functools
import inspect
from typing import TYPE_CHECKING, Any

from aretry.core.config import DEFAULT_MAX_ATTEMPTS
from aretry.exceptions import InvalidConfigurationError
from aretry.retry.executor import RetryExecutor
from aretry.retry.executor_async import AsyncRetryExecutor
from aretry.retry.policy import RetryPolicy

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from aretry.delay.base import BaseDelayStrategy
    from aretry.retry.policy import BaseRetryPolicy


def retrying(
    policy: BaseRetryPolicy | None = None,
    *,
    delay_strategy: BaseDelayStrategy | None = None,
    max_attempts: int | None = None,
    retryable_exceptions: Iterable[type[BaseException]] | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    r"""Decorate a function so each call is retried on failure.

    Coroutine functions are run with ``AsyncRetryExecutor``, any other
    callable with ``RetryExecutor``. The arguments of each call are
    forwarded to every attempt. The policy is built once, at decoration
    time, so an invalid configuration fails before the function is ever
    called.

    Args:
        policy: The retry policy to use. If omitted, a ``RetryPolicy`` is
            built from the keyword arguments.
        delay_strategy: The delay strategy, required when ``policy`` is
            omitted.
        max_attempts: Maximum number of attempts when ``policy`` is
            omitted (default: 3).
        retryable_exceptions: Retryable exception classes when
            ``policy`` is omitted (default: every exception).

    Returns:
        The decorator.

    Raises:
        InvalidConfigurationError: If neither or both of ``policy`` and
            ``delay_strategy`` are provided, if ``max_attempts`` or
            ``retryable_exceptions`` is combined with ``policy``, or if
            the policy parameters are invalid.

    Example:
        ```pycon
        >>> from aretry import fixed_delay, retrying
        >>> calls = []
        >>> @retrying(delay_strategy=fixed_delay(1), max_attempts=3)
        ... def divide(a, b):
        ...     calls.append((a, b))
        ...     if len(calls) < 2:
        ...         raise ConnectionError("flaky")
        ...     return a / b
        ...
        >>> divide(6, b=3)
        2.0
        >>> calls
        [(6, 3), (6, 3)]

        ```
    """
    if policy is None:
        if delay_strategy is None:
            msg = "retrying requires either a policy or a delay_strategy"
            raise InvalidConfigurationError(msg)
        policy = RetryPolicy(
            max_attempts=DEFAULT_MAX_ATTEMPTS if max_attempts is None else max_attempts,
            delay_strategy=delay_strategy,
            retryable_exceptions=() if retryable_exceptions is None else retryable_exceptions,
        )
    elif delay_strategy is not None:
        msg = "retrying accepts a policy or a delay_strategy, not both"
        raise InvalidConfigurationError(msg)
    elif max_attempts is not None or retryable_exceptions is not None:
        msg = "max_attempts and retryable_exceptions cannot be combined with a policy"
        raise InvalidConfigurationError(msg)

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(func):
            async_executor = AsyncRetryExecutor(policy)

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                return await async_executor.execute(functools.partial(func, *args, **kwargs))

            return async_wrapper

        executor = RetryExecutor(policy)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return executor.execute(functools.partial(func, *args, **kwargs))

        return wrapper

    return decorator
