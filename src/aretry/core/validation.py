r"""Parameter validation utilities for retry policies and delay
strategies.

This module provides validation functions to ensure parameters meet the
required constraints before being used in the retry loop.
"""

from __future__ import annotations

__all__ = [
    "validate_attempt",
    "validate_factor",
    "validate_max_attempts",
    "validate_max_delay",
    "validate_non_negative_delay",
    "validate_retryable_exceptions",
]

import math
from datetime import timedelta
from typing import TYPE_CHECKING

from aretry.exceptions import InvalidConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable

_ZERO = timedelta(0)


def validate_max_attempts(max_attempts: int) -> None:
    """Validate the maximum number of attempts of a retry policy.

    Args:
        max_attempts: Maximum number of attempts, including the first
            one. Must be an integer >= 1.

    Raises:
        InvalidConfigurationError: If ``max_attempts`` is not an
            integer or is lower than 1.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_max_attempts
        >>> validate_max_attempts(3)
        >>> validate_max_attempts(0)
        Traceback (most recent call last):
        ...
        aretry.exceptions.InvalidConfigurationError: max_attempts must be >= 1, got 0

        ```
    """
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        msg = f"max_attempts must be an integer, got {type(max_attempts).__qualname__}"
        raise InvalidConfigurationError(msg)
    if max_attempts < 1:
        msg = f"max_attempts must be >= 1, got {max_attempts}"
        raise InvalidConfigurationError(msg)


def validate_retryable_exceptions(
    retryable_exceptions: Iterable[type[BaseException]],
) -> tuple[type[BaseException], ...]:
    """Validate and normalize an allow-list of retryable exception
    types.

    Args:
        retryable_exceptions: The exception classes that should trigger
            a retry. An empty iterable means every exception is
            retryable.

    Returns:
        The allow-list as a tuple, ready to be used with ``isinstance``.

    Raises:
        InvalidConfigurationError: If an entry is not an exception
            class, or if a single class was passed instead of an
            iterable of classes.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_retryable_exceptions
        >>> validate_retryable_exceptions({TimeoutError})
        (<class 'TimeoutError'>,)
        >>> validate_retryable_exceptions(())
        ()

        ```
    """
    if isinstance(retryable_exceptions, type):
        msg = (
            "retryable_exceptions must be an iterable of exception classes, "
            f"got the class {retryable_exceptions.__qualname__}"
        )
        raise InvalidConfigurationError(msg)
    types = tuple(retryable_exceptions)
    for exc_type in types:
        if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
            msg = f"retryable_exceptions must only contain exception classes, got {exc_type!r}"
            raise InvalidConfigurationError(msg)
    return types


def validate_attempt(attempt: int) -> None:
    """Validate a 1-indexed attempt number.

    Args:
        attempt: The attempt number. Must be >= 1.

    Raises:
        ValueError: If ``attempt`` is lower than 1.
    """
    if attempt < 1:
        msg = f"attempt must be >= 1, got {attempt}"
        raise ValueError(msg)


def validate_non_negative_delay(name: str, delay: timedelta) -> None:
    """Validate that a delay is not negative.

    Args:
        name: The parameter name used in the error message.
        delay: The delay to validate.

    Raises:
        ValueError: If ``delay`` is negative.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aretry.core.validation import validate_non_negative_delay
        >>> validate_non_negative_delay("delay", timedelta(milliseconds=100))
        >>> validate_non_negative_delay("delay", timedelta(seconds=-1))
        Traceback (most recent call last):
        ...
        ValueError: delay must be non-negative, got -1 day, 23:59:59

        ```
    """
    if delay < _ZERO:
        msg = f"{name} must be non-negative, got {delay}"
        raise ValueError(msg)


def validate_max_delay(max_delay: timedelta | None) -> None:
    """Validate an optional delay cap.

    Args:
        max_delay: The delay cap, or ``None`` for no cap.

    Raises:
        ValueError: If ``max_delay`` is given and not positive.
    """
    if max_delay is not None and max_delay <= _ZERO:
        msg = f"max_delay must be positive if specified, got {max_delay}"
        raise ValueError(msg)


def validate_factor(factor: float) -> None:
    """Validate the growth factor of an exponential delay.

    Args:
        factor: The growth factor. Must be a finite number >= 0.

    Raises:
        ValueError: If ``factor`` is negative, infinite or NaN.
    """
    if not math.isfinite(factor) or factor < 0:
        msg = f"factor must be a finite non-negative number, got {factor}"
        raise ValueError(msg)
