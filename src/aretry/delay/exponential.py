r"""Exponential delay strategy."""

from __future__ import annotations

__all__ = ["ExponentialDelay", "exponential_delay", "exponential_delay_millis"]

import math
from datetime import timedelta

from aretry.core.config import DEFAULT_EXPONENTIAL_FACTOR, DEFAULT_MAX_DELAY_MILLIS
from aretry.core.validation import (
    validate_attempt,
    validate_factor,
    validate_max_delay,
    validate_non_negative_delay,
)
from aretry.delay.arithmetic import clamp_delay, saturating_mul
from aretry.delay.base import BaseDelayStrategy


class ExponentialDelay(BaseDelayStrategy):
    """Exponential delay strategy.

    Calculates delay as: initial_delay * (factor ** (attempt - 1)), with
    optional max_delay cap.

    The growth saturates: when the multiplier or the product overflows,
    the delay becomes ``aretry.delay.MAX_DELAY`` (or max_delay when a
    cap is set) instead of raising.

    Args:
        initial_delay: The delay after the first attempt.
        factor: The base of the exponential growth (default: 2.0).
        max_delay: Optional maximum delay cap. If specified, delays will
            not exceed this value.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aretry.delay import ExponentialDelay
        >>> strategy = ExponentialDelay(initial_delay=timedelta(milliseconds=100))
        >>> [strategy.calculate(i) // timedelta(milliseconds=1) for i in range(1, 5)]
        [100, 200, 400, 800]
        >>> # With max_delay cap
        >>> strategy = ExponentialDelay(
        ...     initial_delay=timedelta(milliseconds=100),
        ...     max_delay=timedelta(milliseconds=500),
        ... )
        >>> strategy.calculate(4)  # Would be 800ms, but capped
        datetime.timedelta(microseconds=500000)

        ```
    """

    def __init__(
        self,
        initial_delay: timedelta,
        factor: float = DEFAULT_EXPONENTIAL_FACTOR,
        max_delay: timedelta | None = None,
    ) -> None:
        validate_non_negative_delay("initial_delay", initial_delay)
        validate_factor(factor)
        validate_max_delay(max_delay)

        self.initial_delay = initial_delay
        self.factor = float(factor)
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(initial_delay={self.initial_delay!r}, "
            f"factor={self.factor!r}, max_delay={self.max_delay!r})"
        )

    def calculate(self, attempt: int) -> timedelta:
        """Calculate exponential delay.

        Args:
            attempt: The attempt number (1-indexed).

        Returns:
            The calculated delay: initial_delay * (factor ** (attempt - 1)),
            capped at max_delay if set.
        """
        validate_attempt(attempt)
        try:
            multiplier = self.factor ** (attempt - 1)
        except OverflowError:
            # The exponent does not fit in a float
            if self.factor > 1:
                multiplier = math.inf
            elif self.factor == 1:
                multiplier = 1.0
            else:
                multiplier = 0.0
        return clamp_delay(saturating_mul(self.initial_delay, multiplier), self.max_delay)


def exponential_delay(
    initial_delay_millis: int,
    factor: float = DEFAULT_EXPONENTIAL_FACTOR,
    max_delay_millis: int = DEFAULT_MAX_DELAY_MILLIS,
) -> ExponentialDelay:
    """Create an exponential delay strategy from numbers of
    milliseconds.

    Unlike ``ExponentialDelay``, the cap defaults to five minutes.

    Args:
        initial_delay_millis: The delay after the first attempt in
            milliseconds.
        factor: The base of the exponential growth (default: 2.0).
        max_delay_millis: The maximum delay in milliseconds
            (default: 300000, i.e. five minutes).

    Returns:
        The exponential delay strategy.

    Example:
        ```pycon
        >>> from aretry.delay import exponential_delay
        >>> strategy = exponential_delay(100)
        >>> strategy.calculate(3)
        datetime.timedelta(microseconds=400000)
        >>> strategy.calculate(100)
        datetime.timedelta(seconds=300)

        ```
    """
    return ExponentialDelay(
        initial_delay=timedelta(milliseconds=initial_delay_millis),
        factor=factor,
        max_delay=timedelta(milliseconds=max_delay_millis),
    )


def exponential_delay_millis(
    attempt: int,
    initial_delay_millis: int,
    max_delay_millis: int = DEFAULT_MAX_DELAY_MILLIS,
) -> int:
    """Compute a doubling delay directly in integer milliseconds.

    The delay is initial_delay_millis * (2 ** (attempt - 1)), capped at
    max_delay_millis. Integer arithmetic keeps the result exact, and
    the power is never materialized once it is known to exceed the cap.

    Args:
        attempt: The attempt number (1-indexed).
        initial_delay_millis: The delay after the first attempt in
            milliseconds. Must be >= 0.
        max_delay_millis: The maximum delay in milliseconds
            (default: 300000, i.e. five minutes). Must be >= 0.

    Returns:
        The delay in milliseconds.

    Raises:
        ValueError: If attempt is lower than 1 or a delay is negative.

    Example:
        ```pycon
        >>> from aretry.delay import exponential_delay_millis
        >>> [exponential_delay_millis(i, 100) for i in range(1, 5)]
        [100, 200, 400, 800]
        >>> exponential_delay_millis(1_000_000, 100)
        300000

        ```
    """
    validate_attempt(attempt)
    if initial_delay_millis < 0:
        msg = f"initial_delay_millis must be non-negative, got {initial_delay_millis}"
        raise ValueError(msg)
    if max_delay_millis < 0:
        msg = f"max_delay_millis must be non-negative, got {max_delay_millis}"
        raise ValueError(msg)

    if initial_delay_millis == 0:
        return 0
    shift = attempt - 1
    if shift > max_delay_millis.bit_length():
        return max_delay_millis
    return min(initial_delay_millis << shift, max_delay_millis)
