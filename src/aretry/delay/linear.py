r"""Linear delay strategy."""

from __future__ import annotations

__all__ = ["LinearDelay", "linear_delay"]

from datetime import timedelta

from aretry.core.validation import (
    validate_attempt,
    validate_max_delay,
    validate_non_negative_delay,
)
from aretry.delay.arithmetic import clamp_delay, saturating_add, saturating_mul
from aretry.delay.base import BaseDelayStrategy


class LinearDelay(BaseDelayStrategy):
    """Linear delay strategy.

    Calculates delay as: initial_delay + increment * (attempt - 1), with
    optional max_delay cap.

    This strategy provides evenly spaced growth, which can be useful for
    services that recover quickly or when you want predictable timing.

    Args:
        initial_delay: The delay after the first attempt.
        increment: The amount added to the delay for each subsequent
            attempt.
        max_delay: Optional maximum delay cap. If specified, delays will
            not exceed this value.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aretry.delay import LinearDelay
        >>> strategy = LinearDelay(
        ...     initial_delay=timedelta(milliseconds=100),
        ...     increment=timedelta(milliseconds=200),
        ... )
        >>> [strategy.calculate(i) // timedelta(milliseconds=1) for i in range(1, 6)]
        [100, 300, 500, 700, 900]
        >>> # With max_delay cap
        >>> strategy = LinearDelay(
        ...     initial_delay=timedelta(milliseconds=100),
        ...     increment=timedelta(milliseconds=200),
        ...     max_delay=timedelta(seconds=1),
        ... )
        >>> strategy.calculate(6)  # Would be 1100ms, but capped
        datetime.timedelta(seconds=1)

        ```
    """

    def __init__(
        self,
        initial_delay: timedelta,
        increment: timedelta,
        max_delay: timedelta | None = None,
    ) -> None:
        validate_non_negative_delay("initial_delay", initial_delay)
        validate_non_negative_delay("increment", increment)
        validate_max_delay(max_delay)

        self.initial_delay = initial_delay
        self.increment = increment
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(initial_delay={self.initial_delay!r}, "
            f"increment={self.increment!r}, max_delay={self.max_delay!r})"
        )

    def calculate(self, attempt: int) -> timedelta:
        """Calculate linear delay.

        Args:
            attempt: The attempt number (1-indexed).

        Returns:
            The calculated delay: initial_delay + increment * (attempt - 1),
            capped at max_delay if set.
        """
        validate_attempt(attempt)
        delay = saturating_add(self.initial_delay, saturating_mul(self.increment, attempt - 1))
        return clamp_delay(delay, self.max_delay)


def linear_delay(
    initial_delay_millis: int,
    increment_millis: int,
    max_delay_millis: int | None = None,
) -> LinearDelay:
    """Create a linear delay strategy from numbers of milliseconds.

    Args:
        initial_delay_millis: The delay after the first attempt in
            milliseconds.
        increment_millis: The amount added for each subsequent attempt
            in milliseconds.
        max_delay_millis: Optional maximum delay in milliseconds.

    Returns:
        The linear delay strategy.

    Example:
        ```pycon
        >>> from aretry.delay import linear_delay
        >>> strategy = linear_delay(100, 200, max_delay_millis=1000)
        >>> strategy.calculate(2)
        datetime.timedelta(microseconds=300000)

        ```
    """
    return LinearDelay(
        initial_delay=timedelta(milliseconds=initial_delay_millis),
        increment=timedelta(milliseconds=increment_millis),
        max_delay=None if max_delay_millis is None else timedelta(milliseconds=max_delay_millis),
    )
