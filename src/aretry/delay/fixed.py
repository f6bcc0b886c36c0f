r"""Fixed delay strategy."""

from __future__ import annotations

__all__ = ["FixedDelay", "fixed_delay"]

from datetime import timedelta

from aretry.core.validation import validate_attempt, validate_non_negative_delay
from aretry.delay.base import BaseDelayStrategy


class FixedDelay(BaseDelayStrategy):
    """Fixed delay strategy.

    Returns the same delay for every attempt, regardless of the attempt
    number.

    Args:
        delay: The delay to use for every attempt. Must be non-negative.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aretry.delay import FixedDelay
        >>> strategy = FixedDelay(timedelta(milliseconds=250))
        >>> strategy.calculate(1)
        datetime.timedelta(microseconds=250000)
        >>> strategy.calculate(10)
        datetime.timedelta(microseconds=250000)

        ```
    """

    def __init__(self, delay: timedelta) -> None:
        validate_non_negative_delay("delay", delay)
        self.delay = delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay!r})"

    def calculate(self, attempt: int) -> timedelta:
        """Calculate fixed delay.

        Args:
            attempt: The attempt number (1-indexed, unused apart from
                validation).

        Returns:
            The fixed delay value.
        """
        validate_attempt(attempt)
        return self.delay


def fixed_delay(delay_millis: int) -> FixedDelay:
    """Create a fixed delay strategy from a number of milliseconds.

    Args:
        delay_millis: The fixed delay in milliseconds.

    Returns:
        The fixed delay strategy.

    Example:
        ```pycon
        >>> from aretry.delay import fixed_delay
        >>> fixed_delay(100)
        FixedDelay(delay=datetime.timedelta(microseconds=100000))

        ```
    """
    return FixedDelay(timedelta(milliseconds=delay_millis))
