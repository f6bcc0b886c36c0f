r"""Saturating ``timedelta`` arithmetic used by the delay strategies.

Growing delays can exceed the range of ``datetime.timedelta`` for large
attempt numbers. The helpers below clamp such results to ``MAX_DELAY``
instead of raising ``OverflowError``.
"""

from __future__ import annotations

__all__ = ["MAX_DELAY", "clamp_delay", "saturating_add", "saturating_mul"]

import math
from datetime import timedelta

# Largest representable delay, returned when a computation overflows
MAX_DELAY: timedelta = timedelta.max

_ZERO = timedelta(0)


def saturating_mul(delay: timedelta, multiplier: float) -> timedelta:
    """Multiply a delay, saturating to ``MAX_DELAY`` on overflow.

    Args:
        delay: A non-negative delay.
        multiplier: A non-negative multiplier, possibly ``math.inf``.

    Returns:
        ``delay * multiplier``, or ``MAX_DELAY`` if the product does not
        fit in a ``timedelta``. A zero delay or a zero multiplier always
        gives a zero delay.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aretry.delay.arithmetic import MAX_DELAY, saturating_mul
        >>> saturating_mul(timedelta(milliseconds=100), 4.0)
        datetime.timedelta(microseconds=400000)
        >>> saturating_mul(timedelta(seconds=1), float("inf")) == MAX_DELAY
        True

        ```
    """
    if delay == _ZERO or multiplier == 0:
        return _ZERO
    try:
        if math.isinf(multiplier):
            return MAX_DELAY
        return delay * multiplier
    except OverflowError:
        return MAX_DELAY


def saturating_add(left: timedelta, right: timedelta) -> timedelta:
    """Add two non-negative delays, saturating to ``MAX_DELAY`` on
    overflow.

    Args:
        left: A non-negative delay.
        right: A non-negative delay.

    Returns:
        ``left + right``, or ``MAX_DELAY`` if the sum does not fit in a
        ``timedelta``.
    """
    try:
        return left + right
    except OverflowError:
        return MAX_DELAY


def clamp_delay(delay: timedelta, max_delay: timedelta | None) -> timedelta:
    """Cap a delay to an optional maximum.

    Args:
        delay: The computed delay.
        max_delay: The cap, or ``None`` to leave the delay unchanged.

    Returns:
        ``min(delay, max_delay)`` when a cap is set, ``delay`` otherwise.
    """
    if max_delay is not None:
        return min(delay, max_delay)
    return delay
