r"""Delay strategies computing how long to wait between attempts.

This package provides fixed, linear and exponential delay strategies,
factories taking raw milliseconds, and helpers that wait for the delay
of a given attempt.
"""

from __future__ import annotations

__all__ = [
    "MAX_DELAY",
    "BaseDelayStrategy",
    "ExponentialDelay",
    "FixedDelay",
    "LinearDelay",
    "exponential_delay",
    "exponential_delay_millis",
    "fixed_delay",
    "linear_delay",
    "wait",
    "wait_async",
]

from aretry.delay.arithmetic import MAX_DELAY
from aretry.delay.base import BaseDelayStrategy
from aretry.delay.exponential import (
    ExponentialDelay,
    exponential_delay,
    exponential_delay_millis,
)
from aretry.delay.fixed import FixedDelay, fixed_delay
from aretry.delay.linear import LinearDelay, linear_delay
from aretry.delay.sleep import wait, wait_async
