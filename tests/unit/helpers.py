r"""Shared test helpers for the convenience retry functions.

This module contains the test case definitions used to run the same
tests against the fixed, linear and exponential retry functions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import pytest

from aretry import (
    exponential_retry,
    exponential_retry_async,
    fixed_retry,
    fixed_retry_async,
    linear_retry,
    linear_retry_async,
)

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class RetryFunctionTestCase:
    """Test case definition for convenience retry function testing.

    Attributes:
        name: The name of the backoff (e.g., "fixed", "linear").
        retry_func: The function to test (e.g., fixed_retry).
        delay_kwargs: The delay keyword arguments passed on each call.
        expected_sleeps: The expected sleep durations in seconds after
            the first three failed attempts.
    """

    name: str
    retry_func: Callable[..., Any]
    delay_kwargs: dict[str, Any] = field(default_factory=dict)
    expected_sleeps: list[float] = field(default_factory=list)


FIXED_KWARGS = {"delay_millis": 100}
LINEAR_KWARGS = {"initial_delay_millis": 100, "increment_millis": 200}
EXPONENTIAL_KWARGS = {"initial_delay_millis": 100}

# Define test parameters for all blocking retry functions
RETRY_FUNCTIONS = [
    pytest.param(
        RetryFunctionTestCase(
            name="fixed",
            retry_func=fixed_retry,
            delay_kwargs=FIXED_KWARGS,
            expected_sleeps=[0.1, 0.1, 0.1],
        ),
        id="fixed",
    ),
    pytest.param(
        RetryFunctionTestCase(
            name="linear",
            retry_func=linear_retry,
            delay_kwargs=LINEAR_KWARGS,
            expected_sleeps=[0.1, 0.3, 0.5],
        ),
        id="linear",
    ),
    pytest.param(
        RetryFunctionTestCase(
            name="exponential",
            retry_func=exponential_retry,
            delay_kwargs=EXPONENTIAL_KWARGS,
            expected_sleeps=[0.1, 0.2, 0.4],
        ),
        id="exponential",
    ),
]

# Define test parameters for all asyncio retry functions
RETRY_FUNCTIONS_ASYNC = [
    pytest.param(
        RetryFunctionTestCase(
            name="fixed",
            retry_func=fixed_retry_async,
            delay_kwargs=FIXED_KWARGS,
            expected_sleeps=[0.1, 0.1, 0.1],
        ),
        id="fixed",
    ),
    pytest.param(
        RetryFunctionTestCase(
            name="linear",
            retry_func=linear_retry_async,
            delay_kwargs=LINEAR_KWARGS,
            expected_sleeps=[0.1, 0.3, 0.5],
        ),
        id="linear",
    ),
    pytest.param(
        RetryFunctionTestCase(
            name="exponential",
            retry_func=exponential_retry_async,
            delay_kwargs=EXPONENTIAL_KWARGS,
            expected_sleeps=[0.1, 0.2, 0.4],
        ),
        id="exponential",
    ),
]
