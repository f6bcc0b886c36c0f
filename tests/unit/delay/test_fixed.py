r"""Unit tests for FixedDelay strategy."""

from __future__ import annotations

from datetime import timedelta

import pytest

from aretry.delay.fixed import FixedDelay, fixed_delay


@pytest.mark.parametrize("attempt", range(1, 101))
def test_fixed_delay_is_constant(attempt: int) -> None:
    """Test that fixed delay returns the same delay for every attempt."""
    strategy = FixedDelay(timedelta(milliseconds=250))
    assert strategy.calculate(attempt) == timedelta(milliseconds=250)


def test_fixed_delay_zero() -> None:
    """Test fixed delay with a zero delay."""
    strategy = FixedDelay(timedelta(0))
    assert strategy.calculate(1) == timedelta(0)
    assert strategy.calculate(42) == timedelta(0)


def test_fixed_delay_large_attempt() -> None:
    """Test that fixed delay ignores very large attempt numbers."""
    strategy = FixedDelay(timedelta(seconds=1))
    assert strategy.calculate(10**18) == timedelta(seconds=1)


def test_fixed_delay_invalid_delay() -> None:
    """Test that negative delay raises ValueError."""
    with pytest.raises(ValueError, match=r"delay must be non-negative"):
        FixedDelay(timedelta(milliseconds=-1))


@pytest.mark.parametrize("attempt", [0, -1])
def test_fixed_delay_invalid_attempt(attempt: int) -> None:
    """Test that attempts are 1-indexed."""
    strategy = FixedDelay(timedelta(seconds=1))
    with pytest.raises(ValueError, match=r"attempt must be >= 1"):
        strategy.calculate(attempt)


def test_fixed_delay_repr() -> None:
    assert repr(FixedDelay(timedelta(seconds=1))) == (
        "FixedDelay(delay=datetime.timedelta(seconds=1))"
    )


def test_fixed_delay_factory() -> None:
    """Test creating a fixed delay from milliseconds."""
    strategy = fixed_delay(100)
    assert isinstance(strategy, FixedDelay)
    assert strategy.delay == timedelta(milliseconds=100)


def test_fixed_delay_factory_invalid() -> None:
    with pytest.raises(ValueError, match=r"delay must be non-negative"):
        fixed_delay(-100)
