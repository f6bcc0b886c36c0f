from __future__ import annotations

import pytest
from coola import objects_are_equal

from aretry.core.config import (
    DEFAULT_EXPONENTIAL_FACTOR,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_DELAY_MILLIS,
    RetryConfig,
)
from aretry.delay import fixed_delay
from aretry.exceptions import InvalidConfigurationError
from aretry.retry import RetryPolicy

###############################
#     Tests for constants     #
###############################


def test_default_max_attempts() -> None:
    assert DEFAULT_MAX_ATTEMPTS == 3


def test_default_exponential_factor() -> None:
    assert DEFAULT_EXPONENTIAL_FACTOR == 2.0


def test_default_max_delay_millis() -> None:
    assert DEFAULT_MAX_DELAY_MILLIS == 300_000


#################################
#     Tests for RetryConfig     #
#################################


def test_retry_config_defaults() -> None:
    strategy = fixed_delay(100)
    config = RetryConfig(delay_strategy=strategy)
    assert config.delay_strategy is strategy
    assert config.max_attempts == 3
    assert config.retryable_exceptions == ()


def test_retry_config_normalizes_retryable_exceptions() -> None:
    config = RetryConfig(
        delay_strategy=fixed_delay(100),
        retryable_exceptions=[TimeoutError, ConnectionError],  # type: ignore[arg-type]
    )
    assert objects_are_equal(config.retryable_exceptions, (TimeoutError, ConnectionError))


def test_retry_config_invalid_max_attempts() -> None:
    with pytest.raises(InvalidConfigurationError, match=r"max_attempts must be >= 1, got 0"):
        RetryConfig(delay_strategy=fixed_delay(100), max_attempts=0)


def test_retry_config_invalid_retryable_exceptions() -> None:
    with pytest.raises(InvalidConfigurationError, match=r"retryable_exceptions"):
        RetryConfig(
            delay_strategy=fixed_delay(100),
            retryable_exceptions=("boom",),  # type: ignore[arg-type]
        )


def test_retry_config_merge() -> None:
    config = RetryConfig(delay_strategy=fixed_delay(100))
    merged = config.merge(max_attempts=5, retryable_exceptions=(KeyError,))
    assert merged is not config
    assert merged.max_attempts == 5
    assert merged.retryable_exceptions == (KeyError,)
    assert merged.delay_strategy is config.delay_strategy
    assert config.max_attempts == 3
    assert config.retryable_exceptions == ()


def test_retry_config_merge_ignores_none() -> None:
    config = RetryConfig(delay_strategy=fixed_delay(100), max_attempts=4)
    merged = config.merge(max_attempts=None, delay_strategy=None)
    assert merged == config


def test_retry_config_merge_validates() -> None:
    config = RetryConfig(delay_strategy=fixed_delay(100))
    with pytest.raises(InvalidConfigurationError, match=r"max_attempts must be >= 1"):
        config.merge(max_attempts=-1)


def test_retry_config_merge_unknown_field() -> None:
    config = RetryConfig(delay_strategy=fixed_delay(100))
    with pytest.raises(TypeError):
        config.merge(jitter=0.1)


def test_retry_config_to_policy() -> None:
    strategy = fixed_delay(100)
    config = RetryConfig(
        delay_strategy=strategy, max_attempts=4, retryable_exceptions=(TimeoutError,)
    )
    policy = config.to_policy()
    assert isinstance(policy, RetryPolicy)
    assert policy.max_attempts == 4
    assert policy.delay_strategy is strategy
    assert policy.retryable_exceptions == (TimeoutError,)
