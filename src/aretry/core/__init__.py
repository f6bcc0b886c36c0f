r"""Core configuration and validation shared by the retry machinery."""

from __future__ import annotations

__all__ = [
    "DEFAULT_EXPONENTIAL_FACTOR",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MAX_DELAY_MILLIS",
    "RetryConfig",
    "validate_attempt",
    "validate_factor",
    "validate_max_attempts",
    "validate_max_delay",
    "validate_non_negative_delay",
    "validate_retryable_exceptions",
]

from aretry.core.config import (
    DEFAULT_EXPONENTIAL_FACTOR,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_DELAY_MILLIS,
    RetryConfig,
)
from aretry.core.validation import (
    validate_attempt,
    validate_factor,
    validate_max_attempts,
    validate_max_delay,
    validate_non_negative_delay,
    validate_retryable_exceptions,
)
