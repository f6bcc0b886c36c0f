r"""Configuration dataclass and defaults for retry policies.

This module provides configuration constants and a dataclass-based
configuration object that can be validated once, tweaked with
``merge``, and turned into a ``RetryPolicy``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_EXPONENTIAL_FACTOR",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MAX_DELAY_MILLIS",
    "RetryConfig",
]

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from aretry.core.validation import validate_max_attempts, validate_retryable_exceptions

if TYPE_CHECKING:
    from aretry.delay.base import BaseDelayStrategy
    from aretry.retry.policy import RetryPolicy


# Default maximum number of attempts, including the first one
DEFAULT_MAX_ATTEMPTS = 3

# Default base of the exponential growth
# Delay = initial_delay * factor ** (attempt - 1)
DEFAULT_EXPONENTIAL_FACTOR = 2.0

# Default cap of the exponential delay factories, in milliseconds (5 minutes)
DEFAULT_MAX_DELAY_MILLIS = 5 * 60 * 1000


@dataclass
class RetryConfig:
    """Configuration for retry behavior.

    Args:
        delay_strategy: The strategy computing the delay after each
            failed attempt.
        max_attempts: Maximum number of attempts, including the first
            one. Must be >= 1.
        retryable_exceptions: Exception classes that trigger a retry.
            An empty tuple means every exception is retryable.

    Raises:
        InvalidConfigurationError: If any parameter fails validation.

    Example:
        ```pycon
        >>> from aretry.core.config import RetryConfig
        >>> from aretry.delay import fixed_delay
        >>> config = RetryConfig(delay_strategy=fixed_delay(100))
        >>> config.max_attempts
        3
        >>> merged = config.merge(max_attempts=5)  # Override specific parameters
        >>> merged.max_attempts
        5
        >>> config.max_attempts  # Original unchanged
        3
        >>> policy = merged.to_policy()
        >>> policy.max_attempts
        5

        ```
    """

    delay_strategy: BaseDelayStrategy
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    retryable_exceptions: tuple[type[BaseException], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        validate_max_attempts(self.max_attempts)
        self.retryable_exceptions = validate_retryable_exceptions(self.retryable_exceptions)

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with specified parameters overridden.

        Args:
            **overrides: Fields to override. ``None`` values are ignored
                so optional call-site arguments can be forwarded as is.

        Returns:
            A new validated ``RetryConfig``.
        """
        return replace(self, **{key: value for key, value in overrides.items() if value is not None})

    def to_policy(self) -> RetryPolicy:
        """Build the retry policy described by this config.

        Returns:
            A ``RetryPolicy`` sharing this config's delay strategy.
        """
        # Imported here since aretry.retry depends on aretry.core
        from aretry.retry.policy import RetryPolicy  # noqa: PLC0415

        return RetryPolicy(
            max_attempts=self.max_attempts,
            delay_strategy=self.delay_strategy,
            retryable_exceptions=self.retryable_exceptions,
        )
