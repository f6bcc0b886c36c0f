r"""Define the exceptions raised by the retry machinery itself.

Failures raised by the retried callable are never wrapped: they
propagate unchanged. The exceptions below only signal problems with the
retry configuration or an explicit cancellation of a blocking retry
loop.
"""

from __future__ import annotations

__all__ = ["InvalidConfigurationError", "RetryCancelledError"]


class InvalidConfigurationError(ValueError):
    """Exception raised when a retry policy is built with invalid
    parameters.

    It subclasses ``ValueError`` so callers that already guard
    parameter validation with ``except ValueError`` keep working.

    Example:
        ```pycon
        >>> from aretry.exceptions import InvalidConfigurationError
        >>> raise InvalidConfigurationError("max_attempts must be >= 1, got 0")
        Traceback (most recent call last):
            ...
        aretry.exceptions.InvalidConfigurationError: max_attempts must be >= 1, got 0

        ```
    """


class RetryCancelledError(RuntimeError):
    """Exception raised when a blocking retry loop is cancelled while
    waiting between two attempts.

    The failure of the last attempt is available as ``__cause__``.

    Args:
        attempt: The attempt number (1-indexed) whose failure was being
            waited on when the cancellation happened.
        message: Optional custom error message.

    Example:
        ```pycon
        >>> from aretry.exceptions import RetryCancelledError
        >>> exc = RetryCancelledError(attempt=2)
        >>> exc.attempt
        2
        >>> str(exc)
        'retry loop cancelled while waiting after attempt 2'

        ```
    """

    def __init__(self, attempt: int, message: str | None = None) -> None:
        if message is None:
            message = f"retry loop cancelled while waiting after attempt {attempt}"
        super().__init__(message)
        self.attempt = attempt
