r"""Abstract base class for delay strategies."""

from __future__ import annotations

__all__ = ["BaseDelayStrategy"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import timedelta


class BaseDelayStrategy(ABC):
    """Abstract base class for delay strategies.

    A delay strategy determines how long to wait before the next attempt
    of a failed operation, based only on the number of the attempt that
    just failed. Implementations must be pure: the same attempt number
    always gives the same delay, nothing is stored between calls, and
    the computation never blocks. A single instance can therefore be
    shared by any number of concurrent retry loops.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> timedelta:
        """Calculate the delay for a given attempt.

        Args:
            attempt: The attempt number (1-indexed). For example,
                attempt=1 is the first attempt, attempt=2 is the second
                attempt, etc.

        Returns:
            The non-negative delay to wait after this attempt failed.
        """
