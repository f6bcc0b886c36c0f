from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, patch

import pytest

from aretry.delay import fixed_delay
from aretry.retry import RetryPolicy

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def policy() -> RetryPolicy:
    """Create a retry policy with 3 attempts and a fixed 10ms delay."""
    return RetryPolicy(max_attempts=3, delay_strategy=fixed_delay(10))


@pytest.fixture
def mock_func() -> Mock:
    """Create a mock callable that succeeds on the first attempt."""
    return Mock(return_value="ok")


@pytest.fixture
def mock_async_func() -> AsyncMock:
    """Create a mock coroutine function that succeeds on the first
    attempt."""
    return AsyncMock(return_value="ok")
