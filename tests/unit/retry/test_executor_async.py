r"""Unit tests for the asyncio retry executor."""

from __future__ import annotations

import asyncio
import logging
from unittest.mock import AsyncMock, Mock, call

import pytest

from aretry.delay import fixed_delay, linear_delay
from aretry.retry import AsyncRetryExecutor, RetryPolicy


def test_async_retry_executor_attributes(policy: RetryPolicy) -> None:
    assert AsyncRetryExecutor(policy).policy is policy


@pytest.mark.asyncio
async def test_async_retry_executor_success_first_attempt(
    policy: RetryPolicy, mock_async_func: AsyncMock, mock_asleep: Mock
) -> None:
    assert await AsyncRetryExecutor(policy).execute(mock_async_func) == "ok"
    mock_async_func.assert_awaited_once_with()
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_async_retry_executor_success_after_failures(
    policy: RetryPolicy, mock_asleep: Mock
) -> None:
    func = AsyncMock(side_effect=[ConnectionError("fail 1"), ConnectionError("fail 2"), "ok"])
    assert await AsyncRetryExecutor(policy).execute(func) == "ok"
    assert func.await_count == 3
    assert mock_asleep.call_args_list == [call(0.01), call(0.01)]


@pytest.mark.asyncio
async def test_async_retry_executor_uses_attempt_number_for_delay(mock_asleep: Mock) -> None:
    policy = RetryPolicy(max_attempts=3, delay_strategy=linear_delay(100, 200))
    func = AsyncMock(side_effect=[ValueError(), ValueError(), "ok"])
    assert await AsyncRetryExecutor(policy).execute(func) == "ok"
    assert mock_asleep.call_args_list == [call(0.1), call(0.3)]


@pytest.mark.asyncio
async def test_async_retry_executor_exhausted_raises_last_error(
    policy: RetryPolicy, mock_asleep: Mock
) -> None:
    errors = [TimeoutError("fail 1"), TimeoutError("fail 2"), TimeoutError("fail 3")]
    func = AsyncMock(side_effect=errors)
    with pytest.raises(TimeoutError, match=r"fail 3") as exc_info:
        await AsyncRetryExecutor(policy).execute(func)
    assert exc_info.value is errors[2]
    assert func.await_count == 3
    assert mock_asleep.call_count == 2


@pytest.mark.asyncio
async def test_async_retry_executor_single_attempt(mock_asleep: Mock) -> None:
    policy = RetryPolicy(max_attempts=1, delay_strategy=fixed_delay(10))
    func = AsyncMock(side_effect=ValueError("boom"))
    with pytest.raises(ValueError, match=r"boom"):
        await AsyncRetryExecutor(policy).execute(func)
    func.assert_awaited_once_with()
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_async_retry_executor_non_retryable_error(mock_asleep: Mock) -> None:
    policy = RetryPolicy(
        max_attempts=5, delay_strategy=fixed_delay(10), retryable_exceptions=[ConnectionError]
    )
    func = AsyncMock(side_effect=[ConnectionError("fail"), KeyError("missing"), "ok"])
    with pytest.raises(KeyError, match=r"missing"):
        await AsyncRetryExecutor(policy).execute(func)
    assert func.await_count == 2
    mock_asleep.assert_called_once_with(0.01)


@pytest.mark.asyncio
async def test_async_retry_executor_non_awaitable_is_not_retried(
    policy: RetryPolicy, mock_asleep: Mock
) -> None:
    func = Mock(return_value="ok")
    with pytest.raises(TypeError, match=r"func must return an awaitable, got str"):
        await AsyncRetryExecutor(policy).execute(func)
    func.assert_called_once_with()
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_async_retry_executor_type_error_from_coroutine_is_retried(
    policy: RetryPolicy, mock_asleep: Mock
) -> None:
    func = AsyncMock(side_effect=[TypeError("bad payload"), "ok"])
    assert await AsyncRetryExecutor(policy).execute(func) == "ok"
    assert func.await_count == 2
    mock_asleep.assert_called_once_with(0.01)


@pytest.mark.asyncio
async def test_async_retry_executor_cancelled_error_from_func_is_not_retried(
    policy: RetryPolicy, mock_asleep: Mock
) -> None:
    func = AsyncMock(side_effect=[asyncio.CancelledError(), "ok"])
    with pytest.raises(asyncio.CancelledError):
        await AsyncRetryExecutor(policy).execute(func)
    func.assert_awaited_once_with()
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_async_retry_executor_cancelled_while_waiting() -> None:
    """Test that cancelling the task interrupts a long wait and no
    further attempt is made."""
    policy = RetryPolicy(max_attempts=3, delay_strategy=fixed_delay(60_000))
    func = AsyncMock(side_effect=ValueError("fail"))

    task = asyncio.create_task(AsyncRetryExecutor(policy).execute(func))
    while func.await_count == 0:
        await asyncio.sleep(0)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    func.assert_awaited_once_with()


@pytest.mark.asyncio
async def test_async_retry_executor_concurrent_tasks(mock_asleep: Mock) -> None:
    executor = AsyncRetryExecutor(RetryPolicy(max_attempts=2, delay_strategy=fixed_delay(10)))
    funcs = [AsyncMock(side_effect=[ValueError(), i]) for i in range(5)]
    results = await asyncio.gather(*(executor.execute(func) for func in funcs))
    assert results == [0, 1, 2, 3, 4]
    assert mock_asleep.call_count == 5


@pytest.mark.asyncio
async def test_async_retry_executor_logs(
    policy: RetryPolicy, mock_asleep: Mock, caplog: pytest.LogCaptureFixture
) -> None:
    func = AsyncMock(side_effect=[ValueError("fail"), "ok"])
    with caplog.at_level(level=logging.DEBUG):
        await AsyncRetryExecutor(policy).execute(func)
    assert "Attempt 1 failed with ValueError, retrying in 0.010s" in caplog.messages
    assert "Succeeded on attempt 2" in caplog.messages
    mock_asleep.assert_called_once_with(0.01)
