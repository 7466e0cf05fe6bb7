"""Exponential backoff retry for async API calls."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import structlog
from tenacity import AsyncRetrying, RetryCallState, retry_if_exception_type, stop_after_attempt, wait_exponential

from chatsum.core.constants import (
    DEFAULT_RETRY_BASE_DELAY_SECONDS,
    DEFAULT_RETRY_MAX_DELAY_SECONDS,
    DEFAULT_SUMMARY_MAX_ATTEMPTS,
)

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def _before_sleep_logger(function_name: str) -> Callable[[RetryCallState], None]:
    """Build a tenacity callback that logs a failed attempt before the next wait."""

    def log_attempt(retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        logger.warning(
            "retry_attempt_failed",
            function=function_name,
            attempt=retry_state.attempt_number,
            next_delay=retry_state.next_action.sleep if retry_state.next_action else None,
            error=str(error),
        )

    return log_attempt


async def retry_with_backoff(
    fn: Callable[..., Awaitable[T]],
    *args: Any,
    max_attempts: int = DEFAULT_SUMMARY_MAX_ATTEMPTS,
    base_delay: float = DEFAULT_RETRY_BASE_DELAY_SECONDS,
    max_delay: float = DEFAULT_RETRY_MAX_DELAY_SECONDS,
    retry_on: type[BaseException] | tuple[type[BaseException], ...] = Exception,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    **kwargs: Any,
) -> T:
    """
    Await ``fn(*args, **kwargs)`` with exponential backoff between failed attempts.

    Configuration:
    - Max attempts: ``max_attempts`` (total, including the first call)
    - Wait before attempt n+1: ``base_delay * 2^(n-1)``, capped at ``max_delay``
    - Retries on: ``retry_on`` exceptions only, anything else propagates at once
    - Re-raises: Yes, the last error after max attempts

    :param fn: Coroutine function to call
    :param args: Positional arguments forwarded to ``fn``
    :param max_attempts: Attempt ceiling, must be >= 1
    :param base_delay: Delay in seconds after the first failure
    :param max_delay: Upper bound for any single delay
    :param retry_on: Exception type(s) treated as transient
    :param sleep: Awaitable sleep used between attempts
    :param kwargs: Keyword arguments forwarded to ``fn``
    :return: Result of the first successful call
    :raises ValueError: If max_attempts is lower than 1
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")

    retrying = AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=base_delay, max=max_delay),
        retry=retry_if_exception_type(retry_on),
        before_sleep=_before_sleep_logger(getattr(fn, "__qualname__", repr(fn))),
        sleep=sleep,
        reraise=True,
    )

    async for attempt in retrying:
        with attempt:
            result = await fn(*args, **kwargs)

    return result
