"""Bounded retry with exponential backoff for HTTP exchanges."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

import httpx

from ....core.exceptions import NetworkError

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]
Operation = Callable[[], Awaitable[httpx.Response]]


def is_transient_status(status_code: int) -> bool:
    """Return True for statuses worth retrying: 429 and any 5xx."""
    return status_code == 429 or 500 <= status_code <= 599


@dataclass(frozen=True)
class RetryPolicy:
    """Immutable retry configuration.

    Attributes:
        max_attempts: Total number of invocations, including the first one
        initial_delay: Delay in seconds before the second attempt
        backoff_multiplier: Factor applied to the delay after every retry
        transient_status: Predicate deciding whether a response is retried
        retryable_exceptions: Exception types that trigger a retry
    """

    max_attempts: int = 3
    initial_delay: float = 0.25
    backoff_multiplier: float = 2.0
    transient_status: Callable[[int], bool] = field(default=is_transient_status, compare=False)
    retryable_exceptions: tuple[type[Exception], ...] = (NetworkError,)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.initial_delay < 0:
            raise ValueError("initial_delay cannot be negative")
        if self.backoff_multiplier < 1:
            raise ValueError("backoff_multiplier must be at least 1")

    def delays(self) -> list[float]:
        """Delays slept between attempts when every attempt but the last is retried."""
        result: list[float] = []
        delay = self.initial_delay
        for _ in range(self.max_attempts - 1):
            result.append(delay)
            delay *= self.backoff_multiplier
        return result


DEFAULT_RETRY_POLICY = RetryPolicy()


async def execute_with_retry(
    operation: Operation,
    policy: RetryPolicy = DEFAULT_RETRY_POLICY,
    *,
    sleep: Sleep = asyncio.sleep,
) -> httpx.Response:
    """Run one HTTP exchange, retrying transient failures.

    The operation is invoked at most ``policy.max_attempts`` times. A retryable
    exception or a transient status is retried while attempts remain. The last
    attempt's response is returned whatever its status, and the last attempt's
    exception propagates unchanged.

    Args:
        operation: Zero-argument coroutine function performing one exchange
        policy: Retry configuration
        sleep: Awaitable used to wait between attempts

    Returns:
        The first non-transient response, or the final attempt's response

    Raises:
        NetworkError: If the final attempt fails below the HTTP layer
    """
    delay = policy.initial_delay

    for attempt in range(1, policy.max_attempts + 1):
        is_last = attempt == policy.max_attempts

        try:
            response = await operation()
        except policy.retryable_exceptions as e:
            if is_last:
                logger.error(f"Attempt {attempt}/{policy.max_attempts} failed, giving up: {e}")
                raise
            logger.warning(f"Attempt {attempt}/{policy.max_attempts} failed: {e}; retrying in {delay:.2f}s")
        else:
            if is_last or not policy.transient_status(response.status_code):
                if attempt > 1:
                    logger.info(f"Returning status {response.status_code} after {attempt} attempts")
                return response

            logger.warning(
                f"Attempt {attempt}/{policy.max_attempts} returned transient status "
                f"{response.status_code}; retrying in {delay:.2f}s"
            )
            await response.aclose()

        await sleep(delay)
        delay *= policy.backoff_multiplier

    raise RuntimeError("retry loop exited without a result")


class RetryableClient:
    """Mixin class to add retry functionality to HTTP clients."""

    def __init__(self, retry_policy: RetryPolicy | None = None, sleep: Sleep = asyncio.sleep):
        """Initialize retryable client.

        Args:
            retry_policy: Configuration for retry behavior
            sleep: Awaitable used to wait between attempts
        """
        self.retry_policy = retry_policy or DEFAULT_RETRY_POLICY
        self._sleep = sleep

    async def execute_with_retry(self, operation: Operation) -> httpx.Response:
        """Execute one exchange with this client's retry policy.

        Args:
            operation: Zero-argument coroutine function performing one exchange

        Returns:
            Terminal response
        """
        return await execute_with_retry(operation, self.retry_policy, sleep=self._sleep)
