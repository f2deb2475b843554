"""Retrying transport with exponential backoff."""

import asyncio
from typing import Any, Awaitable, Callable, Optional

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_not_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from snippet_reviewer.config import Settings, settings
from snippet_reviewer.errors import RateLimitedError, RetryExhaustedError, TransportError
from snippet_reviewer.utils.logging import logger

RATE_LIMITED_STATUS = 429

Operation = Callable[[], Awaitable[Any]]
Sleep = Callable[[float], Awaitable[None]]


class RetryTransport:
    """Runs an HTTP operation, retrying on rate limits and raised errors.

    The operation returns a response-like object exposing ``is_success``,
    ``status_code`` and ``reason_phrase`` (an ``httpx.Response``).
    Waits grow as ``base_delay * 2**attempt_index`` with no cap or jitter.
    """

    def __init__(
        self,
        max_attempts: Optional[int] = None,
        base_delay: Optional[float] = None,
        sleep: Sleep = asyncio.sleep,
        config: Settings = settings,
    ):
        """Initialize transport.

        Args:
            max_attempts: Maximum number of attempts (defaults to config)
            base_delay: Delay in seconds before the first retry (defaults to config)
            sleep: Awaitable sleep used between attempts
            config: Settings supplying defaults
        """
        self.max_attempts = max_attempts if max_attempts is not None else config.max_attempts
        self.base_delay = base_delay if base_delay is not None else config.base_delay
        self.sleep = sleep

        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

    def _check_status(self, response: Any) -> None:
        if response.is_success:
            return
        if response.status_code == RATE_LIMITED_STATUS:
            raise RateLimitedError(response.status_code)
        reason = getattr(response, "reason_phrase", "") or str(response.status_code)
        raise TransportError(f"API error: {reason}", status_code=response.status_code)

    def _log_retry(self, retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception()
        delay = retry_state.next_action.sleep if retry_state.next_action else 0
        logger.warning(
            f"Attempt {retry_state.attempt_number}/{self.max_attempts} failed with "
            f"{type(error).__name__}: {error}. Retrying in {delay:.1f}s..."
        )

    async def execute(self, operation: Operation) -> Any:
        """Run the operation until it succeeds or attempts run out.

        Args:
            operation: Zero-argument coroutine function performing one request

        Returns:
            The first successful response

        Raises:
            TransportError: On a non-OK, non-429 status (not retried)
            RetryExhaustedError: If the last attempt was rate limited
            Exception: Whatever the last attempt raised, when it raised
        """
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=self.base_delay),
            retry=retry_if_not_exception_type(TransportError),
            sleep=self.sleep,
            before_sleep=self._log_retry,
            reraise=True,
        )

        try:
            async for attempt in retrying:
                with attempt:
                    response = await operation()
                    self._check_status(response)
        except RateLimitedError as e:
            logger.error(f"All {self.max_attempts} attempts were rate limited")
            raise RetryExhaustedError(self.max_attempts) from e

        return response
