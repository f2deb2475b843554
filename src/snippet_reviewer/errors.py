"""Error kinds raised along the review pipeline."""

from typing import Optional


class ReviewError(Exception):
    """Base class for review pipeline failures."""


class ConfigurationError(ReviewError):
    """Required configuration (such as the API key) is missing."""


class EmptyInputError(ReviewError):
    """A review was requested for blank code."""


class TransportError(ReviewError):
    """The API answered with a non-OK, non-retryable status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class RateLimitedError(ReviewError):
    """The API answered 429. Retried by the transport, never surfaced directly."""

    def __init__(self, status_code: int = 429):
        super().__init__(f"Rate limited (HTTP {status_code})")
        self.status_code = status_code


class RetryExhaustedError(ReviewError):
    """Every attempt was consumed by rate limiting."""

    def __init__(self, attempts: int):
        super().__init__(f"Gave up after {attempts} attempts: API is rate limiting requests")
        self.attempts = attempts


class ResponseParseError(ReviewError):
    """The model's text is not a well-formed review result."""
