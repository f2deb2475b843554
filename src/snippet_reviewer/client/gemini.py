"""Gemini generateContent client."""

from typing import Any, Dict, Optional
import httpx

from snippet_reviewer.client.request_builder import RequestBuilder
from snippet_reviewer.client.transport import RetryTransport
from snippet_reviewer.config import Settings, settings
from snippet_reviewer.errors import ConfigurationError
from snippet_reviewer.models.request import ReviewRequest
from snippet_reviewer.models.result import ReviewOutcome
from snippet_reviewer.parsers.response_parser import parse_review_response
from snippet_reviewer.utils.logging import logger


class GeminiClient:
    """Sends review requests to the Gemini API."""

    def __init__(
        self,
        config: Settings = settings,
        builder: Optional[RequestBuilder] = None,
        transport: Optional[RetryTransport] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize Gemini client.

        Args:
            config: Settings with credential, model and retry configuration
            builder: Payload builder
            transport: Retry transport
            http_client: Optional preconfigured HTTP client

        Raises:
            ConfigurationError: If no API key is configured
        """
        if config.api_key is None or not config.api_key.get_secret_value():
            raise ConfigurationError(
                "No API key configured. Set SNIPPET_REVIEW_API_KEY in the environment or .env file."
            )

        self.config = config
        self.builder = builder or RequestBuilder()
        self.transport = transport or RetryTransport(config=config)
        self.client = http_client or httpx.AsyncClient(timeout=config.request_timeout)

    async def close(self) -> None:
        """Close HTTP client."""
        await self.client.aclose()

    async def generate(self, payload: Dict[str, Any]) -> httpx.Response:
        """Perform a single generateContent request.

        Args:
            payload: Request body

        Returns:
            Raw HTTP response, whatever its status
        """
        return await self.client.post(
            self.config.endpoint_url,
            params={"key": self.config.api_key.get_secret_value()},
            json=payload,
        )

    async def review(self, request: ReviewRequest) -> ReviewOutcome:
        """Review a code snippet.

        Args:
            request: Code and language to review

        Returns:
            Parsed review, or EmptyModelResponse when the model produced no text
        """
        payload = self.builder.build(request)

        logger.info(
            f"Requesting review model={self.config.model_name}, "
            f"language={request.language}, code_chars={len(request.code)}"
        )

        response = await self.transport.execute(lambda: self.generate(payload))
        return parse_review_response(response)

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
