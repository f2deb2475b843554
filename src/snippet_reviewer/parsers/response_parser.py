"""Extract and validate the review from a generateContent response."""

import json
from typing import Any, Optional
from pydantic import ValidationError

from snippet_reviewer.errors import ResponseParseError, TransportError
from snippet_reviewer.models.result import EmptyModelResponse, ReviewOutcome, ReviewResult
from snippet_reviewer.utils.logging import logger


def extract_generated_text(envelope: Any) -> Optional[str]:
    """Get candidates[0].content.parts[0].text from a decoded response.

    Args:
        envelope: Decoded response body

    Returns:
        The generated text, or None if any step of the path is missing
    """
    try:
        text = envelope["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None

    if not isinstance(text, str):
        return None
    return text


def parse_review_text(text: str) -> ReviewResult:
    """Parse the model's JSON text into a review result.

    Raises:
        ResponseParseError: If the text is not JSON or lacks a required field
    """
    try:
        return ReviewResult.model_validate_json(text)
    except ValidationError as e:
        raise ResponseParseError(f"Malformed review JSON: {e}") from e


def parse_review_response(response: Any) -> ReviewOutcome:
    """Turn the transport's final response into a review outcome.

    Args:
        response: HTTP response (``httpx.Response``)

    Returns:
        ReviewResult, or EmptyModelResponse when no text was generated

    Raises:
        TransportError: If the response status is not OK
        ResponseParseError: If the envelope or the review text is malformed
    """
    if not response.is_success:
        raise TransportError(f"HTTP Error: {response.status_code}", status_code=response.status_code)

    try:
        envelope = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ResponseParseError(f"Response body is not JSON: {e}") from e

    text = extract_generated_text(envelope)
    if not text or not text.strip():
        finish_reason = _finish_reason(envelope)
        logger.warning(f"Model returned no text (finishReason={finish_reason})")
        return EmptyModelResponse()

    result = parse_review_text(text)
    logger.debug(
        f"Parsed review: score={result.ReadabilityScore}, "
        f"findings={result.total_findings}"
    )
    return result


def _finish_reason(envelope: Any) -> Optional[str]:
    try:
        return envelope["candidates"][0].get("finishReason")
    except (KeyError, IndexError, TypeError, AttributeError):
        return None
