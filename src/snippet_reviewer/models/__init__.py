"""Data models for review requests, results, and the output schema."""

from snippet_reviewer.models.request import ReviewRequest
from snippet_reviewer.models.result import EmptyModelResponse, ReviewOutcome, ReviewResult
from snippet_reviewer.models.schema import REQUIRED_FIELDS, RESPONSE_SCHEMA

__all__ = [
    "ReviewRequest",
    "ReviewResult",
    "EmptyModelResponse",
    "ReviewOutcome",
    "RESPONSE_SCHEMA",
    "REQUIRED_FIELDS",
]
