"""Shared test fixtures."""

import json
from typing import List

import httpx
import pytest

from snippet_reviewer.config import Settings


def make_envelope(text) -> dict:
    """Wrap text in a generateContent response body."""
    return {
        "candidates": [
            {
                "content": {"parts": [{"text": text}], "role": "model"},
                "finishReason": "STOP",
            }
        ]
    }


def make_response(status_code: int = 200, body=None) -> httpx.Response:
    """Build an httpx response with an optional JSON body."""
    if body is None:
        return httpx.Response(status_code)
    return httpx.Response(status_code, json=body)


class FakeSleep:
    """Records requested delays instead of sleeping."""

    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)

    @property
    def total(self) -> float:
        return sum(self.delays)


@pytest.fixture
def review_data():
    """A complete review with findings in every category."""
    return {
        "OverallSummary": "Builds SQL from user input and lacks error handling.",
        "ReadabilityScore": 4,
        "BugsFound": [
            "Query is printed but never executed.",
            "Short user IDs are logged but not rejected.",
        ],
        "SecurityRisks": ["SQL injection via string concatenation of userId."],
        "RefactoringSuggestions": ["Use a PreparedStatement.", "Add try-with-resources."],
    }


@pytest.fixture
def clean_review_data():
    """A review with no findings."""
    return {
        "OverallSummary": "ok",
        "ReadabilityScore": 9,
        "BugsFound": [],
        "SecurityRisks": [],
        "RefactoringSuggestions": [],
    }


@pytest.fixture
def review_envelope(review_data):
    return make_envelope(json.dumps(review_data))


@pytest.fixture
def test_settings():
    """Settings isolated from the environment and .env files."""
    return Settings(
        _env_file=None,
        api_key="test-key",
        api_base_url="https://example.test/v1beta",
        model_name="test-model",
        max_attempts=3,
        base_delay=1.0,
    )


@pytest.fixture
def fake_sleep():
    return FakeSleep()
