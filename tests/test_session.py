"""Tests for the review session (submission handler)."""

import asyncio

import pytest

from snippet_reviewer.errors import RetryExhaustedError, TransportError
from snippet_reviewer.models.result import EmptyModelResponse, ReviewResult
from snippet_reviewer.render.blocks import MessageBlock, Severity, SummaryBlock
from snippet_reviewer.render.surface import OutputSurface
from snippet_reviewer.session import ReviewSession
from snippet_reviewer.ui.state import UIState


class FakeClient:
    """Stands in for GeminiClient, returning or raising a fixed outcome."""

    def __init__(self, outcome=None, delay: float = 0.0):
        self.outcome = outcome
        self.delay = delay
        self.requests = []
        self.busy_during_call = None
        self.ui_state = None

    async def review(self, request):
        self.requests.append(request)
        if self.ui_state is not None:
            self.busy_during_call = self.ui_state.is_busy
        if self.delay:
            await asyncio.sleep(self.delay)
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome


def _session(outcome, delay: float = 0.0):
    client = FakeClient(outcome, delay)
    state = UIState()
    client.ui_state = state
    return ReviewSession(client, OutputSurface(), state), client


class TestReviewSession:
    @pytest.mark.asyncio
    async def test_successful_review_rendered(self, review_data):
        session, client = _session(ReviewResult(**review_data))

        result = await session.submit("  x = 1  ", "Python")

        assert isinstance(result, ReviewResult)
        assert client.requests[0].code == "x = 1"
        assert client.requests[0].language == "Python"
        assert isinstance(session.surface.blocks[0], SummaryBlock)
        assert session.last_error is None

    @pytest.mark.asyncio
    async def test_busy_while_request_in_flight(self, review_data):
        session, client = _session(ReviewResult(**review_data))
        await session.submit("x = 1", "Python")
        assert client.busy_during_call is True
        assert not session.ui_state.is_busy

    @pytest.mark.asyncio
    async def test_empty_code_sends_nothing(self):
        session, client = _session(None)

        assert await session.submit("   \n\t", "Python") is None
        assert client.requests == []
        assert session.surface.blocks == []
        assert session.last_error is None

    @pytest.mark.asyncio
    async def test_empty_model_response_message(self):
        session, _ = _session(EmptyModelResponse())

        assert await session.submit("x = 1", "Python") is None

        [block] = session.surface.blocks
        assert isinstance(block, MessageBlock)
        assert "Try simplifying the code" in block.text
        assert block.title is None
        assert session.last_error is None
        assert not session.ui_state.is_busy

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            TransportError("API error: Bad Request", status_code=400),
            RetryExhaustedError(3),
            ConnectionError("network unreachable"),
        ],
    )
    async def test_failures_show_failure_panel(self, error):
        session, _ = _session(error)

        assert await session.submit("x = 1", "Python") is None

        [block] = session.surface.blocks
        assert block.title == "Review Failed"
        assert str(error) in block.text
        assert block.severity == Severity.CRITICAL
        assert session.last_error is error
        assert not session.ui_state.is_busy

    @pytest.mark.asyncio
    async def test_second_submission_while_busy_is_dropped(self, review_data):
        session, client = _session(ReviewResult(**review_data), delay=0.01)

        first, second = await asyncio.gather(
            session.submit("x = 1", "Python"),
            session.submit("y = 2", "Python"),
        )

        assert isinstance(first, ReviewResult)
        assert second is None
        assert len(client.requests) == 1

    @pytest.mark.asyncio
    async def test_can_submit_again_after_failure(self, review_data):
        session, client = _session(TransportError("API error", status_code=500))
        await session.submit("x = 1", "Python")

        client.outcome = ReviewResult(**review_data)
        result = await session.submit("x = 1", "Python")

        assert isinstance(result, ReviewResult)
        assert session.last_error is None
