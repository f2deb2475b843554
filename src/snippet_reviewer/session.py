"""Form submission handler tying the review pipeline together."""

from typing import Optional

from snippet_reviewer.client.gemini import GeminiClient
from snippet_reviewer.errors import EmptyInputError
from snippet_reviewer.models.request import ReviewRequest
from snippet_reviewer.models.result import EmptyModelResponse, ReviewResult
from snippet_reviewer.render.renderer import (
    empty_response_block,
    failure_block,
    progress_block,
    render_review,
)
from snippet_reviewer.render.surface import OutputSurface
from snippet_reviewer.ui.state import UIState
from snippet_reviewer.utils.logging import logger


class ReviewSession:
    """Runs one review at a time and draws the outcome."""

    def __init__(
        self,
        client: GeminiClient,
        surface: OutputSurface,
        ui_state: Optional[UIState] = None,
    ):
        """Initialize review session.

        Args:
            client: Client performing the review request
            surface: Surface receiving rendered output
            ui_state: Form state (a headless one is created when omitted)
        """
        self.client = client
        self.surface = surface
        self.ui_state = ui_state or UIState()
        self.last_error: Optional[BaseException] = None

    async def submit(self, code: str, language: str) -> Optional[ReviewResult]:
        """Handle a form submission.

        Args:
            code: Raw code from the input
            language: Selected language

        Returns:
            The rendered review, or None when nothing was reviewed
        """
        try:
            request = ReviewRequest(code=code, language=language)
        except EmptyInputError:
            logger.debug("Empty code submitted, ignoring")
            return None

        if not self.ui_state.submit_enabled:
            logger.debug("Review already in progress, ignoring submission")
            return None

        self.last_error = None

        with self.ui_state.busy():
            self.surface.show(progress_block(language))

            try:
                outcome = await self.client.review(request)

                if isinstance(outcome, EmptyModelResponse):
                    self.surface.show(empty_response_block(outcome.message))
                    return None

                render_review(outcome, self.surface)
                return outcome

            except Exception as e:
                logger.error(f"Review Error: {type(e).__name__}: {e}")
                self.last_error = e
                self.surface.show(failure_block(e))
                return None
