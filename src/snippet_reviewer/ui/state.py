"""Busy/idle state of the review form."""

from contextlib import contextmanager
from typing import Iterator, Optional
from rich.console import Console
from rich.status import Status

IDLE_LABEL = "Run AI Review"
BUSY_LABEL = "Analyzing..."


class UIState:
    """Controls input, submit button and loading indicator around a review.

    Disabling the submit control while busy is the only thing that keeps
    reviews from overlapping. Submissions made while busy are dropped.
    """

    def __init__(self, console: Optional[Console] = None):
        """Initialize UI state.

        Args:
            console: Console for the loading spinner. No spinner when None.
        """
        self.console = console
        self.submit_enabled = True
        self.input_enabled = True
        self.loading_visible = False
        self.submit_label = IDLE_LABEL
        self._status: Optional[Status] = None

    @property
    def is_busy(self) -> bool:
        return not self.submit_enabled

    def set_busy(self, busy: bool) -> None:
        """Enter or leave the busy state.

        Args:
            busy: True while a review is in flight
        """
        self.submit_enabled = not busy
        self.input_enabled = not busy
        self.loading_visible = busy
        self.submit_label = BUSY_LABEL if busy else IDLE_LABEL

        if busy:
            self._start_spinner()
        else:
            self._stop_spinner()

    def _start_spinner(self) -> None:
        if self.console is None or self._status is not None:
            return
        self._status = self.console.status(self.submit_label)
        self._status.start()

    def _stop_spinner(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    @contextmanager
    def busy(self) -> Iterator["UIState"]:
        """Hold the busy state for the duration of the block."""
        self.set_busy(True)
        try:
            yield self
        finally:
            self.set_busy(False)
