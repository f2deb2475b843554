"""Review result models."""

from typing import List, Union
from pydantic import BaseModel, ConfigDict, Field

EMPTY_RESPONSE_MESSAGE = "AI returned an empty response. Try simplifying the code."


class ReviewResult(BaseModel):
    """Structured review returned by the model.

    Every field is required. A payload missing any of them is rejected
    rather than rendered as a partial review.
    """

    model_config = ConfigDict(extra="ignore")

    OverallSummary: str
    ReadabilityScore: float
    BugsFound: List[str]
    RefactoringSuggestions: List[str]
    SecurityRisks: List[str]

    @property
    def score_label(self) -> str:
        """Score formatted as "<score> / 10"."""
        score = self.ReadabilityScore
        value = int(score) if float(score).is_integer() else score
        return f"{value} / 10"

    @property
    def total_findings(self) -> int:
        return len(self.BugsFound) + len(self.RefactoringSuggestions) + len(self.SecurityRisks)


class EmptyModelResponse(BaseModel):
    """The model answered without any generated text."""

    message: str = Field(default=EMPTY_RESPONSE_MESSAGE)


ReviewOutcome = Union[ReviewResult, EmptyModelResponse]
