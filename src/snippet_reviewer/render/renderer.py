"""Map a review result onto view-model blocks."""

from typing import List, NamedTuple

from snippet_reviewer.models.result import ReviewResult
from snippet_reviewer.models.schema import BUGS_FIELD, REFACTORING_FIELD, SECURITY_FIELD
from snippet_reviewer.render.blocks import (
    Block,
    CategoryBlock,
    MessageBlock,
    Severity,
    SummaryBlock,
)
from snippet_reviewer.render.surface import OutputSurface

GOOD_SCORE = 8
WARNING_SCORE = 5


class Category(NamedTuple):
    field: str
    label: str
    icon: str
    severity: Severity


# Drawn in this order
CATEGORIES = (
    Category(BUGS_FIELD, "Critical Bugs Found", "🚨", Severity.CRITICAL),
    Category(SECURITY_FIELD, "Security Risks", "🔒", Severity.WARNING),
    Category(REFACTORING_FIELD, "Refactoring Suggestions", "✨", Severity.INFO),
)

FAILURE_TITLE = "Review Failed"
FAILURE_TEXT = "Could not process API request or parse JSON."


def score_severity(score: float) -> Severity:
    """Classify a readability score.

    Args:
        score: Readability score (1-10)

    Returns:
        GOOD for 8 and above, WARNING from 5 up to 8, CRITICAL below 5
    """
    if score >= GOOD_SCORE:
        return Severity.GOOD
    if score >= WARNING_SCORE:
        return Severity.WARNING
    return Severity.CRITICAL


def build_blocks(result: ReviewResult) -> List[Block]:
    """Build the summary block followed by one block per non-empty category."""
    blocks: List[Block] = [
        SummaryBlock(
            summary=result.OverallSummary,
            score_label=result.score_label,
            severity=score_severity(result.ReadabilityScore),
        )
    ]

    for category in CATEGORIES:
        items = getattr(result, category.field, None) or []
        if not items:
            continue
        blocks.append(
            CategoryBlock(
                category=category.field,
                label=category.label,
                icon=category.icon,
                severity=category.severity,
                items=list(items),
            )
        )

    return blocks


def render_review(result: ReviewResult, surface: OutputSurface) -> None:
    """Clear the surface and draw the review."""
    surface.clear()
    for block in build_blocks(result):
        surface.append(block)
    surface.scroll_to_end()


def progress_block(language: str) -> MessageBlock:
    return MessageBlock(text=f"Starting analysis for {language}...", severity=Severity.INFO)


def empty_response_block(message: str) -> MessageBlock:
    return MessageBlock(text=f"Error: {message}", severity=Severity.CRITICAL)


def failure_block(error: BaseException) -> MessageBlock:
    return MessageBlock(
        title=FAILURE_TITLE,
        text=f"{FAILURE_TEXT}\nError: {error}",
        severity=Severity.CRITICAL,
    )
