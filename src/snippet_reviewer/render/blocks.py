"""View-model blocks drawn on an output surface."""

from enum import Enum
from typing import List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    """Visual classification of a block."""

    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"
    INFO = "info"


# Rich styles per severity
SEVERITY_COLORS = {
    Severity.GOOD: "green",
    Severity.WARNING: "yellow",
    Severity.CRITICAL: "red",
    Severity.INFO: "blue",
}


class SummaryBlock(BaseModel):
    """Overall summary with readability score."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["summary"] = "summary"
    title: str = "Overall Summary"
    summary: str
    score_label: str
    severity: Severity


class CategoryBlock(BaseModel):
    """A titled list of findings for one category."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["category"] = "category"
    category: str
    label: str
    icon: str = ""
    severity: Severity
    items: List[str] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def title(self) -> str:
        prefix = f"{self.icon} " if self.icon else ""
        return f"{prefix}{self.label} ({self.count} Found)"


class MessageBlock(BaseModel):
    """Status or error message."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["message"] = "message"
    text: str
    title: Optional[str] = None
    severity: Severity = Severity.INFO


Block = Union[SummaryBlock, CategoryBlock, MessageBlock]
