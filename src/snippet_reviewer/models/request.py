"""Review request model."""

from pydantic import BaseModel, ConfigDict, field_validator

from snippet_reviewer.errors import EmptyInputError


class ReviewRequest(BaseModel):
    """A code snippet and the language it is written in.

    Blank code raises EmptyInputError directly rather than a ValidationError.
    """

    model_config = ConfigDict(frozen=True)

    code: str
    language: str

    @field_validator("code", "language", mode="before")
    @classmethod
    def _strip(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("code")
    @classmethod
    def _require_code(cls, value: str) -> str:
        if not value:
            raise EmptyInputError("No code to review")
        return value
