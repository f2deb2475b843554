"""Outbound payload construction for the generateContent endpoint."""

from typing import Any, Dict, Optional

from snippet_reviewer.models.request import ReviewRequest
from snippet_reviewer.models.schema import RESPONSE_SCHEMA

SYSTEM_INSTRUCTION = (
    "You are an expert Senior Software Engineer. Your task is to perform a rigorous, "
    "objective code review and return the findings exclusively in the specified JSON format.\n"
    "Analyze the code thoroughly for logic errors, adherence to best practices, "
    "performance bottlenecks, and security vulnerabilities.\n"
    "Do not include any text outside of the JSON object."
)

RESPONSE_MIME_TYPE = "application/json"


def build_user_query(code: str, language: str) -> str:
    """Build the review instruction embedding the language and code."""
    return (
        f"Review the following code snippet written in {language}. "
        "Provide a strict, technical analysis based on the required JSON schema:"
        f"\n\n```{language}\n{code}\n```"
    )


class RequestBuilder:
    """Builds generateContent payloads from review requests."""

    def __init__(
        self,
        system_instruction: str = SYSTEM_INSTRUCTION,
        response_schema: Optional[Dict[str, Any]] = None,
    ):
        """Initialize request builder.

        Args:
            system_instruction: Instruction framing the model as a reviewer
            response_schema: Structured output schema (defaults to the review schema)
        """
        self.system_instruction = system_instruction
        self.response_schema = response_schema if response_schema is not None else RESPONSE_SCHEMA

    def build(self, request: ReviewRequest) -> Dict[str, Any]:
        """Build the request payload.

        Args:
            request: Code and language to review

        Returns:
            JSON-serializable payload
        """
        return {
            "contents": [{"parts": [{"text": build_user_query(request.code, request.language)}]}],
            "generationConfig": {
                "responseMimeType": RESPONSE_MIME_TYPE,
                "responseSchema": self.response_schema,
            },
            "systemInstruction": {"parts": [{"text": self.system_instruction}]},
        }
