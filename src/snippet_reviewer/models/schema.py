"""Structured output contract sent to the model."""

from typing import List

SUMMARY_FIELD = "OverallSummary"
SCORE_FIELD = "ReadabilityScore"
BUGS_FIELD = "BugsFound"
REFACTORING_FIELD = "RefactoringSuggestions"
SECURITY_FIELD = "SecurityRisks"

# Uses the Gemini OpenAPI-subset type names (upper case)
RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        SUMMARY_FIELD: {
            "type": "STRING",
            "description": "A professional, concise summary of the code quality and overall function.",
        },
        SCORE_FIELD: {
            "type": "NUMBER",
            "description": "A score from 1 to 10 (10 being best) assessing code clarity, comments, and style.",
        },
        BUGS_FIELD: {
            "type": "ARRAY",
            "items": {
                "type": "STRING",
                "description": "Specific, actionable bugs or logic errors found. Use code snippets if necessary.",
            },
        },
        REFACTORING_FIELD: {
            "type": "ARRAY",
            "items": {
                "type": "STRING",
                "description": "Suggestions for optimization, performance improvement, or design pattern adherence.",
            },
        },
        SECURITY_FIELD: {
            "type": "ARRAY",
            "items": {
                "type": "STRING",
                "description": "List of potential security vulnerabilities (e.g., SQL injection, buffer overflow, weak input validation).",
            },
        },
    },
    "required": [SUMMARY_FIELD, SCORE_FIELD, BUGS_FIELD, SECURITY_FIELD, REFACTORING_FIELD],
}

REQUIRED_FIELDS: List[str] = list(RESPONSE_SCHEMA["required"])
