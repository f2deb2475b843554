"""Tests for request/result models and the response schema."""

import pytest
from pydantic import ValidationError

from snippet_reviewer.errors import EmptyInputError
from snippet_reviewer.models import (
    REQUIRED_FIELDS,
    RESPONSE_SCHEMA,
    EmptyModelResponse,
    ReviewRequest,
    ReviewResult,
)


class TestResponseSchema:
    def test_declares_all_five_fields(self):
        assert set(RESPONSE_SCHEMA["properties"]) == {
            "OverallSummary",
            "ReadabilityScore",
            "BugsFound",
            "RefactoringSuggestions",
            "SecurityRisks",
        }

    def test_all_fields_required(self):
        assert set(REQUIRED_FIELDS) == set(RESPONSE_SCHEMA["properties"])

    def test_field_types(self):
        props = RESPONSE_SCHEMA["properties"]
        assert props["OverallSummary"]["type"] == "STRING"
        assert props["ReadabilityScore"]["type"] == "NUMBER"
        for field in ("BugsFound", "RefactoringSuggestions", "SecurityRisks"):
            assert props[field]["type"] == "ARRAY"
            assert props[field]["items"]["type"] == "STRING"

    def test_every_field_has_description(self):
        for name, prop in RESPONSE_SCHEMA["properties"].items():
            description = prop.get("description") or prop.get("items", {}).get("description")
            assert description, f"Missing description: {name}"


class TestReviewRequest:
    def test_strips_code(self):
        request = ReviewRequest(code="\n  print('hi')  \n", language="Python")
        assert request.code == "print('hi')"

    def test_blank_code_raises_empty_input(self):
        with pytest.raises(EmptyInputError):
            ReviewRequest(code="   \n", language="Python")

    def test_empty_code_raises_empty_input(self):
        with pytest.raises(EmptyInputError):
            ReviewRequest(code="", language="Python")

    def test_is_immutable(self):
        request = ReviewRequest(code="x = 1", language="Python")
        with pytest.raises(ValidationError):
            request.code = "y = 2"


class TestReviewResult:
    def test_parses_complete_payload(self, review_data):
        result = ReviewResult(**review_data)
        assert result.ReadabilityScore == 4
        assert len(result.BugsFound) == 2
        assert result.total_findings == 5

    def test_missing_field_rejected(self, review_data):
        del review_data["SecurityRisks"]
        with pytest.raises(ValidationError):
            ReviewResult(**review_data)

    def test_empty_lists_accepted(self, clean_review_data):
        result = ReviewResult(**clean_review_data)
        assert result.BugsFound == []
        assert result.total_findings == 0

    def test_extra_keys_ignored(self, clean_review_data):
        result = ReviewResult(**clean_review_data, Confidence=0.9)
        assert "Confidence" not in result.model_dump()

    def test_score_label_integral(self, clean_review_data):
        assert ReviewResult(**clean_review_data).score_label == "9 / 10"

    def test_score_label_fractional(self, clean_review_data):
        clean_review_data["ReadabilityScore"] = 7.5
        assert ReviewResult(**clean_review_data).score_label == "7.5 / 10"


class TestEmptyModelResponse:
    def test_default_message_suggests_simplifying(self):
        assert "simplifying" in EmptyModelResponse().message
