"""Consumer-side critique parsing tests."""

from __future__ import annotations

import json

import pytest

from cv_suggester.domain.suggestions import UNREADABLE_MESSAGE, Suggestions, parse_suggestions
from cv_suggester.errors import CompletionFailed, SuggestionParseError
from stubs import VALID_SUGGESTIONS


def test_valid_json_object_parses_into_schema() -> None:
    suggestions = parse_suggestions(json.dumps(VALID_SUGGESTIONS))

    assert suggestions.summary_rewrite.startswith("Graduate ML engineer")
    assert suggestions.skills_to_frontload == ["Python", "PyTorch", "AWS"]
    assert suggestions.bullet_rewrites[0].improved.startswith("Built Airflow")
    assert not suggestions.bullet_rewrites[0].is_net_new
    assert not suggestions.needs_clarification


def test_dict_input_is_accepted() -> None:
    assert parse_suggestions(VALID_SUGGESTIONS).missing_keywords == ["Kubernetes"]


def test_every_field_is_absent_safe() -> None:
    suggestions = parse_suggestions("{}")
    assert suggestions == Suggestions()
    assert suggestions.bullet_rewrites == []
    assert suggestions.ats_notes == ""


def test_loose_shapes_are_normalised() -> None:
    suggestions = parse_suggestions(json.dumps({
        "summary_rewrite": None,
        "skills_to_frontload": "Python",
        "red_flags": None,
        "ats_notes": ["dates", "titles"],
        "bullet_rewrites": [{"section": "Projects", "improved": "Shipped X"}, "not a record"],
        "clarifications_needed": ["Which year did you graduate?"],
        "unexpected": "ignored",
    }))

    assert suggestions.summary_rewrite == ""
    assert suggestions.skills_to_frontload == ["Python"]
    assert suggestions.red_flags == []
    assert suggestions.ats_notes == "dates; titles"
    assert len(suggestions.bullet_rewrites) == 1
    assert suggestions.bullet_rewrites[0].is_net_new
    assert suggestions.needs_clarification


@pytest.mark.parametrize("raw", ["not json", "", "[1, 2]", '"just a string"', "{\"a\": "])
def test_unreadable_answer_raises_parse_error(raw: str) -> None:
    with pytest.raises(SuggestionParseError) as excinfo:
        parse_suggestions(raw)
    assert excinfo.value.message == UNREADABLE_MESSAGE
    assert excinfo.value.category == "SuggestionParseError"


def test_parse_error_is_distinct_from_completion_failure() -> None:
    assert not issubclass(SuggestionParseError, CompletionFailed)
    assert SuggestionParseError.category != CompletionFailed.category
