import json

import pytest

from groomer.analysis.normalizer import (
    NormalizationError,
    NormalizationErrorKind,
    normalize,
    strip_code_fences,
)

MINIMAL = {
    "summary": "x",
    "score": 50,
    "goodPoints": [],
    "missingPoints": [],
    "acceptanceCriteria": [],
}


def test_clean_json_round_trips(valid_report):
    assert normalize(json.dumps(valid_report)) == valid_report


def test_minimal_report_passes_without_defaults():
    result = normalize(json.dumps(MINIMAL))
    assert result == MINIMAL
    assert "questions" not in result


def test_extra_fields_pass_through():
    payload = dict(MINIMAL, confidence="high")
    assert normalize(json.dumps(payload))["confidence"] == "high"


@pytest.mark.parametrize(
    "wrapped",
    [
        "```json\n{body}\n```",
        "```\n{body}\n```",
        "  ```json{body}```  ",
    ],
)
def test_fenced_output_matches_unwrapped(valid_report, wrapped):
    body = json.dumps(valid_report)
    assert normalize(wrapped.replace("{body}", body)) == normalize(body)


def test_strip_code_fences():
    assert strip_code_fences('```json\n{"a": 1}\n```\n') == '{"a": 1}'


def test_parse_failure_keeps_snippet():
    raw = "Sure! Here is the analysis: " + "x" * 500
    result = normalize(raw)

    assert isinstance(result, NormalizationError)
    assert result.kind is NormalizationErrorKind.PARSE_FAILURE
    assert result.snippet == raw[:200]
    assert result.field is None


def test_nan_is_a_parse_failure():
    raw = json.dumps(MINIMAL).replace("50", "NaN")
    result = normalize(raw)
    assert isinstance(result, NormalizationError)
    assert result.kind is NormalizationErrorKind.PARSE_FAILURE


def test_missing_fields_report_first_missing():
    result = normalize('{"summary":"x"}')

    assert isinstance(result, NormalizationError)
    assert result.kind is NormalizationErrorKind.SCHEMA_VIOLATION
    assert result.field == "score"
    assert result.message == "Missing required field: score"


def test_missing_field_wins_over_bad_score():
    payload = dict(MINIMAL, score=150)
    del payload["acceptanceCriteria"]
    result = normalize(json.dumps(payload))
    assert result.field == "acceptanceCriteria"


@pytest.mark.parametrize("score", [150, -1, 100.5, "80", True, None])
def test_score_out_of_range_or_wrong_type(score):
    payload = dict(MINIMAL, score=score)
    result = normalize(json.dumps(payload))

    assert isinstance(result, NormalizationError)
    assert result.kind is NormalizationErrorKind.SCHEMA_VIOLATION
    assert result.field == "score"


@pytest.mark.parametrize("score", [0, 100, 42.5])
def test_score_bounds_are_inclusive(score):
    assert normalize(json.dumps(dict(MINIMAL, score=score)))["score"] == score


def test_non_object_json_is_schema_violation():
    result = normalize("[1, 2, 3]")
    assert isinstance(result, NormalizationError)
    assert result.kind is NormalizationErrorKind.SCHEMA_VIOLATION
    assert result.field is None


def test_non_text_input_never_raises():
    result = normalize(None)
    assert isinstance(result, NormalizationError)
    assert result.kind is NormalizationErrorKind.PARSE_FAILURE


def test_does_not_mutate_between_calls():
    raw = json.dumps(MINIMAL)
    first = normalize(raw)
    first["summary"] = "changed"
    assert normalize(raw)["summary"] == "x"
