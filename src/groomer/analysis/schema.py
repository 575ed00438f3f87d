"""Grooming report contract.

Only ``REQUIRED_FIELDS`` are enforced; the remaining fields are passed through
as the model returned them (or absent).
"""

from __future__ import annotations

from typing import Any, TypedDict

REQUIRED_FIELDS = (
    "summary",
    "score",
    "goodPoints",
    "missingPoints",
    "acceptanceCriteria",
)

OPTIONAL_FIELDS = (
    "mismatches",
    "uiSuggestions",
    "technicalSuggestions",
    "storyPoints",
    "questions",
)

SCORE_MIN = 0
SCORE_MAX = 100


class AnalysisReport(TypedDict, total=False):
    summary: str
    score: float
    goodPoints: list[Any]
    missingPoints: list[Any]
    mismatches: list[Any]
    uiSuggestions: list[Any]
    technicalSuggestions: list[Any]
    acceptanceCriteria: list[Any]
    storyPoints: float
    questions: list[Any]


# What the normalizer enforces.
CONTRACT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": list(REQUIRED_FIELDS),
    "properties": {
        "score": {"type": "number", "minimum": SCORE_MIN, "maximum": SCORE_MAX},
    },
}


def _string_list(description: str) -> dict[str, Any]:
    return {"type": "array", "items": {"type": "string"}, "description": description}


# Full description of the report, sent to the model when asking for a repair.
ANALYSIS_JSON_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": list(REQUIRED_FIELDS),
    "properties": {
        "summary": {"type": "string", "description": "Brief summary of the ticket"},
        "score": {
            "type": "number",
            "minimum": SCORE_MIN,
            "maximum": SCORE_MAX,
            "description": "Quality of the description, 0-100",
        },
        "goodPoints": _string_list("Well-defined aspects"),
        "missingPoints": _string_list("Missing critical information"),
        "mismatches": _string_list("Contradictions or ambiguities"),
        "uiSuggestions": _string_list("UI/UX related suggestions"),
        "technicalSuggestions": _string_list("Technical implementation suggestions"),
        "acceptanceCriteria": _string_list("Refined acceptance criteria"),
        "storyPoints": {"type": "number", "description": "Estimated story points"},
        "questions": _string_list("Clarifying questions for the reporter"),
    },
}
