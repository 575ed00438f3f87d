from __future__ import annotations

import json
from typing import Any, Mapping

SYSTEM_PROMPT = """You are a Senior Product Owner with expertise in Agile methodologies, user story grooming, and technical requirements analysis. Your task is to analyze Jira tickets and provide detailed grooming reports that help development teams understand and implement the requirements effectively. User will send Summary and Description of the ticket. The output should be a JSON object containing the following fields:
    Output JSON schema:
      {
        "summary": "Brief summary of the ticket",
        "score": "Number 0-100 representing quality of description",
        "goodPoints": ["List of well-defined aspects"],
        "missingPoints": ["List of missing critical information"],
        "mismatches": ["List of contradictions or ambiguities"],
        "uiSuggestions": ["List of UI/UX related suggestions"],
        "technicalSuggestions": ["List of technical implementation suggestions"],
        "acceptanceCriteria": ["Refined list of ACs"],
        "storyPoints": "Estimated story points (number)",
        "questions": ["List of clarifying questions to ask the reporter. Think as a User Story expert and what features and flows are missing in the ticket which needs to be handled either from BE or FE perspective. Make sure to cover edge cases as well."]
      }
"""

NO_SUMMARY = "No summary"
NO_DESCRIPTION = "No description"


def build_user_prompt(ticket: Mapping[str, Any]) -> str:
    """Ticket summary plus the raw description.

    Jira v3 descriptions are ADF documents, so they are sent as compact JSON.
    """
    fields = ticket.get("fields") or {}
    summary = fields.get("summary") or NO_SUMMARY
    description = fields.get("description")
    if description:
        description_text = json.dumps(
            description, ensure_ascii=False, separators=(",", ":")
        )
    else:
        description_text = NO_DESCRIPTION
    return f"Ticket Summary: {summary}\n\nDescription: {description_text}"
