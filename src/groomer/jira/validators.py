from __future__ import annotations

from typing import Any

from .errors import JiraValidationError

MAX_RESULTS_LIMIT = 100


def validate_encoded_auth(auth: Any) -> str:
    if not auth or not isinstance(auth, str):
        raise JiraValidationError("Invalid or missing authentication header")
    return auth


def validate_id(value: Any, label: str) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if not value or not isinstance(value, str):
        raise JiraValidationError(f"{label} is required")
    return value


def validate_max_results(max_results: Any) -> int:
    try:
        value = int(max_results)
    except (TypeError, ValueError):
        raise JiraValidationError(
            f"maxResults must be a number between 1 and {MAX_RESULTS_LIMIT}"
        ) from None
    if value < 1 or value > MAX_RESULTS_LIMIT:
        raise JiraValidationError(
            f"maxResults must be a number between 1 and {MAX_RESULTS_LIMIT}"
        )
    return value
