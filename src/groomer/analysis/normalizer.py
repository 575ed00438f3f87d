"""Turn raw model text into a validated grooming report.

Model output is untrusted, so every stage returns either its value or a
``NormalizationError`` instead of raising. Callers decide whether to repair,
surface the raw text, or reject.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from jsonschema import Draft7Validator
from jsonschema.exceptions import ValidationError as _SchemaValidationError

from groomer import logger as logger_mod

from .schema import CONTRACT_SCHEMA, REQUIRED_FIELDS, AnalysisReport

log = logger_mod.get_logger()

SNIPPET_CHARS = 200

_contract_validator = Draft7Validator(CONTRACT_SCHEMA)


class NormalizationErrorKind(str, Enum):
    PARSE_FAILURE = "parse_failure"
    SCHEMA_VIOLATION = "schema_violation"


@dataclass(frozen=True)
class NormalizationError:
    kind: NormalizationErrorKind
    message: str
    snippet: Optional[str] = None
    field: Optional[str] = None


Normalized = Union[AnalysisReport, NormalizationError]


def strip_code_fences(text: str) -> str:
    return text.replace("```json", "").replace("```", "").strip()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_json(raw_text: str) -> Union[Any, NormalizationError]:
    cleaned = strip_code_fences(raw_text)
    try:
        return json.loads(cleaned, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        return NormalizationError(
            kind=NormalizationErrorKind.PARSE_FAILURE,
            message=f"Failed to parse JSON: {e}",
            snippet=raw_text[:SNIPPET_CHARS],
        )


def _violated_field(error: _SchemaValidationError) -> Optional[str]:
    if error.validator == "required":
        missing = [f for f in REQUIRED_FIELDS if f not in error.instance]
        return missing[0] if missing else None
    if error.path:
        return str(error.path[0])
    return None


def _error_rank(error: _SchemaValidationError) -> tuple[int, int]:
    # Root type errors first, then missing fields (in contract order), then values.
    if error.validator == "type" and not error.path:
        return (0, 0)
    if error.validator == "required":
        return (1, 0)
    field = _violated_field(error)
    order = REQUIRED_FIELDS.index(field) if field in REQUIRED_FIELDS else len(REQUIRED_FIELDS)
    return (2, order)


def validate_report(data: Any) -> Normalized:
    errors = list(_contract_validator.iter_errors(data))
    if not errors:
        return data

    first = min(errors, key=_error_rank)
    field = _violated_field(first)
    if first.validator == "required":
        message = f"Missing required field: {field}"
    elif field == "score":
        message = "Score must be a number between 0-100"
    else:
        message = first.message
    return NormalizationError(
        kind=NormalizationErrorKind.SCHEMA_VIOLATION, message=message, field=field
    )


def normalize(raw_text: str) -> Normalized:
    if not isinstance(raw_text, str):
        return NormalizationError(
            kind=NormalizationErrorKind.PARSE_FAILURE,
            message="Model response was not text",
            snippet=repr(raw_text)[:SNIPPET_CHARS],
        )

    parsed = parse_json(raw_text)
    if isinstance(parsed, NormalizationError):
        log.warning(f"Failed to parse analysis result: {parsed.message}")
        return parsed

    result = validate_report(parsed)
    if isinstance(result, NormalizationError):
        log.warning(f"Analysis result rejected: {result.message}")
    return result
