from __future__ import annotations

from typing import Any, Optional

from groomer import config
from groomer import logger as logger_mod
from groomer.llm.adapter import LLMAdapter

from .errors import AnalysisFailedError, TicketValidationError
from .normalizer import NormalizationError, Normalized, normalize
from .prompts import SYSTEM_PROMPT, build_user_prompt
from .schema import ANALYSIS_JSON_SCHEMA

log = logger_mod.get_logger()

MISSING_TICKET_DATA = "Ticket data is required for analysis"
PARSE_FAILED = "Failed to parse LLM response"


def validate_ticket(ticket: Any) -> None:
    if not isinstance(ticket, dict):
        raise TicketValidationError("Ticket must be a valid object")
    fields = ticket.get("fields")
    if not isinstance(fields, dict):
        raise TicketValidationError("Ticket must have fields property")
    summary = fields.get("summary")
    if not isinstance(summary, str) or not summary:
        raise TicketValidationError("Ticket must have a summary")


class AnalysisService:
    """Ticket -> grooming report.

    Composes generation and normalization, and decides what to do when the
    model output does not normalize: one repair attempt (if enabled), then
    either a ``{"raw": text}`` fallback or ``AnalysisFailedError``.
    """

    def __init__(
        self,
        adapter: Optional[LLMAdapter] = None,
        *,
        repair_enabled: Optional[bool] = None,
        raw_fallback: Optional[bool] = None,
    ):
        self._adapter = adapter or LLMAdapter.from_env()
        self._repair_enabled = (
            config.ANALYSIS_REPAIR_ENABLED if repair_enabled is None else repair_enabled
        )
        self._raw_fallback = (
            config.ANALYSIS_RAW_FALLBACK if raw_fallback is None else raw_fallback
        )

    async def analyze_ticket(
        self, ticket: Any, llm_api_key: Optional[str] = None
    ) -> dict[str, Any]:
        if not ticket:
            raise TicketValidationError(MISSING_TICKET_DATA)
        validate_ticket(ticket)

        ticket_key = ticket.get("key")
        log.info(f"Starting ticket analysis: {ticket_key}")

        raw = await self._adapter.generate(
            SYSTEM_PROMPT, build_user_prompt(ticket), api_key=llm_api_key
        )
        result: Normalized = normalize(raw)

        if isinstance(result, NormalizationError) and self._repair_enabled:
            log.info(f"Repairing malformed analysis for {ticket_key}: {result.message}")
            raw = await self._adapter.repair(
                raw, schema=ANALYSIS_JSON_SCHEMA, api_key=llm_api_key
            )
            result = normalize(raw)

        if isinstance(result, NormalizationError):
            if self._raw_fallback:
                log.warning(f"Returning raw LLM text for {ticket_key}")
                return {"raw": raw}
            log.error(f"Ticket analysis failed for {ticket_key}: {result.message}")
            raise AnalysisFailedError(PARSE_FAILED, result)

        log.info(f"Successfully analyzed ticket {ticket_key} (score={result['score']})")
        return dict(result)
