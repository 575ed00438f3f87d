"""Credential -> provider classification.

Keys carry no explicit provider marker, so the provider is inferred from the
key prefix. Rules are ordered; the first match wins and anything unmatched
goes to OpenAI.
"""

from __future__ import annotations

from typing import Any

from groomer import logger as logger_mod

from .errors import InvalidCredentialError
from .types import ProviderKind

log = logger_mod.get_logger()

GEMINI_KEY_PREFIX = "AIza"
OPENAI_KEY_PREFIX = "sk-"
MISTRAL_KEY_PREFIX = "9GF"

PREFIX_RULES: tuple[tuple[str, ProviderKind], ...] = (
    (GEMINI_KEY_PREFIX, ProviderKind.GEMINI),
    (OPENAI_KEY_PREFIX, ProviderKind.OPENAI),
    (MISTRAL_KEY_PREFIX, ProviderKind.MISTRAL),
)

DEFAULT_PROVIDER = ProviderKind.OPENAI


def select_provider(credential: Any) -> ProviderKind:
    if not isinstance(credential, str) or not credential:
        raise InvalidCredentialError("Credential must be a non-empty string")

    for prefix, kind in PREFIX_RULES:
        if credential.startswith(prefix):
            return kind

    log.debug(f"Unrecognized key prefix; defaulting to {DEFAULT_PROVIDER.value}")
    return DEFAULT_PROVIDER
