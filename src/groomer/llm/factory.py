from __future__ import annotations

from typing import Any, Callable, Optional

from groomer import config

from .base import LLMClient, LLMConfig
from .errors import UnknownProviderError
from .gemini_client import GeminiLLM
from .mistral_client import MistralLLM
from .openai_client import OpenAILLM
from .types import ProviderKind


def parse_provider(provider: ProviderKind | str) -> ProviderKind:
    if isinstance(provider, ProviderKind):
        return provider
    p = str(provider).lower().strip()
    try:
        return ProviderKind(p)
    except ValueError as e:
        raise UnknownProviderError(f"Unknown LLM provider: {provider}") from e


def build_llm(
    provider: ProviderKind | str,
    *,
    timeout_s: Optional[float] = None,
    sdk_factory: Optional[Callable[[str, LLMConfig], Any]] = None,
) -> LLMClient:
    """Factory for provider clients.

    Providers:
    - openai
    - mistral
    - gemini

    Extend by adding a new provider client, a ProviderKind member, and a
    mapping here (plus a prefix rule in ``selector`` if keys are sniffable).
    """

    kind = parse_provider(provider)
    if kind is ProviderKind.OPENAI:
        return OpenAILLM(
            LLMConfig(
                provider=kind,
                model=config.OPENAI_MODEL,
                base_url=config.OPENAI_BASE_URL,
                temperature=config.LLM_TEMPERATURE,
                timeout_s=timeout_s,
            ),
            sdk_factory=sdk_factory,
        )
    if kind is ProviderKind.MISTRAL:
        return MistralLLM(
            LLMConfig(
                provider=kind,
                model=config.MISTRAL_MODEL,
                base_url=config.MISTRAL_BASE_URL,
                temperature=config.LLM_TEMPERATURE,
                timeout_s=timeout_s,
            ),
            sdk_factory=sdk_factory,
        )
    return GeminiLLM(
        LLMConfig(
            provider=kind,
            model=config.GEMINI_MODEL,
            temperature=config.LLM_TEMPERATURE,
            timeout_s=timeout_s,
        ),
        sdk_factory=sdk_factory,
    )
