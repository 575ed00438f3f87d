"""LLM provider abstractions (OpenAI / Mistral / Gemini).

Design goals:
- Keep provider-specific SDKs isolated behind one ``complete`` capability.
- Keep credential -> provider routing in one pure, testable function.
- Surface provider failures as typed errors; never switch providers on failure.
"""

from .adapter import LLMAdapter, generate, repair
from .errors import (
    InvalidCredentialError,
    LLMError,
    MissingCredentialError,
    ProviderCallFailedError,
    ProviderTimeoutError,
    UnknownProviderError,
)
from .factory import build_llm, parse_provider
from .selector import select_provider
from .types import LLMMessage, ProviderKind

__all__ = [
    "InvalidCredentialError",
    "LLMAdapter",
    "LLMError",
    "LLMMessage",
    "MissingCredentialError",
    "ProviderCallFailedError",
    "ProviderKind",
    "ProviderTimeoutError",
    "UnknownProviderError",
    "build_llm",
    "generate",
    "parse_provider",
    "repair",
    "select_provider",
]
