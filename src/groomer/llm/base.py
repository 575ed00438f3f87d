from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from .errors import MissingCredentialError
from .types import ProviderKind


@dataclass(frozen=True)
class LLMConfig:
    provider: ProviderKind
    model: str
    base_url: Optional[str] = None
    temperature: float = 0.0
    timeout_s: Optional[float] = 60.0


class LLMClient(Protocol):
    """One provider's wire format behind a single ``complete`` capability."""

    kind: ProviderKind

    async def complete(
        self,
        *,
        system_prompt: Optional[str],
        user_prompt: str,
        api_key: str,
    ) -> str:
        raise NotImplementedError


def require_api_key(api_key: str, provider: ProviderKind) -> None:
    if not api_key:
        raise MissingCredentialError(f"{provider.value} apiKey required")
