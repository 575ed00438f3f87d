from __future__ import annotations

from typing import Optional

from ._chat import SdkFactory, chat_completion, default_sdk_factory
from .base import LLMConfig, require_api_key
from .types import GenerationRequest, ProviderKind

JSON_OBJECT_FORMAT = {"type": "json_object"}


class MistralLLM:
    """Mistral's OpenAI-compatible chat endpoint, forced into JSON-object mode."""

    kind = ProviderKind.MISTRAL

    def __init__(self, config: LLMConfig, *, sdk_factory: SdkFactory | None = None):
        self._cfg = config
        self._sdk_factory = sdk_factory or default_sdk_factory

    @property
    def config(self) -> LLMConfig:
        return self._cfg

    async def complete(
        self,
        *,
        system_prompt: Optional[str],
        user_prompt: str,
        api_key: str,
    ) -> str:
        require_api_key(api_key, self.kind)
        request = GenerationRequest(
            user_prompt=user_prompt, credential=api_key, system_prompt=system_prompt
        )
        return await chat_completion(
            request,
            config=self._cfg,
            sdk_factory=self._sdk_factory,
            extra={"response_format": JSON_OBJECT_FORMAT},
        )
