from __future__ import annotations

from typing import Any, Callable, Optional

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types

from groomer import logger as logger_mod

from .base import LLMConfig, require_api_key
from .errors import ProviderCallFailedError, ProviderTimeoutError
from .types import ProviderKind

log = logger_mod.get_logger()

JSON_MIME_TYPE = "application/json"

SdkFactory = Callable[[str, LLMConfig], Any]


def default_sdk_factory(api_key: str, config: LLMConfig) -> genai.Client:
    http_options = None
    if config.timeout_s is not None:
        # google-genai expects milliseconds
        http_options = genai_types.HttpOptions(timeout=int(config.timeout_s * 1000))
    return genai.Client(api_key=api_key, http_options=http_options)


class GeminiLLM:
    """Gemini generate-content.

    The system prompt travels through ``system_instruction`` rather than being
    folded into the user turn, and the response is requested as JSON.
    """

    kind = ProviderKind.GEMINI

    def __init__(self, config: LLMConfig, *, sdk_factory: SdkFactory | None = None):
        self._cfg = config
        self._sdk_factory = sdk_factory or default_sdk_factory

    @property
    def config(self) -> LLMConfig:
        return self._cfg

    def build_request(
        self, *, system_prompt: Optional[str], user_prompt: str
    ) -> dict[str, Any]:
        generation_config: dict[str, Any] = {"response_mime_type": JSON_MIME_TYPE}
        if system_prompt:
            generation_config["system_instruction"] = system_prompt
        return {
            "model": self._cfg.model,
            "contents": [{"role": "user", "parts": [{"text": user_prompt}]}],
            "config": generation_config,
        }

    async def complete(
        self,
        *,
        system_prompt: Optional[str],
        user_prompt: str,
        api_key: str,
    ) -> str:
        require_api_key(api_key, self.kind)
        request = self.build_request(system_prompt=system_prompt, user_prompt=user_prompt)
        client = self._sdk_factory(api_key, self._cfg)
        provider = self.kind.value

        log.info(f"Calling {provider} model: {self._cfg.model}")
        try:
            response = await client.aio.models.generate_content(**request)
        except genai_errors.APIError as e:
            log.error(f"{provider} call failed with status {e.code}")
            raise ProviderCallFailedError(provider, e.code, e.message or str(e)) from e
        except httpx.TimeoutException as e:
            log.error(f"{provider} call timed out")
            raise ProviderTimeoutError(provider, self._cfg.timeout_s) from e
        except httpx.TransportError as e:
            log.error(f"{provider} connection failed: {e}")
            raise ProviderCallFailedError(provider, None, str(e)) from e
        finally:
            # one client per call, so its connection pool goes with it
            await client.aio.aclose()

        return getattr(response, "text", None) or ""
