"""Chat-completions wire call shared by the OpenAI-shaped providers."""

from __future__ import annotations

from typing import Any, Callable, Optional

import openai
from openai import AsyncOpenAI

from groomer import logger as logger_mod

from .base import LLMConfig
from .errors import ProviderCallFailedError, ProviderTimeoutError
from .types import GenerationRequest

log = logger_mod.get_logger()

SdkFactory = Callable[[str, LLMConfig], Any]


def default_sdk_factory(api_key: str, config: LLMConfig) -> AsyncOpenAI:
    kwargs: dict[str, Any] = {
        "api_key": api_key,
        "base_url": config.base_url,
        # exactly one round trip per call
        "max_retries": 0,
    }
    if config.timeout_s is not None:
        kwargs["timeout"] = config.timeout_s
    return AsyncOpenAI(**kwargs)


def build_chat_body(
    config: LLMConfig,
    request: GenerationRequest,
    extra: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    body: dict[str, Any] = {
        "model": config.model,
        "messages": [m.as_dict() for m in request.chat_messages()],
        "temperature": config.temperature,
    }
    if extra:
        body.update(extra)
    return body


def _first_choice_text(resp: Any) -> str:
    choices = getattr(resp, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    return getattr(message, "content", None) or ""


async def chat_completion(
    request: GenerationRequest,
    *,
    config: LLMConfig,
    sdk_factory: SdkFactory,
    extra: Optional[dict[str, Any]] = None,
) -> str:
    """One chat-completions round trip; the SDK client is closed afterwards."""
    provider = config.provider.value
    body = build_chat_body(config, request, extra)
    sdk = sdk_factory(request.credential, config)
    log.info(f"Calling {provider} model: {body['model']}")
    try:
        resp = await sdk.chat.completions.create(**body)
    # APITimeoutError subclasses APIConnectionError, so it goes first.
    except openai.APITimeoutError as e:
        log.error(f"{provider} call timed out")
        raise ProviderTimeoutError(provider, config.timeout_s) from e
    except openai.APIStatusError as e:
        log.error(f"{provider} call failed with status {e.status_code}")
        raise ProviderCallFailedError(provider, e.status_code, e.response.text) from e
    except openai.APIConnectionError as e:
        log.error(f"{provider} connection failed: {e}")
        raise ProviderCallFailedError(provider, None, str(e)) from e
    finally:
        await sdk.close()
    return _first_choice_text(resp)
