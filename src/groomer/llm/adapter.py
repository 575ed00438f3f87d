"""generate / repair: resolve a key, pick a provider, make one call."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Callable, Mapping, Optional

from groomer import config
from groomer import logger as logger_mod

from .base import LLMClient
from .errors import (
    InvalidCredentialError,
    LLMError,
    MissingCredentialError,
    ProviderTimeoutError,
)
from .factory import build_llm, parse_provider
from .selector import select_provider
from .types import ProviderKind, RepairRequest

log = logger_mod.get_logger()

LLMFactory = Callable[..., LLMClient]

# Sentinel so an explicit ``timeout_s=None`` can disable the default timeout.
_DEFAULT = object()


def build_repair_prompt(request: RepairRequest) -> str:
    schema_json = json.dumps(request.schema, ensure_ascii=False)
    return (
        "The following text is intended to be valid JSON conforming to this schema: "
        f"{schema_json}\n\nOriginal:\n{request.raw_text}\n\n"
        "Please return only the corrected JSON object that validates against the schema."
    )


class LLMAdapter:
    """Single entry point for LLM generation.

    Holds no per-request state: default keys and the timeout are read-only
    after construction, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        *,
        default_api_key: str = "",
        provider_api_keys: Optional[Mapping[ProviderKind, str]] = None,
        timeout_s: Optional[float] = None,
        llm_factory: LLMFactory = build_llm,
    ):
        self._default_api_key = default_api_key
        self._provider_api_keys = dict(provider_api_keys or {})
        self._timeout_s = timeout_s
        self._llm_factory = llm_factory

    @classmethod
    def from_env(cls, **kwargs: Any) -> "LLMAdapter":
        kwargs.setdefault("default_api_key", config.DEFAULT_LLM_API_KEY)
        kwargs.setdefault(
            "provider_api_keys",
            {ProviderKind(k): v for k, v in config.PROVIDER_API_KEYS.items()},
        )
        kwargs.setdefault("timeout_s", config.LLM_TIMEOUT_S)
        return cls(**kwargs)

    def resolve_credential(
        self, api_key: Any, provider: Optional[ProviderKind] = None
    ) -> str:
        if api_key is not None and not isinstance(api_key, str):
            raise InvalidCredentialError("LLM apiKey must be a string")
        if api_key and api_key.strip():
            return api_key.strip()

        if provider is not None:
            fallback = self._provider_api_keys.get(provider, "")
        else:
            fallback = self._default_api_key
        if not fallback:
            raise MissingCredentialError("LLM apiKey required")
        return fallback

    async def generate(
        self,
        system_prompt: Optional[str],
        user_prompt: str,
        *,
        api_key: Optional[str] = None,
        provider: ProviderKind | str | None = None,
        timeout_s: Any = _DEFAULT,
    ) -> str:
        return await self._complete(
            system_prompt,
            user_prompt,
            api_key=api_key,
            provider=provider,
            timeout_s=timeout_s,
            operation="generate",
        )

    async def repair(
        self,
        raw_text: str,
        *,
        schema: dict[str, Any],
        api_key: Optional[str] = None,
        provider: ProviderKind | str | None = None,
        timeout_s: Any = _DEFAULT,
    ) -> str:
        kind = parse_provider(provider) if provider is not None else None
        request = RepairRequest(
            raw_text=raw_text,
            schema=schema,
            credential=self.resolve_credential(api_key, kind),
        )
        log.info("Requesting JSON repair from provider")
        return await self._complete(
            "",
            build_repair_prompt(request),
            api_key=request.credential,
            provider=kind,
            timeout_s=timeout_s,
            operation="repair",
        )

    async def _complete(
        self,
        system_prompt: Optional[str],
        user_prompt: str,
        *,
        api_key: Optional[str],
        provider: ProviderKind | str | None,
        timeout_s: Any,
        operation: str,
    ) -> str:
        kind = parse_provider(provider) if provider is not None else None
        key = self.resolve_credential(api_key, kind)
        if kind is None:
            kind = select_provider(key)
        timeout = self._timeout_s if timeout_s is _DEFAULT else timeout_s

        log.debug(
            f"{operation}: key {logger_mod.mask_credential(key)} -> {kind.value}"
        )
        client = self._llm_factory(kind, timeout_s=timeout)
        call = client.complete(
            system_prompt=system_prompt, user_prompt=user_prompt, api_key=key
        )
        try:
            if timeout is None:
                return await call
            return await asyncio.wait_for(call, timeout)
        except asyncio.TimeoutError as e:
            log.error(f"LLM {operation} call timed out after {timeout}s")
            raise ProviderTimeoutError(kind.value, timeout) from e
        except LLMError as e:
            log.error(f"LLM {operation} call failed: {e}")
            raise


async def generate(
    system_prompt: Optional[str],
    user_prompt: str,
    *,
    api_key: Optional[str] = None,
    provider: ProviderKind | str | None = None,
    timeout_s: Any = _DEFAULT,
) -> str:
    """Module-level convenience using the environment-configured adapter."""
    return await LLMAdapter.from_env().generate(
        system_prompt,
        user_prompt,
        api_key=api_key,
        provider=provider,
        timeout_s=timeout_s,
    )


async def repair(
    raw_text: str,
    *,
    schema: dict[str, Any],
    api_key: Optional[str] = None,
    provider: ProviderKind | str | None = None,
    timeout_s: Any = _DEFAULT,
) -> str:
    return await LLMAdapter.from_env().repair(
        raw_text,
        schema=schema,
        api_key=api_key,
        provider=provider,
        timeout_s=timeout_s,
    )
