from __future__ import annotations


class LLMError(RuntimeError):
    pass


class InvalidCredentialError(LLMError):
    """Raised when a credential is empty or not a string."""


class MissingCredentialError(LLMError):
    """Raised when no API key was supplied and no default is configured."""


class UnknownProviderError(LLMError):
    pass


class ProviderCallFailedError(LLMError):
    """The provider answered with a non-success status (or never answered).

    ``status`` is ``None`` for transport failures.
    """

    def __init__(self, provider: str, status: int | None, body: str):
        self.provider = provider
        self.status = status
        self.body = body
        super().__init__(f"{provider} call failed (status={status}): {body[:200]}")


class ProviderTimeoutError(LLMError):
    def __init__(self, provider: str, timeout_s: float | None):
        self.provider = provider
        self.timeout_s = timeout_s
        super().__init__(f"{provider} call timed out after {timeout_s}s")
