import sys
from pathlib import Path
from types import SimpleNamespace

import pytest


def pytest_configure():
    # This repo uses a src/ layout, so when running tests without an editable
    # install, we add <repo>/src to sys.path.
    repo_root = Path(__file__).resolve().parents[2]
    src_path = str(repo_root / "src")
    if src_path not in sys.path:
        sys.path.insert(0, src_path)


class FakeSDK:
    """Stands in for both ``AsyncOpenAI`` and ``genai.Client``.

    Records every request and answers with ``text`` (or raises ``error``).
    """

    def __init__(self, text: str = "{}", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[tuple[str, dict]] = []
        self.closed = 0
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))
        self.aio = SimpleNamespace(
            models=SimpleNamespace(generate_content=self._generate_content),
            aclose=self.close,
        )

    async def close(self):
        self.closed += 1

    async def _create(self, **kwargs):
        self.calls.append(("chat", kwargs))
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.text)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])

    async def _generate_content(self, **kwargs):
        self.calls.append(("generate_content", kwargs))
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


class LLMHarness:
    """Builds the real provider clients on top of a ``FakeSDK``."""

    def __init__(self, sdk: FakeSDK):
        self.sdk = sdk
        self.built: list = []
        self.api_keys: list[str] = []

    def sdk_factory(self, api_key, config):
        self.api_keys.append(api_key)
        return self.sdk

    def factory(self, kind, timeout_s=None):
        from groomer.llm.factory import build_llm

        client = build_llm(kind, timeout_s=timeout_s, sdk_factory=self.sdk_factory)
        self.built.append(client)
        return client


@pytest.fixture
def fake_sdk():
    return FakeSDK()


@pytest.fixture
def llm_harness(fake_sdk):
    return LLMHarness(fake_sdk)


@pytest.fixture
def valid_report():
    return {
        "summary": "Fix the login redirect",
        "score": 72,
        "goodPoints": ["Clear reproduction steps"],
        "missingPoints": ["No browser matrix"],
        "mismatches": [],
        "uiSuggestions": ["Show inline error"],
        "technicalSuggestions": ["Add session expiry test"],
        "acceptanceCriteria": ["User lands on dashboard after login"],
        "storyPoints": 3,
        "questions": ["Does SSO share this flow?"],
    }
