import pytest

from groomer.llm.errors import InvalidCredentialError
from groomer.llm.selector import select_provider
from groomer.llm.types import ProviderKind


@pytest.mark.parametrize(
    "key, expected",
    [
        ("AIzaSyExample123", ProviderKind.GEMINI),
        ("AIza", ProviderKind.GEMINI),
        ("sk-test", ProviderKind.OPENAI),
        ("sk-proj-abc", ProviderKind.OPENAI),
        ("9GFxyz", ProviderKind.MISTRAL),
        ("dKmistralstyle", ProviderKind.OPENAI),
        ("x", ProviderKind.OPENAI),
        ("aiza-lowercase", ProviderKind.OPENAI),
    ],
)
def test_prefix_rules(key, expected):
    assert select_provider(key) is expected


def test_classification_is_stable_for_a_key():
    key = "9GF-some-key"
    assert {select_provider(key) for _ in range(5)} == {ProviderKind.MISTRAL}


@pytest.mark.parametrize("bad", ["", None, 123, b"sk-bytes"])
def test_rejects_empty_or_non_string(bad):
    with pytest.raises(InvalidCredentialError):
        select_provider(bad)
