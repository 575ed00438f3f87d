from groomer.analysis.prompts import SYSTEM_PROMPT, build_user_prompt
from groomer.analysis.schema import OPTIONAL_FIELDS, REQUIRED_FIELDS


def test_user_prompt_without_description():
    ticket = {"key": "AB-1", "fields": {"summary": "Fix login bug"}}
    assert (
        build_user_prompt(ticket)
        == "Ticket Summary: Fix login bug\n\nDescription: No description"
    )


def test_user_prompt_serializes_adf_description():
    adf = {"type": "doc", "content": [{"type": "paragraph", "text": "Ünïcode"}]}
    ticket = {"fields": {"summary": "S", "description": adf}}
    assert build_user_prompt(ticket) == (
        'Ticket Summary: S\n\nDescription: {"type":"doc","content":'
        '[{"type":"paragraph","text":"Ünïcode"}]}'
    )


def test_user_prompt_defaults_summary():
    assert build_user_prompt({"fields": {}}).startswith("Ticket Summary: No summary")


def test_system_prompt_mentions_every_field():
    for field in REQUIRED_FIELDS + OPTIONAL_FIELDS:
        assert f'"{field}"' in SYSTEM_PROMPT
