from promptops.core.agent_ids import BUILT_IN_AGENT_IDS
from promptops.core.models import CustomAgent
from promptops.dialects import (
    AGENT_DIALECTS, AGENT_OPTIONS, get_agent_dialect, get_agent_dialect_prompt,
    get_custom_agent_dialect_prompt
)

import pytest

def test_every_built_in_agent_has_a_dialect():
    assert set(AGENT_DIALECTS) == set(BUILT_IN_AGENT_IDS)
    assert [option["value"] for option in AGENT_OPTIONS] == list(AGENT_DIALECTS)

def test_unknown_agent_raises_key_error():
    with pytest.raises(KeyError):
        get_agent_dialect("chatgpt")

def test_dialect_entries_are_immutable():
    with pytest.raises(Exception):
        AGENT_DIALECTS["cursor"].tone = "Chatty"

def test_built_in_dialect_prompt():
    prompt = get_agent_dialect_prompt("cursor")
    lines = prompt.split("\n")
    assert lines[0] == "AGENT: Cursor"
    assert lines[1] == "- Tone: Technical, minimal"
    assert lines[4].startswith("- Key instruction: Keep changes minimal")
    assert lines[5].startswith("- Output notes: ")

class TestCustomAgentDialect:

    def test_only_filled_fields_are_rendered(self):
        agent = CustomAgent(
            id="3f2b8c1e-6d4a-4b7e-9a12-5c8d7e6f1a2b",
            user_id="user-1",
            name="House Style",
            tone="Friendly",
            emphasis="   "
        )
        prompt = get_custom_agent_dialect_prompt(agent)
        assert prompt == "CUSTOM AGENT: House Style\n- Tone: Friendly"

    def test_custom_instructions_block(self):
        agent = CustomAgent(
            id="3f2b8c1e-6d4a-4b7e-9a12-5c8d7e6f1a2b",
            user_id="user-1",
            name="House Style",
            documentation_url="https://docs.example.com",
            custom_instructions="Always use pnpm."
        )
        prompt = get_custom_agent_dialect_prompt(agent)
        assert "- Documentation: https://docs.example.com" in prompt
        assert prompt.endswith("\n\nCUSTOM INSTRUCTIONS:\nAlways use pnpm.")

    def test_built_in_defaults_are_not_borrowed(self):
        agent = CustomAgent(id="3f2b8c1e-6d4a-4b7e-9a12-5c8d7e6f1a2b", user_id="u", name="Bare")
        prompt = get_custom_agent_dialect_prompt(agent)
        assert prompt == "CUSTOM AGENT: Bare"
