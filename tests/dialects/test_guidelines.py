from promptops.dialects.guidelines import (
    ALL_GUIDELINES, ANTHROPIC_GUIDELINES, CURSOR_GUIDELINES, OPENAI_GUIDELINES,
    get_provider_guideline, lookup_guidelines
)
from promptops.core.agent_ids import BUILT_IN_AGENT_IDS

import pytest

def test_all_guideline_sets_have_an_injection():
    for guideline in ALL_GUIDELINES.values():
        assert guideline.prompt_injection

def test_get_provider_guideline():
    assert get_provider_guideline("anthropic") is ANTHROPIC_GUIDELINES
    with pytest.raises(KeyError):
        get_provider_guideline("mistral")

def test_provider_and_agent_are_combined():
    result = lookup_guidelines("openai", "cursor")
    assert result.provider is OPENAI_GUIDELINES
    assert result.agent is CURSOR_GUIDELINES
    assert result.combined_injection == f"{OPENAI_GUIDELINES.prompt_injection}\n\n{CURSOR_GUIDELINES.prompt_injection}"

def test_same_set_is_not_repeated():
    result = lookup_guidelines("anthropic", "claude-code")
    assert result.agent is None
    assert result.combined_injection == ANTHROPIC_GUIDELINES.prompt_injection

@pytest.mark.parametrize("provider", ["groq", "ollama", "custom"])
def test_vendors_without_guidelines_fall_back_to_openai(provider):
    result = lookup_guidelines(provider, "generic")
    assert result.provider is OPENAI_GUIDELINES
    assert result.agent is None
    assert result.combined_injection == OPENAI_GUIDELINES.prompt_injection

@pytest.mark.parametrize("agent", BUILT_IN_AGENT_IDS)
def test_every_built_in_agent_resolves(agent):
    result = lookup_guidelines("anthropic", agent)
    assert result.combined_injection.startswith(ANTHROPIC_GUIDELINES.prompt_injection)
