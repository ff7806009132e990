from promptops.core.errors import PromptValidationError
from promptops.core.models import (
    ClarifyingAnswers, CustomAgent, CustomTweak, SelectedTweaks, UpdateCustomAgentRequest,
    UpdateCustomTweakRequest, ValidationError, ValidationResult
)

import pytest

@pytest.fixture
def custom_agent():
    return CustomAgent(
        id="3f2b8c1e-6d4a-4b7e-9a12-5c8d7e6f1a2b",
        user_id="user-1",
        name="House Style",
        tone="Friendly"
    )

def test_custom_agent_id(custom_agent):
    assert custom_agent.agent_id == "custom-3f2b8c1e-6d4a-4b7e-9a12-5c8d7e6f1a2b"
    assert custom_agent.icon == "bot"
    assert custom_agent.is_active

def test_custom_agent_partial_update(custom_agent):
    """Only the fields explicitly present on the update change"""
    updated = custom_agent.apply_update(UpdateCustomAgentRequest(emphasis="Tests first"))
    assert updated.emphasis == "Tests first"
    assert updated.tone == "Friendly"
    assert updated.name == "House Style"
    assert updated.updated_at >= custom_agent.updated_at
    assert custom_agent.emphasis is None

def test_custom_agent_update_can_clear_field(custom_agent):
    updated = custom_agent.apply_update(UpdateCustomAgentRequest(tone=None))
    assert updated.tone is None

def test_empty_update_returns_same_agent(custom_agent):
    assert custom_agent.apply_update(UpdateCustomAgentRequest()) is custom_agent

def test_custom_tweak_update():
    tweak = CustomTweak(id="t1", user_id="user-1", name="Hebrew UI", short_name="RTL", instruction="Support RTL")
    assert tweak.icon == "sparkles"
    updated = tweak.apply_update(UpdateCustomTweakRequest(is_active=False))
    assert updated.is_active is False
    assert updated.instruction == "Support RTL"

def test_selected_tweaks_is_empty():
    assert SelectedTweaks().is_empty
    assert not SelectedTweaks(thinking="think").is_empty
    assert not SelectedTweaks(custom=["t1"]).is_empty

def test_clarifying_answers_drop_blank():
    answers = ClarifyingAnswers(answers={0: " Dark mode ", 1: "   ", 2: ""})
    assert answers.answers == {0: "Dark mode"}

def test_validation_result_from_errors():
    assert ValidationResult.from_errors([]).valid
    assert ValidationResult.from_errors([]).first_message is None

    result = ValidationResult.from_errors([
        ValidationError(field="input", message="Input is required"),
        ValidationError(field="agent", message="Agent is required")
    ])
    assert not result.valid
    assert result.first_message == "Input is required"

def test_prompt_validation_error_carries_result():
    result = ValidationResult.from_errors([ValidationError(field="agent", message="Invalid agent selected")])
    error = PromptValidationError(result)
    assert str(error) == "Invalid agent selected"
    assert error.errors == result.errors
