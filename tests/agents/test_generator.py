from promptops.agents import CompletionProvider, PromptGenerator
from promptops.builder.prompts import CLARIFYING_QUESTIONS_INSTRUCTION
from promptops.core.errors import CustomAgentNotFoundError, PromptValidationError
from promptops.core.models import (
    AICompletionRequest, AICompletionResponse, ClarifyingAnswers, CustomAgent,
    PromptGenerationOptions, TokenUsage
)
from promptops.dialects.guidelines import ANTHROPIC_GUIDELINES

from typing import List
import pytest

COMPLETION = """**Goal:** Fix login bug
**Acceptance criteria:**
- Login succeeds
- No console errors
**Questions:**
- Which browsers are affected?"""

AGENT_UUID = "3f2b8c1e-6d4a-4b7e-9a12-5c8d7e6f1a2b"


class FakeProvider(CompletionProvider):
    """Records every request and answers with a canned completion"""
    name = "anthropic"

    def __init__(self, content :str=COMPLETION):
        self.content = content
        self.requests :List[AICompletionRequest] = []

    async def complete(self, request :AICompletionRequest) -> AICompletionResponse:
        self.requests.append(self.resolve_request(request))
        return AICompletionResponse(
            content=self.content,
            usage=TokenUsage(prompt_tokens=10, completion_tokens=5, total_tokens=15)
        )


class FailingProvider(CompletionProvider):

    async def complete(self, request :AICompletionRequest) -> AICompletionResponse:
        raise RuntimeError("rate limited")


@pytest.fixture
def provider():
    return FakeProvider()

@pytest.fixture
def options():
    return PromptGenerationOptions(
        input="The login button does nothing on Safari",
        agent="cursor",
        length="standard",
        strategy="implement"
    )

@pytest.mark.asyncio
async def test_generate(provider, options):
    generator = PromptGenerator(provider=provider)
    result = await generator.generate(options)

    assert len(provider.requests) == 1
    assert result.prompt.goal == "Fix login bug"
    assert result.prompt.acceptance_criteria == ["Login succeeds", "No console errors"]
    assert result.prompt.full_prompt == COMPLETION
    assert result.usage.total_tokens == 15
    assert result.input_language == "en"
    assert [message.role for message in result.messages] == ["system", "user"]
    assert provider.requests[0].messages == result.messages

@pytest.mark.asyncio
async def test_provider_defaults_fill_sampling_parameters(provider, options):
    await PromptGenerator(provider=provider).generate(options)
    assert provider.requests[0].max_tokens == 2048
    assert provider.requests[0].temperature == 0.7

@pytest.mark.asyncio
async def test_provider_name_selects_guidelines(provider, options):
    result = await PromptGenerator(provider=provider).generate(options)
    assert ANTHROPIC_GUIDELINES.prompt_injection in result.messages[0].content

    generator = PromptGenerator(provider=provider, provider_type="openai")
    assert generator.guideline_provider == "openai"

@pytest.mark.asyncio
async def test_invalid_request_is_never_sent(provider, options):
    generator = PromptGenerator(provider=provider)
    with pytest.raises(PromptValidationError) as exc_info:
        await generator.generate(options.model_copy(update={"input": "fix it"}))

    assert exc_info.value.errors[0].field == "input"
    assert provider.requests == []

@pytest.mark.asyncio
async def test_unknown_custom_agent(provider, options):
    generator = PromptGenerator(provider=provider)
    with pytest.raises(CustomAgentNotFoundError):
        await generator.generate(options.model_copy(update={"agent": f"custom-{AGENT_UUID}"}))
    assert provider.requests == []

@pytest.mark.asyncio
async def test_custom_agent_dialect(provider, options):
    custom_agent = CustomAgent(id=AGENT_UUID, user_id="u", name="House Style", tone="Terse")
    generator = PromptGenerator(provider=provider, custom_agents=[custom_agent])
    result = await generator.generate(options.model_copy(update={"agent": custom_agent.agent_id}))

    system_prompt = result.messages[0].content
    assert "CUSTOM AGENT: House Style" in system_prompt
    assert "GUIDELINES:" not in system_prompt

@pytest.mark.asyncio
async def test_provider_errors_propagate(options):
    generator = PromptGenerator(provider=FailingProvider())
    with pytest.raises(RuntimeError, match="rate limited"):
        await generator.generate(options)

@pytest.mark.asyncio
async def test_hebrew_input_language(provider, options):
    result = await PromptGenerator(provider=provider).generate(
        options.model_copy(update={"input": "הכפתור לא עובד בדף הבית"})
    )
    assert result.input_language == "he"
    assert result.messages[1].content.startswith("[Input is in Hebrew - translate to English]")

@pytest.mark.asyncio
async def test_answer_questions(provider, options):
    generator = PromptGenerator(provider=provider)
    options = options.model_copy(update={"ask_clarifying_questions": True})

    first = await generator.generate(options)
    assert CLARIFYING_QUESTIONS_INSTRUCTION in first.messages[0].content

    second = await generator.answer_questions(
        options,
        first.prompt.clarifying_questions,
        {0: "Safari 17 only"}
    )
    assert CLARIFYING_QUESTIONS_INSTRUCTION not in second.messages[0].content
    assert second.messages[1].content.endswith("Q: Which browsers are affected?\nA: Safari 17 only")
    assert len(provider.requests) == 2

@pytest.mark.asyncio
async def test_answer_questions_with_answer_form(provider, options):
    generator = PromptGenerator(provider=provider)
    questions = ["Which browsers are affected?", "Is there a console error?"]
    answers = ClarifyingAnswers(answers={0: "  Safari 17 only ", 1: "   "})

    result = await generator.answer_questions(options, questions, answers)
    user_content = result.messages[1].content
    assert user_content.endswith("Q: Which browsers are affected?\nA: Safari 17 only")
    assert "Is there a console error?" not in user_content

def test_suggest_ignores_custom_agents(provider, options):
    generator = PromptGenerator(provider=provider)
    assert generator.suggest(options.model_copy(update={"input": "fix the button"}))[0].confidence == 0.45
    custom = options.model_copy(update={"input": "fix the button", "agent": f"custom-{AGENT_UUID}"})
    assert generator.suggest(custom)[0].confidence == 0.3
