from ..builder import PromptBuilderConfig, build_answered_input, build_messages, parse_generated_prompt
from ..core.agent_ids import CustomAgentRef, is_built_in_agent_id, parse_agent_id, resolve_custom_agent
from ..core.errors import PromptValidationError
from ..core.language import detect_input_language
from ..core.logs import logger
from ..core.models import (
    AICompletionRequest, AIProviderType, ClarifyingAnswers, CustomAgent, CustomTweak,
    GenerationResult, PromptGenerationOptions, TweakSuggestion
)
from ..tweaks import suggest_tweaks
from ..validators import validate_prompt_generation_options
from .providers import CompletionProvider

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional, Union


class PromptGenerator(BaseModel):
    """
    Validates a request, assembles the messages, runs one completion and parses it.

    Custom agents and tweaks are whatever rows the caller owns; they are looked
    up here but never persisted.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    provider :CompletionProvider
    provider_type :Optional[AIProviderType]=None
    custom_agents :List[CustomAgent]=Field(default_factory=list)
    custom_tweaks :List[CustomTweak]=Field(default_factory=list)

    @property
    def guideline_provider(self) -> str:
        return self.provider_type or self.provider.name

    def builder_config(self, options :PromptGenerationOptions) -> PromptBuilderConfig:
        custom_agent = None
        agent_ref = parse_agent_id(options.agent)
        if isinstance(agent_ref, CustomAgentRef):
            custom_agent = resolve_custom_agent(agent_ref.agent_id, self.custom_agents)

        return PromptBuilderConfig(
            provider=self.guideline_provider,
            custom_agent=custom_agent,
            custom_tweaks=self.custom_tweaks
        )

    async def generate(self, options :PromptGenerationOptions) -> GenerationResult:
        """
        Raises:
            PromptValidationError: the request is invalid, nothing is sent.
            CustomAgentNotFoundError: a custom agent id matches no owned agent.
        """
        validation = validate_prompt_generation_options(options)
        if not validation.valid:
            logger.warning(f"generation rejected: {validation.first_message}")
            raise PromptValidationError(validation)

        config = self.builder_config(options)
        messages = build_messages(options, config)

        logger.info(f"generating prompt agent={options.agent} provider={self.guideline_provider} length={options.length} strategy={options.strategy}")
        response = await self.provider.complete(AICompletionRequest(messages=messages))

        prompt = parse_generated_prompt(response.content)
        logger.info(f"prompt generated chars={len(response.content)} criteria={len(prompt.acceptance_criteria)}")

        return GenerationResult(
            prompt=prompt,
            messages=messages,
            usage=response.usage,
            input_language=detect_input_language(options.input)
        )

    async def answer_questions(
            self,
            options :PromptGenerationOptions,
            questions :List[str],
            answers :Union[ClarifyingAnswers, Dict[int, str]]) -> GenerationResult:
        """Regenerate with the answered questions folded into the input. Questions are not asked twice."""
        if not isinstance(answers, ClarifyingAnswers):
            answers = ClarifyingAnswers(answers=answers)

        answered_options = options.model_copy(update={
            "input": build_answered_input(options.input, questions, answers.answers),
            "ask_clarifying_questions": False
        })
        return await self.generate(answered_options)

    def suggest(self, options :PromptGenerationOptions) -> List[TweakSuggestion]:
        current_agent = options.agent if is_built_in_agent_id(options.agent) else None
        return suggest_tweaks(options.input, current_agent)
