from ...builder import PromptBuilderConfig, build_messages
from ...core.agent_ids import is_custom_agent_id, resolve_custom_agent
from ...core.errors import CustomAgentNotFoundError
from ...core.models import (
    CustomAgent, CustomTweak, PromptGenerationOptions, ValidationError, ValidationResult
)
from ...validators import validate_prompt_generation_options
from ..utils import to_json

from typing import List, Optional

def buildPromptMessages(
    options: dict,
    provider: str = "openai",
    custom_agent: Optional[dict] = None,
    custom_tweaks: Optional[List[dict]] = None) -> str:
    """
    Assembles the system and user messages for a prompt generation request.
    The messages can be sent as-is to any chat completion API.

    Args:
        options: Same shape as in validateGenerationOptions, plus optional
                 `ask_clarifying_questions` (bool) and `project_context` (str)
        provider: AI provider whose guidelines apply (openai, anthropic, groq, ollama, custom)
        custom_agent: Custom agent row, required when `options.agent` is `custom-<uuid>`;
                      its `id` must be the uuid embedded in the agent id
        custom_tweaks: Custom tweak rows referenced by `options.tweaks.custom`

    Returns:
        JSON list [{"role": "system", "content": "..."}, {"role": "user", "content": "..."}],
        or the validation result {"valid": false, "errors": [...]} when the request is invalid
        or the custom agent row does not match.
    """
    validation = validate_prompt_generation_options(options)
    if not validation.valid:
        return to_json(validation)

    generation_options = PromptGenerationOptions.model_validate(options)

    resolved_agent = None
    if is_custom_agent_id(generation_options.agent):
        owned_agents = [CustomAgent.model_validate(custom_agent)] if custom_agent else []
        try:
            resolved_agent = resolve_custom_agent(generation_options.agent, owned_agents)
        except CustomAgentNotFoundError:
            return to_json(ValidationResult.from_errors([
                ValidationError(field="agent", message="Custom agent not found")
            ]))

    config = PromptBuilderConfig(
        provider=provider,
        custom_agent=resolved_agent,
        custom_tweaks=[CustomTweak.model_validate(tweak) for tweak in custom_tweaks or []]
    )

    return to_json(build_messages(generation_options, config))
