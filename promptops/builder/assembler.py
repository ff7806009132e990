from ..core.agent_ids import is_custom_agent_id
from ..core.defaults import SECTION_DELIMITER
from ..core.language import detect_input_language
from ..core.logs import logger
from ..core.models import (
    AIMessage, CustomAgent, CustomTweak, PromptGenerationOptions, SelectedTweaks
)
from ..dialects import get_agent_dialect_prompt, get_custom_agent_dialect_prompt, lookup_guidelines
from ..tweaks.catalog import TWEAKS_BY_ID
from .prompts import (
    ACTIVE_TWEAKS_HEADER, ANSWERED_QUESTIONS_TEMPLATE, CLARIFYING_QUESTIONS_INSTRUCTION,
    CORE_SYSTEM_PROMPT, CUSTOM_TWEAK_TEMPLATE, GUIDELINES_HEADER, LENGTH_INSTRUCTIONS,
    PROJECT_CONTEXT_TEMPLATE, QUESTION_ANSWER_TEMPLATE, STRATEGY_INSTRUCTIONS, TRANSLATE_HINT
)

from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class PromptBuilderConfig(BaseModel):
    """What the assembler needs besides the request itself"""
    provider :str="openai"
    custom_agent :Optional[CustomAgent]=None
    custom_tweaks :List[CustomTweak]=Field(default_factory=list)


def build_tweak_instructions(
        selected_tweaks :Optional[SelectedTweaks]=None,
        custom_tweaks :Optional[List[CustomTweak]]=None) -> Optional[str]:
    """
    Render the selected tweaks as one block.

    Order is fixed: thinking level, skills, behaviors, then custom tweaks, each
    group in selection order.

    Returns:
        The `ACTIVE TWEAKS:` block, or None when nothing is selected.
    """
    if selected_tweaks is None:
        return None

    instructions = []

    if selected_tweaks.thinking:
        instructions.append(TWEAKS_BY_ID[selected_tweaks.thinking].instruction)

    for skill_id in selected_tweaks.skills:
        instructions.append(TWEAKS_BY_ID[skill_id].instruction)

    for behavior_id in selected_tweaks.behaviors:
        instructions.append(TWEAKS_BY_ID[behavior_id].instruction)

    if selected_tweaks.custom:
        custom_by_id = {tweak.id: tweak for tweak in custom_tweaks or []}
        for custom_id in selected_tweaks.custom:
            custom_tweak = custom_by_id.get(custom_id)
            if custom_tweak is None or not custom_tweak.is_active:
                logger.debug(f"skipping unavailable custom tweak {custom_id}")
                continue
            instructions.append(CUSTOM_TWEAK_TEMPLATE.format(
                NAME=custom_tweak.name,
                INSTRUCTION=custom_tweak.instruction
            ))

    if not instructions:
        return None

    return "\n\n".join([ACTIVE_TWEAKS_HEADER, *instructions])


def build_system_prompt(options :PromptGenerationOptions, config :PromptBuilderConfig) -> str:
    """
    Compose the system instruction sent to the completion API.

    Blocks, separated by `---` lines:
        core rules, guidelines (built-in agents only), agent dialect, length,
        strategy, clarifying questions (optional), tweaks (optional), project
        context (optional).
    """
    parts = [CORE_SYSTEM_PROMPT]
    is_custom = is_custom_agent_id(options.agent)

    if not is_custom:
        guidelines = lookup_guidelines(config.provider, options.agent)
        if guidelines.combined_injection:
            parts.append(f"{GUIDELINES_HEADER}\n{guidelines.combined_injection}")
        parts.append(get_agent_dialect_prompt(options.agent))

    elif config.custom_agent is not None:
        parts.append(get_custom_agent_dialect_prompt(config.custom_agent))

    parts.append(LENGTH_INSTRUCTIONS[options.length])
    parts.append(STRATEGY_INSTRUCTIONS[options.strategy])

    if options.ask_clarifying_questions:
        parts.append(CLARIFYING_QUESTIONS_INSTRUCTION)

    tweak_instructions = build_tweak_instructions(options.tweaks, config.custom_tweaks)
    if tweak_instructions:
        parts.append(tweak_instructions)

    if options.project_context and options.project_context.strip():
        parts.append(PROJECT_CONTEXT_TEMPLATE.format(CONTEXT=options.project_context))

    system_prompt = SECTION_DELIMITER.join(parts)
    logger.debug(f"built system prompt agent={options.agent} blocks={len(parts)} chars={len(system_prompt)}")
    return system_prompt


def build_messages(options :PromptGenerationOptions, config :PromptBuilderConfig) -> List[AIMessage]:
    """Exactly two messages: the system prompt and the (possibly annotated) user input."""
    system_prompt = build_system_prompt(options, config)

    user_content = options.input
    if detect_input_language(options.input) == "he":
        user_content = f"{TRANSLATE_HINT}\n\n{options.input}"

    return [
        AIMessage(role="system", content=system_prompt),
        AIMessage(role="user", content=user_content)
    ]


def build_answered_input(input :str, questions :List[str], answers :Dict[int, str]) -> str:
    """Append answered clarifying questions to the original request, skipping unanswered ones."""
    answered = [
        QUESTION_ANSWER_TEMPLATE.format(QUESTION=question, ANSWER=answers[index].strip())
        for index, question in enumerate(questions)
        if answers.get(index) and answers[index].strip()
    ]
    if not answered:
        return input

    return ANSWERED_QUESTIONS_TEMPLATE.format(INPUT=input, ANSWERS="\n\n".join(answered))
