from promptops.core.models import (
    GeneratedPrompt, GenerationResult, PromptGenerationOptions, SelectedTweaks,
    TweakSuggestion, ValidationResult
)
from promptops.core.errors import (
    CustomAgentNotFoundError, InvalidAgentIdError, PromptOpsError, PromptValidationError
)
from promptops.builder import (
    PromptBuilderConfig, build_messages, build_system_prompt,
    format_prompt_for_copy, parse_generated_prompt
)
from promptops.tweaks import estimate_token_impact, resolve_conflicts, suggest_tweaks
from promptops.validators import (
    lint_prompt_input, validate_prompt_generation_options, validate_prompt_input
)

__all__ = [
    "GeneratedPrompt",
    "GenerationResult",
    "PromptGenerationOptions",
    "SelectedTweaks",
    "TweakSuggestion",
    "ValidationResult",
    "CustomAgentNotFoundError",
    "InvalidAgentIdError",
    "PromptOpsError",
    "PromptValidationError",
    "PromptBuilderConfig",
    "build_messages",
    "build_system_prompt",
    "format_prompt_for_copy",
    "parse_generated_prompt",
    "estimate_token_impact",
    "resolve_conflicts",
    "suggest_tweaks",
    "lint_prompt_input",
    "validate_prompt_generation_options",
    "validate_prompt_input"
]
