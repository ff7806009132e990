from .suggest_tweaks import suggestTweaks
from .validate_options import validateGenerationOptions, lintPromptInput
from .build_messages import buildPromptMessages
from .parse_prompt import parseGeneratedPrompt, estimateTokenImpact

__all__ = [
    "suggestTweaks",
    "validateGenerationOptions",
    "lintPromptInput",
    "buildPromptMessages",
    "parseGeneratedPrompt",
    "estimateTokenImpact"
]
