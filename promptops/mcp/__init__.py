from .server import promptOpsMCPServer
from .tools import (
    suggestTweaks, validateGenerationOptions, lintPromptInput,
    buildPromptMessages, parseGeneratedPrompt, estimateTokenImpact
)

for tool in (
    suggestTweaks,
    validateGenerationOptions,
    lintPromptInput,
    buildPromptMessages,
    parseGeneratedPrompt,
    estimateTokenImpact
):
    promptOpsMCPServer.tool(tool)

__all__ = [
    "promptOpsMCPServer",
    "suggestTweaks",
    "validateGenerationOptions",
    "lintPromptInput",
    "buildPromptMessages",
    "parseGeneratedPrompt",
    "estimateTokenImpact"
]
