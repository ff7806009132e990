from .agents import (
    AGENT_DIALECTS, AGENT_OPTIONS, get_agent_dialect,
    get_agent_dialect_prompt, get_custom_agent_dialect_prompt
)
from .guidelines import ALL_GUIDELINES, get_provider_guideline, lookup_guidelines

__all__ = [
    "AGENT_DIALECTS",
    "AGENT_OPTIONS",
    "get_agent_dialect",
    "get_agent_dialect_prompt",
    "get_custom_agent_dialect_prompt",
    "ALL_GUIDELINES",
    "get_provider_guideline",
    "lookup_guidelines"
]
