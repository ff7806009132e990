from ...core.models import GuidelinesLookupResult, ProviderGuideline
from ...core.logs import logger
from .anthropic import ANTHROPIC_GUIDELINES
from .cursor import CURSOR_GUIDELINES
from .google import GOOGLE_GUIDELINES
from .lovable import LOVABLE_GUIDELINES
from .openai import OPENAI_GUIDELINES
from .replit import REPLIT_GUIDELINES

from typing import Dict, Optional

ALL_GUIDELINES :Dict[str, ProviderGuideline] = {
    "openai": OPENAI_GUIDELINES,
    "anthropic": ANTHROPIC_GUIDELINES,
    "google": GOOGLE_GUIDELINES,
    "cursor": CURSOR_GUIDELINES,
    "lovable": LOVABLE_GUIDELINES,
    "replit": REPLIT_GUIDELINES
}

# None -> vendor publishes no guideline set, general best practices apply
PROVIDER_TO_GUIDELINE :Dict[str, Optional[str]] = {
    "openai": "openai",
    "anthropic": "anthropic",
    "groq": None,
    "ollama": None,
    "custom": None
}

AGENT_TO_GUIDELINE :Dict[str, str] = {
    "cursor": "cursor",
    "lovable": "lovable",
    "replit": "replit",
    "codex": "openai",
    "claude-code": "anthropic",
    "windsurf": "openai",
    "bolt": "openai",
    "v0": "openai",
    "aider": "openai",
    "generic": "openai",
    "custom": "openai"
}

def get_provider_guideline(provider_id :str) -> ProviderGuideline:
    return ALL_GUIDELINES[provider_id]

def lookup_guidelines(provider :str, agent :str) -> GuidelinesLookupResult:
    """
    Combine the LLM vendor's guideline set with the target agent's.

    Only meaningful for built-in agents. When both resolve to the same set the
    agent block is dropped so the instructions are not repeated.
    """
    provider_guideline_id = PROVIDER_TO_GUIDELINE.get(provider)
    if provider_guideline_id is None:
        logger.debug(f"no published guidelines for provider={provider}, using {OPENAI_GUIDELINES.id}")
        provider_guideline = OPENAI_GUIDELINES
    else:
        provider_guideline = ALL_GUIDELINES[provider_guideline_id]

    agent_guideline = ALL_GUIDELINES[AGENT_TO_GUIDELINE[agent]]
    is_distinct = agent_guideline.id != provider_guideline.id

    injections = []
    if provider_guideline.prompt_injection:
        injections.append(provider_guideline.prompt_injection)

    if is_distinct and agent_guideline.prompt_injection:
        injections.append(agent_guideline.prompt_injection)

    return GuidelinesLookupResult(
        provider=provider_guideline,
        agent=agent_guideline if is_distinct else None,
        combined_injection="\n\n".join(injections)
    )
