from ...core.defaults import DEFAULT_MAX_SUGGESTIONS
from ...core.agent_ids import is_built_in_agent_id
from ...tweaks import TWEAKS_BY_ID, suggest_tweaks
from ..utils import to_json

from typing import Optional

def suggestTweaks(
    input: str,
    agent: Optional[str] = None,
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS) -> str:
    """
    Suggests prompt tweaks (skills, thinking levels, behaviors) for a rough coding request.

    Args:
        input: The user's request in free text (Hebrew or English)
        agent: Optional built-in agent id (cursor, lovable, replit, codex, claude-code,
               windsurf, bolt, v0, aider, generic). Tweaks tuned for it score higher.
        max_suggestions: Maximum number of suggestions to return (default: 3)

    Returns:
        JSON list ordered by confidence, highest first:
        [
            {
                "tweak_id": "debug",
                "label": "Debugging",
                "category": "skill",
                "confidence": 0.6,
                "reason": "Contains \"bug\""
            }
        ]
    """
    current_agent = agent if agent and is_built_in_agent_id(agent) else None
    suggestions = suggest_tweaks(input, current_agent, max_suggestions)

    results = []
    for suggestion in suggestions:
        tweak = TWEAKS_BY_ID[suggestion.tweak_id]
        results.append({
            **suggestion.model_dump(),
            "label": tweak.label,
            "category": tweak.category
        })

    return to_json(results)
