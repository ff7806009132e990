from .catalog import (
    ALL_TWEAKS, BEHAVIOR_TWEAKS, SKILL_TWEAKS, THINKING_LEVELS, THINKING_TWEAKS,
    TOKEN_COST_LABELS, TWEAKS_BY_ID, get_tweak_by_id, get_tweaks_by_category, is_thinking_tweak
)
from .suggestions import (
    estimate_token_impact, get_conflicting_tweaks, resolve_conflicts, suggest_tweaks,
    toggle_behavior, toggle_custom_tweak, toggle_skill, toggle_thinking, tweaks_conflict
)

__all__ = [
    "ALL_TWEAKS",
    "BEHAVIOR_TWEAKS",
    "SKILL_TWEAKS",
    "THINKING_LEVELS",
    "THINKING_TWEAKS",
    "TOKEN_COST_LABELS",
    "TWEAKS_BY_ID",
    "get_tweak_by_id",
    "get_tweaks_by_category",
    "is_thinking_tweak",
    "estimate_token_impact",
    "get_conflicting_tweaks",
    "resolve_conflicts",
    "suggest_tweaks",
    "toggle_behavior",
    "toggle_custom_tweak",
    "toggle_skill",
    "toggle_thinking",
    "tweaks_conflict"
]
