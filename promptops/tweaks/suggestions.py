from ..core.defaults import (
    AGENT_RELEVANCE_SCORE, DEFAULT_MAX_SUGGESTIONS, KEYWORD_SCORE,
    MAX_CONFIDENCE, MIN_CONFIDENCE
)
from ..core.models import SelectedTweaks, ThinkingLevel, TweakSuggestion
from .catalog import ALL_TWEAKS, THINKING_LEVELS, TWEAKS_BY_ID

from typing import Dict, List, NamedTuple, Optional
import re

class ComplexityIndicator(NamedTuple):
    pattern :re.Pattern
    level :str
    boost :float

COMPLEXITY_INDICATORS = [
    ComplexityIndicator(re.compile(r"complex|complicated|tricky", re.IGNORECASE), "think", 0.2),
    ComplexityIndicator(re.compile(r"difficult|challenging|hard problem", re.IGNORECASE), "think-harder", 0.25),
    ComplexityIndicator(re.compile(r"critical|mission.?critical|production|enterprise", re.IGNORECASE), "ultrathink", 0.3),
    ComplexityIndicator(re.compile(r"architect|redesign|major refactor", re.IGNORECASE), "think-harder", 0.2)
]

# Per token-cost class (min %, max %) added to the request
TWEAK_COST_IMPACT = {
    "low": (5, 10),
    "medium": (15, 25),
    "high": (50, 75),
    "very-high": (100, 150)
}

THINKING_COST_IMPACT = {
    "medium": (30, 50),
    "high": (100, 150),
    "very-high": (200, 300)
}

def _cap(score :float) -> float:
    return min(round(score, 4), MAX_CONFIDENCE)

def suggest_tweaks(
        input :str,
        current_agent :Optional[str]=None,
        max_suggestions :int=DEFAULT_MAX_SUGGESTIONS) -> List[TweakSuggestion]:
    """
    Score every catalog tweak against free text and return the best matches.

    Args:
        input: Raw user request
        current_agent: Built-in agent id, adds a relevance bonus when listed on a tweak
        max_suggestions: Number of suggestions to return

    Returns:
        Suggestions ordered by confidence (ties keep catalog order).
    """
    lower_input = input.lower()
    scores :Dict[str, float] = {}
    reasons :Dict[str, List[str]] = {}

    for tweak in ALL_TWEAKS:
        score = 0.0
        tweak_reasons = []

        for keyword in dict.fromkeys(tweak.trigger_keywords or []):
            if keyword.lower() in lower_input:
                score += KEYWORD_SCORE
                if not tweak_reasons:
                    tweak_reasons.append(f'Contains "{keyword}"')

        if current_agent and current_agent in (tweak.relevant_agents or []):
            score += AGENT_RELEVANCE_SCORE
            if score > KEYWORD_SCORE:
                tweak_reasons.append(f"Optimized for {current_agent}")

        score = _cap(score)
        if score >= MIN_CONFIDENCE:
            scores[tweak.id] = score
            reasons[tweak.id] = tweak_reasons

    for indicator in COMPLEXITY_INDICATORS:
        if indicator.pattern.search(input):
            scores[indicator.level] = _cap(scores.get(indicator.level, 0.0) + indicator.boost)
            level_reasons = reasons.setdefault(indicator.level, [])
            if not level_reasons:
                level_reasons.append("Complex task detected")

    suggestions = [
        TweakSuggestion(
            tweak_id=tweak_id,
            confidence=score,
            reason=(reasons.get(tweak_id) or ["Relevant to your input"])[0]
        )
        for tweak_id, score in scores.items()
        if score >= MIN_CONFIDENCE
    ]

    # sorted() is stable, equal scores keep encounter order
    suggestions = sorted(suggestions, key=lambda suggestion: suggestion.confidence, reverse=True)
    return suggestions[:max_suggestions]

def tweaks_conflict(tweak_id_a :str, tweak_id_b :str) -> bool:
    """Symmetric even though conflicts are declared on one side only. Unknown ids never conflict."""
    tweak_a = TWEAKS_BY_ID.get(tweak_id_a)
    tweak_b = TWEAKS_BY_ID.get(tweak_id_b)

    if tweak_a is None or tweak_b is None:
        return False

    return (
        tweak_id_b in (tweak_a.conflicts_with or [])
        or tweak_id_a in (tweak_b.conflicts_with or [])
    )

def resolve_conflicts(tweak_ids :List[str]) -> List[str]:
    """
    Drop every id that conflicts with one kept earlier in the list.

    Order dependent: the first selected tweak of a conflicting pair wins, so
    resolve_conflicts([a, b]) != resolve_conflicts([b, a]) when a and b conflict.
    """
    result = []
    for tweak_id in tweak_ids:
        if not any(tweaks_conflict(tweak_id, existing_id) for existing_id in result):
            result.append(tweak_id)
    return result

def get_conflicting_tweaks(tweak_id :str) -> List[str]:
    tweak = TWEAKS_BY_ID.get(tweak_id)
    if tweak is None or not tweak.conflicts_with:
        return []
    return list(tweak.conflicts_with)

def estimate_token_impact(tweak_ids :List[str], thinking_level :Optional[str]=None) -> str:
    min_percent = 0
    max_percent = 0

    for tweak_id in tweak_ids:
        tweak = TWEAKS_BY_ID.get(tweak_id)
        if tweak is None:
            continue
        low, high = TWEAK_COST_IMPACT[tweak.token_cost]
        min_percent += low
        max_percent += high

    if thinking_level and thinking_level in THINKING_LEVELS:
        thinking_tweak = TWEAKS_BY_ID[thinking_level]
        low, high = THINKING_COST_IMPACT.get(thinking_tweak.token_cost, (0, 0))
        min_percent += low
        max_percent += high

    if min_percent == 0 and max_percent == 0:
        return "No additional cost"

    return f"+{min_percent}-{max_percent}% tokens"

# ============================================================================
# Selection handlers
# ============================================================================

def _toggle(ids :List[str], tweak_id :str) -> List[str]:
    if tweak_id in ids:
        return [existing for existing in ids if existing != tweak_id]
    return [*ids, tweak_id]

def toggle_skill(selected :SelectedTweaks, skill_id :str) -> SelectedTweaks:
    return selected.model_copy(update={"skills": _toggle(selected.skills, skill_id)})

def toggle_thinking(selected :SelectedTweaks, thinking_id :ThinkingLevel) -> SelectedTweaks:
    """Single select, picking the active level again clears it."""
    thinking = None if selected.thinking == thinking_id else thinking_id
    return selected.model_copy(update={"thinking": thinking})

def toggle_behavior(selected :SelectedTweaks, behavior_id :str) -> SelectedTweaks:
    """Adding a behavior evicts every selected behavior it conflicts with; the newcomer wins."""
    if behavior_id in selected.behaviors:
        behaviors = [existing for existing in selected.behaviors if existing != behavior_id]
    else:
        behaviors = [
            existing for existing in selected.behaviors
            if not tweaks_conflict(existing, behavior_id)
        ]
        behaviors.append(behavior_id)
    return selected.model_copy(update={"behaviors": behaviors})

def toggle_custom_tweak(selected :SelectedTweaks, custom_tweak_id :str) -> SelectedTweaks:
    return selected.model_copy(update={"custom": _toggle(selected.custom, custom_tweak_id)})
