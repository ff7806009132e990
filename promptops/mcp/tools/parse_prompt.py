from ...builder import format_prompt_for_copy, parse_generated_prompt
from ...tweaks import estimate_token_impact
from ..utils import to_json

from typing import List, Optional

def parseGeneratedPrompt(raw_text: str) -> str:
    """
    Splits a model completion into structured sections.

    Args:
        raw_text: The completion text as returned by the model

    Returns:
        JSON object with `goal`, `context`, `current_behavior`, `expected_behavior`,
        `acceptance_criteria`, `constraints`, `clarifying_questions`, `full_prompt`
        (the untouched input) and `copy_text` (markdown ready to paste into an agent).
    """
    prompt = parse_generated_prompt(raw_text)
    return to_json({
        **prompt.model_dump(mode="json"),
        "copy_text": format_prompt_for_copy(prompt)
    })

def estimateTokenImpact(tweak_ids: List[str], thinking_level: Optional[str] = None) -> str:
    """
    Estimates the extra token cost of a tweak selection.

    Args:
        tweak_ids: Selected skill and behavior ids
        thinking_level: Optional thinking level (think, think-harder, ultrathink)

    Returns:
        JSON object {"impact": "+5-10% tokens"} or {"impact": "No additional cost"}
    """
    return to_json({"impact": estimate_token_impact(tweak_ids, thinking_level)})
