from ...validators import lint_prompt_input, validate_prompt_generation_options
from ..utils import to_json

def validateGenerationOptions(options: dict) -> str:
    """
    Validates a prompt generation request before it is sent to a model.

    Args:
        options: Request with keys `input`, `agent`, `length` (short|standard|detailed),
                 `strategy` (implement|diagnose) and optionally `tweaks`
                 ({"skills": [...], "thinking": "...", "behaviors": [...], "custom": [...]}).

    Returns:
        JSON object {"valid": bool, "errors": [{"field": "...", "message": "..."}]}
    """
    return to_json(validate_prompt_generation_options(options))

def lintPromptInput(input: str) -> str:
    """
    Returns soft writing hints for a request (vague wording, missing expected behavior,
    missing project context). Hints never block generation.

    Returns:
        JSON list of {"type": "warning"|"info", "message": "...", "field": "..."}
    """
    return to_json(lint_prompt_input(input))
