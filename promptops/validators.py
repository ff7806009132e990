from .core.agent_ids import BUILT_IN_AGENT_IDS, is_valid_custom_agent_id
from .core.defaults import (
    CUSTOM_TWEAK_SHORT_NAME_MAX_LENGTH, INPUT_MAX_LENGTH, INPUT_MIN_LENGTH,
    VALID_LENGTHS, VALID_STRATEGIES
)
from .core.errors import PromptValidationError
from .core.models import (
    CreateCustomAgentRequest, CreateCustomTweakRequest, LinterSuggestion,
    PromptGenerationOptions, SelectedTweaks, UpdateCustomAgentRequest,
    UpdateCustomTweakRequest, ValidationError, ValidationResult
)
from .tweaks.catalog import THINKING_LEVELS, TWEAKS_BY_ID
from .tweaks.suggestions import tweaks_conflict

from typing import Any, List, Mapping, Union
from itertools import combinations

VAGUE_TERMS = ["improve", "fix", "make better", "enhance", "optimize"]
EXPECTATION_TERMS = ["should", "expected", "want", "need"]
CONTEXT_TERMS = ["context", "using"]

def _get(source :Any, key :str, default :Any=None) -> Any:
    """Read a field from a pydantic model or a raw request mapping."""
    if isinstance(source, Mapping):
        return source.get(key, default)
    return getattr(source, key, default)

def validate_prompt_input(input :str) -> ValidationResult:
    errors = []

    if input is not None and not isinstance(input, str):
        errors.append(ValidationError(field="input", message="Input must be text"))
    elif not input or not input.strip():
        errors.append(ValidationError(field="input", message="Input is required"))
    elif len(input) < INPUT_MIN_LENGTH:
        errors.append(ValidationError(
            field="input",
            message=f"Input must be at least {INPUT_MIN_LENGTH} characters"
        ))
    elif len(input) > INPUT_MAX_LENGTH:
        errors.append(ValidationError(
            field="input",
            message=f"Input must not exceed {INPUT_MAX_LENGTH} characters"
        ))

    return ValidationResult.from_errors(errors)

def _validate_choice(value :Any, field :str, choices :List[str], label :str) -> List[ValidationError]:
    if not value:
        return [ValidationError(field=field, message=f"{label} is required")]
    if value not in choices:
        return [ValidationError(field=field, message=f"Invalid {label.lower()} selected")]
    return []

def validate_selected_tweaks(tweaks :Union[SelectedTweaks, Mapping]) -> ValidationResult:
    """
    Check every selected id against the catalog and its category.

    Each pair of selected behaviors that conflict yields one error naming both.
    """
    errors = []
    skills = _get(tweaks, "skills") or []
    behaviors = _get(tweaks, "behaviors") or []
    thinking = _get(tweaks, "thinking")

    for skill_id in skills:
        tweak = TWEAKS_BY_ID.get(skill_id)
        if tweak is None:
            errors.append(ValidationError(field="tweaks", message=f"Unknown skill tweak: {skill_id}"))
        elif tweak.category != "skill":
            errors.append(ValidationError(field="tweaks", message=f"{tweak.label} is not a skill tweak"))

    for behavior_id in behaviors:
        tweak = TWEAKS_BY_ID.get(behavior_id)
        if tweak is None:
            errors.append(ValidationError(field="tweaks", message=f"Unknown behavior tweak: {behavior_id}"))
        elif tweak.category != "behavior":
            errors.append(ValidationError(field="tweaks", message=f"{tweak.label} is not a behavior tweak"))

    if thinking and thinking not in THINKING_LEVELS:
        errors.append(ValidationError(field="tweaks", message=f"Invalid thinking level: {thinking}"))

    for behavior_a, behavior_b in combinations(behaviors, 2):
        if tweaks_conflict(behavior_a, behavior_b):
            errors.append(ValidationError(
                field="tweaks",
                message=f"{TWEAKS_BY_ID[behavior_a].label} conflicts with {TWEAKS_BY_ID[behavior_b].label}"
            ))

    return ValidationResult.from_errors(errors)

def validate_prompt_generation_options(options :Union[PromptGenerationOptions, Mapping]) -> ValidationResult:
    """
    Validate a whole generation request.

    Errors accumulate instead of stopping at the first one; callers usually
    surface `first_message` only.
    """
    errors :List[ValidationError] = []

    errors.extend(validate_prompt_input(_get(options, "input")).errors)

    agent = _get(options, "agent")
    if not agent:
        errors.append(ValidationError(field="agent", message="Agent is required"))
    elif not isinstance(agent, str) or (agent not in BUILT_IN_AGENT_IDS and not is_valid_custom_agent_id(agent)):
        errors.append(ValidationError(field="agent", message="Invalid agent selected"))

    errors.extend(_validate_choice(_get(options, "length"), "length", VALID_LENGTHS, "Length"))
    errors.extend(_validate_choice(_get(options, "strategy"), "strategy", VALID_STRATEGIES, "Strategy"))

    tweaks = _get(options, "tweaks")
    if tweaks:
        errors.extend(validate_selected_tweaks(tweaks).errors)

    return ValidationResult.from_errors(errors)

def ensure_valid(result :ValidationResult) -> ValidationResult:
    if not result.valid:
        raise PromptValidationError(result)
    return result

def validate_custom_agent_request(request :Union[CreateCustomAgentRequest, UpdateCustomAgentRequest]) -> ValidationResult:
    errors = []
    name = request.name
    is_create = isinstance(request, CreateCustomAgentRequest)

    if (is_create or name is not None) and not (name or "").strip():
        errors.append(ValidationError(field="name", message="Agent name is required"))

    return ValidationResult.from_errors(errors)

def validate_custom_tweak_request(request :Union[CreateCustomTweakRequest, UpdateCustomTweakRequest]) -> ValidationResult:
    """On create name, short name and instruction are required; short name is bounded on both paths."""
    errors = []
    is_create = isinstance(request, CreateCustomTweakRequest)

    required = [
        ("name", "Tweak name is required"),
        ("short_name", "Short name is required"),
        ("instruction", "Instruction is required")
    ]
    for field, message in required:
        value = getattr(request, field)
        if (is_create or value is not None) and not (value or "").strip():
            errors.append(ValidationError(field=field, message=message))

    short_name = request.short_name
    if short_name and len(short_name.strip()) > CUSTOM_TWEAK_SHORT_NAME_MAX_LENGTH:
        errors.append(ValidationError(
            field="short_name",
            message=f"Short name must be {CUSTOM_TWEAK_SHORT_NAME_MAX_LENGTH} characters or less"
        ))

    return ValidationResult.from_errors(errors)

def lint_prompt_input(input :str) -> List[LinterSuggestion]:
    """Soft hints shown next to the input box. Never blocks generation."""
    suggestions = []
    lower_input = input.lower()

    if "how to" not in lower_input:
        for term in VAGUE_TERMS:
            if term in lower_input:
                suggestions.append(LinterSuggestion(
                    type="warning",
                    message=f'Consider being more specific than "{term}". What exactly should change?'
                ))
                break

    has_expected = any(term in lower_input for term in EXPECTATION_TERMS)
    if not has_expected and len(input) > 50:
        suggestions.append(LinterSuggestion(
            type="info",
            message="Consider adding what the expected behavior should be",
            field="expected"
        ))

    if len(input) < 100 and not any(term in lower_input for term in CONTEXT_TERMS):
        suggestions.append(LinterSuggestion(
            type="info",
            message="Adding tech stack or project context can improve results",
            field="context"
        ))

    return suggestions
