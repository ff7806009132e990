from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, List, Literal, Optional
from datetime import datetime, timezone

PromptMode = Literal["quick", "smart-form", "wizard", "pro"]
PromptLength = Literal["short", "standard", "detailed"]
PromptStrategy = Literal["implement", "diagnose"]
InputLanguage = Literal["he", "en"]

BuiltInAgentId = Literal[
    "cursor", "lovable", "replit", "codex", "claude-code",
    "windsurf", "bolt", "v0", "aider", "generic", "custom"
]

AIProviderType = Literal["openai", "anthropic", "groq", "ollama", "custom"]
GuidelineProviderId = Literal["openai", "anthropic", "google", "cursor", "lovable", "replit"]

TweakCategory = Literal["skill", "thinking", "behavior"]
ThinkingLevel = Literal["think", "think-harder", "ultrathink"]
TokenCostLevel = Literal["low", "medium", "high", "very-high"]
CustomTweakCategory = Literal["skill", "behavior", "custom"]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ============================================================================
# Static registry entries
# ============================================================================

class AgentDialect(BaseModel):
    """Tone/structure profile for one built-in coding agent"""
    model_config = ConfigDict(frozen=True)

    id :str
    name :str
    tone :str
    structure :str
    emphasis :str
    extra_phrase :str
    output_format_notes :Optional[str]=None


class ProviderGuideline(BaseModel):
    """Prompt-engineering best practices published by a vendor or tool"""
    model_config = ConfigDict(frozen=True)

    id :GuidelineProviderId
    name :str
    documentation_url :Optional[str]=None
    principles :List[str]
    structure_rules :List[str]
    avoid :List[str]
    prompt_patterns :List[str]
    prompt_injection :Optional[str]=None
    version :Optional[str]=None


class GuidelinesLookupResult(BaseModel):
    provider :ProviderGuideline
    agent :Optional[ProviderGuideline]=None
    combined_injection :str


class TweakDefinition(BaseModel):
    """Catalog entry for a selectable prompt modifier"""
    model_config = ConfigDict(frozen=True)

    id :str
    label :str
    description :str
    category :TweakCategory
    instruction :str
    token_cost :TokenCostLevel
    trigger_keywords :Optional[List[str]]=None
    relevant_agents :Optional[List[str]]=None
    conflicts_with :Optional[List[str]]=None
    icon :Optional[str]=None


class TweakSuggestion(BaseModel):
    tweak_id :str
    confidence :float
    reason :str


class SelectedTweaks(BaseModel):
    """
    Transient tweak selection for a single generation request.

    Ids are plain strings here; `validate_selected_tweaks` checks them against the catalog.
    """
    skills :List[str]=Field(default_factory=list)
    thinking :Optional[str]=None
    behaviors :List[str]=Field(default_factory=list)
    custom :List[str]=Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.skills or self.thinking or self.behaviors or self.custom)


# ============================================================================
# User owned entities
# ============================================================================

class CreateCustomAgentRequest(BaseModel):
    name :str
    description :Optional[str]=None
    tone :Optional[str]=None
    structure_preference :Optional[str]=None
    emphasis :Optional[str]=None
    extra_phrase :Optional[str]=None
    documentation_url :Optional[str]=None
    custom_instructions :Optional[str]=None
    icon :Optional[str]=None


class UpdateCustomAgentRequest(BaseModel):
    name :Optional[str]=None
    description :Optional[str]=None
    tone :Optional[str]=None
    structure_preference :Optional[str]=None
    emphasis :Optional[str]=None
    extra_phrase :Optional[str]=None
    documentation_url :Optional[str]=None
    custom_instructions :Optional[str]=None
    icon :Optional[str]=None
    is_active :Optional[bool]=None


class CustomAgent(BaseModel):
    """User authored dialect, referenced as `custom-<uuid>`"""
    id :str
    user_id :str
    name :str
    description :Optional[str]=None
    tone :Optional[str]=None
    structure_preference :Optional[str]=None
    emphasis :Optional[str]=None
    extra_phrase :Optional[str]=None
    documentation_url :Optional[str]=None
    custom_instructions :Optional[str]=None
    icon :Optional[str]="bot"
    is_active :bool=True
    created_at :datetime=Field(default_factory=utcnow)
    updated_at :datetime=Field(default_factory=utcnow)

    @property
    def agent_id(self) -> str:
        return f"custom-{self.id}"

    def apply_update(self, update :UpdateCustomAgentRequest) -> "CustomAgent":
        """Partial update: only fields explicitly set on `update` change."""
        changes = update.model_dump(exclude_unset=True)
        if not changes:
            return self
        changes["updated_at"] = utcnow()
        return self.model_copy(update=changes)


class CreateCustomTweakRequest(BaseModel):
    name :str
    short_name :str
    instruction :str
    description :Optional[str]=None
    category :CustomTweakCategory="custom"
    icon :Optional[str]=None


class UpdateCustomTweakRequest(BaseModel):
    name :Optional[str]=None
    short_name :Optional[str]=None
    instruction :Optional[str]=None
    description :Optional[str]=None
    category :Optional[CustomTweakCategory]=None
    icon :Optional[str]=None
    is_active :Optional[bool]=None


class CustomTweak(BaseModel):
    id :str
    user_id :str
    name :str
    short_name :str
    instruction :str
    description :Optional[str]=None
    category :CustomTweakCategory="custom"
    icon :Optional[str]="sparkles"
    is_active :bool=True
    created_at :datetime=Field(default_factory=utcnow)
    updated_at :datetime=Field(default_factory=utcnow)

    def apply_update(self, update :UpdateCustomTweakRequest) -> "CustomTweak":
        changes = update.model_dump(exclude_unset=True)
        if not changes:
            return self
        changes["updated_at"] = utcnow()
        return self.model_copy(update=changes)


# ============================================================================
# Generation request / result
# ============================================================================

class PromptGenerationOptions(BaseModel):
    """
    A generation request as received from the caller.

    Enum-like fields are plain strings on purpose: membership is checked by
    `validate_prompt_generation_options` so every error can be reported at once.
    """
    input :str=""
    agent :str=""
    length :str=""
    strategy :str=""
    ask_clarifying_questions :bool=False
    project_context :Optional[str]=None
    tweaks :Optional[SelectedTweaks]=None


class GeneratedPrompt(BaseModel):
    """Best-effort structured view over an LLM completion. `full_prompt` is authoritative."""
    goal :str=""
    context :Optional[str]=None
    current_behavior :Optional[str]=None
    expected_behavior :Optional[str]=None
    acceptance_criteria :List[str]=Field(default_factory=list)
    constraints :Optional[List[str]]=None
    clarifying_questions :Optional[List[str]]=None
    full_prompt :str


class AIMessage(BaseModel):
    role :Literal["system", "user", "assistant"]
    content :str


class AICompletionRequest(BaseModel):
    messages :List[AIMessage]
    max_tokens :Optional[int]=None
    temperature :Optional[float]=None


class TokenUsage(BaseModel):
    prompt_tokens :int=0
    completion_tokens :int=0
    total_tokens :int=0


class AICompletionResponse(BaseModel):
    content :str
    finish_reason :Literal["stop", "length", "content_filter", "error"]="stop"
    usage :Optional[TokenUsage]=None


# ============================================================================
# Validation / linting
# ============================================================================

class ValidationError(BaseModel):
    field :str
    message :str


class ValidationResult(BaseModel):
    valid :bool
    errors :List[ValidationError]=Field(default_factory=list)

    @classmethod
    def from_errors(cls, errors :List[ValidationError]) -> "ValidationResult":
        return cls(valid=not errors, errors=errors)

    @property
    def first_message(self) -> Optional[str]:
        return self.errors[0].message if self.errors else None


class LinterSuggestion(BaseModel):
    type :Literal["warning", "info"]
    message :str
    field :Optional[str]=None
    auto_fix :Optional[str]=None


# ============================================================================
# Shapes owned by the persistence layer
# ============================================================================

class Tag(BaseModel):
    id :str
    name :str
    color :Optional[str]=None


class ConstraintsPreset(BaseModel):
    no_breaking_changes :Optional[bool]=None
    keep_tests_green :Optional[bool]=None
    minimal_diff :Optional[bool]=None
    follow_existing_patterns :Optional[bool]=None
    add_tests :Optional[bool]=None
    add_documentation :Optional[bool]=None
    accessibility_required :Optional[bool]=None
    i18n_required :Optional[bool]=None
    custom_constraints :Optional[List[str]]=None


class Project(BaseModel):
    id :str
    user_id :str
    name :str
    description :Optional[str]=None
    stack_summary :Optional[str]=None
    context_pack :Optional[str]=None
    dod_checklist :Optional[List[str]]=None
    default_mode :Optional[PromptMode]=None
    default_agent :Optional[str]=None
    constraints_preset :Optional[ConstraintsPreset]=None


class PromptTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    id :str
    name :str
    type :Literal["bug", "feature", "refactor", "performance", "tests", "general"]
    description :str
    base_structure :str
    placeholders :List[str]
    is_system :bool=True


class GenerationResult(BaseModel):
    prompt :GeneratedPrompt
    messages :List[AIMessage]
    usage :Optional[TokenUsage]=None
    input_language :InputLanguage="en"


class ClarifyingAnswers(BaseModel):
    """Answers keyed by question index, as collected from the answer form"""
    answers :Dict[int, str]=Field(default_factory=dict)

    @field_validator("answers", mode="after")
    @classmethod
    def drop_blank_answers(cls, answers :Dict[int, str]) -> Dict[int, str]:
        return {index: answer.strip() for index, answer in answers.items() if answer and answer.strip()}
