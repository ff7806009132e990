from .assembler import (
    PromptBuilderConfig, build_answered_input, build_messages,
    build_system_prompt, build_tweak_instructions
)
from .parser import extract_bullet_points, format_prompt_for_copy, parse_generated_prompt
from .questions import suggest_answer_options
from .templates import SYSTEM_TEMPLATES, get_system_template, render_template

__all__ = [
    "PromptBuilderConfig",
    "build_answered_input",
    "build_messages",
    "build_system_prompt",
    "build_tweak_instructions",
    "extract_bullet_points",
    "format_prompt_for_copy",
    "parse_generated_prompt",
    "suggest_answer_options",
    "SYSTEM_TEMPLATES",
    "get_system_template",
    "render_template"
]
