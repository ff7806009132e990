from promptops.builder import SYSTEM_TEMPLATES, get_system_template, render_template, suggest_answer_options
from promptops.builder.questions import DEFAULT_ANSWER_OPTIONS

import pytest

def test_templates_declare_their_placeholders():
    for template in SYSTEM_TEMPLATES:
        for placeholder in template.placeholders:
            assert f"{{{placeholder}}}" in template.base_structure

def test_get_system_template():
    assert get_system_template("bug").id == "bug-fix"
    assert get_system_template("general") is None

def test_render_template_keeps_missing_placeholders():
    rendered = render_template(get_system_template("tests"), {"target": "the cart service"})
    assert rendered.startswith("**Goal:** Add test coverage for the cart service")
    assert "{current}" in rendered
    assert "{scenarios}" in rendered

@pytest.mark.parametrize("question,first_option", [
    ("What style should the modal use?", "Follow existing design patterns"),
    ("What should happen after saving?", "Keep it simple and straightforward"),
    ("How do we handle an invalid email?", "Show user-friendly error message"),
    ("Which library do you prefer?", "Use existing project dependencies"),
    ("Is speed a concern here?", "Prioritize simplicity over speed"),
    ("Is export in scope?", "Keep scope minimal"),
])
def test_answer_options_by_family(question, first_option):
    options = suggest_answer_options(question)
    assert len(options) == 3
    assert options[0] == first_option

def test_answer_options_fallback():
    assert suggest_answer_options("Is Tuesday fine?") == DEFAULT_ANSWER_OPTIONS
