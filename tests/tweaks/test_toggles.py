from promptops.core.models import SelectedTweaks
from promptops.tweaks import toggle_behavior, toggle_custom_tweak, toggle_skill, toggle_thinking

def test_behavior_toggle_evicts_conflicting_selection():
    selected = SelectedTweaks(behaviors=["be-thorough", "security-focus"])
    updated = toggle_behavior(selected, "minimize-changes")
    assert "minimize-changes" in updated.behaviors
    assert "be-thorough" not in updated.behaviors
    assert updated.behaviors == ["security-focus", "minimize-changes"]

def test_behavior_toggle_uses_both_declarations():
    selected = SelectedTweaks(behaviors=["ask-questions"])
    assert toggle_behavior(selected, "minimize-changes").behaviors == ["minimize-changes"]

def test_behavior_toggle_removes_selected():
    selected = SelectedTweaks(behaviors=["explain-reasoning"])
    assert toggle_behavior(selected, "explain-reasoning").behaviors == []

def test_toggles_do_not_mutate_input():
    selected = SelectedTweaks(skills=["api-design"], behaviors=["be-thorough"])
    toggle_skill(selected, "database-design")
    toggle_behavior(selected, "minimize-changes")
    assert selected.skills == ["api-design"]
    assert selected.behaviors == ["be-thorough"]

def test_skill_toggle():
    selected = toggle_skill(SelectedTweaks(), "api-design")
    assert selected.skills == ["api-design"]
    assert toggle_skill(selected, "api-design").skills == []

def test_thinking_is_single_select():
    selected = toggle_thinking(SelectedTweaks(), "think")
    assert selected.thinking == "think"
    assert toggle_thinking(selected, "ultrathink").thinking == "ultrathink"
    assert toggle_thinking(selected, "think").thinking is None

def test_custom_toggle():
    selected = toggle_custom_tweak(SelectedTweaks(), "t1")
    assert selected.custom == ["t1"]
    assert toggle_custom_tweak(selected, "t1").custom == []
