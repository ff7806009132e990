from promptops.tweaks import (
    ALL_TWEAKS, BEHAVIOR_TWEAKS, SKILL_TWEAKS, THINKING_LEVELS, THINKING_TWEAKS, TWEAKS_BY_ID,
    get_tweak_by_id, get_tweaks_by_category, is_thinking_tweak
)

def test_catalog_sizes():
    assert len(SKILL_TWEAKS) == 6
    assert len(THINKING_TWEAKS) == 3
    assert len(BEHAVIOR_TWEAKS) == 6
    assert len(ALL_TWEAKS) == len(TWEAKS_BY_ID) == 15

def test_categories_match_groups():
    assert get_tweaks_by_category("skill") == SKILL_TWEAKS
    assert get_tweaks_by_category("thinking") == THINKING_TWEAKS
    assert get_tweaks_by_category("behavior") == BEHAVIOR_TWEAKS

def test_conflicts_reference_catalog_ids():
    for tweak in ALL_TWEAKS:
        for conflict_id in tweak.conflicts_with or []:
            assert conflict_id in TWEAKS_BY_ID

def test_lookup():
    assert get_tweak_by_id("security-focus").label == "Security Focus"
    assert get_tweak_by_id("missing") is None

def test_thinking_levels():
    assert THINKING_LEVELS == [tweak.id for tweak in THINKING_TWEAKS]
    assert is_thinking_tweak("ultrathink")
    assert not is_thinking_tweak("be-thorough")
