from .defaults import HEBREW_RANGE, HEBREW_RATIO_THRESHOLD

import re

HEBREW_PATTERN = re.compile(f"[{HEBREW_RANGE[0]}-{HEBREW_RANGE[1]}]")
WHITESPACE_PATTERN = re.compile(r"\s")

def detect_hebrew(text :str) -> bool:
    """
    Detect whether a significant share of the text is Hebrew.

    Args:
        text: The text to analyze

    Returns:
        True if more than 30% of the non-whitespace characters are in the Hebrew block.
    """
    if not text or not text.strip():
        return False

    hebrew_chars = len(HEBREW_PATTERN.findall(text))
    total_chars = len(WHITESPACE_PATTERN.sub("", text))

    if total_chars == 0:
        return False

    return hebrew_chars / total_chars > HEBREW_RATIO_THRESHOLD

def detect_input_language(text :str) -> str:
    """Returns 'he' for Hebrew, 'en' for English (or anything else)."""
    return "he" if detect_hebrew(text) else "en"

def contains_hebrew(text :str) -> bool:
    """True if any Hebrew character is present, regardless of ratio."""
    return HEBREW_PATTERN.search(text or "") is not None

def get_language_display_name(lang :str) -> str:
    return "Hebrew" if lang == "he" else "English"
