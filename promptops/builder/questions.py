from typing import List, NamedTuple, Tuple

class AnswerFamily(NamedTuple):
    keywords :Tuple[str, ...]
    options :List[str]

# Checked in order, the first family with a keyword in the question wins
ANSWER_FAMILIES = [
    AnswerFamily(
        ("design", "style", "ui", "look"),
        ["Follow existing design patterns", "Use minimal/clean design", "Make it visually prominent"]
    ),
    AnswerFamily(
        ("behavior", "happen", "should", "work"),
        ["Keep it simple and straightforward", "Add confirmation/feedback", "Make it configurable by user"]
    ),
    AnswerFamily(
        ("error", "fail", "invalid", "edge case"),
        ["Show user-friendly error message", "Fail silently with logging", "Prevent invalid states entirely"]
    ),
    AnswerFamily(
        ("technology", "library", "framework", "approach"),
        ["Use existing project dependencies", "Keep it lightweight/vanilla", "Use industry standard solution"]
    ),
    AnswerFamily(
        ("performance", "speed", "optimize"),
        ["Prioritize simplicity over speed", "Optimize for performance", "Balance both approaches"]
    ),
    AnswerFamily(
        ("scope", "include", "feature", "additional"),
        ["Keep scope minimal", "Include related improvements", "Full implementation with extras"]
    )
]

DEFAULT_ANSWER_OPTIONS = [
    "Yes, proceed with this approach",
    "No, use an alternative",
    "Need more context to decide"
]

def suggest_answer_options(question :str) -> List[str]:
    """Three canned answers for a clarifying question, picked by keyword family."""
    lower_question = question.lower()
    for family in ANSWER_FAMILIES:
        if any(keyword in lower_question for keyword in family.keywords):
            return list(family.options)
    return list(DEFAULT_ANSWER_OPTIONS)
