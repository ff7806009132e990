from ..core.models import GeneratedPrompt

from typing import Dict, List, Optional
import re

# Tested in order, first match wins
SECTION_PATTERNS :Dict[str, re.Pattern] = {
    "goal": re.compile(r"^\*?\*?Goal\*?\*?:", re.IGNORECASE),
    "context": re.compile(r"^\*?\*?Context\*?\*?:", re.IGNORECASE),
    "current_behavior": re.compile(r"^\*?\*?Current( behavior)?( \(BROKEN\))?\*?\*?:", re.IGNORECASE),
    "current_issues": re.compile(r"^\*?\*?(Current )?Issues?\*?\*?:", re.IGNORECASE),
    "expected_behavior": re.compile(r"^\*?\*?Expected( behavior)?\*?\*?:", re.IGNORECASE),
    "acceptance_criteria": re.compile(r"^\*?\*?Acceptance criteria\*?\*?:", re.IGNORECASE),
    "constraints": re.compile(r"^\*?\*?Constraints?\*?\*?:", re.IGNORECASE),
    "clarifying_questions": re.compile(r"^\*?\*?(Questions?|Clarifying questions?)\*?\*?:", re.IGNORECASE)
}

LEADING_ASTERISKS = re.compile(r"^\*+\s*")
ONLY_ASTERISKS = re.compile(r"^\*+$")
BULLET_MARKER = re.compile(r"^(?:[-*•]|\d+\.)\s*")

def match_section(line :str) -> Optional[str]:
    for section, pattern in SECTION_PATTERNS.items():
        if pattern.match(line):
            return section
    return None

def extract_bullet_points(lines :List[str]) -> List[str]:
    """
    Keep list items only, with their marker removed.

    A line is an item when it starts with `-`, `*`, `•` or `<digits>.`; lines
    made only of asterisks are formatting noise and are ignored.
    """
    bullets = []
    for line in lines:
        trimmed = line.strip()
        if not trimmed or ONLY_ASTERISKS.match(trimmed):
            continue

        if not BULLET_MARKER.match(trimmed):
            continue

        content = BULLET_MARKER.sub("", trimmed, count=1)
        content = LEADING_ASTERISKS.sub("", content, count=1).strip()
        if content and content != "*":
            bullets.append(content)

    return bullets

def _join_section_text(lines :List[str]) -> str:
    cleaned = [LEADING_ASTERISKS.sub("", line, count=1).strip() for line in lines]
    return "\n".join(line for line in cleaned if line).strip()

def _save_section(result :dict, section :str, lines :List[str]):
    if section in ("goal", "context", "expected_behavior"):
        result[section] = _join_section_text(lines)

    elif section in ("current_behavior", "current_issues"):
        text = _join_section_text(lines)
        existing = result.get("current_behavior")
        result["current_behavior"] = f"{existing}\n{text}" if existing else text

    else:
        result[section] = extract_bullet_points(lines)

def parse_generated_prompt(raw_text :str) -> GeneratedPrompt:
    """
    Turn an LLM completion into a GeneratedPrompt.

    Best effort and never raises: sections that are missing or malformed stay
    empty, and `full_prompt` always carries the untouched input.
    """
    result = {
        "goal": "",
        "acceptance_criteria": [],
        "full_prompt": raw_text
    }

    current_section = None
    current_content :List[str] = []

    for line in raw_text.split("\n"):
        matched_section = match_section(line)

        if matched_section:
            if current_section:
                _save_section(result, current_section, current_content)
            current_section = matched_section
            _, _, after_colon = line.partition(":")
            after_colon = after_colon.strip()
            current_content = [after_colon] if after_colon else []

        elif current_section:
            current_content.append(line)

    if current_section:
        _save_section(result, current_section, current_content)

    return GeneratedPrompt(**result)

def format_prompt_for_copy(prompt :GeneratedPrompt) -> str:
    """
    Render the structured prompt as copyable markdown.

    Clarifying questions are left out on purpose: they are answered through the
    question form and folded back into the input, never pasted to the agent.
    """
    sections = []

    if prompt.goal:
        sections.append(f"**Goal:** {prompt.goal}")

    if prompt.context:
        sections.append(f"**Context:** {prompt.context}")

    if prompt.current_behavior:
        sections.append(f"**Current behavior (BROKEN):**\n{prompt.current_behavior}")

    if prompt.expected_behavior:
        sections.append(f"**Expected behavior:** {prompt.expected_behavior}")

    if prompt.acceptance_criteria:
        criteria = "\n".join(f"- {criterion}" for criterion in prompt.acceptance_criteria)
        sections.append(f"**Acceptance criteria:**\n{criteria}")

    if prompt.constraints:
        constraints = "\n".join(f"- {constraint}" for constraint in prompt.constraints)
        sections.append(f"**Constraints:**\n{constraints}")

    return "\n\n".join(sections)
