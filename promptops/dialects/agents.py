from ..core.models import AgentDialect, CustomAgent

from typing import Dict, List

AGENT_DIALECTS :Dict[str, AgentDialect] = {
    "cursor": AgentDialect(
        id="cursor",
        name="Cursor",
        tone="Technical, minimal",
        structure="Files → Changes",
        emphasis="Diff size, tests",
        extra_phrase="Keep changes minimal and focused. Reference specific file paths.",
        output_format_notes="Include file paths when relevant. Prefer small, atomic changes."
    ),
    "lovable": AgentDialect(
        id="lovable",
        name="Lovable",
        tone="UX-focused",
        structure="User story → UI",
        emphasis="Design consistency",
        extra_phrase="Match the existing UI patterns and design system.",
        output_format_notes="Focus on user experience and visual consistency."
    ),
    "replit": AgentDialect(
        id="replit",
        name="Replit",
        tone="Beginner-friendly",
        structure="Setup → Verify",
        emphasis="Environment",
        extra_phrase="Include how to run and verify the changes.",
        output_format_notes="Explain environment setup and verification steps."
    ),
    "codex": AgentDialect(
        id="codex",
        name="Codex",
        tone="Methodical",
        structure="Steps 1, 2, 3",
        emphasis="Order of operations",
        extra_phrase="First... then... finally...",
        output_format_notes="Use numbered steps and explicit ordering."
    ),
    "claude-code": AgentDialect(
        id="claude-code",
        name="Claude Code",
        tone="Thoughtful, comprehensive",
        structure="Context → Plan → Execute",
        emphasis="Understanding before action",
        extra_phrase="Think step-by-step before implementing. Understand the full context first.",
        output_format_notes="Provide reasoning, then implementation. Consider edge cases."
    ),
    "windsurf": AgentDialect(
        id="windsurf",
        name="Windsurf",
        tone="Collaborative, iterative",
        structure="Issue → Solution → Verify",
        emphasis="Multi-file changes",
        extra_phrase="Consider related files that may need updates. Work across the codebase.",
        output_format_notes="Identify all affected files upfront. Include verification steps."
    ),
    "bolt": AgentDialect(
        id="bolt",
        name="Bolt",
        tone="Fast, practical",
        structure="Goal → Implementation",
        emphasis="Working code quickly",
        extra_phrase="Focus on getting it working quickly. Iterate from there.",
        output_format_notes="Prioritize functional code. Keep it simple and direct."
    ),
    "v0": AgentDialect(
        id="v0",
        name="v0",
        tone="UI-focused, component-driven",
        structure="Component → Styling → Integration",
        emphasis="Clean, reusable components",
        extra_phrase="Generate clean, reusable UI components with modern patterns.",
        output_format_notes="Use React/Next.js patterns. Include Tailwind CSS styling."
    ),
    "aider": AgentDialect(
        id="aider",
        name="Aider",
        tone="Git-aware, diff-focused",
        structure="Changes → Commit",
        emphasis="Precise code changes",
        extra_phrase="Show precise code changes. Be ready to commit.",
        output_format_notes="Format changes as diffs when possible. Keep commits atomic."
    ),
    "generic": AgentDialect(
        id="generic",
        name="Generic (Any Agent)",
        tone="Neutral, adaptable",
        structure="Problem → Solution → Criteria",
        emphasis="Clarity and completeness",
        extra_phrase="Format for any AI coding assistant. Be clear and complete.",
        output_format_notes="Universal format that works with any AI tool."
    ),
    "custom": AgentDialect(
        id="custom",
        name="Custom Agent",
        tone="User-defined",
        structure="User-defined",
        emphasis="User-defined",
        extra_phrase="Follow the custom instructions provided.",
        output_format_notes="Apply user-defined preferences and guidelines."
    )
}

AGENT_OPTIONS :List[Dict[str, str]] = [
    {"value": dialect.id, "label": dialect.name} for dialect in AGENT_DIALECTS.values()
]

def get_agent_dialect(agent_id :str) -> AgentDialect:
    return AGENT_DIALECTS[agent_id]

def get_agent_dialect_prompt(agent_id :str) -> str:
    dialect = AGENT_DIALECTS[agent_id]
    lines = [
        f"AGENT: {dialect.name}",
        f"- Tone: {dialect.tone}",
        f"- Structure preference: {dialect.structure}",
        f"- Emphasis: {dialect.emphasis}",
        f"- Key instruction: {dialect.extra_phrase}"
    ]
    if dialect.output_format_notes:
        lines.append(f"- Output notes: {dialect.output_format_notes}")
    return "\n".join(lines)

def get_custom_agent_dialect_prompt(custom_agent :CustomAgent) -> str:
    """
    Render a user authored agent in the same shape as a built-in dialect.

    Fields left empty on the agent are omitted, never filled from the built-in table.
    """
    lines = [f"CUSTOM AGENT: {custom_agent.name}"]
    optional_lines = [
        ("Description", custom_agent.description),
        ("Tone", custom_agent.tone),
        ("Structure preference", custom_agent.structure_preference),
        ("Emphasis", custom_agent.emphasis),
        ("Key instruction", custom_agent.extra_phrase),
        ("Documentation", custom_agent.documentation_url)
    ]
    for label, value in optional_lines:
        if value and value.strip():
            lines.append(f"- {label}: {value.strip()}")

    if custom_agent.custom_instructions and custom_agent.custom_instructions.strip():
        lines.append("")
        lines.append("CUSTOM INSTRUCTIONS:")
        lines.append(custom_agent.custom_instructions.strip())

    return "\n".join(lines)
