from ..core.models import PromptTemplate

from typing import Dict, List, Optional
import re

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")

SYSTEM_TEMPLATES :List[PromptTemplate] = [
    PromptTemplate(
        id="bug-fix",
        name="Bug Fix",
        type="bug",
        description="Template for reporting and fixing bugs",
        base_structure="""**Goal:** Fix the bug where {problem}
**Current behavior:** {current}
**Expected behavior:** {expected}
**Steps to reproduce:** {steps}
**Acceptance criteria:**
- Bug no longer occurs
- Existing tests pass
- No regressions introduced""",
        placeholders=["problem", "current", "expected", "steps"]
    ),
    PromptTemplate(
        id="new-feature",
        name="New Feature",
        type="feature",
        description="Template for implementing new features",
        base_structure="""**Goal:** Implement {feature}
**Context:** {context}
**User story:** As a {user}, I want to {action} so that {benefit}
**Acceptance criteria:**
- {criteria}
**Constraints:**
- Follow existing code patterns
- Include unit tests""",
        placeholders=["feature", "context", "user", "action", "benefit", "criteria"]
    ),
    PromptTemplate(
        id="refactor",
        name="Refactoring",
        type="refactor",
        description="Template for refactoring existing code",
        base_structure="""**Goal:** Refactor {target} to {improvement}
**Current state:** {current}
**Desired state:** {desired}
**Acceptance criteria:**
- Functionality unchanged
- All tests pass
- Code is more {quality}
**Constraints:**
- No breaking changes
- Keep the PR reviewable (minimal diff)""",
        placeholders=["target", "improvement", "current", "desired", "quality"]
    ),
    PromptTemplate(
        id="performance",
        name="Performance",
        type="performance",
        description="Template for performance improvements",
        base_structure="""**Goal:** Improve performance of {target}
**Current metrics:** {metrics}
**Target metrics:** {target_metrics}
**Suspected cause:** {cause}
**Acceptance criteria:**
- Measurable performance improvement
- No functionality regressions
- Include before/after benchmarks""",
        placeholders=["target", "metrics", "target_metrics", "cause"]
    ),
    PromptTemplate(
        id="tests",
        name="Add Tests",
        type="tests",
        description="Template for adding test coverage",
        base_structure="""**Goal:** Add test coverage for {target}
**Current coverage:** {current}
**Test scenarios:**
- {scenarios}
**Acceptance criteria:**
- All test scenarios covered
- Tests are readable and maintainable
- Edge cases included""",
        placeholders=["target", "current", "scenarios"]
    )
]

def get_system_template(template_type :str) -> Optional[PromptTemplate]:
    for template in SYSTEM_TEMPLATES:
        if template.type == template_type:
            return template
    return None

def render_template(template :PromptTemplate, values :Dict[str, str]) -> str:
    """Fill `{placeholder}` slots; placeholders without a value are left as they are."""
    return PLACEHOLDER_PATTERN.sub(
        lambda match: values.get(match.group(1), match.group(0)),
        template.base_structure
    )
