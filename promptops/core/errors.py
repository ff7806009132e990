from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ValidationResult


class PromptOpsError(Exception):
    """Base class for every error raised by promptops."""


class PromptValidationError(PromptOpsError):
    """Raised when a generation request fails validation. Carries the full result."""

    def __init__(self, result: "ValidationResult"):
        self.result = result
        super().__init__(result.first_message or "Invalid input")

    @property
    def errors(self):
        return self.result.errors


class InvalidAgentIdError(PromptOpsError, ValueError):
    """Agent id is neither a built-in id nor a well formed `custom-<uuid>`."""


class CustomAgentNotFoundError(PromptOpsError, LookupError):
    """A `custom-<uuid>` reference does not resolve to exactly one agent row."""

    def __init__(self, agent_id: str, matches: int = 0):
        self.agent_id = agent_id
        self.matches = matches
        super().__init__(f"Custom agent not found: {agent_id} ({matches} matches)")
