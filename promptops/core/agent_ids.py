from .errors import CustomAgentNotFoundError, InvalidAgentIdError
from .models import CustomAgent

from pydantic import BaseModel, Field
from typing import Iterable, Literal, Union
from typing_extensions import Annotated
import uuid

BUILT_IN_AGENT_IDS = [
    "cursor",
    "lovable",
    "replit",
    "codex",
    "claude-code",
    "windsurf",
    "bolt",
    "v0",
    "aider",
    "generic",
    "custom"
]

CUSTOM_AGENT_PREFIX = "custom-"


class BuiltInAgentRef(BaseModel):
    kind :Literal["built-in"]="built-in"
    agent_id :str


class CustomAgentRef(BaseModel):
    kind :Literal["custom"]="custom"
    uuid :str

    @property
    def agent_id(self) -> str:
        return f"{CUSTOM_AGENT_PREFIX}{self.uuid}"


AgentRef = Annotated[Union[BuiltInAgentRef, CustomAgentRef], Field(discriminator="kind")]


def is_built_in_agent_id(agent_id :str) -> bool:
    return agent_id in BUILT_IN_AGENT_IDS

def is_custom_agent_id(agent_id :str) -> bool:
    """The bare `custom` id is the built-in placeholder dialect, not a custom reference."""
    return isinstance(agent_id, str) and agent_id.startswith(CUSTOM_AGENT_PREFIX) and agent_id != "custom"

def extract_custom_agent_uuid(agent_id :str) -> str:
    return agent_id[len(CUSTOM_AGENT_PREFIX):] if is_custom_agent_id(agent_id) else ""

def is_valid_custom_agent_id(agent_id :str) -> bool:
    if not is_custom_agent_id(agent_id):
        return False
    try:
        uuid.UUID(extract_custom_agent_uuid(agent_id))
    except ValueError:
        return False
    return True

def parse_agent_id(agent_id :str) -> AgentRef:
    if is_built_in_agent_id(agent_id):
        return BuiltInAgentRef(agent_id=agent_id)
    if is_valid_custom_agent_id(agent_id):
        return CustomAgentRef(uuid=extract_custom_agent_uuid(agent_id))
    raise InvalidAgentIdError(f"Invalid agent id: {agent_id!r}")

def resolve_custom_agent(agent_id :str, agents :Iterable[CustomAgent]) -> CustomAgent:
    """
    Resolve a `custom-<uuid>` reference against the caller's agent rows.

    Raises:
        CustomAgentNotFoundError: unless exactly one row carries the embedded uuid.
    """
    target = extract_custom_agent_uuid(agent_id).lower()
    matches = [agent for agent in agents if agent.id.lower() == target] if target else []
    if len(matches) != 1:
        raise CustomAgentNotFoundError(agent_id, len(matches))
    return matches[0]
