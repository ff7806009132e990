from promptops.core.agent_ids import (
    BUILT_IN_AGENT_IDS, AgentRef, BuiltInAgentRef, CustomAgentRef, extract_custom_agent_uuid,
    is_built_in_agent_id, is_custom_agent_id, is_valid_custom_agent_id,
    parse_agent_id, resolve_custom_agent
)
from promptops.core.errors import CustomAgentNotFoundError, InvalidAgentIdError
from promptops.core.models import CustomAgent

from pydantic import TypeAdapter
import pytest

AGENT_UUID = "3f2b8c1e-6d4a-4b7e-9a12-5c8d7e6f1a2b"

@pytest.fixture
def custom_agent():
    return CustomAgent(id=AGENT_UUID, user_id="user-1", name="House Style")

class TestPredicates:
    """Built-in vs custom id checks"""

    @pytest.mark.parametrize("agent_id", BUILT_IN_AGENT_IDS)
    def test_built_in_ids(self, agent_id):
        assert is_built_in_agent_id(agent_id)
        assert not is_custom_agent_id(agent_id)

    def test_bare_custom_is_built_in(self):
        assert is_built_in_agent_id("custom")
        assert not is_custom_agent_id("custom")

    def test_custom_prefix(self):
        agent_id = f"custom-{AGENT_UUID}"
        assert is_custom_agent_id(agent_id)
        assert extract_custom_agent_uuid(agent_id) == AGENT_UUID
        assert is_valid_custom_agent_id(agent_id)

    def test_custom_prefix_without_uuid_is_not_valid(self):
        assert is_custom_agent_id("custom-not-a-uuid")
        assert not is_valid_custom_agent_id("custom-not-a-uuid")

    def test_extract_from_built_in_is_empty(self):
        assert extract_custom_agent_uuid("cursor") == ""

    @pytest.mark.parametrize("agent_id", [None, 7, ["custom-x"]])
    def test_non_text_is_not_custom(self, agent_id):
        assert not is_custom_agent_id(agent_id)
        assert not is_valid_custom_agent_id(agent_id)


class TestParseAgentId:

    def test_built_in(self):
        ref = parse_agent_id("claude-code")
        assert isinstance(ref, BuiltInAgentRef)
        assert ref.kind == "built-in"
        assert ref.agent_id == "claude-code"

    def test_custom(self):
        ref = parse_agent_id(f"custom-{AGENT_UUID}")
        assert isinstance(ref, CustomAgentRef)
        assert ref.uuid == AGENT_UUID
        assert ref.agent_id == f"custom-{AGENT_UUID}"

    @pytest.mark.parametrize("agent_id", ["", "chatgpt", "custom-123", "Cursor"])
    def test_invalid(self, agent_id):
        with pytest.raises(InvalidAgentIdError):
            parse_agent_id(agent_id)

    def test_invalid_is_value_error(self):
        with pytest.raises(ValueError):
            parse_agent_id("nope")

    def test_stored_ref_picks_variant_by_kind(self):
        adapter = TypeAdapter(AgentRef)
        stored = adapter.dump_python(parse_agent_id(f"custom-{AGENT_UUID}"))
        assert stored == {"kind": "custom", "uuid": AGENT_UUID}
        assert isinstance(adapter.validate_python(stored), CustomAgentRef)
        assert isinstance(adapter.validate_python({"kind": "built-in", "agent_id": "v0"}), BuiltInAgentRef)


class TestResolveCustomAgent:

    def test_single_match(self, custom_agent):
        assert resolve_custom_agent(custom_agent.agent_id, [custom_agent]) is custom_agent

    def test_match_is_case_insensitive(self, custom_agent):
        assert resolve_custom_agent(f"custom-{AGENT_UUID.upper()}", [custom_agent]) is custom_agent

    def test_no_match(self, custom_agent):
        with pytest.raises(CustomAgentNotFoundError) as exc_info:
            resolve_custom_agent("custom-00000000-0000-0000-0000-000000000000", [custom_agent])
        assert exc_info.value.matches == 0

    def test_duplicate_rows_are_rejected(self, custom_agent):
        with pytest.raises(CustomAgentNotFoundError) as exc_info:
            resolve_custom_agent(custom_agent.agent_id, [custom_agent, custom_agent.model_copy()])
        assert exc_info.value.matches == 2

    def test_built_in_id_never_resolves(self, custom_agent):
        with pytest.raises(CustomAgentNotFoundError):
            resolve_custom_agent("cursor", [custom_agent])
