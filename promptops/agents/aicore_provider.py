from ..core.defaults import DEFAULT_LLM_CONFIG_PATH
from ..core.logs import logger
from ..core.models import AICompletionRequest, AICompletionResponse, AIProviderType
from .providers import CompletionProvider

try:
    from aicore.config import Config
    from aicore.llm import Llm
except ImportError as e:
    raise ImportError(
        "The 'promptops.agents.aicore_provider' module requires the 'aicore' package. "
        "Install it with: pip install promptops[agents]"
    ) from e

from typing import Optional
from pathlib import Path
import os

KNOWN_PROVIDERS = ["openai", "anthropic", "groq", "ollama"]

def init_llm(config_path :Optional[Path]=None) -> Llm:
    if config_path is None:
        config_path = Path(os.getenv("PROMPTOPS_CONFIG_PATH", DEFAULT_LLM_CONFIG_PATH))
    llm = Llm.from_config(Config.from_yaml(config_path).llm)
    return llm

def provider_type_from_name(provider_name :Optional[str]) -> AIProviderType:
    provider_name = (provider_name or "").lower()
    return provider_name if provider_name in KNOWN_PROVIDERS else "custom"


class AicoreProvider(CompletionProvider):
    """Runs completions through an aicore `Llm` built from a YAML config."""

    def __init__(self, llm :Llm):
        self.llm = llm
        self.name = provider_type_from_name(getattr(llm.config, "provider", None))

    @classmethod
    def from_config(cls, config_path :Optional[Path]=None) -> "AicoreProvider":
        return cls(init_llm(config_path))

    async def complete(self, request :AICompletionRequest) -> AICompletionResponse:
        request = self.resolve_request(request)
        system_prompt = "\n\n".join(
            message.content for message in request.messages if message.role == "system"
        )
        prompt = [message.content for message in request.messages if message.role != "system"]

        logger.debug(f"aicore completion provider={self.name} messages={len(request.messages)}")
        content = await self.llm.acomplete(
            prompt[0] if len(prompt) == 1 else prompt,
            system_prompt=system_prompt or None,
            stream=False
        )
        return AICompletionResponse(content=content)
