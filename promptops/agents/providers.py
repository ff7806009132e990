from ..core.defaults import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE
from ..core.models import AICompletionRequest, AICompletionResponse, AIProviderType

from abc import ABC, abstractmethod


class CompletionProvider(ABC):
    """
    Anything able to turn chat messages into one completion.

    The generator awaits `complete` exactly once per request; retries, timeouts
    and credentials are the provider's business.
    """
    name :AIProviderType="custom"
    default_max_tokens :int=DEFAULT_MAX_TOKENS
    default_temperature :float=DEFAULT_TEMPERATURE

    @abstractmethod
    async def complete(self, request :AICompletionRequest) -> AICompletionResponse:
        ...

    def resolve_request(self, request :AICompletionRequest) -> AICompletionRequest:
        """Fill missing sampling parameters with the provider defaults."""
        return request.model_copy(update={
            "max_tokens": request.max_tokens if request.max_tokens is not None else self.default_max_tokens,
            "temperature": request.temperature if request.temperature is not None else self.default_temperature
        })
