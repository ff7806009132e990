from .generator import PromptGenerator
from .providers import CompletionProvider

__all__ = [
    "PromptGenerator",
    "CompletionProvider"
]
