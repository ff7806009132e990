from .openai import OPENAI_GUIDELINES
from .anthropic import ANTHROPIC_GUIDELINES
from .google import GOOGLE_GUIDELINES
from .cursor import CURSOR_GUIDELINES
from .lovable import LOVABLE_GUIDELINES
from .replit import REPLIT_GUIDELINES
from .lookup import ALL_GUIDELINES, lookup_guidelines, get_provider_guideline

__all__ = [
    "OPENAI_GUIDELINES",
    "ANTHROPIC_GUIDELINES",
    "GOOGLE_GUIDELINES",
    "CURSOR_GUIDELINES",
    "LOVABLE_GUIDELINES",
    "REPLIT_GUIDELINES",
    "ALL_GUIDELINES",
    "lookup_guidelines",
    "get_provider_guideline"
]
