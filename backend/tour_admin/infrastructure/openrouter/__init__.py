"""OpenRouter infrastructure package."""

from .openrouter_client import OpenRouterClient
from .openrouter_tag_suggester import OpenRouterTagSuggester

__all__ = ["OpenRouterClient", "OpenRouterTagSuggester"]
