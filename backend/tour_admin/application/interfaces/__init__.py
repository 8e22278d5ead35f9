from .resource_client import ResourceClient
from .tag_suggester import TagSuggester

__all__ = [
    "ResourceClient",
    "TagSuggester",
]
