from .record import Record
from .tag import Tag, find_tag_by_name
from .list_state import BulkDeleteResult, ListSnapshot, LoadState
from .stats import DashboardStats, StatsPeriod
from .completion import ChatCompletionResult, ChatMessage, TokenUsage
from .resource import (
    LOCATIONS,
    RESOURCES,
    STATS,
    TAGS,
    TOURS,
    USERS,
    Operation,
    ResourceSpec,
)

__all__ = [
    "ChatCompletionResult",
    "ChatMessage",
    "TokenUsage",
    "Record",
    "Tag",
    "find_tag_by_name",
    "BulkDeleteResult",
    "ListSnapshot",
    "LoadState",
    "DashboardStats",
    "StatsPeriod",
    "LOCATIONS",
    "RESOURCES",
    "STATS",
    "TAGS",
    "TOURS",
    "USERS",
    "Operation",
    "ResourceSpec",
]
