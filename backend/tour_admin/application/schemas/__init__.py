from .drafts import (
    LOCATION_CATEGORIES,
    USER_ROLES,
    DraftModel,
    LocationDraft,
    UserDraft,
    is_blank,
)
from .views import BadgeSchema, BulkDeleteSchema, RowSchema, TableSchema, TagSchema
from .requests import (
    LocationFormRequest,
    LoginRequest,
    RejectTourRequest,
    SelectionRequest,
    TagSuggestionRequest,
    UserFormRequest,
)

__all__ = [
    "LOCATION_CATEGORIES",
    "USER_ROLES",
    "DraftModel",
    "LocationDraft",
    "UserDraft",
    "is_blank",
    "BadgeSchema",
    "BulkDeleteSchema",
    "RowSchema",
    "TableSchema",
    "TagSchema",
    "LocationFormRequest",
    "LoginRequest",
    "RejectTourRequest",
    "SelectionRequest",
    "TagSuggestionRequest",
    "UserFormRequest",
]
