"""Pydantic draft models: the payloads the admin backend accepts on create/update.

A draft is edited as a plain mapping of raw form values (strings straight
from inputs) and only coerced into one of these models on submit. Every
optional field is always serialized, as ``null`` when unset, so the backend
can tell "clear this field" apart from "field not sent".
"""

from typing import Any, ClassVar

from pydantic import BaseModel, Field, field_validator

from tour_admin.domain.entities import Record

LOCATION_CATEGORIES: tuple[str, ...] = (
    "restaurant",
    "cafe",
    "bar",
    "museum",
    "park",
    "monument",
    "theater",
    "beach",
    "market",
    "shopping",
    "nightlife",
    "sports",
    "adventure",
    "wellness",
    "transport",
    "accommodation",
    "other",
)

USER_ROLES: tuple[str, ...] = ("user", "guide", "creator", "admin")


def is_blank(value: Any) -> bool:
    """True for None, empty/whitespace strings and empty collections."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


class DraftModel(BaseModel):
    """Base class for drafts: blank strings become ``None`` before validation."""

    required_fields: ClassVar[tuple[str, ...]] = ()
    required_message: ClassVar[str] = "Please fill in all required fields"

    model_config = {"extra": "ignore"}

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str):
            stripped = value.strip()
            return stripped or None
        return value

    @classmethod
    def blank_values(cls) -> dict[str, Any]:
        """Raw form values for a new, empty draft."""
        return {
            name: ([] if name == "tag_ids" else field.default)
            for name, field in cls.model_fields.items()
        }

    @classmethod
    def values_from_record(cls, record: Record) -> dict[str, Any]:
        """Raw form values pre-filled from an existing record."""
        values = cls.blank_values()
        for name in values:
            if record.get(name) is not None:
                values[name] = record.get(name)
        return values

    def to_payload(self) -> dict[str, Any]:
        """Full payload including ``null`` for every unset optional field."""
        return self.model_dump(mode="json")


class LocationDraft(DraftModel):
    """Payload for POST/PUT ``/api/admin-locations``."""

    required_fields: ClassVar[tuple[str, ...]] = ("name", "city_id", "category")
    required_message: ClassVar[str] = "Name, City, and Category are required"

    name: str | None = None
    city_id: str | None = None
    address: str | None = None
    category: str | None = None
    description: str | None = None
    recommendations: str | None = None
    price_level: int | None = None
    avg_price_usd: float | None = None
    website: str | None = None
    phone: str | None = None
    booking_url: str | None = None
    verified: bool = True
    lat: float | None = None
    lng: float | None = None
    google_place_id: str | None = None
    tag_ids: list[str] = Field(default_factory=list)

    @field_validator("category")
    @classmethod
    def _known_category(cls, value: str | None) -> str | None:
        if value is not None and value not in LOCATION_CATEGORIES:
            raise ValueError(f"unknown category '{value}'")
        return value

    @field_validator("verified", mode="before")
    @classmethod
    def _verified_default(cls, value: Any) -> Any:
        # runs before the blank-to-None hook of the base class
        if value is None or (isinstance(value, str) and not value.strip()):
            return True
        return value

    @field_validator("city_id", mode="before")
    @classmethod
    def _city_id_as_string(cls, value: Any) -> Any:
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator("tag_ids", mode="before")
    @classmethod
    def _tag_ids_as_strings(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, (list, tuple, set)):
            return [str(item) for item in value]
        return value

    @classmethod
    def values_from_record(cls, record: Record) -> dict[str, Any]:
        values = super().values_from_record(record)
        if values.get("city_id") is None:
            city = record.get("city")
            if isinstance(city, dict) and city.get("id") is not None:
                values["city_id"] = str(city["id"])
        if not values.get("tag_ids"):
            tags = record.get("tags") or []
            values["tag_ids"] = [
                str(t["id"]) for t in tags if isinstance(t, dict) and t.get("id") is not None
            ]
        values["verified"] = bool(record.get("verified", False))
        return values


class UserDraft(DraftModel):
    """Payload for POST ``/api/admin-users``: creates a user by email."""

    required_fields: ClassVar[tuple[str, ...]] = ("email",)
    required_message: ClassVar[str] = "Please enter email"

    email: str | None = None
    role: str = "user"
    name: str | None = None

    @field_validator("email")
    @classmethod
    def _looks_like_email(cls, value: str | None) -> str | None:
        if value is not None and "@" not in value:
            raise ValueError("invalid email address")
        return value

    @field_validator("role", mode="before")
    @classmethod
    def _known_role(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return "user"
        value = str(value).strip()
        if value not in USER_ROLES:
            raise ValueError(f"unknown role '{value}'")
        return value

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload["createByEmail"] = True
        return payload
