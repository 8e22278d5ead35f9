"""Pydantic request schemas for the console API.

Form bodies are deliberately loose: required fields and number parsing are
checked by the draft form so the caller gets the same messages the
dashboard shows.
"""

from typing import Any

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LocationFormRequest(BaseModel):
    name: str | None = None
    city_id: str | int | None = None
    address: str | None = None
    category: str | None = None
    description: str | None = None
    recommendations: str | None = None
    price_level: str | int | None = None
    avg_price_usd: str | float | None = None
    website: str | None = None
    phone: str | None = None
    booking_url: str | None = None
    verified: bool | None = None
    lat: str | float | None = None
    lng: str | float | None = None
    google_place_id: str | None = None
    tag_ids: list[str] | None = None

    def form_values(self) -> dict[str, Any]:
        """Only the fields the caller actually sent."""
        return self.model_dump(exclude_unset=True)


class UserFormRequest(BaseModel):
    email: str | None = None
    role: str | None = None
    name: str | None = None


class TagSuggestionRequest(BaseModel):
    description: str | None = None
    recommendations: str | None = None
    tag_ids: list[str] = []


class RejectTourRequest(BaseModel):
    reason: str | None = Field(None, max_length=1000)


class SelectionRequest(BaseModel):
    ids: list[str] = []
    mode: str = Field("replace", pattern="^(replace|add|remove|clear|all)$")
