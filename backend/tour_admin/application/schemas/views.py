"""Pydantic response schemas for rendered list pages."""

from typing import Any

from pydantic import BaseModel


class BadgeSchema(BaseModel):
    label: str
    tone: str

    model_config = {"from_attributes": True}


class RowSchema(BaseModel):
    id: str
    cells: dict[str, str]
    badges: list[BadgeSchema] = []
    tags: list[str] = []
    actions: list[str] = []
    selected: bool = False

    model_config = {"from_attributes": True}


class TableSchema(BaseModel):
    """One rendered list page as returned by the console API."""

    page: str
    state: str
    columns: list[str]
    rows: list[RowSchema]
    filters: dict[str, Any] = {}
    selected_ids: list[str] = []
    error: str | None = None
    empty_message: str | None = None

    model_config = {"from_attributes": True}


class BulkDeleteSchema(BaseModel):
    requested: int
    succeeded: list[str]
    failed: dict[str, str]
    summary: str

    model_config = {"from_attributes": True}


class TagSchema(BaseModel):
    id: str
    name: str
    type: str | None = None

    model_config = {"from_attributes": True}
