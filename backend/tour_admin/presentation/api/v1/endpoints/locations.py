"""Locations page endpoints: list, create/edit form submit, delete, tag suggestions."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from tour_admin.application.schemas import (
    LocationFormRequest,
    TableSchema,
    TagSchema,
    TagSuggestionRequest,
)
from tour_admin.application.services import AdminConsole, DraftForm
from tour_admin.infrastructure.dependencies import get_admin_console
from tour_admin.presentation.api.errors import domain_errors
from tour_admin.presentation.api.responses import load_tags, table_response

router = APIRouter(prefix="/locations", tags=["Locations"])


async def _submit(form: DraftForm, body: LocationFormRequest) -> None:
    """Run the form; any inline error is returned with its mapped status."""
    with domain_errors():
        form.update(body.form_values())
        if not await form.submit():
            raise form.failure


@router.get("", response_model=TableSchema)
async def list_locations(
    search: str | None = Query(None, description="Free-text search"),
    console: AdminConsole = Depends(get_admin_console),
) -> TableSchema:
    """Apply the filters, load immediately and return the rendered page."""
    await load_tags(console)
    await console.locations.apply_filters({"search": search or ""})
    return table_response(console, "locations")


@router.post("", response_model=TableSchema, status_code=status.HTTP_201_CREATED)
async def create_location(
    body: LocationFormRequest,
    console: AdminConsole = Depends(get_admin_console),
) -> TableSchema:
    await load_tags(console)
    await _submit(console.location_form(), body)
    return table_response(console, "locations")


@router.put("/{location_id}", response_model=TableSchema)
async def update_location(
    location_id: str,
    body: LocationFormRequest,
    console: AdminConsole = Depends(get_admin_console),
) -> TableSchema:
    """Edit a loaded location; fields not sent keep their current values."""
    await load_tags(console)
    with domain_errors():
        await console.ensure_loaded("locations")
        form = console.location_form(location_id)
    await _submit(form, body)
    return table_response(console, "locations")


@router.delete("/{location_id}", response_model=TableSchema)
async def delete_location(
    location_id: str,
    console: AdminConsole = Depends(get_admin_console),
) -> TableSchema:
    with domain_errors():
        await console.locations.delete(location_id)
    return table_response(console, "locations")


@router.post("/tag-suggestions")
async def suggest_tags(
    body: TagSuggestionRequest,
    console: AdminConsole = Depends(get_admin_console),
) -> dict:
    """Suggest existing tags for a description; unknown names are dropped."""
    if not console.can_suggest_tags:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Tag suggestions are not configured",
        )
    await load_tags(console)
    form = console.location_form()
    with domain_errors():
        form.update(
            {
                "description": body.description,
                "recommendations": body.recommendations,
                "tag_ids": list(body.tag_ids),
            }
        )
        tags = await form.suggest_tags()
    return {
        "suggested_names": form.suggested_names,
        "tags": [TagSchema.model_validate(tag, from_attributes=True) for tag in tags],
        "error": form.error,
    }
