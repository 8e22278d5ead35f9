"""Tours page endpoints: list, moderation and delete."""

from fastapi import APIRouter, Depends, Query

from tour_admin.application.schemas import RejectTourRequest, TableSchema
from tour_admin.application.services import AdminConsole
from tour_admin.infrastructure.dependencies import get_admin_console
from tour_admin.presentation.api.errors import domain_errors
from tour_admin.presentation.api.responses import table_response

router = APIRouter(prefix="/tours", tags=["Tours"])


@router.get("", response_model=TableSchema)
async def list_tours(
    search: str | None = Query(None, description="Free-text search"),
    status: str | None = Query(None, description="Moderation status, or 'all'"),
    console: AdminConsole = Depends(get_admin_console),
) -> TableSchema:
    await console.tours.apply_filters({"search": search or "", "status": status or ""})
    return table_response(console, "tours")


@router.post("/{tour_id}/approve", response_model=TableSchema)
async def approve_tour(
    tour_id: str,
    console: AdminConsole = Depends(get_admin_console),
) -> TableSchema:
    """Approve a pending tour; blocked while it has no trip format."""
    with domain_errors():
        await console.ensure_loaded("tours")
        await console.moderation.approve(tour_id)
    return table_response(console, "tours")


@router.post("/{tour_id}/reject", response_model=TableSchema)
async def reject_tour(
    tour_id: str,
    body: RejectTourRequest | None = None,
    console: AdminConsole = Depends(get_admin_console),
) -> TableSchema:
    with domain_errors():
        await console.ensure_loaded("tours")
        await console.moderation.reject(tour_id, body.reason if body else None)
    return table_response(console, "tours")


@router.delete("/{tour_id}", response_model=TableSchema)
async def delete_tour(
    tour_id: str,
    console: AdminConsole = Depends(get_admin_console),
) -> TableSchema:
    with domain_errors():
        await console.tours.delete(tour_id)
    return table_response(console, "tours")
