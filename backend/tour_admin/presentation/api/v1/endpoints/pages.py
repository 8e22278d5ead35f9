"""Endpoints shared by every list page: selection, bulk delete and CSV export."""

from fastapi import APIRouter, Depends, Query, Response

from tour_admin.application.schemas import BulkDeleteSchema, SelectionRequest
from tour_admin.application.services import AdminConsole
from tour_admin.infrastructure.dependencies import get_admin_console
from tour_admin.presentation.api.errors import domain_errors

router = APIRouter(tags=["List Pages"])


@router.post("/{page}/selection")
async def update_selection(
    page: str,
    body: SelectionRequest,
    console: AdminConsole = Depends(get_admin_console),
) -> dict:
    """Change the page's selection; ids that are not loaded are ignored."""
    with domain_errors():
        controller = console.controller(page)

    if body.mode == "clear":
        controller.clear_selection()
    elif body.mode == "all":
        controller.select_all()
    elif body.mode == "remove":
        for record_id in body.ids:
            controller.deselect(record_id)
    else:
        if body.mode == "replace":
            controller.clear_selection()
        for record_id in body.ids:
            controller.select(record_id)

    return {"page": page, "selected_ids": sorted(controller.selected_ids)}


@router.post("/{page}/bulk-delete", response_model=BulkDeleteSchema)
async def bulk_delete(
    page: str,
    console: AdminConsole = Depends(get_admin_console),
) -> BulkDeleteSchema:
    """Delete every selected record; failures are listed, the page reloads once."""
    with domain_errors():
        result = await console.controller(page).bulk_delete()
    return BulkDeleteSchema(
        requested=result.requested,
        succeeded=result.succeeded,
        failed=result.failed,
        summary=result.summary,
    )


@router.get("/{page}/export")
async def export_page(
    page: str,
    save: bool = Query(False, description="Write the file to the export directory instead"),
    console: AdminConsole = Depends(get_admin_console),
):
    """Download the records currently shown on the page as CSV."""
    with domain_errors():
        if save:
            path = console.export(page)
            return {"path": str(path)}
        filename, content = console.export_content(page)

    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
