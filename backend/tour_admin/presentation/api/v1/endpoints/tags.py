"""Available tags endpoint."""

from fastapi import APIRouter, Depends, Query

from tour_admin.application.schemas import TagSchema
from tour_admin.application.services import AdminConsole
from tour_admin.infrastructure.dependencies import get_admin_console
from tour_admin.presentation.api.errors import domain_errors

router = APIRouter(prefix="/tags", tags=["Tags"])


@router.get("", response_model=list[TagSchema])
async def list_tags(
    refresh: bool = Query(False, description="Bypass the cached tag list"),
    console: AdminConsole = Depends(get_admin_console),
) -> list[TagSchema]:
    with domain_errors():
        tags = await (console.tags.refresh() if refresh else console.tags.load())
    return [TagSchema.model_validate(tag, from_attributes=True) for tag in tags]
