"""Users page endpoints: list with local sorting, create by email, activate, delete."""

from fastapi import APIRouter, Depends, Query, status

from tour_admin.application.schemas import TableSchema, UserFormRequest
from tour_admin.application.services import AdminConsole
from tour_admin.infrastructure.dependencies import get_admin_console
from tour_admin.presentation.api.errors import domain_errors
from tour_admin.presentation.api.responses import table_response

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=TableSchema)
async def list_users(
    search: str | None = Query(None, description="Free-text search"),
    role: str | None = Query(None, description="Role filter, or 'all'"),
    sort_by: str | None = Query(None, pattern="^(role|name|email|created)$"),
    sort_order: str | None = Query(None, pattern="^(asc|desc)$"),
    console: AdminConsole = Depends(get_admin_console),
) -> TableSchema:
    if sort_by is not None:
        console.users.sorter.set(sort_by, sort_order or "asc")
    await console.users.apply_filters({"search": search or "", "role": role or ""})
    return table_response(console, "users")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserFormRequest,
    console: AdminConsole = Depends(get_admin_console),
) -> dict:
    """Create a user by email; the response carries the temporary password."""
    form = console.user_form()
    with domain_errors():
        form.update(body.model_dump(exclude_unset=True))
        if not await form.submit():
            raise form.failure
    result = form.result or {}
    return {
        "user": result.get("user"),
        "temp_password": result.get("tempPassword"),
        "table": table_response(console, "users"),
    }


@router.patch("/{user_id}/active", response_model=TableSchema)
async def toggle_user_active(
    user_id: str,
    console: AdminConsole = Depends(get_admin_console),
) -> TableSchema:
    """Flip the user's active flag."""
    with domain_errors():
        await console.ensure_loaded("users")
        await console.toggle_user_active(user_id)
    return table_response(console, "users")


@router.delete("/{user_id}", response_model=TableSchema)
async def delete_user(
    user_id: str,
    console: AdminConsole = Depends(get_admin_console),
) -> TableSchema:
    with domain_errors():
        await console.users.delete(user_id)
    return table_response(console, "users")
