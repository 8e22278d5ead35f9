"""FastAPI dependency injection: hands the long-lived console objects to endpoints.

The objects are built once in the application lifespan and parked on
``app.state``; tests replace these providers through ``dependency_overrides``.
"""

from fastapi import HTTPException, Request, status

from tour_admin.application.services import AdminConsole
from tour_admin.infrastructure.admin_api import AdminApiClient
from tour_admin.infrastructure.session import AdminSession


def _state_attr(request: Request, name: str):
    value = getattr(request.app.state, name, None)
    if value is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Console is not initialised",
        )
    return value


async def get_admin_console(request: Request) -> AdminConsole:
    """Provides the process-wide AdminConsole."""
    return _state_attr(request, "console")


async def get_admin_session(request: Request) -> AdminSession:
    """Provides the session holding the admin bearer token."""
    return _state_attr(request, "session")


async def get_admin_api(request: Request) -> AdminApiClient:
    """Provides the admin backend client (used for login)."""
    return _state_attr(request, "admin_api")
