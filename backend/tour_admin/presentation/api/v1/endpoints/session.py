"""Sign-in endpoints: manage the bearer token every admin call carries."""

from fastapi import APIRouter, Depends, status

from tour_admin.application.schemas import LoginRequest
from tour_admin.infrastructure.admin_api import AdminApiClient
from tour_admin.infrastructure.dependencies import get_admin_api, get_admin_session
from tour_admin.infrastructure.session import AdminSession
from tour_admin.presentation.api.errors import domain_errors

router = APIRouter(prefix="/session", tags=["Session"])


def _session_body(session: AdminSession) -> dict:
    return {"authenticated": session.is_authenticated, "user": session.user}


@router.get("")
async def current_session(session: AdminSession = Depends(get_admin_session)) -> dict:
    return _session_body(session)


@router.post("")
async def login(
    body: LoginRequest,
    session: AdminSession = Depends(get_admin_session),
    api: AdminApiClient = Depends(get_admin_api),
) -> dict:
    """Sign in against the admin backend and keep the token for later calls."""
    with domain_errors():
        await session.login(api.http_client, api.base_url, body.email, body.password)
    return _session_body(session)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def logout(session: AdminSession = Depends(get_admin_session)) -> None:
    session.logout()
