"""Liveness probe; answers even before the console is initialised."""

from fastapi import APIRouter

from tour_admin.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    settings = get_settings()
    return {
        "status": "ok",
        "version": settings.app_version,
        "environment": settings.app_env,
        "admin_api": {
            "base_url": settings.admin_api_base_url,
            "token_configured": bool(settings.admin_api_token.strip()),
        },
        "tag_suggestions": bool(settings.openrouter_api_key.strip()),
    }
