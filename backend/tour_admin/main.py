"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tour_admin.application.interfaces import TagSuggester
from tour_admin.application.services import AdminConsole, CsvExporter
from tour_admin.config import Settings, get_settings
from tour_admin.infrastructure.admin_api import AdminApiClient
from tour_admin.infrastructure.logging.log_config import setup_logging
from tour_admin.infrastructure.openrouter import OpenRouterClient, OpenRouterTagSuggester
from tour_admin.infrastructure.session import AdminSession
from tour_admin.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


def _build_openrouter_client(settings: Settings) -> OpenRouterClient | None:
    """OpenRouter client, or None when no API key is configured."""
    api_key = settings.openrouter_api_key.strip()
    if not api_key:
        logger.warning("OPENROUTER_API_KEY is not configured; tag suggestions are disabled.")
        return None
    return OpenRouterClient(
        api_key=api_key,
        base_url=settings.openrouter_base_url,
        app_name=settings.openrouter_app_name,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: build the session, backend client and console."""
    settings = get_settings()
    setup_logging()

    session = AdminSession(token=settings.admin_api_token.strip() or None)
    admin_api = AdminApiClient(
        session,
        base_url=settings.admin_api_base_url,
        timeout=settings.admin_api_timeout,
    )
    openrouter = _build_openrouter_client(settings)
    tag_suggester: TagSuggester | None = None
    if openrouter is not None:
        tag_suggester = OpenRouterTagSuggester(openrouter, model=settings.tag_suggestion_model)

    console = AdminConsole(
        locations=admin_api.locations,
        tours=admin_api.tours,
        users=admin_api.users,
        tags=admin_api.tags,
        stats=admin_api.stats,
        exporter=CsvExporter(settings.export_dir),
        tag_suggester=tag_suggester,
        debounce_seconds=settings.search_debounce_seconds,
    )

    app.state.session = session
    app.state.admin_api = admin_api
    app.state.console = console
    logger.info("Admin console ready (backend %s)", settings.admin_api_base_url)

    yield

    # Shutdown
    console.close()
    await admin_api.aclose()
    if openrouter is not None:
        await openrouter.aclose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "tour_admin.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
