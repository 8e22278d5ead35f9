"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from tour_admin.presentation.api.v1.endpoints.health import router as health_router
from tour_admin.presentation.api.v1.endpoints.session import router as session_router
from tour_admin.presentation.api.v1.endpoints.dashboard import router as dashboard_router
from tour_admin.presentation.api.v1.endpoints.tags import router as tags_router
from tour_admin.presentation.api.v1.endpoints.locations import router as locations_router
from tour_admin.presentation.api.v1.endpoints.tours import router as tours_router
from tour_admin.presentation.api.v1.endpoints.users import router as users_router
from tour_admin.presentation.api.v1.endpoints.pages import router as pages_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(session_router)
router.include_router(dashboard_router)
router.include_router(tags_router)
router.include_router(locations_router)
router.include_router(tours_router)
router.include_router(users_router)
# generic /{page}/... routes go last so they never shadow a page's own routes
router.include_router(pages_router)
