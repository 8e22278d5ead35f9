"""Dashboard statistics endpoint."""

from dataclasses import asdict

from fastapi import APIRouter, Depends, Query

from tour_admin.application.services import AdminConsole
from tour_admin.domain.entities import StatsPeriod
from tour_admin.infrastructure.dependencies import get_admin_console
from tour_admin.presentation.api.errors import domain_errors

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats")
async def get_stats(
    period: StatsPeriod | None = Query(None, description="Reporting window; omit for all time"),
    console: AdminConsole = Depends(get_admin_console),
) -> dict:
    """Normalized platform statistics for the landing page."""
    with domain_errors():
        stats = await console.dashboard.get_stats(period)
    return {"period": period.value if period else None, "stats": asdict(stats)}
