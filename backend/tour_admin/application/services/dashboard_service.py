"""Application service for the dashboard landing page statistics."""

from tour_admin.application.interfaces import ResourceClient
from tour_admin.domain.entities import DashboardStats, StatsPeriod


class DashboardService:
    def __init__(self, stats_client: ResourceClient):
        self._client = stats_client

    async def get_stats(self, period: StatsPeriod | str | None = None) -> DashboardStats:
        """Fetch ``/api/admin-stats``; no period means all-time figures."""
        if period is not None and not isinstance(period, StatsPeriod):
            period = StatsPeriod(period)
        payload = await self._client.fetch({"period": period.value if period else None})
        return DashboardStats.from_payload(payload.get("stats"))
