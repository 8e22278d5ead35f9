"""Tour moderation: approve / reject pending tours from the tours page."""

import logging
from typing import Any

from tour_admin.application.services.list_controller import ListController
from tour_admin.application.services.table_renderer import PENDING_STATUS
from tour_admin.domain.entities import Record
from tour_admin.domain.exceptions import BlockedActionError
from tour_admin.infrastructure.logging.colored_logger import WorkflowLogger, WorkflowStage

logger = logging.getLogger(__name__)
wlog = WorkflowLogger("TourModeration")

MISSING_FORMAT_MESSAGE = (
    "This tour has no trip format yet. Ask the guide to choose a format "
    "before it can be approved."
)


def trip_format_of(tour: Record) -> str | None:
    value = tour.get("format")
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


_PAST_TENSE = {"approve": "approved", "reject": "rejected"}


def ensure_can_moderate(tour: Record, action: str) -> None:
    status = tour.get("status") or "draft"
    if status != PENDING_STATUS:
        raise BlockedActionError(
            action,
            f"Only pending tours can be {_PAST_TENSE[action]} (status is '{status}')",
        )


def ensure_can_approve(tour: Record) -> None:
    """Approval is blocked client-side while the trip format is missing."""
    ensure_can_moderate(tour, "approve")
    if trip_format_of(tour) is None:
        raise BlockedActionError("approve", MISSING_FORMAT_MESSAGE)


class TourModerationService:
    """Runs moderation actions through the tours page controller."""

    def __init__(self, tours: ListController):
        self._tours = tours

    async def approve(self, tour_id: str) -> dict[str, Any]:
        tour = self._tours.find(tour_id)
        try:
            ensure_can_approve(tour)
        except BlockedActionError as exc:
            wlog.step_error(WorkflowStage.MODERATE, f"Approve blocked for tour {tour_id}", error=exc)
            raise
        wlog.step_start(WorkflowStage.MODERATE, "Approving tour", id=tour_id)
        return await self._tours.update_fields(tour_id, {"status": "approved"})

    async def reject(self, tour_id: str, reason: str | None = None) -> dict[str, Any]:
        tour = self._tours.find(tour_id)
        ensure_can_moderate(tour, "reject")
        wlog.step_start(WorkflowStage.MODERATE, "Rejecting tour", id=tour_id)
        fields: dict[str, Any] = {"status": "rejected"}
        fields["rejection_reason"] = reason.strip() if reason and reason.strip() else None
        return await self._tours.update_fields(tour_id, fields)
