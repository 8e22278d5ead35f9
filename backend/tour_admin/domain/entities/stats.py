"""Domain entity for the admin dashboard statistics."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class StatsPeriod(str, Enum):
    """Reporting windows accepted by the stats endpoint."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


def _number(source: dict[str, Any], *paths: str) -> float:
    """Return the first truthy number found along dotted ``paths``, else 0."""
    for path in paths:
        value: Any = source
        for part in path.split("."):
            if not isinstance(value, dict):
                value = None
                break
            value = value.get(part)
        if value:
            try:
                return float(value)
            except (TypeError, ValueError):
                continue
    return 0.0


@dataclass
class DashboardStats:
    """Normalized counters shown on the dashboard landing page."""

    tours_total: int = 0
    tours_approved: int = 0
    tours_pending: int = 0
    tours_draft: int = 0
    tours_rejected: int = 0
    locations_total: int = 0
    locations_verified: int = 0
    users_total: int = 0
    users_guides: int = 0
    users_customers: int = 0
    users_admins: int = 0
    revenue_total: float = 0.0
    revenue_pdf: float = 0.0
    revenue_guided: float = 0.0
    sales_pdf: int = 0
    sales_guided: int = 0
    bookings_total: int = 0
    bookings_confirmed: int = 0
    bookings_pending: int = 0
    bookings_completed: int = 0
    bookings_cancelled: int = 0
    new_bookings_today: int = 0
    new_users_this_week: int = 0
    revenue_this_month: float = 0.0
    unread_notifications: int = 0
    messages_this_week: int = 0
    active_conversations: int = 0
    # conversion funnel
    funnel_visitors: int = 0
    funnel_tour_preview: int = 0
    funnel_itineraries_generated: int = 0
    funnel_full_tour_opened: int = 0

    @classmethod
    def from_payload(cls, stats: dict[str, Any] | None) -> "DashboardStats":
        """Build from the backend ``stats`` object, tolerating missing sections."""
        s = stats or {}
        return cls(
            tours_total=int(_number(s, "tours.total", "counts.tours")),
            tours_approved=int(_number(s, "tours.approved")),
            tours_pending=int(_number(s, "tours.pending")),
            tours_draft=int(_number(s, "tours.draft")),
            tours_rejected=int(_number(s, "tours.rejected")),
            locations_total=int(_number(s, "counts.locations")),
            locations_verified=int(_number(s, "locationsByVerified.verified")),
            users_total=int(_number(s, "users.total", "counts.users")),
            users_guides=int(_number(s, "users.guides", "counts.guides")),
            users_customers=int(_number(s, "users.customers")),
            users_admins=int(_number(s, "users.admins")),
            revenue_total=round(_number(s, "revenue.total"), 2),
            revenue_pdf=round(_number(s, "revenue.pdf"), 2),
            revenue_guided=round(_number(s, "revenue.guided"), 2),
            sales_pdf=int(_number(s, "sales.pdf")),
            sales_guided=int(_number(s, "sales.guided")),
            bookings_total=int(_number(s, "bookings.total")),
            bookings_confirmed=int(_number(s, "bookings.confirmed")),
            bookings_pending=int(_number(s, "bookings.pending")),
            bookings_completed=int(_number(s, "bookings.completed")),
            bookings_cancelled=int(_number(s, "bookings.cancelled")),
            new_bookings_today=int(_number(s, "activity.newBookingsToday")),
            new_users_this_week=int(_number(s, "activity.newUsersThisWeek")),
            revenue_this_month=round(
                _number(s, "activity.revenueThisMonth", "revenue.thisMonth"), 2
            ),
            unread_notifications=int(_number(s, "activity.unreadNotifications")),
            messages_this_week=int(_number(s, "activity.messagesThisWeek")),
            active_conversations=int(_number(s, "activity.activeConversations")),
            funnel_visitors=int(_number(s, "funnel.visitors")),
            funnel_tour_preview=int(_number(s, "funnel.tourPreview")),
            funnel_itineraries_generated=int(_number(s, "funnel.itinerariesGenerated")),
            funnel_full_tour_opened=int(_number(s, "funnel.fullTourOpened")),
        )
