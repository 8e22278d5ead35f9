"""Table renderer: pure functions from (records, filters, selection) to rows.

No network access happens here; the row actions only describe which
controls a page shows for a record.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from tour_admin.domain.entities import ListSnapshot, Record, Tag

NOT_AVAILABLE = "N/A"

PENDING_STATUS = "pending"


@dataclass
class Badge:
    label: str
    tone: str  # "success" | "danger" | "warning" | "neutral" | "info"


@dataclass
class Row:
    id: str
    cells: dict[str, str]
    badges: list[Badge] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    actions: list[str] = field(default_factory=list)
    selected: bool = False


@dataclass
class TableView:
    page: str
    state: str
    columns: list[str]
    rows: list[Row]
    filters: dict[str, Any] = field(default_factory=dict)
    selected_ids: list[str] = field(default_factory=list)
    error: str | None = None
    empty_message: str | None = None


def _text(value: Any) -> str:
    if value is None or value == "":
        return NOT_AVAILABLE
    return str(value)


def _date(value: Any) -> str:
    if not value:
        return NOT_AVAILABLE
    return str(value)[:10]


def _city(record: Record) -> str:
    # tours may carry the city as a plain name instead of an inlined object
    city = record.get("city")
    if isinstance(city, str) and city:
        return city
    return record.linked_name("city") or NOT_AVAILABLE


def _tag_names(record: Record, tags_by_id: dict[str, Tag]) -> list[str]:
    names: list[str] = []
    for tag_id in record.get("tag_ids") or []:
        tag = tags_by_id.get(str(tag_id))
        if tag is not None:
            names.append(tag.name)
    for inline in record.get("tags") or []:
        if isinstance(inline, dict) and inline.get("name") and inline["name"] not in names:
            names.append(inline["name"])
    return names


# ── Locations ──────────────────────────────────────────────────────

LOCATION_COLUMNS = ["name", "city", "category", "address"]


def location_row(record: Record, selected: bool, tags_by_id: dict[str, Tag]) -> Row:
    verified = bool(record.get("verified"))
    return Row(
        id=record.id,
        cells={
            "name": _text(record.get("name")),
            "city": _city(record),
            "category": _text(record.get("category")),
            "address": _text(record.get("address")),
        },
        badges=[
            Badge("✓ Verified", "success") if verified else Badge("Unverified", "danger")
        ],
        tags=_tag_names(record, tags_by_id),
        actions=["edit", "delete"],
        selected=selected,
    )


# ── Tours ──────────────────────────────────────────────────────────

TOUR_COLUMNS = ["title", "guide", "city", "format", "created"]

_TOUR_STATUS_TONES = {
    "approved": "success",
    "published": "success",
    PENDING_STATUS: "warning",
    "rejected": "danger",
    "draft": "neutral",
}


def tour_actions(record: Record) -> list[str]:
    actions: list[str] = []
    if (record.get("status") or "draft") == PENDING_STATUS:
        actions += ["approve", "reject"]
    actions.append("delete")
    return actions


def tour_row(record: Record, selected: bool) -> Row:
    status = record.get("status") or "draft"
    return Row(
        id=record.id,
        cells={
            "title": _text(record.get("title")),
            "guide": record.linked_name("guide") or NOT_AVAILABLE,
            "city": _city(record),
            "format": _text(record.get("format")),
            "created": _date(record.get("created_at") or record.get("createdAt")),
        },
        badges=[Badge(status, _TOUR_STATUS_TONES.get(status, "neutral"))],
        actions=tour_actions(record),
        selected=selected,
    )


# ── Users ──────────────────────────────────────────────────────────

USER_COLUMNS = [
    "name",
    "email",
    "role",
    "pdf_sales",
    "guided_sales",
    "tours_created",
    "tours_generated",
    "tours_purchased",
    "created",
]

_ROLE_TONES = {"admin": "danger", "guide": "info", "creator": "info", "user": "neutral"}


def _amount(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def _sales(sales: Any, count_key: str, revenue_key: str) -> str:
    """Sales count, with the revenue appended when there is any."""
    if not isinstance(sales, dict):
        sales = {}
    count = sales.get(count_key) or 0
    revenue = _amount(sales.get(revenue_key))
    return f"{count} (${revenue:.2f})" if revenue > 0 else str(count)


def user_row(record: Record, selected: bool) -> Row:
    role = record.get("role") or "user"
    active = bool(record.get("is_active"))
    sales = record.get("sales") or {}
    creates_tours = role in ("guide", "creator")
    return Row(
        id=record.id,
        cells={
            "name": _text(record.get("name")),
            "email": _text(record.get("email")),
            "role": role,
            "pdf_sales": _sales(sales, "pdf", "pdfRevenue"),
            "guided_sales": _sales(sales, "guided", "guidedRevenue"),
            "tours_created": str(record.get("toursCreated") or 0) if creates_tours else "—",
            "tours_generated": str(record.get("toursGenerated") or 0),
            "tours_purchased": str(record.get("toursPurchased") or 0),
            "created": _date(record.get("createdAt") or record.get("created_at")),
        },
        badges=[
            Badge(role, _ROLE_TONES.get(role, "neutral")),
            Badge("Active", "success") if active else Badge("Inactive", "danger"),
        ],
        actions=["deactivate" if active else "activate", "delete"],
        selected=selected,
    )


# ── Tables ─────────────────────────────────────────────────────────

_LAYOUTS: dict[str, list[str]] = {
    "locations": LOCATION_COLUMNS + ["tags"],
    "tours": TOUR_COLUMNS,
    "users": USER_COLUMNS,
}

_EMPTY_MESSAGES = {
    "locations": "No locations found",
    "tours": "No tours found",
    "users": "No users found",
}


def render_rows(
    page: str,
    records: Iterable[Record],
    selected_ids: Iterable[str] = (),
    tags: Iterable[Tag] = (),
) -> list[Row]:
    if page not in _LAYOUTS:
        raise ValueError(f"No table layout for '{page}'")
    selected = set(selected_ids)
    tags_by_id = {tag.id: tag for tag in tags}
    rows: list[Row] = []
    for record in records:
        is_selected = record.id in selected
        if page == "locations":
            rows.append(location_row(record, is_selected, tags_by_id))
        elif page == "tours":
            rows.append(tour_row(record, is_selected))
        else:
            rows.append(user_row(record, is_selected))
    return rows


def render_table(page: str, snapshot: ListSnapshot, tags: Iterable[Tag] = ()) -> TableView:
    """Render a whole page from a controller snapshot."""
    rows = render_rows(page, snapshot.records, snapshot.selected_ids, tags)
    return TableView(
        page=page,
        state=snapshot.state.value,
        columns=list(_LAYOUTS[page]),
        rows=rows,
        filters=dict(snapshot.filters),
        selected_ids=sorted(snapshot.selected_ids),
        error=snapshot.error,
        empty_message=_EMPTY_MESSAGES[page] if not rows else None,
    )
