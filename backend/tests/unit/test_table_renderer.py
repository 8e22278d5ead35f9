"""Unit tests for the pure table renderer."""

import pytest

from tour_admin.application.services.table_renderer import (
    NOT_AVAILABLE,
    location_row,
    render_rows,
    render_table,
    tour_actions,
    user_row,
)
from tour_admin.domain.entities import ListSnapshot, LoadState, Record, Tag


def test_location_row_shows_verification_and_tags():
    record = Record.from_payload(
        {
            "id": 1,
            "name": "Cafe X",
            "city": {"id": 2, "name": "Porto"},
            "category": "cafe",
            "verified": True,
            "tag_ids": ["7", "99"],
        }
    )

    row = location_row(record, selected=True, tags_by_id={"7": Tag("7", "Coffee")})

    assert row.cells == {
        "name": "Cafe X",
        "city": "Porto",
        "category": "cafe",
        "address": NOT_AVAILABLE,
    }
    assert row.badges[0].label == "✓ Verified"
    assert row.tags == ["Coffee"]
    assert row.selected is True
    assert row.actions == ["edit", "delete"]


def test_unverified_location_badge():
    row = location_row(Record.from_payload({"id": 1, "verified": False}), False, {})
    assert row.badges[0].label == "Unverified"


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        ("pending", ["approve", "reject", "delete"]),
        ("approved", ["delete"]),
        ("rejected", ["delete"]),
        (None, ["delete"]),
    ],
)
def test_moderation_actions_only_for_pending_tours(status, expected):
    assert tour_actions(Record.from_payload({"id": 1, "status": status})) == expected


def test_user_row_active_toggle_and_created_date():
    record = Record.from_payload(
        {
            "id": "u1",
            "email": "guide@example.com",
            "role": "guide",
            "is_active": False,
            "createdAt": "2024-05-01T10:00:00Z",
        }
    )

    row = user_row(record, selected=False)

    assert row.cells["created"] == "2024-05-01"
    assert row.cells["name"] == NOT_AVAILABLE
    assert [badge.label for badge in row.badges] == ["guide", "Inactive"]
    assert row.actions == ["activate", "delete"]


def test_render_table_empty_state():
    snapshot = ListSnapshot(
        state=LoadState.READY, records=[], filters={"search": "zzz"}, selected_ids=frozenset()
    )

    view = render_table("tours", snapshot)

    assert view.rows == []
    assert view.empty_message == "No tours found"
    assert view.state == "ready"
    assert view.filters == {"search": "zzz"}


def test_render_table_marks_selected_rows():
    records = [Record.from_payload({"id": i, "title": f"T{i}"}) for i in (1, 2)]
    snapshot = ListSnapshot(
        state=LoadState.READY, records=records, filters={}, selected_ids=frozenset({"2"})
    )

    view = render_table("tours", snapshot)

    assert [row.selected for row in view.rows] == [False, True]
    assert view.selected_ids == ["2"]
    assert view.empty_message is None


def test_unknown_page_has_no_layout():
    with pytest.raises(ValueError):
        render_rows("bookings", [])


def test_user_row_sales_and_tour_counters():
    guide = Record.from_payload(
        {
            "id": "u2",
            "role": "guide",
            "is_active": True,
            "sales": {"pdf": 3, "pdfRevenue": 29.7, "guided": 0},
            "toursCreated": 4,
            "toursPurchased": 1,
        }
    )
    customer = Record.from_payload({"id": "u3", "toursCreated": 9})

    guide_row = user_row(guide, selected=False)
    customer_row = user_row(customer, selected=False)

    assert guide_row.cells["pdf_sales"] == "3 ($29.70)"
    assert guide_row.cells["guided_sales"] == "0"
    assert guide_row.cells["tours_created"] == "4"
    assert guide_row.cells["tours_purchased"] == "1"
    assert guide_row.actions == ["deactivate", "delete"]
    assert customer_row.cells["tours_created"] == "—"
    assert customer_row.badges[1].label == "Inactive"


def test_unknown_page_is_rejected_for_empty_snapshot():
    snapshot = ListSnapshot(state=LoadState.READY, records=[], filters={}, selected_ids=frozenset())

    with pytest.raises(ValueError, match="bookings"):
        render_table("bookings", snapshot)


def test_malformed_sales_do_not_break_the_row():
    odd_revenue = Record.from_payload(
        {"id": "u4", "role": "guide", "sales": {"pdf": 2, "pdfRevenue": "n/a"}}
    )
    not_a_mapping = Record.from_payload({"id": "u5", "sales": ["pdf"]})

    assert user_row(odd_revenue, selected=False).cells["pdf_sales"] == "2"
    assert user_row(not_a_mapping, selected=False).cells["guided_sales"] == "0"
