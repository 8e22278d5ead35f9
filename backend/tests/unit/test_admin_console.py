"""Unit tests for the AdminConsole page wiring."""

from datetime import date

import pytest

from tests.fakes import FakeResourceClient, FakeTagSuggester
from tour_admin.application.services import AdminConsole, CsvExporter
from tour_admin.domain.entities import LoadState
from tour_admin.domain.exceptions import EntityNotFoundError, NoDataToExportError


def _console(tmp_path, **clients) -> AdminConsole:
    defaults = {
        "locations": FakeResourceClient(
            "locations",
            [{"id": "1", "name": "Cafe X", "category": "cafe", "tag_ids": ["t1"]}],
        ),
        "tours": FakeResourceClient("tours"),
        "users": FakeResourceClient(
            "users", [{"id": "u1", "email": "a@b.c", "role": "user", "is_active": True}]
        ),
        "tags": FakeResourceClient(
            "tags", [{"id": "t2", "name": "brunch"}, {"id": "t1", "name": "Coffee"}]
        ),
        "stats": FakeResourceClient("stats", payload={"stats": {}}),
    }
    defaults.update(clients)
    return AdminConsole(
        exporter=CsvExporter(tmp_path, today=lambda: date(2024, 1, 2)),
        tag_suggester=FakeTagSuggester(["coffee"]),
        debounce_seconds=0.01,
        **defaults,
    )


@pytest.mark.asyncio
async def test_render_locations_with_tag_names(tmp_path):
    console = _console(tmp_path)

    tags = await console.tags.load()
    await console.locations.mount()
    view = console.render("locations")

    assert [tag.name for tag in tags] == ["brunch", "Coffee"]
    assert view.rows[0].tags == ["Coffee"]
    assert view.state == "ready"


@pytest.mark.asyncio
async def test_tags_are_fetched_once(tmp_path):
    tags_client = FakeResourceClient("tags", [{"id": "t1", "name": "Coffee"}])
    console = _console(tmp_path, tags=tags_client)

    await console.tags.load()
    await console.tags.load()
    assert len(tags_client.calls_of("list")) == 1

    await console.tags.refresh()
    assert len(tags_client.calls_of("list")) == 2


@pytest.mark.asyncio
async def test_location_form_saves_through_page_controller(tmp_path):
    locations = FakeResourceClient("locations", [{"id": "1", "name": "Cafe X", "category": "cafe"}])
    console = _console(tmp_path, locations=locations)
    await console.ensure_loaded("locations")

    form = console.location_form("1")
    form.set_field("city_id", "c9")

    assert await form.submit() is True
    assert locations.calls_of("update")[0][0] == "1"
    assert console.locations.records[0].get("city_id") == "c9"


@pytest.mark.asyncio
async def test_toggle_user_active(tmp_path):
    users = FakeResourceClient("users", [{"id": "u1", "email": "a@b.c", "is_active": True}])
    console = _console(tmp_path, users=users)
    await console.ensure_loaded("users")

    await console.toggle_user_active("u1")
    await console.toggle_user_active("u1")

    assert [fields for _, fields in users.calls_of("update")] == [
        {"is_active": False},
        {"is_active": True},
    ]


@pytest.mark.asyncio
async def test_ensure_loaded_mounts_once(tmp_path):
    tours = FakeResourceClient("tours")
    console = _console(tmp_path, tours=tours)

    await console.ensure_loaded("tours")
    await console.ensure_loaded("tours")

    assert console.tours.state is LoadState.READY
    assert len(tours.calls_of("list")) == 1


@pytest.mark.asyncio
async def test_export_shown_records(tmp_path):
    console = _console(tmp_path)
    await console.users.mount()

    path = console.export("users")

    assert path == tmp_path / "users_2024-01-02.csv"
    with pytest.raises(NoDataToExportError):
        console.export("tours")


def test_unknown_page(tmp_path):
    with pytest.raises(EntityNotFoundError):
        _console(tmp_path).controller("bookings")
