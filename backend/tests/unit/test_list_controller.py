"""Unit tests for the ListController state machine."""

import asyncio

import pytest

from tests.fakes import FakeResourceClient
from tour_admin.application.services import ListController, user_sorter
from tour_admin.domain.entities import LoadState
from tour_admin.domain.exceptions import (
    ActionInProgressError,
    ApiError,
    EntityNotFoundError,
    NetworkError,
)

LOCATIONS = [
    {"id": "1", "name": "Alpha Cafe", "category": "cafe"},
    {"id": "2", "name": "Beta Bar", "category": "bar"},
    {"id": "3", "name": "Gamma Museum", "category": "museum"},
]


@pytest.fixture
def client() -> FakeResourceClient:
    return FakeResourceClient("locations", LOCATIONS)


@pytest.fixture
def controller(client: FakeResourceClient) -> ListController:
    return ListController(client, debounce_seconds=0.05)


@pytest.mark.asyncio
async def test_mount_loads_records(controller: ListController, client: FakeResourceClient):
    assert controller.state is LoadState.IDLE

    assert await controller.mount() is True

    assert controller.state is LoadState.READY
    assert [r.id for r in controller.records] == ["1", "2", "3"]
    assert client.calls_of("list") == [{}]


@pytest.mark.asyncio
async def test_typing_burst_triggers_one_load(controller: ListController, client: FakeResourceClient):
    await controller.mount()

    controller.set_filter("search", "a")
    controller.set_filter("search", "al")
    controller.set_filter("search", "alpha")
    assert controller.search_pending
    assert len(client.calls_of("list")) == 1

    await controller.wait_for_search()

    assert client.calls_of("list")[1:] == [{"search": "alpha"}]
    assert [r.id for r in controller.records] == ["1"]


@pytest.mark.asyncio
async def test_blank_filters_are_not_sent(controller: ListController, client: FakeResourceClient):
    await controller.apply_filters({"search": "  ", "category": "all"})

    assert client.calls_of("list") == [{}]


@pytest.mark.asyncio
async def test_stale_response_is_dropped(controller: ListController, client: FakeResourceClient):
    client.list_delays = [0.1, 0.0]

    slow = asyncio.create_task(controller.apply_filters({"search": "alpha"}))
    await asyncio.sleep(0)
    fast = asyncio.create_task(controller.apply_filters({"search": "beta"}))

    assert await fast is True
    assert await slow is False
    assert [r.id for r in controller.records] == ["2"]
    assert controller.state is LoadState.READY


@pytest.mark.asyncio
async def test_load_failure_sets_error_and_retry_recovers(
    controller: ListController, client: FakeResourceClient
):
    client.list_error = NetworkError("Error fetching locations")

    assert await controller.mount() is False
    assert controller.state is LoadState.ERROR
    assert controller.error == "Error fetching locations"

    client.list_error = None
    assert await controller.retry() is True
    assert controller.state is LoadState.READY
    assert controller.error is None


@pytest.mark.asyncio
async def test_selection_only_accepts_loaded_ids(controller: ListController):
    await controller.mount()

    assert controller.select("1") is True
    assert controller.select("99") is False
    assert controller.toggle_selection("2") is True
    assert controller.toggle_selection("2") is False

    assert controller.selected_ids == {"1"}


@pytest.mark.asyncio
async def test_reload_clears_selection(controller: ListController):
    await controller.mount()
    controller.select_all()
    assert controller.selected_ids == {"1", "2", "3"}

    await controller.reload()

    assert controller.selected_ids == frozenset()


@pytest.mark.asyncio
async def test_bulk_delete_settles_all_and_reloads_once(
    controller: ListController, client: FakeResourceClient
):
    await controller.mount()
    controller.select_all()
    client.fail_delete = {"2"}
    loads_before = len(client.calls_of("list"))

    result = await controller.bulk_delete()

    assert sorted(client.calls_of("delete")) == ["1", "2", "3"]
    assert len(client.calls_of("list")) == loads_before + 1
    assert result.requested == 3
    assert sorted(result.succeeded) == ["1", "3"]
    assert list(result.failed) == ["2"]
    assert result.summary == "Deleted 2 of 3 (1 failed)"
    assert [r.id for r in controller.records] == ["2"]
    assert controller.selected_ids == frozenset()
    assert controller.is_deleting_selected is False


@pytest.mark.asyncio
async def test_bulk_delete_with_empty_selection_does_nothing(
    controller: ListController, client: FakeResourceClient
):
    await controller.mount()

    result = await controller.bulk_delete()

    assert result.requested == 0
    assert client.calls_of("delete") == []
    assert len(client.calls_of("list")) == 1


@pytest.mark.asyncio
async def test_delete_is_guarded_while_in_flight(controller: ListController):
    await controller.mount()

    first = asyncio.create_task(controller.delete("1"))
    await asyncio.sleep(0)
    assert controller.deleting_id == "1"

    with pytest.raises(ActionInProgressError):
        await controller.delete("2")

    await first
    assert controller.deleting_id is None
    assert [r.id for r in controller.records] == ["2", "3"]


@pytest.mark.asyncio
async def test_save_creates_then_reloads(controller: ListController, client: FakeResourceClient):
    await controller.mount()

    await controller.save({"name": "Delta Park", "category": "park"})

    assert len(client.calls_of("create")) == 1
    assert len(client.calls_of("list")) == 2
    assert "Delta Park" in [r.get("name") for r in controller.records]
    assert controller.saving is False


@pytest.mark.asyncio
async def test_failed_save_propagates_without_reload(
    controller: ListController, client: FakeResourceClient
):
    await controller.mount()
    client.save_error = ApiError("City not found", status_code=400)

    with pytest.raises(ApiError):
        await controller.save({"name": "X"}, record_id="1")

    assert len(client.calls_of("list")) == 1
    assert controller.saving is False


@pytest.mark.asyncio
async def test_find_unknown_record(controller: ListController):
    await controller.mount()

    with pytest.raises(EntityNotFoundError):
        controller.find("42")


@pytest.mark.asyncio
async def test_close_cancels_pending_search(controller: ListController, client: FakeResourceClient):
    await controller.mount()
    controller.set_filter("search", "beta")

    controller.close()
    await asyncio.sleep(0.1)

    assert len(client.calls_of("list")) == 1
    assert await controller.reload() is False


@pytest.mark.asyncio
async def test_users_are_sorted_locally():
    client = FakeResourceClient(
        "users",
        [
            {"id": "u1", "name": "Zoe", "email": "zoe@example.com", "role": "user"},
            {"id": "u2", "name": "Adam", "email": "adam@example.com", "role": "admin"},
            {"id": "u3", "name": "Mia", "email": "mia@example.com", "role": "guide"},
        ],
    )
    controller = ListController(client, sorter=user_sorter("name"))

    await controller.mount()
    assert [r.get("name") for r in controller.records] == ["Adam", "Mia", "Zoe"]

    await controller.sort_by("name")
    assert [r.get("name") for r in controller.records] == ["Zoe", "Mia", "Adam"]
    assert controller.sorter.indicator("name") == " ↓"
