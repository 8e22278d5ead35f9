"""Unit tests for DraftForm: validation, submit lifecycle and tags."""

import asyncio

import pytest
import pytest_asyncio

from tests.fakes import FakeResourceClient, FakeTagSuggester
from tour_admin.application.schemas import LocationDraft, UserDraft
from tour_admin.application.services import DraftForm, ListController
from tour_admin.domain.entities import Record, Tag
from tour_admin.domain.exceptions import (
    ActionInProgressError,
    ApiError,
    BlockedActionError,
    ChatProviderError,
)

TAGS = [Tag("1", "Coffee"), Tag("2", "Brunch"), Tag("3", "Rooftop")]


@pytest.fixture
def client() -> FakeResourceClient:
    return FakeResourceClient("locations", [{"id": "10", "name": "Old Place"}])


@pytest_asyncio.fixture
async def controller(client: FakeResourceClient) -> ListController:
    controller = ListController(client)
    await controller.mount()
    return controller


def _location_form(controller: ListController, **kwargs) -> DraftForm:
    return DraftForm(LocationDraft, controller.save, available_tags=TAGS, **kwargs)


# ── Submit ──


@pytest.mark.asyncio
async def test_create_sends_full_payload_with_nulls(
    controller: ListController, client: FakeResourceClient
):
    form = _location_form(controller)
    form.update({"name": "Cafe X", "city_id": "c1", "category": "cafe"})

    assert await form.submit() is True

    assert client.calls_of("create") == [
        {
            "name": "Cafe X",
            "city_id": "c1",
            "address": None,
            "category": "cafe",
            "description": None,
            "recommendations": None,
            "price_level": None,
            "avg_price_usd": None,
            "website": None,
            "phone": None,
            "booking_url": None,
            "verified": True,
            "lat": None,
            "lng": None,
            "google_place_id": None,
            "tag_ids": [],
        }
    ]
    assert len(client.calls_of("list")) == 2
    assert form.is_open is False
    assert form.error is None


@pytest.mark.asyncio
async def test_blank_verified_input_defaults_to_true(
    controller: ListController, client: FakeResourceClient
):
    form = _location_form(controller)
    form.update({"name": "Cafe X", "city_id": "c1", "category": "cafe", "verified": "  "})

    assert await form.submit() is True

    assert form.error is None
    assert client.calls_of("create")[0]["verified"] is True


@pytest.mark.asyncio
async def test_missing_required_field_makes_no_call(
    controller: ListController, client: FakeResourceClient
):
    form = _location_form(controller)
    form.update({"name": "Cafe X", "city_id": "   "})

    assert await form.submit() is False

    assert client.calls_of("create") == []
    assert form.error == "Name, City, and Category are required"
    assert form.failure.fields == ["city_id", "category"]
    assert form.is_open is True


@pytest.mark.asyncio
async def test_unparseable_number_is_reported_inline(
    controller: ListController, client: FakeResourceClient
):
    form = _location_form(controller)
    form.update({"name": "Cafe X", "city_id": "c1", "category": "cafe", "price_level": "cheap"})

    assert await form.submit() is False

    assert client.calls_of("create") == []
    assert form.error.startswith("Invalid value for price_level")


@pytest.mark.asyncio
async def test_numbers_are_coerced(controller: ListController, client: FakeResourceClient):
    form = _location_form(controller)
    form.update(
        {
            "name": "Cafe X",
            "city_id": 4,
            "category": "cafe",
            "price_level": "2",
            "avg_price_usd": "12.5",
            "lat": "41.39",
            "lng": "2.17",
        }
    )

    assert await form.submit() is True

    payload = client.calls_of("create")[0]
    assert payload["city_id"] == "4"
    assert payload["price_level"] == 2
    assert payload["avg_price_usd"] == 12.5
    assert (payload["lat"], payload["lng"]) == (41.39, 2.17)


@pytest.mark.asyncio
async def test_save_failure_keeps_form_open(controller: ListController, client: FakeResourceClient):
    client.save_error = ApiError("City not found", status_code=400)
    form = _location_form(controller)
    form.update({"name": "Cafe X", "city_id": "c1", "category": "cafe"})

    assert await form.submit() is False

    assert form.is_open is True
    assert form.is_submitting is False
    assert form.error == "City not found"
    assert isinstance(form.failure, ApiError)


@pytest.mark.asyncio
async def test_edit_form_prefills_from_record(controller: ListController, client: FakeResourceClient):
    record = Record.from_payload(
        {
            "id": 10,
            "name": "Old Place",
            "city": {"id": 5, "name": "Lisbon"},
            "category": "bar",
            "verified": False,
            "tags": [{"id": 3, "name": "Rooftop"}],
        }
    )

    async def on_save(payload):
        return await controller.save(payload, record.id)

    form = _location_form(controller, record=record)

    assert form.title == "Edit Location"
    assert form.values["city_id"] == "5"
    assert form.values["tag_ids"] == ["3"]
    assert form.values["verified"] is False
    assert [tag.name for tag in form.selected_tags] == ["Rooftop"]

    form = DraftForm(LocationDraft, on_save, record=record)
    assert await form.submit() is True
    record_id, payload = client.calls_of("update")[0]
    assert record_id == "10"
    assert payload["verified"] is False


def test_unknown_field_is_rejected():
    form = DraftForm(LocationDraft, _never_called)

    with pytest.raises(KeyError):
        form.set_field("colour", "red")


async def _never_called(payload):
    raise AssertionError("on_save must not be called")


# ── Tags ──


def test_tag_add_and_remove_are_idempotent():
    form = DraftForm(LocationDraft, _never_called, available_tags=TAGS)

    assert form.add_tag("1") is True
    assert form.add_tag("1") is False
    assert form.tag_ids == ["1"]
    assert [tag.id for tag in form.addable_tags] == ["2", "3"]

    assert form.remove_tag("1") is True
    assert form.remove_tag("1") is False
    assert form.tag_ids == []


@pytest.mark.asyncio
async def test_suggestions_match_existing_tags_case_insensitively():
    suggester = FakeTagSuggester(["coffee", "Vegan", "BRUNCH"])
    form = DraftForm(LocationDraft, _never_called, available_tags=TAGS, tag_suggester=suggester)
    form.update({"description": "Specialty coffee and weekend brunch", "tag_ids": ["2"]})

    offered = await form.suggest_tags()

    assert [tag.name for tag in offered] == ["Coffee"]
    assert suggester.calls[0][0] == "Specialty coffee and weekend brunch"
    assert suggester.calls[0][1] == ["Coffee", "Brunch", "Rooftop"]

    assert form.add_suggested_tag("COFFEE") is True
    assert form.add_suggested_tag("Vegan") is False
    assert form.tag_ids == ["2", "1"]
    assert form.addable_suggestions == []


@pytest.mark.asyncio
async def test_suggestions_need_text():
    suggester = FakeTagSuggester(["coffee"])
    form = DraftForm(LocationDraft, _never_called, available_tags=TAGS, tag_suggester=suggester)

    assert form.can_suggest_tags is False
    with pytest.raises(BlockedActionError):
        await form.suggest_tags()
    assert suggester.calls == []


@pytest.mark.asyncio
async def test_suggester_failure_is_shown_inline():
    suggester = FakeTagSuggester(error=ChatProviderError("openrouter", 503, "timeout"))
    form = DraftForm(LocationDraft, _never_called, available_tags=TAGS, tag_suggester=suggester)
    form.set_field("recommendations", "Try the terrace")

    assert await form.suggest_tags() == []

    assert form.error == "Could not suggest tags: timeout"
    assert form.is_suggesting is False


# ── Users ──


@pytest.mark.asyncio
async def test_user_form_creates_by_email():
    client = FakeResourceClient("users")
    controller = ListController(client)
    form = DraftForm(UserDraft, controller.save, submit_label="Create User", busy_label="Creating...")
    form.update({"email": "guide@example.com", "role": ""})

    assert form.submit_label == "Create User"
    assert await form.submit() is True

    assert client.calls_of("create") == [
        {"email": "guide@example.com", "role": "user", "name": None, "createByEmail": True}
    ]
    assert form.result["success"] is True


@pytest.mark.asyncio
async def test_user_form_validates_email():
    form = DraftForm(UserDraft, _never_called)

    assert await form.submit() is False
    assert form.error == "Please enter email"

    form.update({"email": "not-an-email"})
    assert await form.submit() is False
    assert form.error.startswith("Invalid value for email")


@pytest.mark.asyncio
async def test_second_submit_is_rejected_while_saving():
    release = asyncio.Event()
    saved: list[dict] = []

    async def slow_save(payload):
        await release.wait()
        saved.append(payload)

    form = DraftForm(UserDraft, slow_save)
    form.set_field("email", "a@b.c")

    first = asyncio.create_task(form.submit())
    await asyncio.sleep(0)
    assert form.is_submitting is True
    assert form.submit_label == "Saving..."
    assert form.can_submit is False

    with pytest.raises(ActionInProgressError):
        await form.submit()

    release.set()
    assert await first is True
    assert len(saved) == 1


def test_cancel_closes_without_saving():
    form = DraftForm(LocationDraft, _never_called)
    form.cancel()
    assert form.is_open is False
