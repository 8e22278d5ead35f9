"""Admin console: one controller per list page plus the page-level actions.

A single console lives for the whole process; the HTTP layer only
translates requests into calls on it.
"""

import logging
from pathlib import Path
from typing import Any

from tour_admin.application.interfaces import ResourceClient, TagSuggester
from tour_admin.application.schemas.drafts import LocationDraft, UserDraft
from tour_admin.application.services.csv_exporter import CsvExporter
from tour_admin.application.services.dashboard_service import DashboardService
from tour_admin.application.services.draft_form import DraftForm
from tour_admin.application.services.list_controller import (
    DEFAULT_DEBOUNCE_SECONDS,
    ListController,
)
from tour_admin.application.services.record_sorting import user_sorter
from tour_admin.application.services.table_renderer import TableView, render_table
from tour_admin.application.services.tag_catalog import TagCatalog
from tour_admin.application.services.tour_moderation import TourModerationService
from tour_admin.domain.entities import LoadState
from tour_admin.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

LIST_PAGES = ("locations", "tours", "users")


class AdminConsole:
    def __init__(
        self,
        *,
        locations: ResourceClient,
        tours: ResourceClient,
        users: ResourceClient,
        tags: ResourceClient,
        stats: ResourceClient,
        exporter: CsvExporter,
        tag_suggester: TagSuggester | None = None,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
    ):
        self.locations = ListController(locations, page="locations", debounce_seconds=debounce_seconds)
        self.tours = ListController(tours, page="tours", debounce_seconds=debounce_seconds)
        self.users = ListController(
            users, page="users", sorter=user_sorter(), debounce_seconds=debounce_seconds
        )
        self.tags = TagCatalog(tags)
        self.moderation = TourModerationService(self.tours)
        self.dashboard = DashboardService(stats)
        self._exporter = exporter
        self._tag_suggester = tag_suggester

    @property
    def can_suggest_tags(self) -> bool:
        return self._tag_suggester is not None

    def controller(self, page: str) -> ListController:
        if page not in LIST_PAGES:
            raise EntityNotFoundError("page", page)
        return getattr(self, page)

    async def ensure_loaded(self, page: str) -> ListController:
        """Mount ``page`` if it was never loaded; row actions need its records."""
        controller = self.controller(page)
        if controller.state is LoadState.IDLE:
            await controller.mount()
        return controller

    # ── Forms ──────────────────────────────────────────────────────

    def location_form(self, record_id: str | None = None) -> DraftForm:
        """Create form, or edit form pre-filled from a loaded location."""
        record = self.locations.find(record_id) if record_id is not None else None

        async def on_save(payload: dict[str, Any]) -> dict[str, Any]:
            return await self.locations.save(payload, record_id)

        return DraftForm(
            LocationDraft,
            on_save,
            record=record,
            available_tags=self.tags.tags,
            tag_suggester=self._tag_suggester,
        )

    def user_form(self) -> DraftForm:
        # the created user's temporary password comes back in form.result
        return DraftForm(
            UserDraft,
            self.users.save,
            submit_label="Create User",
            busy_label="Creating...",
        )

    # ── Row actions ────────────────────────────────────────────────

    async def toggle_user_active(self, user_id: str) -> dict[str, Any]:
        user = self.users.find(user_id)
        active = bool(user.get("is_active"))
        logger.info("Setting user %s active=%s", user_id, not active)
        return await self.users.update_fields(user_id, {"is_active": not active})

    # ── Views ──────────────────────────────────────────────────────

    def render(self, page: str) -> TableView:
        controller = self.controller(page)
        tags = self.tags.tags if page == "locations" else ()
        return render_table(page, controller.snapshot(), tags)

    def export(self, page: str) -> Path:
        """Write the records currently shown on ``page`` to a CSV file."""
        controller = self.controller(page)
        return self._exporter.export([record.to_dict() for record in controller.records], page)

    def export_content(self, page: str) -> tuple[str, str]:
        controller = self.controller(page)
        return self._exporter.build([record.to_dict() for record in controller.records], page)

    def close(self) -> None:
        for page in LIST_PAGES:
            self.controller(page).close()
