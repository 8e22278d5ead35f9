"""List controller: state machine behind every admin list page.

Owns the Filter Set, the loaded records, the Selection Set and the busy
flags of one page. Reloads on mount, on (debounced) filter changes, on
retry and after every create/update/delete.
"""

import asyncio
import logging
from collections.abc import Mapping
from contextlib import contextmanager
from typing import Any

from tour_admin.application.interfaces import ResourceClient
from tour_admin.application.services.debounce import DebounceTimer
from tour_admin.application.services.record_sorting import RecordSorter
from tour_admin.domain.entities import BulkDeleteResult, ListSnapshot, LoadState, Record
from tour_admin.domain.exceptions import (
    ActionInProgressError,
    AuthenticationRequiredError,
    EntityNotFoundError,
    RequestError,
)
from tour_admin.domain.filters import clean_filters
from tour_admin.infrastructure.logging.colored_logger import WorkflowLogger, WorkflowStage

logger = logging.getLogger(__name__)
wlog = WorkflowLogger("ListController")

DEFAULT_DEBOUNCE_SECONDS = 0.5


class ListController:
    """Controller for one list page.

    Loads are numbered; a response that comes back after a newer load was
    started is dropped, so a slow stale search never overwrites a fresher
    result.
    """

    def __init__(
        self,
        client: ResourceClient,
        *,
        page: str | None = None,
        filters: Mapping[str, Any] | None = None,
        sorter: RecordSorter | None = None,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
    ):
        self._client = client
        self.page = page or client.resource_name
        self._filters: dict[str, Any] = dict(filters or {})
        self._sorter = sorter
        self._debounce = DebounceTimer(debounce_seconds)

        self.state = LoadState.IDLE
        self.records: list[Record] = []
        self.error: str | None = None
        self._selected: set[str] = set()

        self._load_sequence = 0
        self._closed = False

        # Busy flags
        self.deleting_id: str | None = None
        self.is_deleting_selected = False
        self.saving = False
        self._updating: set[str] = set()

    # ── State ──────────────────────────────────────────────────────

    @property
    def filters(self) -> dict[str, Any]:
        return dict(self._filters)

    @property
    def query(self) -> dict[str, str]:
        """Filters as they will be sent: blank entries omitted."""
        return clean_filters(self._filters)

    @property
    def sorter(self) -> RecordSorter | None:
        return self._sorter

    @property
    def selected_ids(self) -> frozenset[str]:
        return frozenset(self._selected)

    @property
    def loaded_ids(self) -> set[str]:
        return {record.id for record in self.records}

    @property
    def search_pending(self) -> bool:
        return self._debounce.pending

    @property
    def closed(self) -> bool:
        return self._closed

    def snapshot(self) -> ListSnapshot:
        return ListSnapshot(
            state=self.state,
            records=list(self.records),
            filters=self.filters,
            selected_ids=self.selected_ids,
            error=self.error,
        )

    def find(self, record_id: str) -> Record:
        for record in self.records:
            if record.id == record_id:
                return record
        raise EntityNotFoundError(self.page, record_id)

    # ── Loading ────────────────────────────────────────────────────

    async def mount(self) -> bool:
        """Initial load of the page."""
        return await self.reload()

    async def retry(self) -> bool:
        """User-triggered retry, normally offered from the ERROR state."""
        if self.state is not LoadState.ERROR:
            logger.debug("Retry requested for %s in state %s", self.page, self.state.value)
        return await self.reload()

    async def reload(self) -> bool:
        """Fetch the list for the current filters. Returns True when applied."""
        if self._closed:
            return False

        self._load_sequence += 1
        sequence = self._load_sequence
        query = self.query
        self.state = LoadState.LOADING
        self.error = None
        wlog.step_start(WorkflowStage.LOAD, f"Loading {self.page}", seq=sequence, filters=query)

        try:
            records = await self._client.list(query)
        except (RequestError, AuthenticationRequiredError) as exc:
            if not self._is_current(sequence):
                return False
            self.state = LoadState.ERROR
            self.error = getattr(exc, "message", None) or str(exc)
            wlog.step_error(WorkflowStage.LOAD, f"Loading {self.page} failed", error=exc)
            return False

        if not self._is_current(sequence):
            wlog.detail(f"Dropped stale {self.page} response", seq=sequence, latest=self._load_sequence)
            return False

        if self._sorter is not None:
            records = self._sorter.sort(records)
        self.records = records
        self._selected.clear()
        self.state = LoadState.READY
        wlog.step_complete(WorkflowStage.LOAD, f"{len(records)} {self.page} loaded", seq=sequence)
        return True

    def _is_current(self, sequence: int) -> bool:
        return not self._closed and sequence == self._load_sequence

    # ── Filters & sorting ──────────────────────────────────────────

    def set_filter(self, key: str, value: Any) -> None:
        """Change one filter; the reload waits for the debounce window."""
        self.set_filters({key: value})

    def set_filters(self, changes: Mapping[str, Any]) -> None:
        changed = False
        for key, value in changes.items():
            if self._filters.get(key) != value:
                self._filters[key] = value
                changed = True
        if changed and not self._closed:
            self._debounce.schedule(self.reload)

    async def apply_filters(self, changes: Mapping[str, Any]) -> bool:
        """Change filters and load immediately, skipping the debounce window."""
        for key, value in changes.items():
            self._filters[key] = value
        self._debounce.cancel()
        return await self.reload()

    async def sort_by(self, column: str, order: str | None = None) -> bool:
        """Change the sort column (toggling if repeated) and reload right away."""
        if self._sorter is None:
            raise ValueError(f"{self.page} has no sortable columns")
        if order is None:
            self._sorter.toggle(column)
        else:
            self._sorter.set(column, order)
        return await self.reload()

    async def wait_for_search(self) -> None:
        """Wait for a pending debounced reload (if any) to finish."""
        await self._debounce.wait()

    # ── Selection ──────────────────────────────────────────────────

    def select(self, record_id: str) -> bool:
        if record_id not in self.loaded_ids:
            return False
        self._selected.add(record_id)
        return True

    def deselect(self, record_id: str) -> None:
        self._selected.discard(record_id)

    def toggle_selection(self, record_id: str) -> bool:
        if record_id in self._selected:
            self._selected.discard(record_id)
            return False
        return self.select(record_id)

    def select_all(self) -> None:
        self._selected = set(self.loaded_ids)

    def clear_selection(self) -> None:
        self._selected.clear()

    # ── Mutations ──────────────────────────────────────────────────

    @contextmanager
    def _busy(self, flag: str, value: Any = True):
        if getattr(self, flag):
            raise ActionInProgressError(flag)
        setattr(self, flag, value)
        try:
            yield
        finally:
            setattr(self, flag, None if value is not True else False)

    async def save(self, draft: Mapping[str, Any], record_id: str | None = None) -> dict[str, Any]:
        """Persist a draft (create when ``record_id`` is None) and reload.

        Errors propagate to the caller (normally a DraftForm) and skip the reload.
        """
        action = "Updating" if record_id else "Creating"
        with self._busy("saving"):
            async with wlog.timed_step(WorkflowStage.SAVE, f"{action} {self.page} record", id=record_id or "new"):
                if record_id is None:
                    result = await self._client.create(draft)
                else:
                    result = await self._client.update(record_id, draft)
        await self.reload()
        return result

    async def update_fields(self, record_id: str, fields: Mapping[str, Any]) -> dict[str, Any]:
        """Send a partial update for one row (status change, active toggle) and reload."""
        if record_id in self._updating:
            raise ActionInProgressError(f"update:{record_id}")
        self._updating.add(record_id)
        try:
            async with wlog.timed_step(WorkflowStage.SAVE, f"Updating {self.page} row", id=record_id):
                result = await self._client.update(record_id, fields)
        finally:
            self._updating.discard(record_id)
        await self.reload()
        return result

    def is_updating(self, record_id: str) -> bool:
        return record_id in self._updating

    async def delete(self, record_id: str) -> dict[str, Any]:
        """Delete one record and reload; a failure propagates without reload."""
        with self._busy("deleting_id", record_id):
            async with wlog.timed_step(WorkflowStage.DELETE, f"Deleting {self.page} record", id=record_id):
                result = await self._client.delete(record_id)
        await self.reload()
        return result

    async def bulk_delete(self) -> BulkDeleteResult:
        """Delete every selected record concurrently, then reload exactly once.

        Individual failures do not stop the others; they are reported in
        the result. The reload happens whatever the outcome.
        """
        ids = sorted(self._selected)
        if not ids:
            return BulkDeleteResult(requested=0)

        with self._busy("is_deleting_selected"):
            wlog.step_start(WorkflowStage.BULK, f"Deleting {len(ids)} {self.page}")
            outcomes = await asyncio.gather(
                *(self._client.delete(record_id) for record_id in ids),
                return_exceptions=True,
            )

        result = BulkDeleteResult(requested=len(ids))
        for record_id, outcome in zip(ids, outcomes):
            if isinstance(outcome, BaseException):
                result.failed[record_id] = getattr(outcome, "message", None) or str(outcome)
            else:
                result.succeeded.append(record_id)

        if result.failed:
            wlog.step_error(WorkflowStage.BULK, result.summary)
        else:
            wlog.step_complete(WorkflowStage.BULK, result.summary)

        await self.reload()
        return result

    # ── Teardown ───────────────────────────────────────────────────

    def close(self) -> None:
        """Cancel pending timers; later responses are ignored."""
        self._closed = True
        self._debounce.cancel()
