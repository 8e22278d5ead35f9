"""Domain entities describing the state of one list page."""

from dataclasses import dataclass, field
from enum import Enum

from .record import Record


class LoadState(str, Enum):
    """Lifecycle states of a list page."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass
class BulkDeleteResult:
    """Outcome of a settle-all bulk delete."""

    requested: int
    succeeded: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)  # id -> error message

    @property
    def succeeded_count(self) -> int:
        return len(self.succeeded)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def summary(self) -> str:
        text = f"Deleted {self.succeeded_count} of {self.requested}"
        if self.failed:
            text += f" ({self.failed_count} failed)"
        return text


@dataclass
class ListSnapshot:
    """Read-only view of a list page at one point in time."""

    state: LoadState
    records: list[Record]
    filters: dict[str, object]
    selected_ids: frozenset[str]
    error: str | None = None
