"""Client-side sorting for list pages (the users page sorts locally)."""

from collections.abc import Callable
from datetime import datetime
from typing import Any

from tour_admin.domain.entities import Record

SortKey = Callable[[Record], Any]

ROLE_ORDER: dict[str, int] = {"admin": 3, "guide": 2, "creator": 2, "user": 1}


def _lower(field_name: str) -> SortKey:
    return lambda record: str(record.get(field_name) or "").lower()


def _created_timestamp(record: Record) -> float:
    raw = record.get("createdAt") or record.get("created_at")
    if not raw:
        return 0.0
    try:
        return datetime.fromisoformat(str(raw).replace("Z", "+00:00")).timestamp()
    except ValueError:
        return 0.0


USER_SORT_KEYS: dict[str, SortKey] = {
    "role": lambda record: ROLE_ORDER.get(record.get("role") or "", 0),
    "name": _lower("name"),
    "email": _lower("email"),
    "created": _created_timestamp,
}


class RecordSorter:
    """Sort state of one table: active column and direction."""

    def __init__(self, keys: dict[str, SortKey], sort_by: str, order: str = "asc"):
        if sort_by not in keys:
            raise ValueError(f"Unknown sort column '{sort_by}'")
        self._keys = keys
        self.sort_by = sort_by
        self.order = "desc" if order == "desc" else "asc"

    @property
    def columns(self) -> list[str]:
        return list(self._keys)

    def toggle(self, column: str) -> None:
        """Same column flips the direction; a new column starts ascending."""
        if column not in self._keys:
            raise ValueError(f"Unknown sort column '{column}'")
        if column == self.sort_by:
            self.order = "desc" if self.order == "asc" else "asc"
        else:
            self.sort_by = column
            self.order = "asc"

    def set(self, column: str, order: str) -> None:
        if column not in self._keys:
            raise ValueError(f"Unknown sort column '{column}'")
        self.sort_by = column
        self.order = "desc" if order == "desc" else "asc"

    def indicator(self, column: str) -> str:
        if column != self.sort_by:
            return ""
        return " ↑" if self.order == "asc" else " ↓"

    def sort(self, records: list[Record]) -> list[Record]:
        return sorted(records, key=self._keys[self.sort_by], reverse=self.order == "desc")


def user_sorter(sort_by: str = "role", order: str = "asc") -> RecordSorter:
    return RecordSorter(USER_SORT_KEYS, sort_by, order)
