"""Domain entity: one persisted admin record as returned by the backend."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Record:
    """A location, tour or user as listed by the admin backend.

    Records are kept as a flat mapping because each page shows a different,
    denormalized shape (e.g. ``city: {id, name}`` inlined on locations).
    """

    id: str
    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Record":
        """Build a record from a backend JSON object; the id is kept as a string."""
        raw_id = payload.get("id")
        return cls(id="" if raw_id is None else str(raw_id), data=dict(payload))

    def get(self, name: str, default: Any = None) -> Any:
        return self.data.get(name, default)

    def linked_name(self, relation: str) -> str | None:
        """Return ``data[relation]["name"]`` for an inlined relation, if any."""
        linked = self.data.get(relation)
        if isinstance(linked, dict):
            return linked.get("name") or None
        return None

    def to_dict(self) -> dict[str, Any]:
        return dict(self.data)
