"""Domain entity for reference tags attached to locations."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Tag:
    """A reference tag; records point to tags through their ``tag_ids`` list."""

    id: str
    name: str
    type: str | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Tag":
        return cls(
            id=str(payload.get("id", "")),
            name=str(payload.get("name", "")),
            type=payload.get("type") or None,
        )


def find_tag_by_name(tags: list[Tag], name: str) -> Tag | None:
    """Case-insensitive lookup of a tag by its display name."""
    wanted = name.strip().casefold()
    if not wanted:
        return None
    for tag in tags:
        if tag.name.strip().casefold() == wanted:
            return tag
    return None
