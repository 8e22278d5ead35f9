"""Domain description of the admin backend resources and what each one offers."""

from dataclasses import dataclass
from enum import Enum


class Operation(str, Enum):
    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class ResourceSpec:
    """Endpoint path, payload keys and supported operations of one resource."""

    name: str
    path: str
    collection_key: str
    item_key: str | None
    label: str
    operations: frozenset[Operation]

    def supports(self, operation: Operation) -> bool:
        return operation in self.operations


LOCATIONS = ResourceSpec(
    name="locations",
    path="/api/admin-locations",
    collection_key="locations",
    item_key="location",
    label="location",
    operations=frozenset(Operation),
)

TOURS = ResourceSpec(
    name="tours",
    path="/api/admin-tours",
    collection_key="tours",
    item_key="tour",
    label="tour",
    operations=frozenset({Operation.LIST, Operation.GET, Operation.UPDATE, Operation.DELETE}),
)

USERS = ResourceSpec(
    name="users",
    path="/api/admin-users",
    collection_key="users",
    item_key="user",
    label="user",
    operations=frozenset({Operation.LIST, Operation.CREATE, Operation.UPDATE, Operation.DELETE}),
)

TAGS = ResourceSpec(
    name="tags",
    path="/api/admin-tags",
    collection_key="tags",
    item_key=None,
    label="tag",
    operations=frozenset({Operation.LIST}),
)

STATS = ResourceSpec(
    name="stats",
    path="/api/admin-stats",
    collection_key="stats",
    item_key=None,
    label="statistics",
    operations=frozenset({Operation.LIST}),
)

RESOURCES: dict[str, ResourceSpec] = {
    spec.name: spec for spec in (LOCATIONS, TOURS, USERS, TAGS, STATS)
}
