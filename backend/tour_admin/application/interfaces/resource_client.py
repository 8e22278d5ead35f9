"""Abstract interface (port) for one admin backend resource."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from tour_admin.domain.entities import Record


class ResourceClient(ABC):
    """Port for CRUD calls on one resource: implemented in the infrastructure layer."""

    resource_name: str = ""

    @abstractmethod
    async def fetch(self, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Raw response payload for non-record resources such as statistics."""
        ...

    @abstractmethod
    async def list(self, filters: Mapping[str, Any] | None = None) -> list[Record]:
        """Retrieve the records matching ``filters``; blank filters are not sent."""
        ...

    @abstractmethod
    async def get_by_id(self, record_id: str) -> Record:
        """Retrieve a single record."""
        ...

    @abstractmethod
    async def create(self, draft: Mapping[str, Any]) -> dict[str, Any]:
        """Create a record from a full draft and return the backend payload."""
        ...

    @abstractmethod
    async def update(self, record_id: str, draft: Mapping[str, Any]) -> dict[str, Any]:
        """Replace a record's fields with ``draft`` and return the backend payload."""
        ...

    @abstractmethod
    async def delete(self, record_id: str) -> dict[str, Any]:
        """Delete a record and return the backend acknowledgement."""
        ...
