"""Available tags of a page: fetched once per page load."""

import logging

from tour_admin.application.interfaces import ResourceClient
from tour_admin.domain.entities import Tag

logger = logging.getLogger(__name__)


class TagCatalog:
    def __init__(self, client: ResourceClient):
        self._client = client
        self._tags: list[Tag] | None = None

    @property
    def loaded(self) -> bool:
        return self._tags is not None

    @property
    def tags(self) -> list[Tag]:
        return list(self._tags or [])

    async def load(self) -> list[Tag]:
        """Fetch tags on first use; later calls return the cached list."""
        if self._tags is None:
            records = await self._client.list()
            self._tags = sorted(
                (Tag.from_payload(record.data) for record in records),
                key=lambda tag: tag.name.lower(),
            )
            logger.debug("Loaded %d tags", len(self._tags))
        return self.tags

    async def refresh(self) -> list[Tag]:
        self._tags = None
        return await self.load()
