"""Response builders shared by the list page endpoints."""

import logging

from tour_admin.application.schemas import TableSchema
from tour_admin.application.services import AdminConsole
from tour_admin.domain.exceptions import AuthenticationRequiredError, RequestError

logger = logging.getLogger(__name__)


def table_response(console: AdminConsole, page: str) -> TableSchema:
    """Map the page's rendered TableView to its API response."""
    return TableSchema.model_validate(console.render(page), from_attributes=True)


async def load_tags(console: AdminConsole) -> None:
    """Tags only decorate the locations page; failing to load them is not fatal."""
    try:
        await console.tags.load()
    except (RequestError, AuthenticationRequiredError) as exc:
        logger.warning("Could not load tags: %s", exc)
