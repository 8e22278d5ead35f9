"""Admin backend client: wraps the travel platform's ``/api/admin-*`` endpoints.

Every call sends ``Content-Type: application/json`` and the bearer token of
the injected AdminSession. Responses use the envelope
``{success, message?, ...payload}``; a non-2xx status or ``success: false``
raises ApiError with the backend's message, transport failures raise
NetworkError. There are no retries.
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from tour_admin.application.interfaces import ResourceClient
from tour_admin.domain.entities import (
    LOCATIONS,
    STATS,
    TAGS,
    TOURS,
    USERS,
    Operation,
    Record,
    ResourceSpec,
)
from tour_admin.domain.exceptions import (
    ApiError,
    NetworkError,
    UnsupportedOperationError,
)
from tour_admin.domain.filters import clean_filters
from tour_admin.infrastructure.session import AdminSession

logger = logging.getLogger(__name__)


class AdminApiClient:
    """Infrastructure adapter: connects to the admin REST backend.

    Uses one pooled httpx.AsyncClient for all resources. An injected client
    (e.g. one built on httpx.MockTransport) is never closed by this class.
    """

    def __init__(
        self,
        session: AdminSession,
        base_url: str = "http://localhost:3000",
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)

        self.locations = HttpResourceClient(self, LOCATIONS)
        self.tours = HttpResourceClient(self, TOURS)
        self.users = HttpResourceClient(self, USERS)
        self.tags = HttpResourceClient(self, TAGS)
        self.stats = HttpResourceClient(self, STATS)

    @property
    def session(self) -> AdminSession:
        return self._session

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client

    def resource(self, name: str) -> "HttpResourceClient":
        clients = {
            "locations": self.locations,
            "tours": self.tours,
            "users": self.users,
            "tags": self.tags,
            "stats": self.stats,
        }
        try:
            return clients[name]
        except KeyError:
            raise ValueError(f"Unknown resource '{name}'") from None

    def _get_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            **self._session.authorization_header(),
        }

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        json: Any = None,
        failure_message: str = "Request failed",
    ) -> dict[str, Any]:
        """Send one request and unwrap the backend envelope."""
        url = f"{self._base_url}{path}"
        headers = self._get_headers()

        logger.debug("%s %s params=%s", method, path, dict(params or {}))
        try:
            response = await self._http_client.request(
                method, url, headers=headers, params=params or None, json=json
            )
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise NetworkError(f"{failure_message}: {exc}") from exc

        try:
            data = response.json()
        except ValueError:
            data = None

        if not isinstance(data, dict):
            raise ApiError(failure_message, status_code=response.status_code)

        if not response.is_success or not data.get("success"):
            message = data.get("message") or data.get("error") or failure_message
            logger.info(
                "%s %s rejected (%d): %s", method, path, response.status_code, message
            )
            raise ApiError(str(message), status_code=response.status_code)

        return data

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http_client.aclose()


class HttpResourceClient(ResourceClient):
    """ResourceClient for one ``/api/admin-*`` endpoint."""

    def __init__(self, api: AdminApiClient, spec: ResourceSpec):
        self._api = api
        self._spec = spec
        self.resource_name = spec.name

    @property
    def spec(self) -> ResourceSpec:
        return self._spec

    def _require(self, operation: Operation) -> None:
        if not self._spec.supports(operation):
            raise UnsupportedOperationError(self._spec.name, operation.value)

    def _unwrap_item(self, payload: dict[str, Any]) -> dict[str, Any]:
        key = self._spec.item_key
        if key and isinstance(payload.get(key), dict):
            return payload[key]
        return payload

    async def fetch(self, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        self._require(Operation.LIST)
        return await self._api.request(
            "GET",
            self._spec.path,
            params=clean_filters(params),
            failure_message=f"Error fetching {self._spec.name}",
        )

    async def list(self, filters: Mapping[str, Any] | None = None) -> list[Record]:
        payload = await self.fetch(filters)
        items = payload.get(self._spec.collection_key) or []
        return [Record.from_payload(item) for item in items if isinstance(item, dict)]

    async def get_by_id(self, record_id: str) -> Record:
        self._require(Operation.GET)
        payload = await self._api.request(
            "GET",
            self._spec.path,
            params={"id": record_id},
            failure_message=f"Error fetching {self._spec.label}",
        )
        return Record.from_payload(self._unwrap_item(payload))

    async def create(self, draft: Mapping[str, Any]) -> dict[str, Any]:
        self._require(Operation.CREATE)
        return await self._api.request(
            "POST",
            self._spec.path,
            json=dict(draft),
            failure_message=f"Error creating {self._spec.label}",
        )

    async def update(self, record_id: str, draft: Mapping[str, Any]) -> dict[str, Any]:
        self._require(Operation.UPDATE)
        return await self._api.request(
            "PUT",
            self._spec.path,
            params={"id": record_id},
            json=dict(draft),
            failure_message=f"Error updating {self._spec.label}",
        )

    async def delete(self, record_id: str) -> dict[str, Any]:
        self._require(Operation.DELETE)
        return await self._api.request(
            "DELETE",
            self._spec.path,
            params={"id": record_id},
            failure_message=f"Error deleting {self._spec.label}",
        )
