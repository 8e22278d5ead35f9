"""Admin backend infrastructure package."""

from .admin_api_client import AdminApiClient, HttpResourceClient

__all__ = ["AdminApiClient", "HttpResourceClient"]
