"""Domain-specific exceptions: framework-independent."""


class RequestError(Exception):
    """Base for any failed call to the admin backend."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NetworkError(RequestError):
    """Raised when the backend cannot be reached at all (offline, timeout)."""


class ApiError(RequestError):
    """Raised when the backend answers non-2xx or with ``success: false``."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class DraftValidationError(Exception):
    """Raised client-side when a draft fails validation, before any network call."""

    def __init__(self, message: str, fields: list[str] | None = None):
        self.message = message
        self.fields = fields or []
        super().__init__(message)


class BlockedActionError(Exception):
    """Raised when a business rule blocks an action before it reaches the backend."""

    def __init__(self, action: str, message: str):
        self.action = action
        self.message = message
        super().__init__(message)


class ActionInProgressError(Exception):
    """Raised when a guarded action is triggered while the same action is still pending."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"'{action}' is already in progress")


class NoDataToExportError(Exception):
    """Raised when a CSV export is requested for an empty list."""

    def __init__(self, resource: str):
        self.resource = resource
        super().__init__("No data to export")


class UnsupportedOperationError(Exception):
    """Raised when a resource does not offer the requested operation."""

    def __init__(self, resource: str, operation: str):
        self.resource = resource
        self.operation = operation
        super().__init__(f"'{operation}' is not supported for {resource}")


class AuthenticationRequiredError(Exception):
    """Raised when a backend call needs a token and the session has none."""

    def __init__(self, message: str = "Not signed in"):
        super().__init__(message)


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ChatProviderError(Exception):
    """Raised when a chat provider returns an error.

    Carries the provider name so callers can tell which backend failed.
    """

    def __init__(self, provider: str, status_code: int, message: str):
        self.provider = provider
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{provider}] {status_code}: {message}")
