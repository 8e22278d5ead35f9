"""Admin session: the explicit home of the bearer token and signed-in user."""

import logging
from typing import Any

import httpx

from tour_admin.domain.exceptions import (
    ApiError,
    AuthenticationRequiredError,
    NetworkError,
)

logger = logging.getLogger(__name__)

_LOGIN_PATH = "/api/auth-login"


class AdminSession:
    """Holds the bearer token used by every admin backend call.

    One session is shared by all API clients of a console process; tests
    create their own so no hidden global leaks between them.
    """

    def __init__(self, token: str | None = None, user: dict[str, Any] | None = None):
        self._token = token or None
        self._user = user

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def user(self) -> dict[str, Any] | None:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def require_token(self) -> str:
        if self._token is None:
            raise AuthenticationRequiredError()
        return self._token

    def authorization_header(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.require_token()}"}

    def sign_in(self, token: str, user: dict[str, Any] | None = None) -> None:
        self._token = token
        self._user = user

    def logout(self) -> None:
        self._token = None
        self._user = None

    async def login(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        email: str,
        password: str,
    ) -> dict[str, Any]:
        """Sign in against ``/api/auth-login`` and keep the returned token."""
        url = f"{base_url.rstrip('/')}{_LOGIN_PATH}"
        try:
            response = await http_client.post(
                url,
                headers={"Content-Type": "application/json"},
                json={"email": email, "password": password},
            )
        except httpx.HTTPError as exc:
            raise NetworkError(f"Could not reach the server: {exc}") from exc

        try:
            data = response.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            data = {}

        if not response.is_success or not data.get("success") or not data.get("token"):
            message = data.get("message") or data.get("error") or "Login failed"
            raise ApiError(message, status_code=response.status_code)

        user = data.get("user")
        self.sign_in(data["token"], user if isinstance(user, dict) else None)
        logger.info("Signed in as %s", (self._user or {}).get("email", email))
        return self._user or {}
