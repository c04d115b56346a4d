"""
HTTP Identity Service - httpx client for the auth backend.

Endpoints (relative to the configured base URL):
- POST /login     {"username", "password"} -> {"token"} | {"message"}
- GET  /user/me   Authorization: Bearer <token> -> {"user": {...}}
- POST /register  profile JSON -> 2xx | {"message"}
"""

import logging
from typing import Any, Dict, Mapping, Optional
import httpx
from profile_auth.ports.identity_port import IdentityServicePort
from profile_auth.exceptions import (
    TransportError,
    ServiceRejectedError,
    MalformedResponseError,
)

logger = logging.getLogger(__name__)

LOGIN_PATH = "/login"
IDENTITY_PATH = "/user/me"
REGISTER_PATH = "/register"


class HttpIdentityService(IdentityServicePort):
    """
    Identity service reached over HTTP.

    Owns its httpx.AsyncClient unless one is passed in; a caller-supplied
    client (e.g. one bound to an ASGI transport) is left open on aclose().
    """

    def __init__(
        self,
        base_url: str = "",
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ):
        """
        Initialize the HTTP identity service.

        Args:
            base_url: Backend base URL (ignored when a client is given)
            client: Pre-configured async client
            timeout: Request timeout in seconds for the owned client
        """
        if client is None:
            client = httpx.AsyncClient(base_url=base_url.rstrip("/"), timeout=timeout)
            self._owns_client = True
        else:
            self._owns_client = False
        self._client = client

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Send a request, mapping httpx failures to TransportError."""
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            detail = str(e) or e.__class__.__name__
            logger.warning(f"{method} {path} failed: {detail}")
            raise TransportError(detail) from e

        logger.debug(f"{method} {path} -> {response.status_code}")
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(
                f"Expected a JSON response (status {response.status_code})"
            ) from e

    @staticmethod
    def _is_json(response: httpx.Response) -> bool:
        return "application/json" in response.headers.get("content-type", "").lower()

    @classmethod
    def _json_or_none(cls, response: httpx.Response) -> Any:
        """Error bodies are optional; an undecodable one reads as None."""
        if not cls._is_json(response):
            return None
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def _message(data: Any, default: str) -> str:
        if isinstance(data, dict):
            message = data.get("message")
            if isinstance(message, str) and message:
                return message
        return default

    async def login(self, identifier: str, secret: str) -> str:
        response = await self._request(
            "POST",
            LOGIN_PATH,
            json={"username": identifier, "password": secret},
        )
        data = self._json(response)

        if not response.is_success:
            raise ServiceRejectedError(
                self._message(data, "Login failed"),
                response.status_code,
            )

        token = data.get("token") if isinstance(data, dict) else None
        if not isinstance(token, str) or not token:
            raise MalformedResponseError("Login response did not include a token")
        return token

    async def fetch_identity(self, token: str) -> Dict[str, Any]:
        response = await self._request(
            "GET",
            IDENTITY_PATH,
            headers={"Authorization": f"Bearer {token}"},
        )

        if not response.is_success:
            raise ServiceRejectedError(
                self._message(self._json_or_none(response), "Identity lookup failed"),
                response.status_code,
            )

        data = self._json(response)
        user = data.get("user") if isinstance(data, dict) else None
        if not isinstance(user, dict):
            raise MalformedResponseError("Identity response did not include a user")
        return user

    async def register(self, profile: Mapping[str, Any]) -> None:
        response = await self._request("POST", REGISTER_PATH, json=dict(profile))

        if not self._is_json(response):
            content_type = response.headers.get("content-type", "")
            logger.warning(
                f"Non-JSON registration response ({response.status_code}, {content_type or 'no content type'})"
            )
            raise MalformedResponseError("Server error: Invalid response format")

        data = self._json(response)
        if not response.is_success:
            raise ServiceRejectedError(
                self._message(data, "Registration failed"),
                response.status_code,
            )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
