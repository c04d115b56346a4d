"""
Identity Service Port - Interface for the remote auth backend.

Covers the three collaborators the session controller depends on:
- Authentication Service: exchange credentials for a bearer token
- Identity Service: resolve a bearer token to a user payload
- Registration Service: create an account

Implementations:
- HttpIdentityService: httpx-based client for the HTTP backend
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping


class IdentityServicePort(ABC):
    """Port: Talk to the authentication/identity/registration services."""

    @abstractmethod
    async def login(self, identifier: str, secret: str) -> str:
        """
        Exchange credentials for a bearer token.

        Args:
            identifier: Username
            secret: Password

        Returns:
            Bearer token

        Raises:
            TransportError: If the request could not be completed
            ServiceRejectedError: If the service refused the credentials
            MalformedResponseError: If the response has no usable token
        """
        pass

    @abstractmethod
    async def fetch_identity(self, token: str) -> Dict[str, Any]:
        """
        Resolve a bearer token to the current user's payload.

        Args:
            token: Bearer token

        Returns:
            The raw `user` mapping (validated by the caller)

        Raises:
            TransportError, ServiceRejectedError, MalformedResponseError
        """
        pass

    @abstractmethod
    async def register(self, profile: Mapping[str, Any]) -> None:
        """
        Register a new account.

        Args:
            profile: Registration payload (username, password, names, ...)

        Raises:
            TransportError, ServiceRejectedError, MalformedResponseError
        """
        pass

    async def aclose(self) -> None:
        """Release any held connections."""
        return None
