"""
Token Issuer Port - Interface for bearer token issuance (server side).

Implementations:
- JWTTokenIssuer: Signed JWT bearer tokens
"""

from abc import ABC, abstractmethod
from typing import Optional


class TokenIssuerPort(ABC):
    """Port: Issue bearer tokens and resolve them back to a subject."""

    @abstractmethod
    def create_token(self, subject: str, expires_in: int = 3600) -> str:
        """
        Create a bearer token for an account.

        Args:
            subject: Account identifier (username)
            expires_in: Token expiration in seconds (default 1 hour)

        Returns:
            Bearer token string
        """
        pass

    @abstractmethod
    def authenticate(self, token: str) -> Optional[str]:
        """
        Authenticate a token and return its subject.

        Args:
            token: Bearer token

        Returns:
            Subject if valid, None if invalid or expired
        """
        pass
