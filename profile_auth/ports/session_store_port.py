"""
Session Store Port - Interface for persisting the client's bearer credential.

Implementations:
- MemorySessionStore: In-process storage (testing only)
- FileSessionStore: JSON document on disk (survives restarts)
- RedisSessionStore: Single Redis key
"""

from abc import ABC, abstractmethod
from typing import Optional


class SessionStorePort(ABC):
    """Port: Durable, synchronous storage for exactly one credential."""

    @abstractmethod
    def get(self) -> Optional[str]:
        """
        Get the stored credential.

        Returns:
            Credential string, or None if nothing is stored.
            Never raises; storage faults are reported as absence.
        """
        pass

    @abstractmethod
    def set(self, credential: str) -> None:
        """
        Persist a credential, overwriting any prior value.

        Args:
            credential: Opaque bearer token

        Raises:
            SessionStoreError: If the credential could not be persisted
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """
        Remove any stored credential.

        Idempotent; never raises.
        """
        pass
