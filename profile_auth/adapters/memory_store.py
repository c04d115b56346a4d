"""
Memory Session Store - In-process credential storage (testing only).
"""

from typing import Optional
from profile_auth.ports.session_store_port import SessionStorePort


class MemorySessionStore(SessionStorePort):
    """
    In-memory credential storage.

    WARNING: Only for testing and embedding. The credential is lost on
    restart, so the session does not survive a reload.
    """

    def __init__(self, credential: Optional[str] = None):
        """
        Initialize in-memory storage.

        Args:
            credential: Optional credential to start with
        """
        self._credential = credential or None

    def get(self) -> Optional[str]:
        return self._credential

    def set(self, credential: str) -> None:
        self._credential = credential

    def clear(self) -> None:
        self._credential = None
