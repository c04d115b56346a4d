"""
Session Domain Model - Client-side session lifecycle states and events.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from profile_auth.domain.user import User


class SessionState(Enum):
    """Session lifecycle states."""
    UNAUTHENTICATED = "unauthenticated"
    RESOLVING = "resolving"          # stored credential not yet confirmed
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True)
class SessionEvent:
    """
    Emitted to subscribers whenever the session state or user changes.

    `reason` is a short machine-friendly tag ("resolved", "login",
    "logout", "identity_failed", ...).
    """
    state: SessionState
    previous_state: SessionState
    user: Optional[User]
    previous_user: Optional[User]
    reason: str
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_login(self) -> bool:
        return (
            self.state == SessionState.AUTHENTICATED
            and self.previous_state != SessionState.AUTHENTICATED
        )

    @property
    def is_logout(self) -> bool:
        return (
            self.previous_state == SessionState.AUTHENTICATED
            and self.state == SessionState.UNAUTHENTICATED
        )
