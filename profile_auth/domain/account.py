"""
Account Domain Model - Server-side registered account.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from profile_auth.domain.user import User


@dataclass
class Account:
    """
    Account entity - a registered user as stored by the backend.

    Domain rules:
    - username is unique (enforced by the repository)
    - password_hash never leaves the backend (excluded from to_dict())
    """
    username: str
    password_hash: str
    firstname: str
    lastname: str
    profile: Dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    last_login: Optional[datetime] = None

    def record_login(self):
        """Record a successful login."""
        self.last_login = datetime.now(timezone.utc)

    def to_user(self) -> User:
        """Public user view of the account."""
        return User(
            firstname=self.firstname,
            lastname=self.lastname,
            profile={"username": self.username, **self.profile},
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for API responses (never includes the password hash)."""
        return {
            **self.profile,
            "username": self.username,
            "firstname": self.firstname,
            "lastname": self.lastname,
            "created_at": self.created_at.isoformat(),
            "last_login": self.last_login.isoformat() if self.last_login else None,
        }
