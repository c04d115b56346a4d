"""
Domain Models - Pure business entities.

No infrastructure dependencies. Domain logic only.
"""

from profile_auth.domain.user import User
from profile_auth.domain.session import SessionState, SessionEvent
from profile_auth.domain.account import Account

__all__ = [
    "User",
    "SessionState",
    "SessionEvent",
    "Account",
]
