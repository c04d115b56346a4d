"""
Profile Auth - Token-based session lifecycle for a profile web app.

Hexagonal architecture for the client-side session (credential store,
identity service, navigation) plus a reference HTTP backend.

Usage:
    from profile_auth import SessionController
    from profile_auth.adapters import (
        HttpIdentityService, FileSessionStore, RecordingNavigator,
    )

    controller = SessionController(
        identity=HttpIdentityService("http://localhost:3000"),
        store=FileSessionStore("~/.profile_auth/session.json"),
        navigator=RecordingNavigator(),
    )

    # Restore a stored session
    await controller.start()

    # Log in
    error = await controller.login("ada", "secret")
"""

__version__ = "0.1.0"

from profile_auth.sdk.controller import SessionController
from profile_auth.domain.user import User
from profile_auth.domain.session import SessionState, SessionEvent
from profile_auth.factory import create_session_controller

__all__ = [
    "SessionController",
    "User",
    "SessionState",
    "SessionEvent",
    "create_session_controller",
]
