"""
Shared fixtures: a scripted identity service and fresh session components.
"""

import asyncio
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import pytest

from profile_auth.adapters import MemorySessionStore, RecordingNavigator
from profile_auth.config import Settings
from profile_auth.exceptions import ServiceRejectedError
from profile_auth.ports.identity_port import IdentityServicePort
from profile_auth.sdk.controller import SessionController


class FakeIdentityService(IdentityServicePort):
    """
    Identity service driven by plain attributes.

    - identities: token -> user payload, or an exception to raise
    - login_result: token to hand out, or an exception to raise
    - register_error: exception to raise from register(), if any
    - gates: token -> asyncio.Event that fetch_identity waits on
    """

    def __init__(self):
        self.identities: Dict[str, Union[Dict[str, Any], Exception]] = {}
        self.login_result: Union[str, Exception] = "token-1"
        self.register_error: Optional[Exception] = None
        self.gates: Dict[str, asyncio.Event] = {}
        self.calls: List[Tuple[str, Any]] = []
        self.registered: List[Dict[str, Any]] = []
        self.closed = False

    async def login(self, identifier: str, secret: str) -> str:
        self.calls.append(("login", identifier))
        if isinstance(self.login_result, Exception):
            raise self.login_result
        return self.login_result

    async def fetch_identity(self, token: str) -> Dict[str, Any]:
        self.calls.append(("fetch_identity", token))
        if token in self.gates:
            await self.gates[token].wait()

        result = self.identities.get(token, ServiceRejectedError("Unauthorized", 401))
        if isinstance(result, Exception):
            raise result
        return result

    async def register(self, profile: Mapping[str, Any]) -> None:
        self.calls.append(("register", dict(profile)))
        if self.register_error is not None:
            raise self.register_error
        self.registered.append(dict(profile))

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def identity():
    return FakeIdentityService()


@pytest.fixture
def store():
    return MemorySessionStore()


@pytest.fixture
def navigator():
    return RecordingNavigator()


@pytest.fixture
def make_controller(identity, store, navigator):
    """Build a controller over the shared fakes (after arranging the store)."""
    def _make():
        return SessionController(identity=identity, store=store, navigator=navigator)
    return _make


@pytest.fixture
def settings(tmp_path):
    """Settings isolated from the developer's environment and .env file."""
    return Settings(
        _env_file=None,
        BACKEND_URL="http://backend.test/",
        FRONTEND_URL="http://frontend.test",
        JWT_SECRET="test-secret-key-0123456789",
        SESSION_STORE_BACKEND="memory",
        SESSION_STORE_PATH=tmp_path / "session.json",
    )
