"""
Unit tests for the SessionController state machine.
"""

import asyncio

import pytest

from profile_auth.adapters import MemorySessionStore
from profile_auth.domain.session import SessionState
from profile_auth.exceptions import (
    MalformedResponseError,
    ServiceRejectedError,
    SessionStoreError,
    TransportError,
)
from profile_auth.ports.navigation_port import Route
from profile_auth.sdk.controller import (
    INVALID_RESPONSE_FORMAT,
    LOGIN_ERROR_PREFIX,
    LOGIN_SUPERSEDED,
    REGISTER_ERROR_PREFIX,
    SessionController,
)


ADA = {"firstname": "Ada", "lastname": "Lovelace"}


class UnwritableStore(MemorySessionStore):
    """Session store whose writes always fail."""

    def set(self, credential):
        raise SessionStoreError("Could not store session: disk full")


class TestStartup:
    """Initial resolution of a stored credential."""

    async def test_no_credential(self, make_controller, identity):
        controller = make_controller()
        assert controller.state == SessionState.UNAUTHENTICATED

        user = await controller.start()

        assert user is None
        assert controller.user is None
        assert controller.state == SessionState.UNAUTHENTICATED
        assert identity.calls == []

    async def test_stored_credential_accepted(self, make_controller, identity, store):
        store.set("stored")
        identity.identities["stored"] = {**ADA, "email": "ada@example.com"}

        controller = make_controller()
        assert controller.state == SessionState.RESOLVING
        assert controller.user is None

        await controller.start()

        assert controller.state == SessionState.AUTHENTICATED
        assert controller.user.to_dict() == {**ADA, "email": "ada@example.com"}
        assert store.get() == "stored"

    async def test_stored_credential_rejected(self, make_controller, identity, store):
        store.set("revoked")
        identity.identities["revoked"] = ServiceRejectedError("Unauthorized", 401)

        controller = make_controller()
        await controller.start()

        assert controller.user is None
        assert controller.state == SessionState.UNAUTHENTICATED
        assert store.get() is None

    async def test_transport_failure_clears_credential(self, make_controller, identity, store):
        store.set("stored")
        identity.identities["stored"] = TransportError("connection refused")

        controller = make_controller()
        await controller.start()

        assert controller.user is None
        assert store.get() is None

    @pytest.mark.parametrize("payload", [
        {"firstname": "Ada"},
        {"firstname": "Ada", "lastname": "   "},
        {"firstname": None, "lastname": "Lovelace"},
    ])
    async def test_incomplete_user_clears_credential(self, make_controller, identity, store, payload):
        store.set("stored")
        identity.identities["stored"] = payload

        controller = make_controller()
        await controller.start()

        assert controller.user is None
        assert store.get() is None

    async def test_context_manager_closes_identity(self, make_controller, identity):
        async with make_controller() as controller:
            assert controller.state == SessionState.UNAUTHENTICATED
        assert identity.closed is True

    async def test_does_not_navigate(self, make_controller, identity, store, navigator):
        store.set("stored")
        identity.identities["stored"] = ADA

        await make_controller().start()

        assert navigator.history == []


class TestLogout:

    async def test_logout_when_authenticated(self, make_controller, identity, store, navigator):
        store.set("stored")
        identity.identities["stored"] = ADA
        controller = make_controller()
        await controller.start()

        controller.logout()

        assert controller.user is None
        assert controller.state == SessionState.UNAUTHENTICATED
        assert store.get() is None
        assert navigator.history == [Route.LANDING]

    async def test_logout_when_unauthenticated_still_navigates(self, make_controller, navigator):
        controller = make_controller()

        controller.logout()

        assert controller.user is None
        assert navigator.history == [Route.LANDING]


class TestLogin:

    async def test_rejected_returns_server_message(self, make_controller, identity, store, navigator):
        identity.login_result = ServiceRejectedError("Invalid username or password", 401)
        controller = make_controller()

        error = await controller.login("ada", "wrong")

        assert error == "Invalid username or password"
        assert controller.user is None
        assert store.get() is None
        assert navigator.history == []

    async def test_rejected_leaves_existing_session(self, make_controller, identity, store):
        store.set("stored")
        identity.identities["stored"] = ADA
        controller = make_controller()
        await controller.start()
        identity.login_result = ServiceRejectedError("nope", 401)

        error = await controller.login("ada", "wrong")

        assert error == "nope"
        assert controller.user.firstname == "Ada"
        assert store.get() == "stored"

    @pytest.mark.parametrize("failure", [
        TransportError("connection refused"),
        MalformedResponseError("Login response did not include a token"),
    ])
    async def test_transport_or_shape_failure(self, make_controller, identity, failure):
        identity.login_result = failure
        controller = make_controller()

        error = await controller.login("ada", "secret")

        assert error == f"{LOGIN_ERROR_PREFIX}{failure.message}"
        assert controller.state == SessionState.UNAUTHENTICATED

    async def test_success(self, make_controller, identity, store, navigator):
        identity.login_result = "fresh"
        identity.identities["fresh"] = dict(ADA)
        controller = make_controller()

        error = await controller.login("ada", "secret")

        assert error is None
        assert controller.user.to_dict() == {"firstname": "Ada", "lastname": "Lovelace"}
        assert controller.is_authenticated
        assert store.get() == "fresh"
        assert navigator.history == [Route.PROFILE]
        assert ("fetch_identity", "fresh") in identity.calls

    async def test_incomplete_profile_after_token(self, make_controller, identity, store, navigator):
        identity.login_result = "fresh"
        identity.identities["fresh"] = {"firstname": "Ada"}
        controller = make_controller()

        error = await controller.login("ada", "secret")

        assert error
        assert controller.user is None
        assert store.get() is None
        assert navigator.history == []

    async def test_store_write_failure(self, identity, navigator):
        controller = SessionController(identity=identity, store=UnwritableStore(), navigator=navigator)

        error = await controller.login("ada", "secret")

        assert error == f"{LOGIN_ERROR_PREFIX}Could not store session: disk full"
        assert controller.state == SessionState.UNAUTHENTICATED
        assert navigator.history == []
        assert not any(call[0] == "fetch_identity" for call in identity.calls)

    async def test_store_write_failure_keeps_startup_resolution(self, identity, navigator):
        identity.identities["stored"] = ADA
        identity.gates["stored"] = asyncio.Event()
        controller = SessionController(
            identity=identity,
            store=UnwritableStore("stored"),
            navigator=navigator,
        )

        task = asyncio.create_task(controller.start())
        await asyncio.sleep(0)
        error = await controller.login("ada", "secret")
        identity.gates["stored"].set()
        await task

        assert error.startswith(LOGIN_ERROR_PREFIX)
        assert controller.state == SessionState.AUTHENTICATED
        assert controller.user.firstname == "Ada"


class TestRegister:

    async def test_success(self, make_controller, identity, navigator):
        controller = make_controller()
        profile = {"username": "ada", "password": "secret", **ADA}

        error = await controller.register(profile)

        assert error is None
        assert navigator.history == [Route.SUCCESS]
        assert identity.registered == [profile]
        assert controller.state == SessionState.UNAUTHENTICATED

    async def test_rejected(self, make_controller, identity, navigator):
        identity.register_error = ServiceRejectedError("taken", 400)

        error = await make_controller().register({"username": "ada"})

        assert error == "taken"
        assert navigator.history == []

    async def test_non_json_response(self, make_controller, identity, navigator):
        identity.register_error = MalformedResponseError("text/html")

        error = await make_controller().register({"username": "ada"})

        assert error == INVALID_RESPONSE_FORMAT
        assert navigator.history == []

    async def test_transport_failure(self, make_controller, identity):
        identity.register_error = TransportError("timed out")

        error = await make_controller().register({"username": "ada"})

        assert error == f"{REGISTER_ERROR_PREFIX}timed out"

    async def test_does_not_touch_session(self, make_controller, identity, store):
        store.set("stored")
        identity.identities["stored"] = ADA
        controller = make_controller()
        await controller.start()

        await controller.register({"username": "grace"})

        assert controller.user.firstname == "Ada"
        assert store.get() == "stored"


class TestReresolve:

    async def test_failed_refetch_logs_out(self, make_controller, identity, store):
        store.set("stored")
        identity.identities["stored"] = ADA
        controller = make_controller()
        await controller.start()
        events = []
        controller.subscribe(events.append)

        identity.identities["stored"] = ServiceRejectedError("expired", 401)
        await controller.resolve_session()

        assert controller.user is None
        assert store.get() is None
        # Authenticated -> Unauthenticated directly, no RESOLVING flash
        assert [e.state for e in events] == [SessionState.UNAUTHENTICATED]
        assert events[0].is_logout


class TestStaleResolutions:

    async def test_logout_during_startup_resolution(self, make_controller, identity, store):
        store.set("stored")
        identity.identities["stored"] = ADA
        identity.gates["stored"] = asyncio.Event()
        controller = make_controller()

        task = asyncio.create_task(controller.start())
        await asyncio.sleep(0)
        controller.logout()
        identity.gates["stored"].set()
        result = await task

        assert result is None
        assert controller.user is None
        assert controller.state == SessionState.UNAUTHENTICATED

    async def test_stale_failure_keeps_newer_credential(self, make_controller, identity, store, navigator):
        store.set("old")
        identity.identities["old"] = ServiceRejectedError("expired", 401)
        identity.gates["old"] = asyncio.Event()
        identity.login_result = "new"
        identity.identities["new"] = ADA
        controller = make_controller()

        task = asyncio.create_task(controller.start())
        await asyncio.sleep(0)
        error = await controller.login("ada", "secret")
        identity.gates["old"].set()
        await task

        assert error is None
        assert store.get() == "new"
        assert controller.user.lastname == "Lovelace"
        assert navigator.history == [Route.PROFILE]

    async def test_superseded_login(self, make_controller, identity, store, navigator):
        identity.login_result = "first"
        identity.identities["first"] = ADA
        identity.gates["first"] = asyncio.Event()
        controller = make_controller()

        task = asyncio.create_task(controller.login("ada", "secret"))
        await asyncio.sleep(0)
        controller.logout()
        identity.gates["first"].set()
        error = await task

        assert error == LOGIN_SUPERSEDED
        assert controller.user is None
        assert store.get() is None
        assert navigator.history == [Route.LANDING]


class TestSubscriptions:

    async def test_events_for_login_and_logout(self, make_controller, identity):
        identity.identities["token-1"] = ADA
        controller = make_controller()
        events = []
        controller.subscribe(events.append)

        await controller.login("ada", "secret")
        controller.logout()

        assert [e.reason for e in events] == ["resolved", "logout"]
        assert events[0].is_login
        assert events[0].user.firstname == "Ada"
        assert events[1].previous_user.firstname == "Ada"

    async def test_unsubscribe(self, make_controller, identity):
        identity.identities["token-1"] = ADA
        controller = make_controller()
        events = []
        unsubscribe = controller.subscribe(events.append)
        unsubscribe()

        await controller.login("ada", "secret")

        assert events == []

    async def test_failing_listener_does_not_break_session(self, make_controller, identity):
        identity.identities["token-1"] = ADA
        controller = make_controller()
        seen = []

        def broken(event):
            raise RuntimeError("listener bug")

        controller.subscribe(broken)
        controller.subscribe(seen.append)

        error = await controller.login("ada", "secret")

        assert error is None
        assert controller.is_authenticated
        assert len(seen) == 1
