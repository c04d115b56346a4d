"""
Session Controller - Client-side session lifecycle.

Owns the "current authenticated user", keeps it in sync with the session
store and the identity service, and reports failures to the UI as a single
string-or-None result.
"""

import logging
from typing import Any, Callable, List, Mapping, Optional
from profile_auth.ports.identity_port import IdentityServicePort
from profile_auth.ports.session_store_port import SessionStorePort
from profile_auth.ports.navigation_port import NavigatorPort, Route
from profile_auth.domain.user import User
from profile_auth.domain.session import SessionState, SessionEvent
from profile_auth.exceptions import (
    SessionServiceError,
    SessionStoreError,
    ServiceRejectedError,
    MalformedResponseError,
)

logger = logging.getLogger(__name__)

SessionListener = Callable[[SessionEvent], None]

LOGIN_ERROR_PREFIX = "An error occurred while logging in: "
REGISTER_ERROR_PREFIX = "An error occurred during registration: "
PROFILE_UNAVAILABLE = "Signed in, but your profile could not be loaded."
LOGIN_SUPERSEDED = "Login was superseded by a newer session change."
INVALID_RESPONSE_FORMAT = "Server error: Invalid response format"


class SessionController:
    """
    Session state machine: UNAUTHENTICATED, RESOLVING, AUTHENTICATED(user).

    Example:
        from profile_auth import SessionController
        from profile_auth.adapters import (
            HttpIdentityService, FileSessionStore, RecordingNavigator,
        )

        controller = SessionController(
            identity=HttpIdentityService("http://localhost:3000"),
            store=FileSessionStore("~/.profile_auth/session.json"),
            navigator=RecordingNavigator(),
        )

        async with controller:
            error = await controller.login("ada", "secret")
            if error is None:
                print(controller.user.full_name)
            controller.logout()

    Session-mutating steps (credential write on login, logout) bump a
    generation counter. An identity resolution only applies its outcome if
    no newer mutation happened while it was awaiting the service, so the
    stored credential and the visible user never disagree.
    """

    def __init__(
        self,
        identity: IdentityServicePort,
        store: SessionStorePort,
        navigator: NavigatorPort,
    ):
        """
        Initialize the controller.

        The initial state is RESOLVING when a credential is already stored,
        UNAUTHENTICATED otherwise. Call start() (or use `async with`) to run
        the initial resolution.

        Args:
            identity: Identity service adapter
            store: Session store adapter
            navigator: Navigation side-effect channel
        """
        self._identity = identity
        self._store = store
        self._navigator = navigator

        self._user: Optional[User] = None
        self._state = (
            SessionState.RESOLVING if store.get() else SessionState.UNAUTHENTICATED
        )
        self._generation = 0
        self._listeners: List[SessionListener] = []

    async def __aenter__(self) -> "SessionController":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def user(self) -> Optional[User]:
        """The authenticated user, or None."""
        if self._state == SessionState.AUTHENTICATED:
            return self._user
        return None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_authenticated(self) -> bool:
        return self._state == SessionState.AUTHENTICATED

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Register a listener for session changes.

        Args:
            listener: Called with a SessionEvent on every state/user change

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> Optional[User]:
        """Run the initial session resolution."""
        return await self.resolve_session()

    async def close(self):
        """Release the identity service's connections."""
        await self._identity.aclose()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def resolve_session(self) -> Optional[User]:
        """
        Resolve the stored credential to a user.

        Never raises: every failure ends in UNAUTHENTICATED with the
        credential cleared.

        Returns:
            The resolved user, or None
        """
        token = self._store.get()
        if not token:
            self._transition(SessionState.UNAUTHENTICATED, None, "no_credential")
            return None

        if self._state != SessionState.AUTHENTICATED:
            self._transition(SessionState.RESOLVING, None, "resolving")

        return await self._resolve(token, self._generation)

    async def login(self, identifier: str, secret: str) -> Optional[str]:
        """
        Log in with a username and password.

        On success the credential is stored, the user resolved, and the UI
        navigated to the profile view.

        Args:
            identifier: Username
            secret: Password

        Returns:
            None on success, otherwise a human-readable error message
        """
        try:
            token = await self._identity.login(identifier, secret)
        except ServiceRejectedError as e:
            logger.info(f"Login rejected ({e.status_code})")
            return e.message
        except SessionServiceError as e:
            logger.warning(f"Login failed: {e.message}")
            return f"{LOGIN_ERROR_PREFIX}{e.message}"

        try:
            self._store.set(token)
        except SessionStoreError as e:
            logger.warning(f"Login failed: {e.message}")
            return f"{LOGIN_ERROR_PREFIX}{e.message}"
        generation = self._bump_generation()

        user = await self._resolve(token, generation)
        if generation != self._generation:
            return LOGIN_SUPERSEDED
        if user is None:
            return PROFILE_UNAVAILABLE

        self._navigator.navigate(Route.PROFILE)
        return None

    def logout(self) -> None:
        """
        Log out: clear the credential and the user, navigate to the landing view.

        Always navigates, whatever the prior state.
        """
        self._bump_generation()
        self._store.clear()
        self._transition(SessionState.UNAUTHENTICATED, None, "logout")
        self._navigator.navigate(Route.LANDING)

    async def register(self, profile: Mapping[str, Any]) -> Optional[str]:
        """
        Register a new account. Does not log in.

        On success the UI is navigated to the registration success view.

        Args:
            profile: Registration payload

        Returns:
            None on success, otherwise a human-readable error message
        """
        try:
            await self._identity.register(profile)
        except ServiceRejectedError as e:
            logger.info(f"Registration rejected ({e.status_code})")
            return e.message
        except MalformedResponseError:
            return INVALID_RESPONSE_FORMAT
        except SessionServiceError as e:
            logger.warning(f"Registration failed: {e.message}")
            return f"{REGISTER_ERROR_PREFIX}{e.message}"

        self._navigator.navigate(Route.SUCCESS)
        return None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _resolve(self, token: str, generation: int) -> Optional[User]:
        """Fetch and validate the user for `token`; apply only if still current."""
        try:
            payload = await self._identity.fetch_identity(token)
            user = User.from_payload(payload)
        except SessionServiceError as e:
            if generation != self._generation:
                logger.debug("Discarding stale identity failure")
                return None
            logger.warning(f"Identity resolution failed, clearing credential: {e.message}")
            self._store.clear()
            self._transition(SessionState.UNAUTHENTICATED, None, "identity_failed")
            return None

        if generation != self._generation:
            logger.debug("Discarding stale identity resolution")
            return None

        self._transition(SessionState.AUTHENTICATED, user, "resolved")
        return user

    def _bump_generation(self) -> int:
        self._generation += 1
        return self._generation

    def _transition(self, state: SessionState, user: Optional[User], reason: str):
        previous_state, previous_user = self._state, self._user
        if state == previous_state and user == previous_user:
            return

        self._state = state
        self._user = user
        logger.info(f"Session {previous_state.value} -> {state.value} ({reason})")

        event = SessionEvent(
            state=state,
            previous_state=previous_state,
            user=user,
            previous_user=previous_user,
            reason=reason,
        )
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Session listener failed")
