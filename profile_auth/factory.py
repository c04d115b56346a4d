"""
Factory - Build session components from Settings.

Usage:
    from profile_auth.factory import create_session_controller
    from profile_auth.adapters import CallbackNavigator

    controller = create_session_controller(navigator=CallbackNavigator(router.push))
    async with controller:
        ...
"""

import logging
from typing import Optional
import httpx
from profile_auth.config import Settings, get_settings
from profile_auth.ports.session_store_port import SessionStorePort
from profile_auth.ports.navigation_port import NavigatorPort
from profile_auth.adapters.memory_store import MemorySessionStore
from profile_auth.adapters.file_store import FileSessionStore
from profile_auth.adapters.redis_store import RedisSessionStore
from profile_auth.adapters.http_identity import HttpIdentityService
from profile_auth.adapters.navigator import RecordingNavigator
from profile_auth.sdk.controller import SessionController

logger = logging.getLogger(__name__)


def create_session_store(settings: Optional[Settings] = None) -> SessionStorePort:
    """
    Create the session store selected by SESSION_STORE_BACKEND.

    Args:
        settings: Settings to use (defaults to the process-wide settings)

    Returns:
        Session store adapter
    """
    settings = settings or get_settings()
    backend = settings.SESSION_STORE_BACKEND

    if backend == "memory":
        store = MemorySessionStore()
    elif backend == "redis":
        store = RedisSessionStore(
            redis_url=settings.REDIS_URL,
            key=f"profile_auth:{settings.SESSION_STORE_KEY}",
        )
    else:
        store = FileSessionStore(settings.session_store_path, key=settings.SESSION_STORE_KEY)

    logger.debug(f"Using {backend} session store")
    return store


def create_identity_service(
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> HttpIdentityService:
    """
    Create the HTTP identity service for BACKEND_URL.

    Args:
        settings: Settings to use (defaults to the process-wide settings)
        client: Optional pre-configured httpx client (overrides BACKEND_URL)
    """
    settings = settings or get_settings()
    return HttpIdentityService(
        base_url=settings.backend_base_url,
        client=client,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
    )


def create_session_controller(
    settings: Optional[Settings] = None,
    navigator: Optional[NavigatorPort] = None,
    store: Optional[SessionStorePort] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> SessionController:
    """
    Wire a SessionController from settings.

    Args:
        settings: Settings to use (defaults to the process-wide settings)
        navigator: Navigation channel (defaults to a RecordingNavigator)
        store: Session store (defaults to create_session_store())
        client: Optional httpx client for the identity service

    Returns:
        Unstarted controller; call start() or use `async with`
    """
    settings = settings or get_settings()
    return SessionController(
        identity=create_identity_service(settings, client=client),
        store=store or create_session_store(settings),
        navigator=navigator or RecordingNavigator(),
    )
