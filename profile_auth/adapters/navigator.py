"""
Navigator Adapters - Where the session controller's navigation goes.
"""

import logging
from typing import Callable, List, Optional
from profile_auth.ports.navigation_port import NavigatorPort

logger = logging.getLogger(__name__)


class RecordingNavigator(NavigatorPort):
    """
    Records every navigation.

    Useful for tests and for headless clients that only need to know the
    current view.
    """

    def __init__(self):
        self.history: List[str] = []

    @property
    def current(self) -> Optional[str]:
        return self.history[-1] if self.history else None

    def navigate(self, path: str) -> None:
        logger.debug(f"Navigate to {path}")
        self.history.append(path)


class CallbackNavigator(NavigatorPort):
    """Delegates navigation to a callable supplied by the UI layer."""

    def __init__(self, callback: Callable[[str], None]):
        self._callback = callback

    def navigate(self, path: str) -> None:
        logger.debug(f"Navigate to {path}")
        self._callback(path)
