"""
Navigation Port - Side-effect channel used by the session controller.

Implementations:
- RecordingNavigator: Keeps a history (testing, headless use)
- CallbackNavigator: Delegates to a UI-supplied callable
"""

from abc import ABC, abstractmethod


class Route:
    """Views the session controller navigates to."""
    LANDING = "/"
    PROFILE = "/profile"
    SUCCESS = "/success"


class NavigatorPort(ABC):
    """Port: Move the UI to another view."""

    @abstractmethod
    def navigate(self, path: str) -> None:
        """
        Navigate to a view.

        Args:
            path: Route path (see Route)
        """
        pass
