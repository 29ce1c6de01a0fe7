"""Host runtime capabilities used by the order screen."""

import logging
from dataclasses import dataclass
from typing import Protocol

_logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Shows a user-facing notification."""

    def notify(self, message: str) -> None:
        """Display a message to the user."""


class Navigator(Protocol):
    """Moves the host away from the current screen."""

    def navigate(self, route: str) -> None:
        """Navigate to a named route."""


@dataclass
class LoggingNotifier(Notifier):
    """Notifier that writes messages to the application log."""

    def notify(self, message: str) -> None:
        _logger.info("Notification: %s", message)


@dataclass
class LoggingNavigator(Navigator):
    """Navigator that records the last route and logs it."""

    current_route: str | None = None

    def navigate(self, route: str) -> None:
        self.current_route = route
        _logger.info("Navigate to %s", route)
