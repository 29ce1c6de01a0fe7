"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from food_order.adapters.food_api_client import FoodApiClient, HttpxFoodApiClient
from food_order.app_logging import configure_logging
from food_order.config import Settings
from food_order.services.food_details import FoodDetailsController
from food_order.services.host import (
    LoggingNavigator,
    LoggingNotifier,
    Navigator,
    Notifier,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    api_client: FoodApiClient
    notifier: Notifier
    navigator: Navigator
    close_resources: Callable[[], Awaitable[None]]

    def food_details(self) -> FoodDetailsController:
        """Create a controller for a freshly opened food details screen."""
        return FoodDetailsController.create(
            client=self.api_client,
            notifier=self.notifier,
            navigator=self.navigator,
            settings=self.settings,
        )


def build_container(
    settings: Settings | None = None,
    notifier: Notifier | None = None,
    navigator: Navigator | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    configure_logging()
    resolved_settings = settings or Settings()
    api_client = HttpxFoodApiClient.create(
        base_url=resolved_settings.api_base_url,
        timeout=resolved_settings.http_timeout_seconds,
    )

    async def close_resources() -> None:
        await api_client.close()

    return AppContainer(
        settings=resolved_settings,
        api_client=api_client,
        notifier=notifier or LoggingNotifier(),
        navigator=navigator or LoggingNavigator(),
        close_resources=close_resources,
    )
