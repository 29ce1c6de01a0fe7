"""Tests for container wiring."""

import asyncio

from food_order.containers import AppContainer, build_container
from food_order.services.host import LoggingNavigator


def test_build_container_creates_controller(settings) -> None:
    container = build_container(settings)

    controller = container.food_details()

    assert controller.submitter.success_route == settings.dashboard_route
    assert isinstance(container.navigator, LoggingNavigator)
    asyncio.run(container.close_resources())


def test_each_screen_gets_its_own_draft(container: AppContainer) -> None:
    first = container.food_details()
    second = container.food_details()

    assert first.store is not second.store
