"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field

import httpx
import pytest

from food_order.adapters.food_api_client import FoodApiClient
from food_order.adapters.food_api_models import FavoriteRequest, OrderRequest
from food_order.config import Settings
from food_order.containers import AppContainer
from food_order.services.food_details import FoodDetailsController
from food_order.services.host import Navigator, Notifier


def food_payload() -> dict[str, object]:
    return {
        "id": 1,
        "name": "Ao molho",
        "description": "Macarrão ao molho branco, fughi e cheiro verde.",
        "price": 10.0,
        "image_url": "https://example.com/ao_molho.png",
        "extras": [
            {"id": 1, "name": "Bacon", "value": 2.5},
            {"id": 2, "name": "Frango", "value": 1.0},
        ],
    }


def status_error(status_code: int, url: str = "http://api.test") -> httpx.HTTPStatusError:
    request = httpx.Request("GET", url)
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError(
        f"HTTP {status_code}", request=request, response=response
    )


@dataclass
class FakeFoodApiClient(FoodApiClient):
    """Fake food API that records calls in issue order."""

    food: dict[str, object] = field(default_factory=food_payload)
    catalog: list[dict[str, object]] = field(default_factory=lambda: [{"id": 3}])
    favorite_error: Exception | None = None
    food_error: Exception | None = None
    catalog_error: Exception | None = None
    order_error: Exception | None = None
    favorite_write_error: Exception | None = None
    write_errors: list[Exception | None] = field(default_factory=list)
    gate: asyncio.Event | None = None
    catalog_gate: asyncio.Event | None = None
    calls: list[tuple[str, object]] = field(default_factory=list)
    orders: list[OrderRequest] = field(default_factory=list)
    favorites: list[FavoriteRequest] = field(default_factory=list)

    async def _wait(self) -> None:
        if self.gate is not None:
            await self.gate.wait()

    def _raise_queued_write_error(self) -> None:
        if self.write_errors:
            error = self.write_errors.pop(0)
            if error is not None:
                raise error

    async def get_food(self, food_id: int) -> dict[str, object]:
        self.calls.append(("get_food", food_id))
        await self._wait()
        if self.food_error is not None:
            raise self.food_error
        return self.food

    async def find_foods(self, food_id: int) -> list[dict[str, object]]:
        self.calls.append(("find_foods", food_id))
        if self.catalog_gate is not None:
            await self.catalog_gate.wait()
        if self.catalog_error is not None:
            raise self.catalog_error
        return self.catalog

    async def get_favorite(self, food_id: int) -> dict[str, object]:
        self.calls.append(("get_favorite", food_id))
        if self.favorite_error is not None:
            raise self.favorite_error
        return {"id": food_id}

    async def add_favorite(self, favorite: FavoriteRequest) -> None:
        self.calls.append(("add_favorite", favorite.id))
        self.favorites.append(favorite)
        await self._wait()
        self._raise_queued_write_error()
        if self.favorite_write_error is not None:
            raise self.favorite_write_error

    async def remove_favorite(self, food_id: int) -> None:
        self.calls.append(("remove_favorite", food_id))
        await self._wait()
        self._raise_queued_write_error()
        if self.favorite_write_error is not None:
            raise self.favorite_write_error

    async def create_order(self, order: OrderRequest) -> None:
        self.calls.append(("create_order", order.product_id))
        if self.order_error is not None:
            raise self.order_error
        self.orders.append(order)


@dataclass
class RecordingNotifier(Notifier):
    """Notifier that keeps every message."""

    messages: list[str] = field(default_factory=list)

    def notify(self, message: str) -> None:
        self.messages.append(message)


@dataclass
class RecordingNavigator(Navigator):
    """Navigator that keeps every route."""

    routes: list[str] = field(default_factory=list)

    def navigate(self, route: str) -> None:
        self.routes.append(route)


@pytest.fixture
def settings() -> Settings:
    return Settings(api_base_url="http://api.test")


@pytest.fixture
def api_client() -> FakeFoodApiClient:
    return FakeFoodApiClient()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def container(
    settings: Settings,
    api_client: FakeFoodApiClient,
    notifier: RecordingNotifier,
    navigator: RecordingNavigator,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        api_client=api_client,
        notifier=notifier,
        navigator=navigator,
        close_resources=close_resources,
    )


@pytest.fixture
def controller(container: AppContainer) -> FoodDetailsController:
    return container.food_details()
