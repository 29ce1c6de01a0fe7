"""Food ordering REST API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from food_order.adapters.food_api_models import FavoriteRequest, OrderRequest


class FoodApiClient(Protocol):
    """Interface for the food ordering REST API."""

    async def get_food(self, food_id: int) -> dict[str, object]:
        """Fetch a food with its extras and return raw API data."""

    async def find_foods(self, food_id: int) -> list[dict[str, object]]:
        """Query the food catalog filtered by id."""

    async def get_favorite(self, food_id: int) -> dict[str, object]:
        """Fetch the favorite mark for a food; raises when absent."""

    async def add_favorite(self, favorite: FavoriteRequest) -> None:
        """Create a favorite mark for a food."""

    async def remove_favorite(self, food_id: int) -> None:
        """Delete the favorite mark for a food."""

    async def create_order(self, order: OrderRequest) -> None:
        """Submit an order."""


@dataclass
class HttpxFoodApiClient(FoodApiClient):
    """HTTPX-backed food API client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 10

    @classmethod
    def create(cls, base_url: str, timeout: float = 10) -> "HttpxFoodApiClient":
        """Create a food API client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def get_food(self, food_id: int) -> dict[str, object]:
        """Fetch a food by id."""
        response = await self.http_client.get(
            f"{self.base_url}/foods/{food_id}", timeout=self.timeout
        )
        response.raise_for_status()
        return response.json()

    async def find_foods(self, food_id: int) -> list[dict[str, object]]:
        """Query the catalog with an id filter."""
        response = await self.http_client.get(
            f"{self.base_url}/foods",
            params={"id": food_id},
            timeout=self.timeout,
        )
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, list):
            raise RuntimeError("Food catalog lookup did not return a list")
        return payload

    async def get_favorite(self, food_id: int) -> dict[str, object]:
        """Fetch a favorite mark by food id."""
        response = await self.http_client.get(
            f"{self.base_url}/favorites/{food_id}", timeout=self.timeout
        )
        response.raise_for_status()
        return response.json()

    async def add_favorite(self, favorite: FavoriteRequest) -> None:
        """Create a favorite mark."""
        response = await self.http_client.post(
            f"{self.base_url}/favorites",
            json=favorite.model_dump(mode="json", by_alias=True),
            timeout=self.timeout,
        )
        response.raise_for_status()

    async def remove_favorite(self, food_id: int) -> None:
        """Delete a favorite mark."""
        response = await self.http_client.delete(
            f"{self.base_url}/favorites/{food_id}", timeout=self.timeout
        )
        response.raise_for_status()

    async def create_order(self, order: OrderRequest) -> None:
        """Submit an order."""
        response = await self.http_client.post(
            f"{self.base_url}/orders",
            json=order.model_dump(mode="json"),
            timeout=self.timeout,
        )
        response.raise_for_status()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
