"""Item detail loading."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from food_order.adapters.food_api_client import FoodApiClient
from food_order.adapters.food_api_models import FoodPayload
from food_order.domain.models import AddOn, Item, OperationResult
from food_order.formatting import Formatter, format_value
from food_order.services.draft import DraftStore

_logger = logging.getLogger(__name__)


@dataclass
class ItemLoader:
    """Fetch an item with its add-on catalog and seed the draft."""

    client: FoodApiClient
    store: DraftStore
    formatter: Formatter = format_value

    async def load(
        self, item_id: int, is_current: Callable[[], bool] | None = None
    ) -> OperationResult:
        """Load an item in one round trip; the draft keeps no item on failure."""
        try:
            payload = FoodPayload.model_validate(await self.client.get_food(item_id))
        except Exception as exc:
            _logger.exception("Failed to load food %s", item_id)
            return OperationResult.failure(exc)

        if is_current is not None and not is_current():
            _logger.info("Discarding stale load of food %s", item_id)
            return OperationResult.failure(RuntimeError("Load superseded"))
        item, add_ons = self.parse(payload)
        self.store.seed(item, add_ons)
        _logger.info("Loaded food %s with %s extras", item.id, len(add_ons))
        return OperationResult.success()

    def parse(self, payload: FoodPayload) -> tuple[Item, list[AddOn]]:
        """Convert a food payload into an item and zeroed add-ons."""
        item = Item(
            id=payload.id,
            name=payload.name,
            description=payload.description,
            unit_price=payload.price,
            image_url=payload.image_url,
            display_price=self.formatter(payload.price),
        )
        add_ons = [
            AddOn(id=extra.id, name=extra.name, unit_value=extra.value)
            for extra in payload.extras
        ]
        return item, add_ons
