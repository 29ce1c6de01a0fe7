"""Order submission."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from food_order.adapters.food_api_client import FoodApiClient
from food_order.adapters.food_api_models import CatalogEntry, OrderRequest
from food_order.domain.models import OperationResult
from food_order.domain.pricing import build_order_payload
from food_order.services.draft import DraftStore
from food_order.services.host import Navigator, Notifier

_logger = logging.getLogger(__name__)


@dataclass
class OrderSubmitter:
    """Resolve the category, post the order and leave the screen."""

    client: FoodApiClient
    store: DraftStore
    notifier: Notifier
    navigator: Navigator
    success_message: str = "Cadastro realizado com sucesso"
    success_route: str = "DashboardStack"
    submitted: bool = False
    _in_flight: bool = False

    async def finish_order(
        self, is_current: Callable[[], bool] | None = None
    ) -> OperationResult:
        """Submit the current draft once; failures come back as results.

        The order is only posted if the item resolved for the category is
        still the loaded one and ``is_current`` (when given) still holds.
        """
        if self.submitted:
            return OperationResult.failure(RuntimeError("Order already submitted"))
        if self._in_flight:
            return OperationResult.failure(
                RuntimeError("Order submission already in progress")
            )
        draft = self.store.draft
        if draft.item is None:
            return OperationResult.failure(
                RuntimeError("Cannot submit an order before the item is loaded")
            )

        item_id = draft.item.id
        self._in_flight = True
        try:
            category_id = await self.resolve_category(item_id)
            latest = self.store.draft
            if (is_current is not None and not is_current()) or (
                latest.item is None or latest.item.id != item_id
            ):
                _logger.info("Discarding superseded order for food %s", item_id)
                return OperationResult.failure(RuntimeError("Order superseded"))
            order = OrderRequest.model_validate(
                build_order_payload(latest, category_id)
            )
            await self.client.create_order(order)
        except Exception as exc:
            _logger.exception("Failed to submit order for food %s", item_id)
            return OperationResult.failure(exc)
        finally:
            self._in_flight = False

        self.submitted = True
        _logger.info(
            "Submitted order for food %s (category=%s)", order.product_id, category_id
        )
        self.notifier.notify(self.success_message)
        self.navigator.navigate(self.success_route)
        return OperationResult.success()

    async def resolve_category(self, item_id: int) -> int:
        """Return the id of the first catalog entry matching the item."""
        entries = await self.client.find_foods(item_id)
        if not entries:
            raise RuntimeError(f"No catalog entry found for food {item_id}")
        return CatalogEntry.model_validate(entries[0]).id
