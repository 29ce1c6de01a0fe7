"""Controller for the single-item food details screen."""

import asyncio
import logging
from dataclasses import dataclass, field
from decimal import Decimal

from food_order.adapters.food_api_client import FoodApiClient
from food_order.config import Settings
from food_order.domain.models import AddOn, FavoriteState, Item, OperationResult
from food_order.domain.pricing import calculate_total
from food_order.formatting import Formatter, currency_formatter
from food_order.services.draft import DraftStore
from food_order.services.favorites import FavoriteSync
from food_order.services.host import Navigator, Notifier
from food_order.services.items import ItemLoader
from food_order.services.ledger import ExtrasLedger, QuantitySelector
from food_order.services.orders import OrderSubmitter

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FoodDetailsView:
    """Snapshot of everything the screen renders."""

    item: Item | None
    add_ons: tuple[AddOn, ...]
    item_quantity: int
    total: Decimal
    formatted_total: str
    favorite_state: FavoriteState

    @property
    def favorite_icon_name(self) -> str:
        """Return the header icon name for the favorite state."""
        if self.favorite_state is FavoriteState.FAVORITE:
            return "favorite"
        return "favorite-border"


@dataclass
class FoodDetailsController:
    """Owns the draft of one screen and routes every user action."""

    store: DraftStore
    loader: ItemLoader
    favorites: FavoriteSync
    extras: ExtrasLedger
    quantity: QuantitySelector
    submitter: OrderSubmitter
    formatter: Formatter
    item_id: int | None = None
    closed: bool = False
    _generation: int = 0
    _open_task: "asyncio.Task[OperationResult] | None" = field(
        default=None, repr=False
    )

    @classmethod
    def create(
        cls,
        client: FoodApiClient,
        notifier: Notifier,
        navigator: Navigator,
        settings: Settings,
    ) -> "FoodDetailsController":
        """Wire a controller with its own draft store."""
        store = DraftStore()
        formatter = currency_formatter(settings.currency_symbol)
        return cls(
            store=store,
            loader=ItemLoader(client=client, store=store, formatter=formatter),
            favorites=FavoriteSync(
                client=client,
                store=store,
                rollback_on_failure=settings.favorite_rollback_on_failure,
            ),
            extras=ExtrasLedger(store),
            quantity=QuantitySelector(store),
            submitter=OrderSubmitter(
                client=client,
                store=store,
                notifier=notifier,
                navigator=navigator,
                success_message=settings.order_success_message,
                success_route=settings.dashboard_route,
            ),
            formatter=formatter,
        )

    async def open(self, item_id: int) -> OperationResult:
        """Load the item and probe its favorite mark, once per item id."""
        if self.closed:
            return OperationResult.failure(RuntimeError("Screen is closed"))
        if item_id == self.item_id and self._open_task is not None:
            result = await self._open_task
            if result.ok:
                return result

        self.item_id = item_id
        self._generation += 1
        self.store.reset()
        self.favorites.reset()
        self._open_task = asyncio.ensure_future(
            self._load_and_probe(item_id, self._generation)
        )
        return await self._open_task

    def close(self) -> None:
        """Tear the screen down; pending responses are discarded."""
        self.closed = True
        self._generation += 1

    async def _load_and_probe(self, item_id: int, generation: int) -> OperationResult:
        def is_current() -> bool:
            return generation == self._generation

        load_result, _state = await asyncio.gather(
            self.loader.load(item_id, is_current=is_current),
            self.favorites.probe(item_id, is_current=is_current),
        )
        return load_result

    def increment_extra(self, add_on_id: int) -> FoodDetailsView:
        self.extras.increment(add_on_id)
        return self.view()

    def decrement_extra(self, add_on_id: int) -> FoodDetailsView:
        self.extras.decrement(add_on_id)
        return self.view()

    def increment_item(self) -> FoodDetailsView:
        self.quantity.increment()
        return self.view()

    def decrement_item(self) -> FoodDetailsView:
        self.quantity.decrement()
        return self.view()

    async def toggle_favorite(self) -> OperationResult:
        return await self.favorites.toggle()

    async def finish_order(self) -> OperationResult:
        if self.closed:
            return OperationResult.failure(RuntimeError("Screen is closed"))
        generation = self._generation
        return await self.submitter.finish_order(
            is_current=lambda: generation == self._generation
        )

    def view(self) -> FoodDetailsView:
        """Recompute the total from the latest draft."""
        draft = self.store.draft
        total = calculate_total(draft)
        return FoodDetailsView(
            item=draft.item,
            add_ons=draft.add_ons,
            item_quantity=draft.item_quantity,
            total=total,
            formatted_total=self.formatter(total),
            favorite_state=self.favorites.state,
        )
