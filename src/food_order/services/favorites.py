"""Favorite mark synchronization.

The local state is an optimistic mirror of the remote favorite mark. A probe
cannot tell "not found" from a transport failure, so both resolve to
NOT_FAVORITE. Toggles flip the mirror before the remote call is issued; with
``rollback_on_failure`` disabled a failed call leaves local and remote state
diverged until the next probe; when enabled, only the latest toggle since the
last reset is reverted.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from food_order.adapters.food_api_client import FoodApiClient
from food_order.adapters.food_api_models import ExtraPayload, FavoriteRequest
from food_order.domain.models import AddOn, FavoriteState, Item, OperationResult
from food_order.services.draft import DraftStore

_logger = logging.getLogger(__name__)


@dataclass
class FavoriteSync:
    """Probe and toggle the favorite mark of the current item."""

    client: FoodApiClient
    store: DraftStore
    rollback_on_failure: bool = False
    state: FavoriteState = FavoriteState.UNKNOWN
    _toggled: bool = False
    _version: int = 0

    def reset(self) -> None:
        """Forget the mirrored state, e.g. when a new item is opened."""
        self.state = FavoriteState.UNKNOWN
        self._toggled = False
        self._version += 1

    @property
    def is_favorite(self) -> bool:
        """Return True when the local mirror marks the item as favorite."""
        return self.state is FavoriteState.FAVORITE

    async def probe(
        self, item_id: int, is_current: Callable[[], bool] | None = None
    ) -> FavoriteState:
        """Resolve the remote mark; any error counts as not favorite."""
        try:
            await self.client.get_favorite(item_id)
        except Exception as exc:
            resolved = FavoriteState.NOT_FAVORITE
            _logger.warning(
                "Favorite probe for food %s failed (status=%s): %s",
                item_id,
                _status_code_from_exception(exc),
                exc,
            )
        else:
            resolved = FavoriteState.FAVORITE

        if is_current is not None and not is_current():
            return self.state
        if self._toggled:
            _logger.info("Ignoring favorite probe for food %s after toggle", item_id)
            return self.state
        self.state = resolved
        return resolved

    async def toggle(self) -> OperationResult:
        """Flip the mark locally, then mirror it to the remote store."""
        item = self.store.draft.item
        if item is None:
            return OperationResult.failure(
                RuntimeError("Cannot toggle favorite before the item is loaded")
            )

        previous = self.state
        self._version += 1
        version = self._version
        self._toggled = True
        if previous is FavoriteState.FAVORITE:
            self.state = FavoriteState.NOT_FAVORITE
            call = self.client.remove_favorite(item.id)
        else:
            self.state = FavoriteState.FAVORITE
            call = self.client.add_favorite(
                _favorite_request(item, self.store.draft.add_ons)
            )
        intended = self.state

        try:
            await call
        except Exception as exc:
            _logger.exception(
                "Failed to set favorite=%s for food %s",
                intended is FavoriteState.FAVORITE,
                item.id,
            )
            if (
                self.rollback_on_failure
                and version == self._version
                and self.state is intended
            ):
                self.state = previous
            return OperationResult.failure(exc)
        return OperationResult.success()


def _favorite_request(item: Item, add_ons: tuple[AddOn, ...]) -> FavoriteRequest:
    """Build the full item body stored with a favorite mark."""
    return FavoriteRequest(
        id=item.id,
        name=item.name,
        description=item.description,
        price=item.unit_price,
        image_url=item.image_url,
        formatted_price=item.display_price,
        extras=[
            ExtraPayload(id=add_on.id, name=add_on.name, value=add_on.unit_value)
            for add_on in add_ons
        ],
    )


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
