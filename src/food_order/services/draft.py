"""Single owner of the mutable order draft."""

import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace

from food_order.domain.models import AddOn, Item, OrderDraft


@dataclass
class DraftStore:
    """Holds the current OrderDraft and serializes every write to it."""

    _draft: OrderDraft = field(default_factory=OrderDraft)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def draft(self) -> OrderDraft:
        """Return the latest draft snapshot."""
        with self._lock:
            return self._draft

    def update(self, mutate: Callable[[OrderDraft], OrderDraft]) -> OrderDraft:
        """Apply a read-modify-write against the latest draft."""
        with self._lock:
            self._draft = mutate(self._draft)
            return self._draft

    def seed(self, item: Item, add_ons: Iterable[AddOn]) -> OrderDraft:
        """Replace item and add-ons in one step, keeping the item quantity."""
        entries = tuple(add_ons)
        return self.update(lambda draft: replace(draft, item=item, add_ons=entries))

    def reset(self) -> OrderDraft:
        """Drop all selections and any loaded item."""
        return self.update(lambda _draft: OrderDraft())
