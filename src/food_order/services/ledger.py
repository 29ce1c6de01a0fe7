"""Add-on and item quantity mutators."""

from dataclasses import dataclass, replace

from food_order.domain.models import OrderDraft
from food_order.services.draft import DraftStore


@dataclass
class ExtrasLedger:
    """Selected quantity per add-on; never negative."""

    store: DraftStore

    def increment(self, add_on_id: int) -> OrderDraft:
        """Add one unit of an add-on."""
        return self.store.update(lambda draft: _shift_add_on(draft, add_on_id, 1))

    def decrement(self, add_on_id: int) -> OrderDraft:
        """Remove one unit of an add-on if any is selected."""
        return self.store.update(lambda draft: _shift_add_on(draft, add_on_id, -1))

    def quantity(self, add_on_id: int) -> int:
        """Return the selected quantity of an add-on, 0 when unknown."""
        for add_on in self.store.draft.add_ons:
            if add_on.id == add_on_id:
                return add_on.selected_quantity
        return 0


@dataclass
class QuantitySelector:
    """Selected quantity of the base item; never below one."""

    store: DraftStore

    def increment(self) -> OrderDraft:
        """Add one unit of the item."""
        return self.store.update(
            lambda draft: replace(draft, item_quantity=draft.item_quantity + 1)
        )

    def decrement(self) -> OrderDraft:
        """Remove one unit of the item, stopping at one."""
        return self.store.update(_decrement_item)

    @property
    def quantity(self) -> int:
        """Return the selected item quantity."""
        return self.store.draft.item_quantity


def _shift_add_on(draft: OrderDraft, add_on_id: int, delta: int) -> OrderDraft:
    """Return a draft with one add-on moved by delta, floored at zero."""
    changed = False
    add_ons = []
    for add_on in draft.add_ons:
        if add_on.id == add_on_id and not changed:
            new_quantity = add_on.selected_quantity + delta
            if new_quantity < 0:
                return draft
            add_on = replace(add_on, selected_quantity=new_quantity)
            changed = True
        add_ons.append(add_on)
    if not changed:
        return draft
    return replace(draft, add_ons=tuple(add_ons))


def _decrement_item(draft: OrderDraft) -> OrderDraft:
    if draft.item_quantity <= 1:
        return draft
    return replace(draft, item_quantity=draft.item_quantity - 1)
