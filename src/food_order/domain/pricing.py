"""Pricing and order payload assembly."""

from decimal import Decimal

from food_order.domain.models import OrderDraft


def calculate_total(draft: OrderDraft) -> Decimal:
    """Return item price times quantity plus every selected add-on value."""
    if draft.item is None:
        return Decimal(0)
    item_total = draft.item.unit_price * draft.item_quantity
    extras_total = sum(
        (add_on.unit_value * add_on.selected_quantity for add_on in draft.add_ons),
        Decimal(0),
    )
    return item_total + extras_total


def build_order_payload(draft: OrderDraft, category_id: int) -> dict[str, object]:
    """Build the POST /orders body, keeping zero-quantity add-ons."""
    item = draft.item
    if item is None:
        raise RuntimeError("Cannot build an order before the item is loaded")
    return {
        "product_id": item.id,
        "name": item.name,
        "description": item.description,
        "price": item.unit_price,
        "category": category_id,
        "thumbnail_url": item.image_url,
        "extras": [
            {
                "id": add_on.id,
                "name": add_on.name,
                "value": add_on.unit_value,
                "quantity": add_on.selected_quantity,
            }
            for add_on in draft.add_ons
        ],
    }
