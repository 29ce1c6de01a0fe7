"""Domain models for single-item order composition."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True)
class Item:
    """A menu item loaded for the order screen."""

    id: int
    name: str
    description: str
    unit_price: Decimal
    image_url: str
    display_price: str = ""


@dataclass(frozen=True)
class AddOn:
    """An optional extra with its locally selected quantity."""

    id: int
    name: str
    unit_value: Decimal
    selected_quantity: int = 0


@dataclass(frozen=True)
class OrderDraft:
    """In-progress combination of item, quantity and add-on selections."""

    item: Item | None = None
    item_quantity: int = 1
    add_ons: tuple[AddOn, ...] = field(default_factory=tuple)

    @property
    def is_loaded(self) -> bool:
        """Return True once the item detail has been applied."""
        return self.item is not None


class FavoriteState(Enum):
    """Local mirror of the remote favorite mark."""

    UNKNOWN = "unknown"
    NOT_FAVORITE = "not_favorite"
    FAVORITE = "favorite"


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a remote-backed operation."""

    ok: bool
    error: Exception | None = None

    @classmethod
    def success(cls) -> "OperationResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, error: Exception) -> "OperationResult":
        return cls(ok=False, error=error)
