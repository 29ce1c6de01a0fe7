"""Pydantic models for the food REST API payloads."""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

JsonDecimal = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]


class ExtraPayload(BaseModel):
    """Add-on entry of a food detail response."""

    id: int
    name: str
    value: JsonDecimal


class FoodPayload(BaseModel):
    """Food detail response of GET /foods/{id}."""

    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    description: str = ""
    price: Decimal
    image_url: str = ""
    extras: list[ExtraPayload] = Field(default_factory=list)


class CatalogEntry(BaseModel):
    """Entry of the GET /foods?id= catalog lookup."""

    model_config = ConfigDict(extra="ignore")

    id: int


class FavoriteRequest(BaseModel):
    """Body of POST /favorites: the full loaded food."""

    id: int
    name: str
    description: str
    price: JsonDecimal
    image_url: str
    formatted_price: str = Field(default="", serialization_alias="formattedPrice")
    extras: list[ExtraPayload] = Field(default_factory=list)


class OrderExtra(BaseModel):
    """Add-on line of an order."""

    id: int
    name: str
    value: JsonDecimal
    quantity: int


class OrderRequest(BaseModel):
    """Body of POST /orders."""

    product_id: int
    name: str
    description: str
    price: JsonDecimal
    category: int
    thumbnail_url: str
    extras: list[OrderExtra]
