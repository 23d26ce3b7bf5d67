"""Shopping lists, their stops and items, and the repositories the depot relies on."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol


class ShoppingListError(Exception):
    """A shopping list rule was broken."""


class BotStatus(StrEnum):
    UNKNOWN = ""
    IDLE = "idle"
    ACTIVE = "active"


def to_bot_status(status: str) -> BotStatus:
    """Map a stored status to a bot status; anything unrecognised is UNKNOWN."""
    try:
        return BotStatus(status)
    except ValueError:
        return BotStatus.UNKNOWN


@dataclass
class Bot:
    id: str
    name: str
    status: BotStatus = BotStatus.UNKNOWN


@dataclass
class Item:
    product_name: str
    quantity: int


@dataclass
class Product:
    id: str
    store_id: str
    name: str


@dataclass
class Store:
    id: str
    name: str
    location: str


@dataclass
class Stop:
    store_name: str
    store_location: str
    items: dict[str, Item] = field(default_factory=dict)

    def add_item(self, product: Product, quantity: int) -> None:
        """Add a product to this stop; a product already listed is left unchanged."""
        if product.id not in self.items:
            self.items[product.id] = Item(product_name=product.name, quantity=quantity)


class ShoppingListStatus(StrEnum):
    UNKNOWN = ""
    AVAILABLE = "available"
    ASSIGNED = "assigned"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


def to_shopping_list_status(status: str) -> ShoppingListStatus:
    """Map a stored status to a shopping list status; anything unrecognised is UNKNOWN."""
    try:
        return ShoppingListStatus(status)
    except ValueError:
        return ShoppingListStatus.UNKNOWN


@dataclass
class ShoppingList:
    id: str
    order_id: str
    stops: dict[str, Stop] = field(default_factory=dict)
    assigned_bot_id: str = ""
    status: ShoppingListStatus = ShoppingListStatus.UNKNOWN

    def add_item(self, store: Store, product: Product, quantity: int) -> None:
        stop = self.stops.get(store.id)
        if stop is None:
            stop = Stop(store_name=store.name, store_location=store.location)
            self.stops[store.id] = stop
        stop.add_item(product, quantity)

    def cancel(self) -> None:
        if self.status in (ShoppingListStatus.UNKNOWN, ShoppingListStatus.COMPLETED):
            raise ShoppingListError("shopping list cannot be cancelled")
        self.status = ShoppingListStatus.CANCELLED

    def assign(self, bot_id: str) -> None:
        if self.status is not ShoppingListStatus.AVAILABLE:
            raise ShoppingListError("shopping list cannot be assigned")
        self.assigned_bot_id = bot_id
        self.status = ShoppingListStatus.ASSIGNED

    def complete(self) -> None:
        if self.status is not ShoppingListStatus.ASSIGNED:
            raise ShoppingListError("shopping list cannot be completed")
        self.status = ShoppingListStatus.COMPLETED


def create_shopping(id: str, order_id: str) -> ShoppingList:
    """Start an empty, available shopping list for an order."""
    return ShoppingList(id=id, order_id=order_id, status=ShoppingListStatus.AVAILABLE, stops={})


class OrderRepository(Protocol):
    def ready(self, order_id: str) -> None: ...


class ProductRepository(Protocol):
    def find(self, product_id: str) -> Product: ...


class StoreRepository(Protocol):
    def find(self, store_id: str) -> Store: ...


class ShoppingListRepository(Protocol):
    def find(self, shopping_list_id: str) -> ShoppingList: ...

    def find_by_order_id(self, order_id: str) -> ShoppingList: ...

    def save(self, shopping_list: ShoppingList) -> None: ...

    def update(self, shopping_list: ShoppingList) -> None: ...