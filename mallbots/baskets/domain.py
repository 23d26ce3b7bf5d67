"""Basket aggregate, its items and the repositories the basket module relies on."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol


class BasketError(Exception):
    """A basket rule was broken."""


class BasketStatus(StrEnum):
    UNKNOWN = ""
    OPEN = "open"
    CANCELLED = "cancelled"
    CHECKED_OUT = "checked_out"


@dataclass
class Item:
    store_id: str
    product_id: str
    store_name: str
    product_name: str
    product_price: float
    quantity: int


@dataclass
class Product:
    id: str
    store_id: str
    name: str
    price: float


@dataclass
class Store:
    id: str
    name: str
    location: str


def _precedes(a: Item, b: Item) -> bool:
    return a.store_name <= b.store_name and a.product_name < b.product_name


def _sort_items(items: list[Item]) -> None:
    """Stable in-place insertion sort using the basket's item ordering."""
    for i in range(1, len(items)):
        j = i
        while j > 0 and _precedes(items[j], items[j - 1]):
            items[j], items[j - 1] = items[j - 1], items[j]
            j -= 1


@dataclass
class Basket:
    id: str
    customer_id: str
    payment_id: str = ""
    items: list[Item] = field(default_factory=list)
    status: BasketStatus = BasketStatus.UNKNOWN

    def is_cancellable(self) -> bool:
        return self.status is BasketStatus.OPEN

    def is_open(self) -> bool:
        return self.status is BasketStatus.OPEN

    def cancel(self) -> None:
        if not self.is_cancellable():
            raise BasketError("basket cannot be canceled")
        self.status = BasketStatus.CANCELLED
        self.items = []

    def checkout(self, payment_id: str) -> None:
        if not self.is_open():
            raise BasketError("basket cannot be modified")
        if not self.items:
            raise BasketError("basket has no items")
        if not payment_id:
            raise BasketError("payment id cannot be blank")
        self.payment_id = payment_id
        self.status = BasketStatus.CHECKED_OUT

    def add_item(self, store: Store, product: Product, quantity: int) -> None:
        if not self.is_open():
            raise BasketError("basket cannot be modified")
        if quantity < 0:
            raise BasketError("item quantity cannot be negative")

        for item in self.items:
            if item.product_id == product.id and item.store_id == product.store_id:
                item.quantity += quantity
                return

        self.items.append(
            Item(
                store_id=store.id,
                product_id=product.id,
                store_name=store.name,
                product_name=product.name,
                product_price=product.price,
                quantity=quantity,
            )
        )
        _sort_items(self.items)

    def remove_item(self, product: Product, quantity: int) -> None:
        if not self.is_open():
            raise BasketError("basket cannot be modified")
        if quantity < 0:
            raise BasketError("item quantity cannot be negative")

        for index, item in enumerate(self.items):
            if item.product_id == product.id and item.store_id == product.store_id:
                item.quantity -= quantity
                if item.quantity < 1:
                    del self.items[index]
                return


def start_basket(id: str, customer_id: str) -> Basket:
    """Open a new, empty basket for a customer."""
    if not id:
        raise BasketError("basket id cannot be blank")
    if not customer_id:
        raise BasketError("customer id cannot be blank")
    return Basket(id=id, customer_id=customer_id, status=BasketStatus.OPEN, items=[])


class BasketRepository(Protocol):
    def find(self, basket_id: str) -> Basket: ...

    def save(self, basket: Basket) -> None: ...

    def update(self, basket: Basket) -> None: ...


class StoreRepository(Protocol):
    def find(self, store_id: str) -> Store: ...


class ProductRepository(Protocol):
    def find(self, product_id: str) -> Product: ...


class OrderRepository(Protocol):
    def save(self, basket: Basket) -> str: ...