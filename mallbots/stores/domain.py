"""Stores, their products and the repositories the stores module relies on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class StoreError(Exception):
    """A store rule was broken."""


class ProductError(Exception):
    """A product rule was broken."""


@dataclass
class Store:
    id: str
    name: str
    location: str
    participating: bool = False

    def enable_participation(self) -> None:
        if self.participating:
            raise StoreError("store is already participating")
        self.participating = True

    def disable_participation(self) -> None:
        if not self.participating:
            raise StoreError("store is already not participating")
        self.participating = False


@dataclass
class Product:
    id: str
    store_id: str
    name: str
    description: str = ""
    sku: str = ""
    price: float = 0.0


def create_store(id: str, name: str, location: str) -> Store:
    """Create a store that does not yet participate."""
    if not name:
        raise StoreError("store name cannot be blank")
    if not location:
        raise StoreError("store location cannot be blank")
    return Store(id=id, name=name, location=location)


def create_product(
    id: str, store_id: str, name: str, description: str, sku: str, price: float
) -> Product:
    """Create a product after checking its name and price."""
    if not name:
        raise ProductError("product name cannot be blank")
    if price < 0:
        raise ProductError("product price cannot be negative")
    return Product(
        id=id,
        store_id=store_id,
        name=name,
        description=description,
        sku=sku,
        price=price,
    )


class StoreRepository(Protocol):
    def save(self, store: Store) -> None: ...

    def update(self, store: Store) -> None: ...

    def delete(self, store_id: str) -> None: ...

    def find(self, store_id: str) -> Store: ...

    def find_all(self) -> list[Store]: ...


class ParticipatingStoreRepository(Protocol):
    def find_all(self) -> list[Store]: ...


class ProductRepository(Protocol):
    def find_product(self, product_id: str) -> Product: ...

    def add_product(self, product: Product) -> None: ...

    def remove_product(self, product_id: str) -> None: ...

    def get_catalog(self, store_id: str) -> list[Product]: ...