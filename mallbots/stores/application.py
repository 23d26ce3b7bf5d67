"""Store and product use cases."""

from __future__ import annotations

from dataclasses import dataclass

from mallbots.stores.domain import (
    ParticipatingStoreRepository,
    Product,
    ProductRepository,
    Store,
    StoreRepository,
    create_product,
    create_store,
)


@dataclass(frozen=True)
class CreateStore:
    id: str
    name: str
    location: str


@dataclass(frozen=True)
class EnableParticipation:
    id: str


@dataclass(frozen=True)
class DisableParticipation:
    id: str


@dataclass(frozen=True)
class AddProduct:
    id: str
    store_id: str
    name: str
    description: str = ""
    sku: str = ""
    price: float = 0.0


@dataclass(frozen=True)
class RemoveProduct:
    id: str


@dataclass(frozen=True)
class GetStore:
    id: str


@dataclass(frozen=True)
class GetStores:
    pass


@dataclass(frozen=True)
class GetParticipatingStores:
    pass


@dataclass(frozen=True)
class GetCatalog:
    store_id: str


@dataclass(frozen=True)
class GetProduct:
    id: str


class Application:
    def __init__(
        self,
        stores: StoreRepository,
        participating_stores: ParticipatingStoreRepository,
        products: ProductRepository,
    ) -> None:
        self.stores = stores
        self.participating_stores = participating_stores
        self.products = products

    def create_store(self, cmd: CreateStore) -> None:
        store = create_store(cmd.id, cmd.name, cmd.location)
        self.stores.save(store)

    def enable_participation(self, cmd: EnableParticipation) -> None:
        store = self.stores.find(cmd.id)
        store.enable_participation()
        self.stores.update(store)

    def disable_participation(self, cmd: DisableParticipation) -> None:
        store = self.stores.find(cmd.id)
        store.disable_participation()
        self.stores.update(store)

    def add_product(self, cmd: AddProduct) -> None:
        """Add a product to an existing store."""
        try:
            self.stores.find(cmd.store_id)
            product = create_product(
                cmd.id, cmd.store_id, cmd.name, cmd.description, cmd.sku, cmd.price
            )
            self.products.add_product(product)
        except Exception as exc:
            exc.add_note("error adding product")
            raise

    def remove_product(self, cmd: RemoveProduct) -> None:
        self.products.remove_product(cmd.id)

    def get_store(self, query: GetStore) -> Store:
        return self.stores.find(query.id)

    def get_stores(self, query: GetStores) -> list[Store]:
        return self.stores.find_all()

    def get_participating_stores(self, query: GetParticipatingStores) -> list[Store]:
        return self.participating_stores.find_all()

    def get_catalog(self, query: GetCatalog) -> list[Product]:
        return self.products.get_catalog(query.store_id)

    def get_product(self, query: GetProduct) -> Product:
        return self.products.find_product(query.id)