import pytest

from mallbots.stores.application import (
    AddProduct,
    Application,
    CreateStore,
    DisableParticipation,
    EnableParticipation,
    GetCatalog,
    GetParticipatingStores,
    GetProduct,
    GetStore,
    GetStores,
    RemoveProduct,
)
from mallbots.stores.domain import Product, ProductError, Store, StoreError


class FakeStores:
    def __init__(self):
        self.rows = {}
        self.updates = []

    def save(self, store):
        self.rows[store.id] = store

    def update(self, store):
        self.updates.append(store.id)
        self.rows[store.id] = store

    def delete(self, store_id):
        del self.rows[store_id]

    def find(self, store_id):
        return self.rows[store_id]

    def find_all(self):
        return list(self.rows.values())


class FakeParticipating:
    def __init__(self, stores):
        self.stores = stores

    def find_all(self):
        return [s for s in self.stores.rows.values() if s.participating]


class FakeProducts:
    def __init__(self):
        self.rows = {}

    def find_product(self, product_id):
        return self.rows[product_id]

    def add_product(self, product):
        self.rows[product.id] = product

    def remove_product(self, product_id):
        self.rows.pop(product_id, None)

    def get_catalog(self, store_id):
        return [p for p in self.rows.values() if p.store_id == store_id]


@pytest.fixture
def env():
    stores = FakeStores()
    products = FakeProducts()
    app = Application(stores, FakeParticipating(stores), products)
    return app, stores, products


def test_create_store_saves(env):
    app, stores, _ = env
    app.create_store(CreateStore(id="s1", name="Shop", location="Level 1"))
    assert stores.rows["s1"] == Store(id="s1", name="Shop", location="Level 1")


def test_create_store_invalid_not_saved(env):
    app, stores, _ = env
    with pytest.raises(StoreError):
        app.create_store(CreateStore(id="s1", name="", location="Level 1"))
    assert stores.rows == {}


def test_enable_and_disable_participation(env):
    app, stores, _ = env
    app.create_store(CreateStore(id="s1", name="Shop", location="Level 1"))
    app.enable_participation(EnableParticipation(id="s1"))
    assert stores.rows["s1"].participating is True
    app.disable_participation(DisableParticipation(id="s1"))
    assert stores.rows["s1"].participating is False
    assert stores.updates == ["s1", "s1"]


def test_enable_twice_does_not_update(env):
    app, stores, _ = env
    app.create_store(CreateStore(id="s1", name="Shop", location="Level 1"))
    app.enable_participation(EnableParticipation(id="s1"))
    with pytest.raises(StoreError):
        app.enable_participation(EnableParticipation(id="s1"))
    assert stores.updates == ["s1"]


def test_participating_stores(env):
    app, _, _ = env
    app.create_store(CreateStore(id="s1", name="Shop", location="Level 1"))
    app.create_store(CreateStore(id="s2", name="Other", location="Level 2"))
    app.enable_participation(EnableParticipation(id="s2"))
    assert [s.id for s in app.get_participating_stores(GetParticipatingStores())] == ["s2"]
    assert {s.id for s in app.get_stores(GetStores())} == {"s1", "s2"}
    assert app.get_store(GetStore(id="s1")).name == "Shop"


def test_add_and_get_product(env):
    app, _, products = env
    app.create_store(CreateStore(id="s1", name="Shop", location="Level 1"))
    app.add_product(
        AddProduct(id="p1", store_id="s1", name="Widget", description="d", sku="W", price=3.0)
    )
    expected = Product(id="p1", store_id="s1", name="Widget", description="d", sku="W", price=3.0)
    assert app.get_product(GetProduct(id="p1")) == expected
    assert app.get_catalog(GetCatalog(store_id="s1")) == [expected]


def test_add_product_unknown_store(env):
    app, _, products = env
    with pytest.raises(KeyError) as info:
        app.add_product(AddProduct(id="p1", store_id="missing", name="Widget", price=1.0))
    assert "error adding product" in info.value.__notes__
    assert products.rows == {}


def test_add_product_invalid(env):
    app, _, products = env
    app.create_store(CreateStore(id="s1", name="Shop", location="Level 1"))
    with pytest.raises(ProductError) as info:
        app.add_product(AddProduct(id="p1", store_id="s1", name="Widget", price=-1.0))
    assert "error adding product" in info.value.__notes__
    assert products.rows == {}


def test_remove_product(env):
    app, _, products = env
    app.create_store(CreateStore(id="s1", name="Shop", location="Level 1"))
    app.add_product(AddProduct(id="p1", store_id="s1", name="Widget", price=1.0))
    app.remove_product(RemoveProduct(id="p1"))
    assert app.get_catalog(GetCatalog(store_id="s1")) == []