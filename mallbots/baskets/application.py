"""Basket use cases."""

from __future__ import annotations

from dataclasses import dataclass

from mallbots.baskets.domain import (
    Basket,
    BasketRepository,
    OrderRepository,
    ProductRepository,
    StoreRepository,
    start_basket,
)


@dataclass(frozen=True)
class StartBasket:
    id: str
    customer_id: str


@dataclass(frozen=True)
class CancelBasket:
    id: str


@dataclass(frozen=True)
class CheckoutBasket:
    id: str
    payment_id: str


@dataclass(frozen=True)
class AddItem:
    id: str
    product_id: str
    quantity: int


@dataclass(frozen=True)
class RemoveItem:
    id: str
    product_id: str
    quantity: int


@dataclass(frozen=True)
class GetBasket:
    id: str


class Application:
    def __init__(
        self,
        baskets: BasketRepository,
        stores: StoreRepository,
        products: ProductRepository,
        orders: OrderRepository,
    ) -> None:
        self.baskets = baskets
        self.stores = stores
        self.products = products
        self.orders = orders

    def start_basket(self, cmd: StartBasket) -> None:
        basket = start_basket(cmd.id, cmd.customer_id)
        self.baskets.save(basket)

    def cancel_basket(self, cmd: CancelBasket) -> None:
        basket = self.baskets.find(cmd.id)
        basket.cancel()
        self.baskets.update(basket)

    def checkout_basket(self, cmd: CheckoutBasket) -> str:
        """Check the basket out, submit it as an order and return the order id."""
        basket = self.baskets.find(cmd.id)
        try:
            basket.checkout(cmd.payment_id)
            order_id = self.orders.save(basket)
            self.baskets.update(basket)
        except Exception as exc:
            exc.add_note("baskets checkout")
            raise
        return order_id

    def add_item(self, cmd: AddItem) -> None:
        basket = self.baskets.find(cmd.id)
        product = self.products.find(cmd.product_id)
        store = self.stores.find(product.store_id)
        basket.add_item(store, product, cmd.quantity)
        self.baskets.update(basket)

    def remove_item(self, cmd: RemoveItem) -> None:
        product = self.products.find(cmd.product_id)
        basket = self.baskets.find(cmd.id)
        basket.remove_item(product, cmd.quantity)
        self.baskets.update(basket)

    def get_basket(self, query: GetBasket) -> Basket:
        return self.baskets.find(query.id)