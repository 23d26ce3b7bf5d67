"""Depot use cases."""

from __future__ import annotations

from dataclasses import dataclass

from mallbots.depot.domain import (
    OrderRepository,
    ProductRepository,
    ShoppingList,
    ShoppingListRepository,
    StoreRepository,
    create_shopping,
)


@dataclass(frozen=True)
class OrderItem:
    store_id: str
    product_id: str
    quantity: int


@dataclass(frozen=True)
class CreateShoppingList:
    id: str
    order_id: str
    items: tuple[OrderItem, ...] = ()


@dataclass(frozen=True)
class CancelShoppingList:
    id: str


@dataclass(frozen=True)
class AssignShoppingList:
    id: str
    bot_id: str


@dataclass(frozen=True)
class CompleteShoppingList:
    id: str


@dataclass(frozen=True)
class GetShoppingList:
    id: str


class Application:
    def __init__(
        self,
        shopping_lists: ShoppingListRepository,
        stores: StoreRepository,
        products: ProductRepository,
        orders: OrderRepository,
    ) -> None:
        self.shopping_lists = shopping_lists
        self.stores = stores
        self.products = products
        self.orders = orders

    def create_shopping_list(self, cmd: CreateShoppingList) -> None:
        shopping = create_shopping(cmd.id, cmd.order_id)

        try:
            for item in cmd.items:
                store = self.stores.find(item.store_id)
                product = self.products.find(item.product_id)
                shopping.add_item(store, product, item.quantity)
        except Exception as exc:
            exc.add_note("building shopping list")
            raise

        try:
            self.shopping_lists.save(shopping)
        except Exception as exc:
            exc.add_note("scheduling shopping")
            raise

    def cancel_shopping_list(self, cmd: CancelShoppingList) -> None:
        shopping = self.shopping_lists.find(cmd.id)
        shopping.cancel()
        self.shopping_lists.update(shopping)

    def assign_shopping_list(self, cmd: AssignShoppingList) -> None:
        shopping = self.shopping_lists.find(cmd.id)
        shopping.assign(cmd.bot_id)
        self.shopping_lists.update(shopping)

    def complete_shopping_list(self, cmd: CompleteShoppingList) -> None:
        """Complete the list, mark its order ready, then store the list."""
        shopping = self.shopping_lists.find(cmd.id)
        shopping.complete()
        self.orders.ready(shopping.order_id)
        self.shopping_lists.update(shopping)

    def get_shopping_list(self, query: GetShoppingList) -> ShoppingList:
        return self.shopping_lists.find(query.id)