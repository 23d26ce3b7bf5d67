"""Ordering use cases."""

from __future__ import annotations

from dataclasses import dataclass

from mallbots.ordering.domain import Item, Order, OrderError, OrderRepository, create_order


@dataclass(frozen=True)
class CreateOrder:
    id: str
    customer_id: str
    payment_id: str
    items: tuple[Item, ...] = ()


@dataclass(frozen=True)
class CancelOrder:
    id: str


@dataclass(frozen=True)
class ReadyOrder:
    id: str


@dataclass(frozen=True)
class CompleteOrder:
    id: str
    invoice_id: str = ""


@dataclass(frozen=True)
class GetOrder:
    id: str


class Application:
    def __init__(self, orders: OrderRepository, domain_publisher) -> None:
        self.orders = orders
        self.domain_publisher = domain_publisher

    def create_order(self, cmd: CreateOrder) -> None:
        """Create the order, publish its events, then store it."""
        try:
            order = create_order(cmd.id, cmd.customer_id, cmd.payment_id, list(cmd.items))
        except Exception as exc:
            exc.add_note("create order command")
            raise

        self.domain_publisher.publish(*order.events)

        try:
            self.orders.save(order)
        except Exception as exc:
            exc.add_note("create order command")
            raise

    def cancel_order(self, cmd: CancelOrder) -> None:
        order = self.orders.find(cmd.id)
        order.cancel()
        self.domain_publisher.publish(*order.events)
        self.orders.update(order)

    def ready_order(self, cmd: ReadyOrder) -> None:
        """Mark the order ready; an order that cannot be readied is left as it is."""
        order = self.orders.find(cmd.id)
        try:
            order.ready()
        except OrderError:
            return
        self.domain_publisher.publish(*order.events)
        self.orders.update(order)

    def complete_order(self, cmd: CompleteOrder) -> None:
        """Complete the order; an order that cannot be completed is left as it is."""
        order = self.orders.find(cmd.id)
        try:
            order.complete(cmd.invoice_id)
        except OrderError:
            return
        self.orders.update(order)

    def get_order(self, query: GetOrder) -> Order:
        try:
            return self.orders.find(query.id)
        except Exception as exc:
            exc.add_note("get order query")
            raise