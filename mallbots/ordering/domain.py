"""Order aggregate, its events and statuses, and the repositories ordering relies on."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar, Protocol

from mallbots.ddd import AggregateBase, Event


class OrderError(Exception):
    """An order rule was broken."""


class OrderStatus(StrEnum):
    UNKNOWN = ""
    PENDING = "pending"
    IN_PROCESS = "in-progress"
    READY = "ready"
    COMPLETED = "completed"
    CANCELED = "canceled"


def to_order_status(status: str) -> OrderStatus:
    """Map a stored status to an order status; anything unrecognised is UNKNOWN."""
    try:
        return OrderStatus(status)
    except ValueError:
        return OrderStatus.UNKNOWN


@dataclass
class Item:
    product_id: str
    store_id: str
    store_name: str
    product_name: str
    product_price: float
    quantity: int


@dataclass
class Invoice:
    id: str
    amount: float


@dataclass
class Order(AggregateBase):
    customer_id: str = ""
    payment_id: str = ""
    invoice_id: str = ""
    shopping_id: str = ""
    items: list[Item] = field(default_factory=list)
    status: OrderStatus = OrderStatus.UNKNOWN

    @property
    def total(self) -> float:
        """Sum of price times quantity over all items."""
        return sum((item.product_price * item.quantity for item in self.items), 0.0)

    def cancel(self) -> None:
        if self.status is not OrderStatus.PENDING:
            raise OrderError("order cannot be cancelled")
        self.status = OrderStatus.CANCELED
        self.add_event(OrderCanceled(order=self))

    def ready(self) -> None:
        if self.status is not OrderStatus.PENDING:
            raise OrderError("order cannot be ready")
        self.status = OrderStatus.READY
        self.add_event(OrderReadied(order=self))

    def complete(self, invoice_id: str) -> None:
        if self.status is not OrderStatus.READY:
            raise OrderError("order cannot be completed")
        self.invoice_id = invoice_id
        self.status = OrderStatus.COMPLETED
        self.add_event(OrderCompleted(order=self))


@dataclass
class OrderCreated(Event):
    event_name: ClassVar[str] = "ordering.OrderCreated"
    order: Order


@dataclass
class OrderCanceled(Event):
    event_name: ClassVar[str] = "ordering.OrderCanceled"
    order: Order


@dataclass
class OrderReadied(Event):
    event_name: ClassVar[str] = "ordering.OrderReadied"
    order: Order


@dataclass
class OrderCompleted(Event):
    event_name: ClassVar[str] = "ordering.OrderCompleted"
    order: Order


def create_order(id: str, customer_id: str, payment_id: str, items: list[Item]) -> Order:
    """Create a pending order and record an OrderCreated event on it."""
    if not items:
        raise OrderError("order has no items")
    if not customer_id:
        raise OrderError("customer id cannot be blank")
    if not payment_id:
        raise OrderError("payment id cannot be blank")
    order = Order(
        id=id,
        customer_id=customer_id,
        payment_id=payment_id,
        items=list(items),
        status=OrderStatus.PENDING,
    )
    order.add_event(OrderCreated(order=order))
    return order


class CustomerRepository(Protocol):
    def authorize(self, customer_id: str) -> None: ...


class InvoiceRepository(Protocol):
    def save(self, order_id: str, payment_id: str, amount: float) -> None: ...

    def delete(self, invoice_id: str) -> None: ...


class NotificationRepository(Protocol):
    def notify_order_created(self, order_id: str, customer_id: str) -> None: ...

    def notify_order_canceled(self, order_id: str, customer_id: str) -> None: ...

    def notify_order_ready(self, order_id: str, customer_id: str) -> None: ...


class OrderRepository(Protocol):
    def find(self, order_id: str) -> Order: ...

    def save(self, order: Order) -> None: ...

    def update(self, order: Order) -> None: ...


class PaymentRepository(Protocol):
    def confirm(self, payment_id: str) -> None: ...


class ShoppingRepository(Protocol):
    def create(self, order: Order) -> str: ...

    def cancel(self, shopping_id: str) -> None: ...