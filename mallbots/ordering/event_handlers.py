"""Reactions of the ordering module to its own domain events."""

from __future__ import annotations

from mallbots.ddd import Event
from mallbots.ordering.domain import (
    CustomerRepository,
    InvoiceRepository,
    NotificationRepository,
    OrderCanceled,
    OrderCreated,
    OrderReadied,
    PaymentRepository,
    ShoppingRepository,
)


class DomainEventHandlers:
    """Handlers for every order event; each one ignores its event unless overridden."""

    def on_order_created(self, event: Event) -> None:
        return None

    def on_order_canceled(self, event: Event) -> None:
        return None

    def on_order_readied(self, event: Event) -> None:
        return None

    def on_order_completed(self, event: Event) -> None:
        return None


class CustomerHandlers(DomainEventHandlers):
    def __init__(self, customers: CustomerRepository) -> None:
        self.customers = customers

    def on_order_created(self, event: Event) -> None:
        assert isinstance(event, OrderCreated)
        self.customers.authorize(event.order.customer_id)


class InvoiceHandlers(DomainEventHandlers):
    def __init__(self, invoices: InvoiceRepository) -> None:
        self.invoices = invoices

    def on_order_readied(self, event: Event) -> None:
        assert isinstance(event, OrderReadied)
        order = event.order
        self.invoices.save(order.id, order.payment_id, order.total)


class NotificationHandlers(DomainEventHandlers):
    def __init__(self, notifications: NotificationRepository) -> None:
        self.notifications = notifications

    def on_order_created(self, event: Event) -> None:
        assert isinstance(event, OrderCreated)
        self.notifications.notify_order_created(event.order.id, event.order.customer_id)

    def on_order_canceled(self, event: Event) -> None:
        assert isinstance(event, OrderCanceled)
        self.notifications.notify_order_canceled(event.order.id, event.order.customer_id)

    def on_order_readied(self, event: Event) -> None:
        assert isinstance(event, OrderReadied)
        self.notifications.notify_order_ready(event.order.id, event.order.customer_id)


class PaymentHandlers(DomainEventHandlers):
    def __init__(self, payments: PaymentRepository) -> None:
        self.payments = payments

    def on_order_created(self, event: Event) -> None:
        assert isinstance(event, OrderCreated)
        self.payments.confirm(event.order.payment_id)


class ShoppingHandlers(DomainEventHandlers):
    def __init__(self, shopping: ShoppingRepository) -> None:
        self.shopping = shopping

    def on_order_created(self, event: Event) -> None:
        """Create the shopping list and remember its id on the order."""
        assert isinstance(event, OrderCreated)
        event.order.shopping_id = self.shopping.create(event.order)

    def order_canceled(self, event: Event) -> None:
        """Cancel the order's shopping list; not wired as on_order_canceled."""
        assert isinstance(event, OrderCanceled)
        self.shopping.cancel(event.order.shopping_id)