"""Wiring of ordering event handlers to a domain event subscriber."""

from __future__ import annotations

from mallbots.ordering.domain import OrderCanceled, OrderCreated, OrderReadied


def register_customer_handlers(handlers, subscriber) -> None:
    subscriber.subscribe(OrderCreated, handlers.on_order_created)


def register_invoice_handlers(handlers, subscriber) -> None:
    subscriber.subscribe(OrderReadied, handlers.on_order_readied)


def register_notification_handlers(handlers, subscriber) -> None:
    subscriber.subscribe(OrderCreated, handlers.on_order_created)
    subscriber.subscribe(OrderCanceled, handlers.on_order_canceled)
    subscriber.subscribe(OrderReadied, handlers.on_order_readied)


def register_payment_handlers(handlers, subscriber) -> None:
    subscriber.subscribe(OrderCreated, handlers.on_order_created)


def register_shopping_handlers(handlers, subscriber) -> None:
    subscriber.subscribe(OrderCreated, handlers.on_order_created)
    subscriber.subscribe(OrderCanceled, handlers.on_order_canceled)