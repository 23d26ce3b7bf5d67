"""Access logging around the ordering application and its event handlers."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from mallbots.ddd import Event
from mallbots.ordering.application import (
    Application,
    CancelOrder,
    CompleteOrder,
    CreateOrder,
    GetOrder,
    ReadyOrder,
)
from mallbots.ordering.domain import Order
from mallbots.ordering.event_handlers import DomainEventHandlers


@contextmanager
def _access(logger: logging.Logger, name: str) -> Iterator[None]:
    logger.info("--> Ordering.%s", name)
    try:
        yield
    finally:
        logger.info("<-- Ordering.%s", name)


class LoggedApplication:
    """Wraps an application and logs entry to and exit from every call."""

    def __init__(self, app: Application, logger: logging.Logger) -> None:
        self.app = app
        self.logger = logger

    def create_order(self, cmd: CreateOrder) -> None:
        with _access(self.logger, "CreateOrder"):
            return self.app.create_order(cmd)

    def cancel_order(self, cmd: CancelOrder) -> None:
        with _access(self.logger, "CancelOrder"):
            return self.app.cancel_order(cmd)

    def ready_order(self, cmd: ReadyOrder) -> None:
        with _access(self.logger, "ReadyOrder"):
            return self.app.ready_order(cmd)

    def complete_order(self, cmd: CompleteOrder) -> None:
        with _access(self.logger, "CompleteOrder"):
            return self.app.complete_order(cmd)

    def get_order(self, query: GetOrder) -> Order:
        with _access(self.logger, "GetOrder"):
            return self.app.get_order(query)


class LoggedDomainEventHandlers:
    """Wraps event handlers and logs the created, canceled and readied reactions."""

    def __init__(self, handlers: DomainEventHandlers, logger: logging.Logger) -> None:
        self.handlers = handlers
        self.logger = logger

    def on_order_created(self, event: Event) -> None:
        with _access(self.logger, "OnOrderCreated"):
            return self.handlers.on_order_created(event)

    def on_order_canceled(self, event: Event) -> None:
        with _access(self.logger, "OnOrderCanceled"):
            return self.handlers.on_order_canceled(event)

    def on_order_readied(self, event: Event) -> None:
        with _access(self.logger, "OnOrderReadied"):
            return self.handlers.on_order_readied(event)

    def on_order_completed(self, event: Event) -> None:
        """Passed straight through without access logging."""
        return self.handlers.on_order_completed(event)


def log_application_access(app: Application, logger: logging.Logger) -> LoggedApplication:
    return LoggedApplication(app, logger)


def log_domain_event_handler_access(
    handlers: DomainEventHandlers, logger: logging.Logger
) -> LoggedDomainEventHandlers:
    return LoggedDomainEventHandlers(handlers, logger)