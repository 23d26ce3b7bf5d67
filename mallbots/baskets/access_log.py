"""Access logging around the basket application."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from mallbots.baskets.application import (
    AddItem,
    Application,
    CancelBasket,
    CheckoutBasket,
    GetBasket,
    RemoveItem,
    StartBasket,
)
from mallbots.baskets.domain import Basket


class LoggedApplication:
    """Wraps an application and logs entry to and exit from every call."""

    def __init__(self, app: Application, logger: logging.Logger) -> None:
        self.app = app
        self.logger = logger

    @contextmanager
    def _access(self, name: str) -> Iterator[None]:
        self.logger.info("--> Baskets.%s", name)
        try:
            yield
        finally:
            self.logger.info("<-- Baskets.%s", name)

    def start_basket(self, cmd: StartBasket) -> None:
        with self._access("StartBasket"):
            return self.app.start_basket(cmd)

    def cancel_basket(self, cmd: CancelBasket) -> None:
        with self._access("CancelBasket"):
            return self.app.cancel_basket(cmd)

    def checkout_basket(self, cmd: CheckoutBasket) -> str:
        with self._access("CheckoutBasket"):
            return self.app.checkout_basket(cmd)

    def add_item(self, cmd: AddItem) -> None:
        with self._access("AddItem"):
            return self.app.add_item(cmd)

    def remove_item(self, cmd: RemoveItem) -> None:
        with self._access("RemoveItem"):
            return self.app.remove_item(cmd)

    def get_basket(self, query: GetBasket) -> Basket:
        with self._access("GetBasket"):
            return self.app.get_basket(query)


def log_application_access(app: Application, logger: logging.Logger) -> LoggedApplication:
    return LoggedApplication(app, logger)