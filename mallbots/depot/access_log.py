"""Access logging around the depot application."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from mallbots.depot.application import (
    Application,
    AssignShoppingList,
    CancelShoppingList,
    CompleteShoppingList,
    CreateShoppingList,
    GetShoppingList,
)
from mallbots.depot.domain import ShoppingList


class LoggedApplication:
    """Wraps an application and logs entry to and exit from every call."""

    def __init__(self, app: Application, logger: logging.Logger) -> None:
        self.app = app
        self.logger = logger

    @contextmanager
    def _access(self, name: str) -> Iterator[None]:
        self.logger.info("--> Depot.%s", name)
        try:
            yield
        finally:
            self.logger.info("<-- Depot.%s", name)

    def create_shopping_list(self, cmd: CreateShoppingList) -> None:
        with self._access("CreateShoppingList"):
            return self.app.create_shopping_list(cmd)

    def cancel_shopping_list(self, cmd: CancelShoppingList) -> None:
        with self._access("CancelShoppingList"):
            return self.app.cancel_shopping_list(cmd)

    def assign_shopping_list(self, cmd: AssignShoppingList) -> None:
        with self._access("AssignShoppingList"):
            return self.app.assign_shopping_list(cmd)

    def complete_shopping_list(self, cmd: CompleteShoppingList) -> None:
        with self._access("CompleteShoppingList"):
            return self.app.complete_shopping_list(cmd)

    def get_shopping_list(self, query: GetShoppingList) -> ShoppingList:
        with self._access("GetShoppingList"):
            return self.app.get_shopping_list(query)


def log_application_access(app: Application, logger: logging.Logger) -> LoggedApplication:
    return LoggedApplication(app, logger)