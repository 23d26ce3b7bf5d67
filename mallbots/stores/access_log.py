"""Access logging around the stores application."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

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
from mallbots.stores.domain import Product, Store


class LoggedApplication:
    """Wraps an application and logs entry to and exit from every call."""

    def __init__(self, app: Application, logger: logging.Logger) -> None:
        self.app = app
        self.logger = logger

    @contextmanager
    def _access(self, name: str) -> Iterator[None]:
        self.logger.info("--> Stores.%s", name)
        try:
            yield
        finally:
            self.logger.info("<-- Stores.%s", name)

    def create_store(self, cmd: CreateStore) -> None:
        with self._access("CreateStore"):
            return self.app.create_store(cmd)

    def enable_participation(self, cmd: EnableParticipation) -> None:
        with self._access("EnableParticipation"):
            return self.app.enable_participation(cmd)

    def disable_participation(self, cmd: DisableParticipation) -> None:
        with self._access("DisableParticipation"):
            return self.app.disable_participation(cmd)

    def add_product(self, cmd: AddProduct) -> None:
        with self._access("AddProduct"):
            return self.app.add_product(cmd)

    def remove_product(self, cmd: RemoveProduct) -> None:
        with self._access("RemoveProduct"):
            return self.app.remove_product(cmd)

    def get_store(self, query: GetStore) -> Store:
        with self._access("GetStore"):
            return self.app.get_store(query)

    def get_stores(self, query: GetStores) -> list[Store]:
        with self._access("GetStores"):
            return self.app.get_stores(query)

    def get_participating_stores(self, query: GetParticipatingStores) -> list[Store]:
        with self._access("GetParticipatingStores"):
            return self.app.get_participating_stores(query)

    def get_catalog(self, query: GetCatalog) -> list[Product]:
        with self._access("GetCatalog"):
            return self.app.get_catalog(query)

    def get_product(self, query: GetProduct) -> Product:
        with self._access("GetProduct"):
            return self.app.get_product(query)


def log_application_access(app: Application, logger: logging.Logger) -> LoggedApplication:
    return LoggedApplication(app, logger)