"""Access logging around the customer application."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from mallbots.customers.application import (
    Application,
    AuthorizeCustomer,
    DisableCustomer,
    EnableCustomer,
    GetCustomer,
    RegisterCustomer,
)
from mallbots.customers.domain import Customer


class LoggedApplication:
    """Wraps an application and logs entry to and exit from every call."""

    def __init__(self, app: Application, logger: logging.Logger) -> None:
        self.app = app
        self.logger = logger

    @contextmanager
    def _access(self, name: str) -> Iterator[None]:
        self.logger.info("--> Customers.%s", name)
        try:
            yield
        finally:
            self.logger.info("<-- Customers.%s", name)

    def register_customer(self, cmd: RegisterCustomer) -> None:
        with self._access("RegisterCustomer"):
            return self.app.register_customer(cmd)

    def enable_customer(self, cmd: EnableCustomer) -> None:
        with self._access("EnableCustomer"):
            return self.app.enable_customer(cmd)

    def disable_customer(self, cmd: DisableCustomer) -> None:
        with self._access("DisableCustomer"):
            return self.app.disable_customer(cmd)

    def authorize_customer(self, query: AuthorizeCustomer) -> None:
        with self._access("AuthorizeCustomer"):
            return self.app.authorize_customer(query)

    def get_customer(self, query: GetCustomer) -> Customer:
        with self._access("GetCustomer"):
            return self.app.get_customer(query)


def log_application_access(app: Application, logger: logging.Logger) -> LoggedApplication:
    return LoggedApplication(app, logger)