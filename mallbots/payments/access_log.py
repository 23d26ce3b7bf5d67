"""Access logging around the payments application."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from mallbots.payments.application import (
    AdjustInvoice,
    Application,
    AuthorizePayment,
    CancelInvoice,
    ConfirmPayment,
    CreateInvoice,
    PayInvoice,
)


class LoggedApplication:
    """Wraps an application and logs entry to and exit from every call."""

    def __init__(self, app: Application, logger: logging.Logger) -> None:
        self.app = app
        self.logger = logger

    @contextmanager
    def _access(self, name: str) -> Iterator[None]:
        self.logger.info("--> Payments.%s", name)
        try:
            yield
        finally:
            self.logger.info("<-- Payments.%s", name)

    def authorize_payment(self, cmd: AuthorizePayment) -> None:
        with self._access("AuthorizePayment"):
            return self.app.authorize_payment(cmd)

    def create_invoice(self, cmd: CreateInvoice) -> None:
        with self._access("CreateInvoice"):
            return self.app.create_invoice(cmd)

    def adjust_invoice(self, cmd: AdjustInvoice) -> None:
        with self._access("AdjustInvoice"):
            return self.app.adjust_invoice(cmd)

    def pay_invoice(self, cmd: PayInvoice) -> None:
        with self._access("PayInvoice"):
            return self.app.pay_invoice(cmd)

    def cancel_invoice(self, cmd: CancelInvoice) -> None:
        with self._access("CancelInvoice"):
            return self.app.cancel_invoice(cmd)

    def confirm_payment(self, query: ConfirmPayment) -> None:
        with self._access("ConfirmPayment"):
            return self.app.confirm_payment(query)


def log_application_access(app: Application, logger: logging.Logger) -> LoggedApplication:
    return LoggedApplication(app, logger)