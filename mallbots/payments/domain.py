"""Invoices, payments and the repositories the payments module relies on."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol


class InvoiceStatus(StrEnum):
    UNKNOWN = ""
    PENDING = "pending"
    PAID = "paid"
    CANCELED = "canceled"


@dataclass
class Invoice:
    id: str
    order_id: str
    amount: float
    status: InvoiceStatus = InvoiceStatus.UNKNOWN


@dataclass
class Payment:
    id: str
    customer_id: str
    amount: float


class InvoiceRepository(Protocol):
    def find(self, invoice_id: str) -> Invoice: ...

    def save(self, invoice: Invoice) -> None: ...

    def update(self, invoice: Invoice) -> None: ...


class OrderRepository(Protocol):
    def complete(self, invoice_id: str, order_id: str) -> None: ...


class PaymentRepository(Protocol):
    def save(self, payment: Payment) -> None: ...

    def find(self, payment_id: str) -> Payment: ...