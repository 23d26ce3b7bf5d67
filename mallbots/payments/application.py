"""Payment and invoice use cases."""

from __future__ import annotations

from dataclasses import dataclass

from mallbots.payments.domain import (
    Invoice,
    InvoiceRepository,
    InvoiceStatus,
    OrderRepository,
    Payment,
    PaymentRepository,
)


class InvoiceError(Exception):
    """An invoice is not in a state that allows the requested change."""


@dataclass(frozen=True)
class AuthorizePayment:
    id: str
    customer_id: str
    amount: float


@dataclass(frozen=True)
class ConfirmPayment:
    id: str


@dataclass(frozen=True)
class CreateInvoice:
    id: str
    order_id: str
    amount: float
    payment_id: str = ""


@dataclass(frozen=True)
class AdjustInvoice:
    id: str
    amount: float


@dataclass(frozen=True)
class PayInvoice:
    id: str


@dataclass(frozen=True)
class CancelInvoice:
    id: str


class Application:
    def __init__(
        self,
        invoices: InvoiceRepository,
        payments: PaymentRepository,
        orders: OrderRepository,
    ) -> None:
        self.invoices = invoices
        self.payments = payments
        self.orders = orders

    def authorize_payment(self, cmd: AuthorizePayment) -> None:
        self.payments.save(Payment(id=cmd.id, customer_id=cmd.customer_id, amount=cmd.amount))

    def create_invoice(self, cmd: CreateInvoice) -> None:
        self.invoices.save(
            Invoice(
                id=cmd.id,
                order_id=cmd.order_id,
                amount=cmd.amount,
                status=InvoiceStatus.PENDING,
            )
        )

    def adjust_invoice(self, cmd: AdjustInvoice) -> None:
        invoice = self.invoices.find(cmd.id)
        invoice.amount = cmd.amount
        self.invoices.update(invoice)

    def pay_invoice(self, cmd: PayInvoice) -> None:
        """Mark a pending invoice paid, complete its order, then store the invoice."""
        invoice = self.invoices.find(cmd.id)
        if invoice.status is not InvoiceStatus.PENDING:
            raise InvoiceError("invoice cannot be paid for")
        invoice.status = InvoiceStatus.PAID
        self.orders.complete(invoice.id, invoice.order_id)
        self.invoices.update(invoice)

    def cancel_invoice(self, cmd: CancelInvoice) -> None:
        invoice = self.invoices.find(cmd.id)
        if invoice.status is not InvoiceStatus.PENDING:
            raise InvoiceError("invoice cannot be canceled")
        invoice.status = InvoiceStatus.CANCELED
        self.invoices.update(invoice)

    def confirm_payment(self, query: ConfirmPayment) -> None:
        """Succeed if the payment exists; the repository raises otherwise."""
        self.payments.find(query.id)