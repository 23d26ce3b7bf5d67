import pytest

from mallbots.payments.domain import Invoice, InvoiceStatus, Payment


@pytest.mark.parametrize(
    "raw, status",
    [
        ("pending", InvoiceStatus.PENDING),
        ("paid", InvoiceStatus.PAID),
        ("canceled", InvoiceStatus.CANCELED),
        ("", InvoiceStatus.UNKNOWN),
    ],
)
def test_status_round_trips_through_string(raw, status):
    assert InvoiceStatus(raw) is status
    assert str(status) == raw


def test_unrecognised_status_is_rejected():
    with pytest.raises(ValueError):
        InvoiceStatus("refunded")


def test_invoice_defaults_to_unknown_status():
    invoice = Invoice(id="i1", order_id="o1", amount=10.0)
    assert invoice.status is InvoiceStatus.UNKNOWN


def test_invoice_is_mutable_and_compares_by_value():
    invoice = Invoice("i1", "o1", 10.0, InvoiceStatus.PENDING)
    other = Invoice("i1", "o1", 10.0, InvoiceStatus.PENDING)
    assert invoice == other
    invoice.status = InvoiceStatus.PAID
    assert invoice != other


def test_payment_holds_its_fields():
    payment = Payment(id="pay1", customer_id="c1", amount=3.5)
    assert (payment.id, payment.customer_id, payment.amount) == ("pay1", "c1", 3.5)