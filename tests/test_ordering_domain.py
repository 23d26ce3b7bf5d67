import pytest

from mallbots.ordering.domain import (
    Order,
    OrderCanceled,
    OrderCompleted,
    OrderCreated,
    OrderError,
    OrderReadied,
    OrderStatus,
    Item,
    create_order,
    to_order_status,
)


def _item(price=4.0, quantity=1):
    return Item(
        product_id="p1",
        store_id="s1",
        store_name="Store",
        product_name="Widget",
        product_price=price,
        quantity=quantity,
    )


def _order():
    return create_order("o1", "c1", "pay1", [_item()])


def test_create_order_is_pending_with_created_event():
    order = _order()
    assert order.status is OrderStatus.PENDING
    assert order.customer_id == "c1"
    assert order.payment_id == "pay1"
    assert len(order.events) == 1
    assert isinstance(order.events[0], OrderCreated)
    assert order.events[0].order is order


@pytest.mark.parametrize(
    "customer_id, payment_id, items, message",
    [
        ("c1", "pay1", [], "order has no items"),
        ("", "", [], "order has no items"),
        ("", "pay1", [_item()], "customer id cannot be blank"),
        ("c1", "", [_item()], "payment id cannot be blank"),
    ],
)
def test_create_order_validation(customer_id, payment_id, items, message):
    with pytest.raises(OrderError, match=message):
        create_order("o1", customer_id, payment_id, items)


def test_cancel_pending_order():
    order = _order()
    order.cancel()
    assert order.status is OrderStatus.CANCELED
    assert isinstance(order.events[-1], OrderCanceled)
    with pytest.raises(OrderError, match="order cannot be cancelled"):
        order.cancel()


def test_ready_pending_order():
    order = _order()
    order.ready()
    assert order.status is OrderStatus.READY
    assert isinstance(order.events[-1], OrderReadied)


def test_ready_requires_pending():
    order = _order()
    order.cancel()
    with pytest.raises(OrderError, match="order cannot be ready"):
        order.ready()


def test_complete_ready_order():
    order = _order()
    order.ready()
    order.complete("inv1")
    assert order.status is OrderStatus.COMPLETED
    assert order.invoice_id == "inv1"
    assert isinstance(order.events[-1], OrderCompleted)
    assert [type(e) for e in order.events] == [OrderCreated, OrderReadied, OrderCompleted]


def test_complete_requires_ready():
    order = _order()
    with pytest.raises(OrderError, match="order cannot be completed"):
        order.complete("inv1")
    assert order.invoice_id == ""
    assert order.status is OrderStatus.PENDING


def test_total_of_single_item():
    order = create_order("o1", "c1", "pay1", [_item(price=4.0, quantity=1)])
    assert order.total == 4.0


def test_total_with_zero_quantity_and_no_items():
    assert create_order("o1", "c1", "pay1", [_item(quantity=0)]).total == 0.0
    assert Order(id="o2").total == 0.0


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("pending", OrderStatus.PENDING),
        ("in-progress", OrderStatus.IN_PROCESS),
        ("ready", OrderStatus.READY),
        ("canceled", OrderStatus.CANCELED),
        ("completed", OrderStatus.COMPLETED),
        ("bogus", OrderStatus.UNKNOWN),
        ("", OrderStatus.UNKNOWN),
    ],
)
def test_to_order_status(raw, expected):
    assert to_order_status(raw) is expected


def test_status_round_trips_through_string():
    for status in OrderStatus:
        assert to_order_status(str(status)) is status


def test_event_names():
    order = _order()
    order.ready()
    order.complete("inv1")
    names = [event.event_name for event in order.events]
    assert names == [
        "ordering.OrderCreated",
        "ordering.OrderReadied",
        "ordering.OrderCompleted",
    ]
    cancelled = _order()
    cancelled.cancel()
    assert cancelled.events[-1].event_name == "ordering.OrderCanceled"