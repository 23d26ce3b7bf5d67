import pytest

from mallbots.ordering.domain import (
    Item,
    OrderCanceled,
    OrderCompleted,
    OrderCreated,
    OrderReadied,
    create_order,
)
from mallbots.ordering.event_handlers import (
    CustomerHandlers,
    InvoiceHandlers,
    NotificationHandlers,
    PaymentHandlers,
    ShoppingHandlers,
)


class Recorder:
    def __init__(self, result=None, error=None):
        self.calls = []
        self.result = result
        self.error = error

    def __getattr__(self, name):
        def method(*args):
            self.calls.append((name, args))
            if self.error is not None:
                raise self.error
            return self.result

        return method


def _order():
    item = Item("p1", "s1", "Store", "Widget", 4.0, 1)
    return create_order("o1", "c1", "pay1", [item])


def test_customer_handlers_authorize_on_created():
    repo = Recorder()
    order = _order()
    CustomerHandlers(repo).on_order_created(OrderCreated(order=order))
    assert repo.calls == [("authorize", ("c1",))]


def test_customer_handlers_ignore_other_events():
    repo = Recorder()
    handlers = CustomerHandlers(repo)
    order = _order()
    handlers.on_order_canceled(OrderCanceled(order=order))
    handlers.on_order_readied(OrderReadied(order=order))
    handlers.on_order_completed(OrderCompleted(order=order))
    assert repo.calls == []


def test_invoice_handlers_save_total_on_readied():
    repo = Recorder()
    order = _order()
    InvoiceHandlers(repo).on_order_readied(OrderReadied(order=order))
    assert repo.calls == [("save", ("o1", "pay1", order.total))]


def test_notification_handlers_notify_each_event():
    repo = Recorder()
    handlers = NotificationHandlers(repo)
    order = _order()
    handlers.on_order_created(OrderCreated(order=order))
    handlers.on_order_canceled(OrderCanceled(order=order))
    handlers.on_order_readied(OrderReadied(order=order))
    handlers.on_order_completed(OrderCompleted(order=order))
    assert repo.calls == [
        ("notify_order_created", ("o1", "c1")),
        ("notify_order_canceled", ("o1", "c1")),
        ("notify_order_ready", ("o1", "c1")),
    ]


def test_payment_handlers_confirm_on_created():
    repo = Recorder()
    PaymentHandlers(repo).on_order_created(OrderCreated(order=_order()))
    assert repo.calls == [("confirm", ("pay1",))]


def test_shopping_handlers_set_shopping_id():
    repo = Recorder(result="shop1")
    order = _order()
    ShoppingHandlers(repo).on_order_created(OrderCreated(order=order))
    assert order.shopping_id == "shop1"
    assert repo.calls == [("create", (order,))]


def test_shopping_handlers_order_canceled_cancels_list():
    repo = Recorder()
    order = _order()
    order.shopping_id = "shop1"
    ShoppingHandlers(repo).order_canceled(OrderCanceled(order=order))
    assert repo.calls == [("cancel", ("shop1",))]


def test_shopping_handlers_on_order_canceled_is_ignored():
    repo = Recorder()
    order = _order()
    order.shopping_id = "shop1"
    ShoppingHandlers(repo).on_order_canceled(OrderCanceled(order=order))
    assert repo.calls == []


def test_repository_errors_propagate():
    repo = Recorder(error=RuntimeError("down"))
    order = _order()
    with pytest.raises(RuntimeError, match="down"):
        ShoppingHandlers(repo).on_order_created(OrderCreated(order=order))
    assert order.shopping_id == ""