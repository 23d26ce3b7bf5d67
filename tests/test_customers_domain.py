import pytest

from mallbots.customers.domain import Customer, CustomerError, register_customer


def test_register_customer_starts_disabled():
    customer = register_customer("c-1", "Ada", "555-0100")
    assert customer == Customer(id="c-1", name="Ada", sms_number="555-0100", enabled=False)


@pytest.mark.parametrize(
    ("args", "message"),
    [
        (("", "Ada", "555-0100"), "customer id cannot be blank"),
        (("c-1", "", "555-0100"), "customer name cannot be blank"),
        (("c-1", "Ada", ""), "SMS number cannot be blank"),
    ],
)
def test_register_customer_validation(args, message):
    with pytest.raises(CustomerError, match=message):
        register_customer(*args)


def test_enable_then_disable():
    customer = register_customer("c-1", "Ada", "555-0100")
    customer.enable()
    assert customer.enabled is True
    customer.disable()
    assert customer.enabled is False


def test_enable_twice_fails():
    customer = register_customer("c-1", "Ada", "555-0100")
    customer.enable()
    with pytest.raises(CustomerError, match="customer is already enabled"):
        customer.enable()
    assert customer.enabled is True


def test_disable_when_disabled_fails():
    customer = register_customer("c-1", "Ada", "555-0100")
    with pytest.raises(CustomerError, match="customer is already disabled"):
        customer.disable()