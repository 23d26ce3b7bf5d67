"""Customer use cases."""

from __future__ import annotations

from dataclasses import dataclass

from mallbots.customers.domain import Customer, CustomerRepository, register_customer


@dataclass(frozen=True)
class RegisterCustomer:
    id: str
    name: str
    sms_number: str


@dataclass(frozen=True)
class AuthorizeCustomer:
    id: str


@dataclass(frozen=True)
class GetCustomer:
    id: str


@dataclass(frozen=True)
class EnableCustomer:
    id: str


@dataclass(frozen=True)
class DisableCustomer:
    id: str


class CustomerNotAuthorizedError(Exception):
    """The customer exists but is not enabled."""


class Application:
    def __init__(self, customers: CustomerRepository) -> None:
        self.customers = customers

    def register_customer(self, cmd: RegisterCustomer) -> None:
        customer = register_customer(cmd.id, cmd.name, cmd.sms_number)
        self.customers.save(customer)

    def enable_customer(self, cmd: EnableCustomer) -> None:
        customer = self.customers.find(cmd.id)
        customer.enable()
        self.customers.update(customer)

    def disable_customer(self, cmd: DisableCustomer) -> None:
        customer = self.customers.find(cmd.id)
        customer.disable()
        self.customers.update(customer)

    def authorize_customer(self, query: AuthorizeCustomer) -> None:
        customer = self.customers.find(query.id)
        if not customer.enabled:
            raise CustomerNotAuthorizedError("customer is not authorized")

    def get_customer(self, query: GetCustomer) -> Customer:
        return self.customers.find(query.id)