"""Customer aggregate and the repository it is stored through."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class CustomerError(Exception):
    """A customer rule was broken."""


@dataclass
class Customer:
    id: str
    name: str
    sms_number: str
    enabled: bool = False

    def enable(self) -> None:
        if self.enabled:
            raise CustomerError("customer is already enabled")
        self.enabled = True

    def disable(self) -> None:
        if not self.enabled:
            raise CustomerError("customer is already disabled")
        self.enabled = False


def register_customer(id: str, name: str, sms_number: str) -> Customer:
    """Create a new, disabled customer after validating its fields."""
    if not id:
        raise CustomerError("customer id cannot be blank")
    if not name:
        raise CustomerError("customer name cannot be blank")
    if not sms_number:
        raise CustomerError("SMS number cannot be blank")
    return Customer(id=id, name=name, sms_number=sms_number, enabled=False)


class CustomerRepository(Protocol):
    def find(self, customer_id: str) -> Customer: ...

    def save(self, customer: Customer) -> None: ...

    def update(self, customer: Customer) -> None: ...