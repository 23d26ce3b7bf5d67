"""SQL storage for customers."""

from __future__ import annotations

from sqlalchemy import Engine, text

from mallbots.customers.domain import Customer


class CustomerRepository:
    def __init__(self, table_name: str, engine: Engine) -> None:
        self.table_name = table_name
        self.engine = engine

    def _table(self, query: str) -> str:
        return query.format(table=self.table_name)

    def find(self, customer_id: str) -> Customer:
        """Load a customer; raises ``sqlalchemy.exc.NoResultFound`` if absent."""
        query = "SELECT name, sms_number, enabled FROM {table} WHERE id = :id LIMIT 1"
        with self.engine.connect() as conn:
            row = conn.execute(text(self._table(query)), {"id": customer_id}).one()
        return Customer(
            id=customer_id, name=row.name, sms_number=row.sms_number, enabled=bool(row.enabled)
        )

    def save(self, customer: Customer) -> None:
        query = (
            "INSERT INTO {table} (id, name, sms_number, enabled) "
            "VALUES (:id, :name, :sms_number, :enabled)"
        )
        self._execute(query, customer)

    def update(self, customer: Customer) -> None:
        query = (
            "UPDATE {table} SET name = :name, sms_number = :sms_number, "
            "enabled = :enabled WHERE id = :id"
        )
        self._execute(query, customer)

    def _execute(self, query: str, customer: Customer) -> None:
        params = {
            "id": customer.id,
            "name": customer.name,
            "sms_number": customer.sms_number,
            "enabled": customer.enabled,
        }
        with self.engine.begin() as conn:
            conn.execute(text(self._table(query)), params)