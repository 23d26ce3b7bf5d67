"""SQL storage for orders; items are kept as a JSON document."""

from __future__ import annotations

import json
from typing import Any

from sqlalchemy import Engine, text

from mallbots.ordering.domain import Item, Order, to_order_status

_ITEM_FIELDS = (
    ("ProductID", "product_id", ""),
    ("StoreID", "store_id", ""),
    ("StoreName", "store_name", ""),
    ("ProductName", "product_name", ""),
    ("ProductPrice", "product_price", 0.0),
    ("Quantity", "quantity", 0),
)


def _items_to_json(items: list[Item]) -> str:
    return json.dumps(
        [{key: getattr(item, attr) for key, attr, _ in _ITEM_FIELDS} for item in items]
    )


def _items_from_json(raw: str | bytes) -> list[Item]:
    decoded: Any = json.loads(raw)
    if decoded is None:
        return []
    items = []
    for entry in decoded:
        lowered = {key.lower(): value for key, value in (entry or {}).items()}
        items.append(
            Item(**{attr: lowered.get(key.lower(), default) for key, attr, default in _ITEM_FIELDS})
        )
    return items


class OrderRepository:
    def __init__(self, table_name: str, engine: Engine) -> None:
        self.table_name = table_name
        self.engine = engine

    def _table(self, query: str) -> str:
        return query.format(table=self.table_name)

    def find(self, order_id: str) -> Order:
        """Load an order; raises ``sqlalchemy.exc.NoResultFound`` if absent."""
        query = (
            "SELECT customer_id, payment_id, shopping_id, invoice_id, items, status "
            "FROM {table} WHERE id = :id LIMIT 1"
        )
        try:
            with self.engine.connect() as conn:
                row = conn.execute(text(self._table(query)), {"id": order_id}).one()
        except Exception as exc:
            exc.add_note("scanning order")
            raise

        try:
            items = _items_from_json(row.items)
        except (ValueError, TypeError, AttributeError) as exc:
            exc.add_note("unmarshalling items")
            raise

        return Order(
            id=order_id,
            customer_id=row.customer_id,
            payment_id=row.payment_id,
            shopping_id=row.shopping_id,
            invoice_id=row.invoice_id,
            items=items,
            status=to_order_status(row.status),
        )

    def save(self, order: Order) -> None:
        query = (
            "INSERT INTO {table} "
            "(id, customer_id, payment_id, shopping_id, invoice_id, items, status) "
            "VALUES (:id, :customer_id, :payment_id, :shopping_id, :invoice_id, :items, :status)"
        )
        self._execute(query, order, "inserting order")

    def update(self, order: Order) -> None:
        query = (
            "UPDATE {table} SET customer_id = :customer_id, payment_id = :payment_id, "
            "shopping_id = :shopping_id, invoice_id = :invoice_id, items = :items, "
            "status = :status WHERE id = :id"
        )
        self._execute(query, order, "updating order")

    def _execute(self, query: str, order: Order, context: str) -> None:
        params = {
            "id": order.id,
            "customer_id": order.customer_id,
            "payment_id": order.payment_id,
            "shopping_id": order.shopping_id,
            "invoice_id": order.invoice_id,
            "items": _items_to_json(order.items),
            "status": str(order.status),
        }
        try:
            with self.engine.begin() as conn:
                conn.execute(text(self._table(query)), params)
        except Exception as exc:
            exc.add_note(context)
            raise