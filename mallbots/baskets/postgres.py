"""SQL storage for baskets; items are kept as a JSON document."""

from __future__ import annotations

import json
from typing import Any

from sqlalchemy import Engine, text

from mallbots.baskets.domain import Basket, BasketError, BasketStatus, Item

_ITEM_FIELDS = (
    ("StoreID", "store_id", ""),
    ("ProductID", "product_id", ""),
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
        lowered = {key.lower(): value for key, value in entry.items()}
        items.append(
            Item(**{attr: lowered.get(key.lower(), default) for key, attr, default in _ITEM_FIELDS})
        )
    return items


def _status_to_domain(status: str) -> BasketStatus:
    if status in (BasketStatus.OPEN, BasketStatus.CANCELLED, BasketStatus.CHECKED_OUT):
        return BasketStatus(status)
    raise BasketError(f"unknown basket status: {status}")


class BasketRepository:
    def __init__(self, table_name: str, engine: Engine) -> None:
        self.table_name = table_name
        self.engine = engine

    def _table(self, query: str) -> str:
        return query.format(table=self.table_name)

    def find(self, basket_id: str) -> Basket:
        """Load a basket; raises ``sqlalchemy.exc.NoResultFound`` if absent."""
        query = "SELECT customer_id, payment_id, items, status FROM {table} WHERE id = :id LIMIT 1"
        with self.engine.connect() as conn:
            row = conn.execute(text(self._table(query)), {"id": basket_id}).one()
        status = _status_to_domain(row.status)
        return Basket(
            id=basket_id,
            customer_id=row.customer_id,
            payment_id=row.payment_id,
            items=_items_from_json(row.items),
            status=status,
        )

    def save(self, basket: Basket) -> None:
        query = (
            "INSERT INTO {table} (id, customer_id, payment_id, items, status) "
            "VALUES (:id, :customer_id, :payment_id, :items, :status)"
        )
        self._execute(query, basket)

    def update(self, basket: Basket) -> None:
        query = (
            "UPDATE {table} SET customer_id = :customer_id, payment_id = :payment_id, "
            "items = :items, status = :status WHERE id = :id"
        )
        self._execute(query, basket)

    def delete_basket(self, basket_id: str) -> None:
        with self.engine.begin() as conn:
            conn.execute(text(self._table("DELETE FROM {table} WHERE id = :id")), {"id": basket_id})

    def _execute(self, query: str, basket: Basket) -> None:
        params = {
            "id": basket.id,
            "customer_id": basket.customer_id,
            "payment_id": basket.payment_id,
            "items": _items_to_json(basket.items),
            "status": str(basket.status),
        }
        with self.engine.begin() as conn:
            conn.execute(text(self._table(query)), params)