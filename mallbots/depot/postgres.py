"""SQL storage for shopping lists; stops are kept as a JSON document."""

from __future__ import annotations

import json
from typing import Any

from sqlalchemy import Engine, text

from mallbots.depot.domain import Item, ShoppingList, Stop, to_shopping_list_status


def _field(obj: dict[str, Any], name: str, default: Any) -> Any:
    lowered = name.lower()
    for key, value in obj.items():
        if key.lower() == lowered:
            return default if value is None else value
    return default


def _stops_to_json(stops: dict[str, Stop]) -> str:
    return json.dumps(
        {
            store_id: {
                "StoreName": stop.store_name,
                "StoreLocation": stop.store_location,
                "Items": {
                    product_id: {"ProductName": item.product_name, "Quantity": item.quantity}
                    for product_id, item in stop.items.items()
                },
            }
            for store_id, stop in stops.items()
        }
    )


def _stops_from_json(raw: str | bytes) -> dict[str, Stop]:
    decoded: Any = json.loads(raw)
    if decoded is None:
        return {}
    stops = {}
    for store_id, entry in decoded.items():
        entry = entry or {}
        items = {
            product_id: Item(
                product_name=_field(item or {}, "ProductName", ""),
                quantity=_field(item or {}, "Quantity", 0),
            )
            for product_id, item in _field(entry, "Items", {}).items()
        }
        stops[store_id] = Stop(
            store_name=_field(entry, "StoreName", ""),
            store_location=_field(entry, "StoreLocation", ""),
            items=items,
        )
    return stops


class ShoppingListRepository:
    def __init__(self, table_name: str, engine: Engine) -> None:
        self.table_name = table_name
        self.engine = engine

    def _table(self, query: str) -> str:
        return query.format(table=self.table_name)

    def find(self, shopping_list_id: str) -> ShoppingList:
        """Load a list by id; raises ``sqlalchemy.exc.NoResultFound`` if absent."""
        query = (
            "SELECT order_id, stops, assigned_bot_id, status FROM {table} "
            "WHERE id = :id LIMIT 1"
        )
        with self.engine.connect() as conn:
            row = conn.execute(text(self._table(query)), {"id": shopping_list_id}).one()
        return ShoppingList(
            id=shopping_list_id,
            order_id=row.order_id,
            stops=_stops_from_json(row.stops),
            assigned_bot_id=row.assigned_bot_id,
            status=to_shopping_list_status(row.status),
        )

    def find_by_order_id(self, order_id: str) -> ShoppingList:
        """Load a list by its order; raises ``sqlalchemy.exc.NoResultFound`` if absent."""
        query = (
            "SELECT id, stops, assigned_bot_id, status FROM {table} "
            "WHERE order_id = :order_id LIMIT 1"
        )
        with self.engine.connect() as conn:
            row = conn.execute(text(self._table(query)), {"order_id": order_id}).one()
        return ShoppingList(
            id=row.id,
            order_id=order_id,
            stops=_stops_from_json(row.stops),
            assigned_bot_id=row.assigned_bot_id,
            status=to_shopping_list_status(row.status),
        )

    def save(self, shopping_list: ShoppingList) -> None:
        query = (
            "INSERT INTO {table} (id, order_id, stops, assigned_bot_id, status) "
            "VALUES (:id, :order_id, :stops, :assigned_bot_id, :status)"
        )
        self._execute(query, shopping_list)

    def update(self, shopping_list: ShoppingList) -> None:
        query = (
            "UPDATE {table} SET stops = :stops, assigned_bot_id = :assigned_bot_id, "
            "status = :status WHERE id = :id"
        )
        self._execute(query, shopping_list)

    def _execute(self, query: str, shopping_list: ShoppingList) -> None:
        params = {
            "id": shopping_list.id,
            "order_id": shopping_list.order_id,
            "stops": _stops_to_json(shopping_list.stops),
            "assigned_bot_id": shopping_list.assigned_bot_id,
            "status": str(shopping_list.status),
        }
        with self.engine.begin() as conn:
            conn.execute(text(self._table(query)), params)