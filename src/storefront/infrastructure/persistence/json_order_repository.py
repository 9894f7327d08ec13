"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_collection import JsonCollection
from storefront.infrastructure.persistence.records import (
    OrderRecord,
    RecordKind,
    parse_record,
)


def _as_utc(value: datetime) -> datetime:
    """Stored timestamps without an offset are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._collection = JsonCollection(file_path, RecordKind.ORDER)

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        for record in self._collection.load():
            if record.id == order_id:
                return self._to_domain(record)
        return None

    def list_all(self) -> list[Order]:
        return [self._to_domain(record) for record in self._collection.load()]

    def save(self, order: Order) -> None:
        self._collection.upsert(self._to_record(order))

    def delete(self, order_id: str) -> None:
        self._collection.remove(order_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_record(order: Order) -> OrderRecord:
        return parse_record(RecordKind.ORDER, {
            "id": order.id,
            "client_id": order.client_id,
            "status": order.status,
            "items": [
                {
                    "product_id": item.product_id,
                    "name": item.name,
                    "quantity": item.quantity.value,
                    "price": item.price.amount,
                }
                for item in order.items
            ],
            "total_amount": order.total_amount.amount,
            "currency": order.total_amount.currency,
            "created_at": order.created_at,
            "updated_at": order.updated_at,
        })

    @staticmethod
    def _to_domain(record: OrderRecord) -> Order:
        currency = record.currency
        items = [
            OrderItem(
                product_id=i.product_id,
                name=i.name,
                quantity=Quantity(i.quantity),
                price=Money(i.price, currency),
            )
            for i in record.items
        ]
        return Order(
            id=record.id,
            client_id=record.client_id,
            items=items,
            total_amount=Money(record.total_amount, currency),
            status=record.status,
            created_at=_as_utc(record.created_at),
            updated_at=_as_utc(record.updated_at),
        )
