"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from pathlib import Path

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_collection import JsonCollection
from storefront.infrastructure.persistence.records import (
    ProductRecord,
    RecordKind,
    parse_record,
)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._collection = JsonCollection(file_path, RecordKind.PRODUCT)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for record in self._collection.load():
            if record.id == product_id:
                return self._to_domain(record)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(record) for record in self._collection.load()]

    def save(self, product: Product) -> None:
        self._collection.upsert(self._to_record(product))

    def delete(self, product_id: str) -> None:
        self._collection.remove(product_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_record(product: Product) -> ProductRecord:
        return parse_record(RecordKind.PRODUCT, {
            "id": product.id,
            "name": product.name,
            "price": product.price.amount,
            "currency": product.price.currency,
            "unit": product.unit,
            "category": product.category,
            "image": product.image,
            "spec": product.spec,
        })

    @staticmethod
    def _to_domain(record: ProductRecord) -> Product:
        return Product(
            id=record.id,
            name=record.name,
            price=Money(record.price, record.currency),
            unit=record.unit,
            category=record.category,
            image=record.image,
            spec=record.spec,
        )
