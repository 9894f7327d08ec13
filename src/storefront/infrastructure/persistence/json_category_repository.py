"""JSON-file-backed implementation of CategoryRepository."""

from __future__ import annotations

from pathlib import Path

from storefront.domain.model.product import Category
from storefront.domain.repository.category_repository import CategoryRepository
from storefront.infrastructure.persistence.json_collection import JsonCollection
from storefront.infrastructure.persistence.records import RecordKind, parse_record


class JsonCategoryRepository(CategoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._collection = JsonCollection(file_path, RecordKind.CATEGORY)

    def get_by_id(self, category_id: str) -> Category | None:
        for category in self.list_all():
            if category.id == category_id:
                return category
        return None

    def get_by_name(self, name: str) -> Category | None:
        for category in self.list_all():
            if category.name.lower() == name.lower():
                return category
        return None

    def list_all(self) -> list[Category]:
        return [Category(id=r.id, name=r.name) for r in self._collection.load()]

    def save(self, category: Category) -> None:
        self._collection.upsert(
            parse_record(RecordKind.CATEGORY, {"id": category.id, "name": category.name})
        )

    def delete(self, category_id: str) -> None:
        self._collection.remove(category_id)
