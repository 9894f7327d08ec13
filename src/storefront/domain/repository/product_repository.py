"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in insertion order."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product (upsert by ID)."""

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove a product; unknown IDs are ignored."""
