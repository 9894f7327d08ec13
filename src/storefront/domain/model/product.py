"""Catalog aggregates: Product and Category.

Products live independently of orders. They have their own lifecycle:
prices change, products are added and removed from the catalog.
Categories are referenced from products by *name* only, so deleting a
category leaves products pointing at an orphaned category string.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

PLACEHOLDER_IMAGE = "https://picsum.photos/400/300"


@dataclass
class Product:
    """A product in the catalog.

    Edited as a whole by the cashier; there is no versioning, the last
    save wins.
    """

    id: str
    name: str
    price: Money
    unit: str = ""
    category: str = ""
    image: str = PLACEHOLDER_IMAGE
    spec: str = ""

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")

    def matches(self, query: str) -> bool:
        """Search on name or category, as the catalog search box does."""
        return query in self.name or query in self.category


@dataclass
class Category:
    id: str
    name: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Category name is required")
