"""Application service: Browse Catalog use case (query)."""

from __future__ import annotations

import logging

from storefront.application.dto import CatalogDTO, ProductDTO
from storefront.domain.exceptions import StoreUnavailableError
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "All"


def category_chips(products: list[Product]) -> list[str]:
    """``All`` followed by each product category once, in catalog order."""
    seen = dict.fromkeys(p.category for p in products)
    return [ALL_CATEGORIES, *seen]


class BrowseCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, category: str = ALL_CATEGORIES, query: str = "") -> CatalogDTO:
        try:
            products = self._product_repo.list_all()
        except StoreUnavailableError:
            logger.exception("Could not load products; showing none")
            products = []

        selected = [
            p
            for p in products
            if (category == ALL_CATEGORIES or p.category == category)
            and p.matches(query)
        ]
        return CatalogDTO(
            categories=category_chips(products),
            products=[ProductDTO.from_product(p) for p in selected],
        )
