"""Application service: Save Product use case (add or edit).

Editing a product's price does NOT affect any existing orders — they
captured a price snapshot at creation time.
"""

from __future__ import annotations

import logging

from storefront.application.dto import ProductDTO, ProductSpec
from storefront.application.publish import publish_products
from storefront.application.sync import Synchronizer
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.identity import timestamped_id
from storefront.domain.model.product import PLACEHOLDER_IMAGE, Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class SaveProductHandler:

    def __init__(self, product_repo: ProductRepository, synchronizer: Synchronizer) -> None:
        self._product_repo = product_repo
        self._synchronizer = synchronizer

    def handle(self, spec: ProductSpec) -> ProductDTO:
        price = Money.of(spec.price)

        if spec.id is not None:
            existing = self._product_repo.get_by_id(spec.id)
            if existing is None:
                raise EntityNotFoundError(f"Product with ID '{spec.id}' not found")
            image = spec.image or existing.image
            product_id = spec.id
        else:
            image = spec.image or PLACEHOLDER_IMAGE
            product_id = timestamped_id("p")

        product = Product(
            id=product_id,
            name=spec.name.strip(),
            price=price,
            unit=spec.unit.strip(),
            category=spec.category.strip(),
            image=image,
            spec=spec.spec.strip(),
        )
        self._product_repo.save(product)
        publish_products(self._product_repo, self._synchronizer)

        logger.info("Product %s '%s' saved at %s", product.id, product.name, product.price)
        return ProductDTO.from_product(product)
