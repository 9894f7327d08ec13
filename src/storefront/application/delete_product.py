"""Application service: Delete Product use case.

Orders that reference the product keep their name and price snapshot.
An image uploaded for the product is removed with it.
"""

from __future__ import annotations

import logging

from storefront.application.publish import publish_products
from storefront.application.sync import Synchronizer
from storefront.domain.exceptions import EntityNotFoundError, UploadError
from storefront.domain.repository.image_store import ImageStore
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        image_store: ImageStore,
        synchronizer: Synchronizer,
    ) -> None:
        self._product_repo = product_repo
        self._image_store = image_store
        self._synchronizer = synchronizer

    def handle(self, product_id: str) -> None:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if self._image_store.owns(product.image):
            try:
                self._image_store.remove(product.image)
            except UploadError:
                logger.exception("Failed to remove image %s", product.image)

        self._product_repo.delete(product_id)
        publish_products(self._product_repo, self._synchronizer)
        logger.info("Product %s '%s' deleted", product.id, product.name)
