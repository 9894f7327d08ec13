"""Broadcast the full current collection after a write."""

from __future__ import annotations

import logging

from storefront.application.sync import Synchronizer, SyncMessage, SyncTopic
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


def publish_orders(order_repo: OrderRepository, synchronizer: Synchronizer) -> None:
    orders = order_repo.list_all()
    synchronizer.broadcast(SyncMessage(SyncTopic.ORDERS_UPDATED, orders))
    logger.debug("Broadcast %d orders", len(orders))


def publish_products(
    product_repo: ProductRepository, synchronizer: Synchronizer
) -> None:
    products = product_repo.list_all()
    synchronizer.broadcast(SyncMessage(SyncTopic.PRODUCTS_UPDATED, products))
    logger.debug("Broadcast %d products", len(products))
