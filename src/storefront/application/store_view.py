"""Per-view in-memory state, kept current by snapshot broadcasts.

A StoreView is what one open "tab" shows.  On every message it throws
away its collection and takes the received one; there is no merging.
"""

from __future__ import annotations

import logging

from storefront.application.order_alert import OrderAlert
from storefront.application.sync import Synchronizer, SyncMessage, SyncTopic
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.model.role import Role

logger = logging.getLogger(__name__)


class StoreView:

    def __init__(self, role: Role, alert: OrderAlert | None = None) -> None:
        self.role = role
        self.orders: list[Order] = []
        self.products: list[Product] = []
        self._alert = alert
        self._synchronizer: Synchronizer | None = None

    def load(self, products: list[Product], orders: list[Order]) -> None:
        self.products = list(products)
        self.orders = list(orders)

    def attach(self, synchronizer: Synchronizer) -> None:
        self.detach()
        synchronizer.subscribe(self.handle)
        self._synchronizer = synchronizer

    def detach(self) -> None:
        if self._synchronizer is not None:
            self._synchronizer.unsubscribe(self.handle)
            self._synchronizer = None

    def handle(self, message: SyncMessage) -> None:
        if message.topic is SyncTopic.ORDERS_UPDATED:
            self.orders = list(message.payload)
            logger.debug("%s view received %d orders", self.role.value, len(self.orders))
            if self.role.is_staff and self._alert is not None:
                self._alert.trigger()
        elif message.topic is SyncTopic.PRODUCTS_UPDATED:
            self.products = list(message.payload)
            logger.debug("%s view received %d products", self.role.value, len(self.products))
