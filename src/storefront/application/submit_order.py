"""Application service: Submit Order use case.

Orchestrates the flow between repositories, the domain model and the
synchronizer.  This is the only place that coordinates the cart, the
catalog and the order collection.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from storefront.application.dto import OrderDTO
from storefront.application.publish import publish_orders
from storefront.application.sync import Synchronizer
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import utc_now
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.order_assembly_service import OrderAssemblyService

logger = logging.getLogger(__name__)


class SubmitOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        synchronizer: Synchronizer,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._synchronizer = synchronizer
        self._clock = clock

    def handle(self, cart: Cart, client_id: str) -> OrderDTO:
        """Turn the cart into a PENDING order.

        Steps:
        1. Assemble the order against the *current* catalog (fails as a
           whole if any product vanished; nothing is persisted).
        2. Persist it.
        3. Clear the cart.
        4. Broadcast the full order collection to other views.
        """
        svc = OrderAssemblyService()
        order = svc.assemble(
            cart,
            self._product_repo.list_all(),
            client_id=client_id,
            now=self._clock(),
        )

        self._order_repo.save(order)
        cart.clear()
        publish_orders(self._order_repo, self._synchronizer)

        logger.info(
            "Order %s submitted by %s: %d items, total %s",
            order.id,
            client_id,
            order.item_count,
            order.total_amount,
        )
        return OrderDTO.from_order(order)
