"""Application service: Update Order Status use case.

The single entry point for every lifecycle transition.  Legality of the
step itself is enforced by the Order aggregate; *who* may take it is the
dispatcher's concern.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from storefront.application.publish import publish_orders
from storefront.application.sync import Synchronizer
from storefront.domain.model.order import Order, OrderStatus, utc_now
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        synchronizer: Synchronizer,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._order_repo = order_repo
        self._synchronizer = synchronizer
        self._clock = clock

    def handle(self, order_id: str, next_status: OrderStatus) -> Order | None:
        """Apply ``next_status`` and broadcast the order collection.

        An order that no longer exists (deleted from another view) is
        logged and ignored; the return value is then None.
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            logger.warning(
                "Order %s not found; status change to %s ignored",
                order_id,
                next_status.value,
            )
            return None

        previous = order.status
        order.advance_to(next_status, now=self._clock())
        self._order_repo.save(order)
        publish_orders(self._order_repo, self._synchronizer)

        logger.info(
            "Order %s: %s -> %s", order.id, previous.value, order.status.value
        )
        return order
