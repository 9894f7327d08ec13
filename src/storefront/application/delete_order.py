"""Application service: Delete Order use case (cashier only)."""

from __future__ import annotations

import logging

from storefront.application.publish import publish_orders
from storefront.application.sync import Synchronizer
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.role import Role
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.action_policy import can_delete_orders

logger = logging.getLogger(__name__)


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository, synchronizer: Synchronizer) -> None:
        self._order_repo = order_repo
        self._synchronizer = synchronizer

    def handle(self, order_id: str, role: Role) -> None:
        if not can_delete_orders(role):
            raise ValidationError(f"{role.value} may not delete orders")

        if self._order_repo.get_by_id(order_id) is None:
            raise EntityNotFoundError(f"Order {order_id} not found")

        self._order_repo.delete(order_id)
        publish_orders(self._order_repo, self._synchronizer)
        logger.info("Order %s deleted", order_id)
