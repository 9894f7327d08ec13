"""Application service: role-gated order actions.

Offers each role only the transitions ``available_actions`` allows and
routes the chosen one through ``UpdateOrderStatusHandler``.  This is a
UI-level gate: the persistence layer does not check roles.
"""

from __future__ import annotations

import logging

from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.model.role import Role
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.action_policy import available_actions

logger = logging.getLogger(__name__)


class ActionDispatcher:

    def __init__(
        self,
        order_repo: OrderRepository,
        status_handler: UpdateOrderStatusHandler,
    ) -> None:
        self._order_repo = order_repo
        self._status_handler = status_handler

    def dispatch(
        self,
        order_id: str,
        role: Role,
        next_status: OrderStatus | None = None,
    ) -> Order | None:
        """Apply ``next_status`` (or the only action on offer) as ``role``.

        Raises ValidationError when the action is not on offer for this
        role.  A vanished order is a logged no-op, as in
        ``UpdateOrderStatusHandler``.
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            logger.warning("Order %s not found; nothing to dispatch", order_id)
            return None

        offered = available_actions(order, role)
        if next_status is None:
            if not offered:
                raise ValidationError(
                    f"No action available for {role.value} on order {order_id} "
                    f"({order.status.value})"
                )
            (next_status,) = offered

        if next_status not in offered:
            raise ValidationError(
                f"{role.value} may not move order {order_id} from "
                f"{order.status.value} to {next_status.value}"
            )

        return self._status_handler.handle(order_id, next_status)
