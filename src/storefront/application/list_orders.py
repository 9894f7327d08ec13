"""Application service: order lists per role (query).

Staff see the task board: everything not yet completed (the cashier
also sees completed orders), most recently touched first.  Customers
see only their own open orders.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO
from storefront.domain.exceptions import StoreUnavailableError, ValidationError
from storefront.domain.model.order import Order
from storefront.domain.model.role import Role
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


def board_orders(orders: list[Order], role: Role) -> list[Order]:
    visible = [o for o in orders if not o.is_completed or role is Role.CASHIER]
    return sorted(visible, key=lambda o: o.updated_at, reverse=True)


def open_orders_for_client(orders: list[Order], client_id: str) -> list[Order]:
    return [o for o in orders if o.client_id == client_id and not o.is_completed]


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, role: Role, client_id: str | None = None) -> list[OrderDTO]:
        if role is Role.CUSTOMER and not client_id:
            raise ValidationError("A client identifier is required to list your orders")

        try:
            orders = self._order_repo.list_all()
        except StoreUnavailableError:
            logger.exception("Could not load orders; showing none")
            return []

        if role is Role.CUSTOMER:
            selected = open_orders_for_client(orders, client_id)  # type: ignore[arg-type]
        else:
            selected = board_orders(orders, role)
        return [OrderDTO.from_order(o, role) for o in selected]
