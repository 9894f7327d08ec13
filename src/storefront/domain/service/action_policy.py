"""Domain service: which status transitions a role may trigger.

``available_actions`` is pure: the same (status, role) always yields the
same set.  The lifecycle itself (which step follows which) lives on the
Order aggregate; this module only adds who may take each step.
"""

from __future__ import annotations

from storefront.domain.model.order import NEXT_STATUS, Order, OrderStatus
from storefront.domain.model.role import Role

# Target status -> roles allowed to move an order into it.
PERMITTED_ROLES: dict[OrderStatus, frozenset[Role]] = {
    OrderStatus.PICKING_DONE: frozenset({Role.PICKER, Role.CASHIER}),
    OrderStatus.COMPLETED: frozenset({Role.CASHIER}),
}

ACTION_LABELS: dict[OrderStatus, str] = {
    OrderStatus.PICKING_DONE: "Picking done",
    OrderStatus.COMPLETED: "Confirm payment",
}


def available_actions(order: Order, role: Role) -> frozenset[OrderStatus]:
    """Return the transitions ``role`` may apply to ``order`` right now."""
    target = NEXT_STATUS.get(order.status)
    if target is None or role not in PERMITTED_ROLES[target]:
        return frozenset()
    return frozenset({target})


def can_delete_orders(role: Role) -> bool:
    return role is Role.CASHIER