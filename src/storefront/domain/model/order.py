"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its line items.  Its lifecycle
is strictly linear::

    PENDING -> PICKING_DONE -> COMPLETED

There is no cancellation state and no way back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class OrderStatus(Enum):
    PENDING = "PENDING"
    PICKING_DONE = "PICKING_DONE"
    COMPLETED = "COMPLETED"


# The only legal forward step from each status.  COMPLETED is terminal.
NEXT_STATUS: dict[OrderStatus, OrderStatus] = {
    OrderStatus.PENDING: OrderStatus.PICKING_DONE,
    OrderStatus.PICKING_DONE: OrderStatus.COMPLETED,
}


@dataclass(frozen=True)
class OrderItem:
    """Captures the name and price of a product at order-creation time.

    Later catalog edits never reach an existing order through its items.
    """

    product_id: str
    name: str
    quantity: Quantity
    price: Money  # locked at order-creation time

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders — it computes the
    total.  The ``__init__`` is intentionally simple so the repository
    can reconstitute persisted orders without recomputing anything:
    ``total_amount`` is stored, never recalculated.
    """

    id: str
    client_id: str
    items: list[OrderItem]
    total_amount: Money
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        order_id: str,
        client_id: str,
        items: list[OrderItem],
        now: datetime | None = None,
    ) -> Order:
        """Create a PENDING order whose total is the sum of its line totals."""
        if not client_id or not client_id.strip():
            raise ValidationError("Client identifier is required")

        if not items:
            raise ValidationError("Order must contain at least one item")

        total = Money.zero(items[0].price.currency)
        for item in items:
            total = total + item.line_total

        now = now or utc_now()
        return Order(
            id=order_id,
            client_id=client_id,
            items=list(items),
            total_amount=total,
            status=OrderStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

    # --- State transitions ----------------------------------------------------

    def advance_to(self, target: OrderStatus, now: datetime | None = None) -> None:
        """Move the order to ``target`` and stamp ``updated_at``.

        Re-applying the current status is accepted and only refreshes
        ``updated_at``.  Any move other than the single forward step
        raises ValidationError.
        """
        if target != self.status and NEXT_STATUS.get(self.status) != target:
            raise ValidationError(
                f"Cannot move order {self.id} from {self.status.value} "
                f"to {target.value}"
            )
        self.status = target
        self.updated_at = now or utc_now()

    # --- Computed properties --------------------------------------------------

    @property
    def next_status(self) -> OrderStatus | None:
        return NEXT_STATUS.get(self.status)

    @property
    def is_completed(self) -> bool:
        return self.status == OrderStatus.COMPLETED

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)
