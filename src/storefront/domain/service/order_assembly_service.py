"""Domain service: Order Assembly.

Turns a cart into an Order using the catalog as it is *now*.

The two-phase approach (validate-then-build) ensures a cart that refers
to a product deleted since it was added fails as a whole, before any
line item is built, instead of blowing up half way through.
"""

from __future__ import annotations

from datetime import datetime

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.identity import new_order_id
from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Quantity


class OrderAssemblyService:

    def assemble(
        self,
        cart: Cart,
        catalog: list[Product],
        client_id: str,
        order_id: str | None = None,
        now: datetime | None = None,
    ) -> Order:
        """Build a PENDING order from ``cart``.

        Phase 1 — resolve every cart entry against the catalog and collect
                  all missing ids.  Fails before anything is built.
        Phase 2 — snapshot name and price per entry and let
                  ``Order.create`` compute the total.
        """
        if cart.is_empty:
            raise ValidationError("Order must contain at least one item")

        by_id = {p.id: p for p in catalog}

        # Phase 1: validate
        missing = [pid for pid in cart.quantities if pid not in by_id]
        if missing:
            raise EntityNotFoundError(
                "Products no longer in the catalog: " + ", ".join(missing)
            )

        # Phase 2: build
        items = [
            OrderItem(
                product_id=pid,
                name=by_id[pid].name,
                quantity=Quantity(qty),
                price=by_id[pid].price,  # <-- price snapshot
            )
            for pid, qty in cart.quantities.items()
        ]
        return Order.create(
            order_id=order_id or new_order_id(),
            client_id=client_id,
            items=items,
            now=now,
        )
