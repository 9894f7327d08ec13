"""Cart — the customer's ephemeral selection.

Lives only in the submitting session and is never persisted.  It holds
product ids and positive quantities; a quantity that drops to zero
removes the entry instead of storing 0.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


@dataclass
class Cart:

    quantities: dict[str, int] = field(default_factory=dict)

    def add(self, product_id: str) -> None:
        self.quantities[product_id] = self.quantities.get(product_id, 0) + 1

    def remove(self, product_id: str) -> None:
        remaining = self.quantities.get(product_id, 0) - 1
        if remaining <= 0:
            self.quantities.pop(product_id, None)
        else:
            self.quantities[product_id] = remaining

    def quantity_of(self, product_id: str) -> int:
        return self.quantities.get(product_id, 0)

    def clear(self) -> None:
        self.quantities.clear()

    @property
    def is_empty(self) -> bool:
        return not self.quantities

    @property
    def item_count(self) -> int:
        return sum(self.quantities.values())

    def total(self, catalog: list[Product]) -> Money:
        """Running total shown while shopping.

        Products that have left the catalog count as zero here; submission
        is where missing products are rejected.
        """
        prices = {p.id: p.price for p in catalog}
        result = Money.zero()
        for product_id, qty in self.quantities.items():
            price = prices.get(product_id)
            if price is not None:
                result = result + price * qty
        return result
