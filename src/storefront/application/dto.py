"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Money is pre-formatted
here; the domain keeps exact Decimals.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.model.role import Role
from storefront.domain.service.action_policy import available_actions


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single line item as displayed to the user."""

    product_id: str
    name: str
    quantity: int
    price: str  # formatted, e.g. "¥8.50"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    short_id: str
    client_id: str
    status: str
    items: list[OrderItemDTO]
    item_count: int
    total: str
    created_at: str
    updated_at: str
    actions: list[str]  # target statuses the viewing role may apply

    @staticmethod
    def from_order(order: Order, role: Role | None = None) -> OrderDTO:
        actions = available_actions(order, role) if role is not None else frozenset()
        return OrderDTO(
            id=order.id,
            short_id=order.id[-4:],
            client_id=order.client_id,
            status=order.status.value,
            items=[
                OrderItemDTO(
                    product_id=item.product_id,
                    name=item.name,
                    quantity=item.quantity.value,
                    price=item.price.display(),
                    line_total=item.line_total.display(),
                )
                for item in order.items
            ],
            item_count=order.item_count,
            total=order.total_amount.display(),
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
            updated_at=order.updated_at.strftime("%Y-%m-%d %H:%M UTC"),
            actions=sorted(a.value for a in actions),
        )


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: str
    unit: str
    category: str
    image: str
    spec: str

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=product.price.display(1),
            unit=product.unit,
            category=product.category,
            image=product.image,
            spec=product.spec,
        )


@dataclass(frozen=True)
class CatalogDTO:
    """Output: what the customer sees on the shop page."""

    categories: list[str]  # filter chips, "All" first
    products: list[ProductDTO]


@dataclass(frozen=True)
class ProductSpec:
    """Input: the cashier's product form.  ``id=None`` means a new product."""

    name: str
    price: str
    unit: str = ""
    category: str = ""
    image: str | None = None
    spec: str = ""
    id: str | None = None
