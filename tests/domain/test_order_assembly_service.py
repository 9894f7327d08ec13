"""Unit tests for the OrderAssemblyService domain service."""

from datetime import datetime, timezone

import pytest

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.service.order_assembly_service import OrderAssemblyService

NOW = datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc)

CATALOG = [
    Product(id="p1", name="Fuji Apples", price=Money.of(8.5), unit="500g"),
    Product(id="p2", name="Napa Cabbage", price=Money.of(1.2), unit="500g"),
]


class TestAssemble:

    def test_single_entry_example(self):
        order = OrderAssemblyService().assemble(
            Cart({"p1": 3}), CATALOG, client_id="C-ABC123", now=NOW
        )
        assert order.total_amount == Money.of("25.5")
        assert len(order.items) == 1
        item = order.items[0]
        assert (item.product_id, item.name, item.quantity.value, item.price) == (
            "p1", "Fuji Apples", 3, Money.of("8.5"),
        )

    def test_order_fields(self):
        order = OrderAssemblyService().assemble(
            Cart({"p1": 1, "p2": 2}), CATALOG, client_id="C-ABC123", now=NOW
        )
        assert order.status == OrderStatus.PENDING
        assert order.client_id == "C-ABC123"
        assert order.created_at == order.updated_at == NOW
        assert len(order.id) == 9 and order.id.isalnum() and order.id.upper() == order.id

    def test_fresh_id_per_order(self):
        svc = OrderAssemblyService()
        ids = {svc.assemble(Cart({"p1": 1}), CATALOG, "C-ABC123").id for _ in range(20)}
        assert len(ids) == 20

    def test_explicit_id_is_used(self):
        order = OrderAssemblyService().assemble(
            Cart({"p1": 1}), CATALOG, "C-ABC123", order_id="FIXED0001"
        )
        assert order.id == "FIXED0001"

    def test_items_follow_cart_order(self):
        order = OrderAssemblyService().assemble(
            Cart({"p2": 1, "p1": 1}), CATALOG, "C-ABC123"
        )
        assert [i.product_id for i in order.items] == ["p2", "p1"]

    def test_missing_products_fail_as_a_whole(self):
        cart = Cart({"p1": 1, "gone1": 2, "gone2": 1})
        with pytest.raises(EntityNotFoundError, match="gone1, gone2"):
            OrderAssemblyService().assemble(cart, CATALOG, "C-ABC123")
        assert cart.quantities == {"p1": 1, "gone1": 2, "gone2": 1}

    def test_empty_cart_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            OrderAssemblyService().assemble(Cart(), CATALOG, "C-ABC123")
