"""Tests for store initialization and seeding."""

import pytest

from storefront.application.initialize_store import (
    DEFAULT_CATEGORIES,
    InitializeStoreHandler,
)
from storefront.domain.exceptions import StoreUnavailableError
from storefront.domain.model.product import Category, Product
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeCategoryRepository, FakeOrderRepository, FakeProductRepository


def _handler(products=None, categories=None, orders=None):
    product_repo = FakeProductRepository(products)
    order_repo = FakeOrderRepository(orders)
    category_repo = FakeCategoryRepository(categories)
    return (
        InitializeStoreHandler(product_repo, order_repo, category_repo),
        product_repo,
        order_repo,
        category_repo,
    )


def test_empty_store_is_seeded():
    handler, product_repo, _, category_repo = _handler()
    snapshot = handler.handle()
    assert len(snapshot.products) == 5
    assert product_repo.get_by_id("p1").price == Money.of("8.5")
    assert [c.name for c in category_repo.list_all()] == DEFAULT_CATEGORIES


def test_existing_data_is_left_alone():
    handler, product_repo, _, category_repo = _handler(
        products=[Product("x1", "Tea", Money.of("3"))],
        categories=[Category("c1", "Drinks")],
    )
    snapshot = handler.handle()
    assert [p.id for p in snapshot.products] == ["x1"]
    assert [c.name for c in category_repo.list_all()] == ["Drinks"]


def test_unreachable_store_blocks_startup():
    handler, product_repo, _, _ = _handler()
    product_repo.unavailable = True
    with pytest.raises(StoreUnavailableError):
        handler.handle()


def test_read_only_store_starts_with_empty_catalog():
    handler, product_repo, _, _ = _handler()
    product_repo.read_only = True
    snapshot = handler.handle()
    assert snapshot.products == []


class _DiskFullProductRepository(FakeProductRepository):
    """Accepts the first two saves, then fails."""

    def save(self, product: Product) -> None:
        if len(self._store) >= 2:
            raise StoreUnavailableError("disk full")
        super().save(product)


def test_partial_seed_returns_what_was_saved():
    product_repo = _DiskFullProductRepository()
    handler = InitializeStoreHandler(
        product_repo, FakeOrderRepository(), FakeCategoryRepository()
    )
    snapshot = handler.handle()
    assert [p.id for p in snapshot.products] == ["p1", "p2"]
    assert snapshot.products == product_repo.list_all()


def test_read_only_categories_do_not_block_startup():
    handler, _, _, category_repo = _handler()
    category_repo.read_only = True
    snapshot = handler.handle()
    assert len(snapshot.products) == 5
    assert category_repo.list_all() == []
