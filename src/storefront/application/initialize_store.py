"""Application service: Initialize Store use case.

Runs once at startup.  Reading both collections doubles as the
connectivity check: StoreUnavailableError propagates and blocks the
session until the user retries.  An empty store is seeded with a
starter catalog and the default categories.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from storefront.domain.exceptions import DomainException
from storefront.domain.model.identity import timestamped_id
from storefront.domain.model.order import Order
from storefront.domain.model.product import Category, Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.category_repository import CategoryRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = ["Fruit", "Vegetables", "Eggs & Poultry", "Drinks", "Grain & Oil", "Other"]


def starter_products() -> list[Product]:
    return [
        Product("p1", "Fuji Apples", Money.of("8.5"), "500g", "Fruit",
                "https://picsum.photos/id/102/400/300", "Large premium fruit"),
        Product("p2", "Napa Cabbage", Money.of("1.2"), "500g", "Vegetables",
                "https://picsum.photos/id/102/400/301", "Cut fresh daily"),
        Product("p3", "Free-range Eggs", Money.of("15.0"), "box", "Eggs & Poultry",
                "https://picsum.photos/id/102/400/302", "10 per box"),
        Product("p4", "Spring Water", Money.of("2.0"), "bottle", "Drinks",
                "https://picsum.photos/id/102/400/303", "550ml"),
        Product("p5", "Peanut Oil", Money.of("128.0"), "drum", "Grain & Oil",
                "https://picsum.photos/id/102/400/304", "5L per drum"),
    ]


@dataclass(frozen=True)
class StoreSnapshot:
    products: list[Product]
    orders: list[Order]


class InitializeStoreHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._order_repo = order_repo
        self._category_repo = category_repo

    def handle(self) -> StoreSnapshot:
        products = self._product_repo.list_all()
        orders = self._order_repo.list_all()

        if not products:
            products = self._seed_products()
        if not self._category_repo.list_all():
            self._seed_categories()

        logger.info(
            "Store ready: %d products, %d orders", len(products), len(orders)
        )
        return StoreSnapshot(products=products, orders=orders)

    def _seed_products(self) -> list[Product]:
        saved: list[Product] = []
        try:
            for product in starter_products():
                self._product_repo.save(product)
                saved.append(product)
        except DomainException:
            # A read-only store still starts, with whatever got saved.
            logger.warning(
                "Could not seed the starter catalog; %d products saved",
                len(saved),
                exc_info=True,
            )
            return saved
        logger.info("Seeded %d starter products", len(saved))
        return saved

    def _seed_categories(self) -> None:
        saved = 0
        try:
            for name in DEFAULT_CATEGORIES:
                self._category_repo.save(Category(id=timestamped_id("c"), name=name))
                saved += 1
        except DomainException:
            logger.warning(
                "Could not seed the default categories; %d saved", saved, exc_info=True
            )
            return
        logger.info("Seeded %d default categories", saved)
