"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON repositories
and the local broadcast synchronizer but keep everything in memory.
No file I/O, no side effects.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from storefront.application.sync import Synchronizer, SyncListener, SyncMessage
from storefront.domain.exceptions import StoreUnavailableError, UploadError
from storefront.domain.model.order import Order
from storefront.domain.model.product import Category, Product
from storefront.domain.repository.category_repository import CategoryRepository
from storefront.domain.repository.image_store import ImageStore
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository


class FakeOrderRepository(OrderRepository):

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._store: dict[str, Order] = {}
        self.unavailable = False
        for o in orders or []:
            self._store[o.id] = o

    def get_by_id(self, order_id: str) -> Order | None:
        return self._store.get(order_id)

    def list_all(self) -> list[Order]:
        if self.unavailable:
            raise StoreUnavailableError("orders offline")
        return list(self._store.values())

    def save(self, order: Order) -> None:
        self._store[order.id] = order

    def delete(self, order_id: str) -> None:
        self._store.pop(order_id, None)


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        self.unavailable = False
        self.read_only = False
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        if self.unavailable:
            raise StoreUnavailableError("products offline")
        return list(self._store.values())

    def save(self, product: Product) -> None:
        if self.read_only:
            raise StoreUnavailableError("products are read-only")
        self._store[product.id] = product

    def delete(self, product_id: str) -> None:
        self._store.pop(product_id, None)


class FakeCategoryRepository(CategoryRepository):

    def __init__(self, categories: list[Category] | None = None) -> None:
        self._store: dict[str, Category] = {}
        self.read_only = False
        for c in categories or []:
            self._store[c.id] = c

    def get_by_id(self, category_id: str) -> Category | None:
        return self._store.get(category_id)

    def get_by_name(self, name: str) -> Category | None:
        for c in self._store.values():
            if c.name.lower() == name.lower():
                return c
        return None

    def list_all(self) -> list[Category]:
        return list(self._store.values())

    def save(self, category: Category) -> None:
        if self.read_only:
            raise StoreUnavailableError("categories are read-only")
        self._store[category.id] = category

    def delete(self, category_id: str) -> None:
        self._store.pop(category_id, None)


class FakeImageStore(ImageStore):

    def __init__(self, fail: bool = False) -> None:
        self.files: dict[str, bytes] = {}
        self.fail = fail

    def upload(self, data: bytes, filename: str) -> str:
        if self.fail:
            raise UploadError("disk full")
        path = f"/uploads/{len(self.files) + 1}-{filename}"
        self.files[path] = data
        return path

    def owns(self, path: str) -> bool:
        return path.startswith("/uploads/")

    def remove(self, path: str) -> None:
        if self.fail:
            raise UploadError("cannot remove")
        self.files.pop(path, None)


class RecordingSynchronizer(Synchronizer):
    """Keeps every broadcast message; never delivers anywhere."""

    def __init__(self) -> None:
        self.sent: list[SyncMessage] = []
        self.listeners: list[SyncListener] = []
        self.is_open = True

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        self.is_open = False

    def subscribe(self, listener: SyncListener) -> None:
        self.listeners.append(listener)

    def unsubscribe(self, listener: SyncListener) -> None:
        if listener in self.listeners:
            self.listeners.remove(listener)

    def broadcast(self, message: SyncMessage) -> None:
        self.sent.append(message)


class FakeClock:

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> datetime:
        self.now = self.now + timedelta(seconds=seconds)
        return self.now
