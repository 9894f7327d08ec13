"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

A ``StoreContext`` is built once per session.  It owns the repositories,
the image store, the session's synchronizer endpoint and the StoreView
that endpoint keeps current.  It must be opened before use and closed
afterwards (it is a context manager).  The broadcast hub is supplied by
the caller so that views meant to see each other share one.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from storefront.application.browse_catalog import BrowseCatalogHandler
from storefront.application.delete_order import DeleteOrderHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.dispatch_action import ActionDispatcher
from storefront.application.initialize_store import InitializeStoreHandler
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.manage_categories import (
    AddCategoryHandler,
    DeleteCategoryHandler,
    ListCategoriesHandler,
)
from storefront.application.order_alert import OrderAlert
from storefront.application.save_product import SaveProductHandler
from storefront.application.store_view import StoreView
from storefront.application.submit_order import SubmitOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.application.upload_image import UploadImageHandler
from storefront.domain.model.order import utc_now
from storefront.domain.model.role import Role
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.local_image_store import LocalImageStore
from storefront.infrastructure.sync.local_broadcast import (
    LocalBroadcastHub,
    LocalSynchronizer,
)

logger = logging.getLogger(__name__)


def log_announcement(message: str) -> None:
    logger.info("Alert: %s", message)


class StoreContext:

    def __init__(
        self,
        settings: Settings,
        hub: LocalBroadcastHub,
        role: Role = Role.CUSTOMER,
        speaker: Callable[[str], None] = log_announcement,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.settings = settings
        self.clock = clock
        data_dir = settings.data_dir
        self.product_repo = JsonProductRepository(data_dir / "products.json")
        self.order_repo = JsonOrderRepository(data_dir / "orders.json")
        self.category_repo = JsonCategoryRepository(data_dir / "categories.json")
        self.image_store = LocalImageStore(settings.upload_dir)
        self.synchronizer = LocalSynchronizer(hub, settings.sync_channel)
        self.view = StoreView(role, OrderAlert(speaker, clock=clock))

    # --- Lifecycle ------------------------------------------------------------

    def open(self) -> StoreContext:
        self.synchronizer.open()
        self.view.attach(self.synchronizer)
        logger.debug("Store context open on %s", self.settings.data_dir)
        return self

    def close(self) -> None:
        self.view.detach()
        self.synchronizer.close()

    def sign_in(self, role: Role) -> None:
        """Switch the view to ``role``; staff views raise new-order alerts."""
        self.view.role = role

    def __enter__(self) -> StoreContext:
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()

    # --- Use cases ------------------------------------------------------------

    def initialize_store(self) -> InitializeStoreHandler:
        return InitializeStoreHandler(
            product_repo=self.product_repo,
            order_repo=self.order_repo,
            category_repo=self.category_repo,
        )

    def submit_order(self) -> SubmitOrderHandler:
        return SubmitOrderHandler(
            order_repo=self.order_repo,
            product_repo=self.product_repo,
            synchronizer=self.synchronizer,
            clock=self.clock,
        )

    def update_order_status(self) -> UpdateOrderStatusHandler:
        return UpdateOrderStatusHandler(
            order_repo=self.order_repo,
            synchronizer=self.synchronizer,
            clock=self.clock,
        )

    def action_dispatcher(self) -> ActionDispatcher:
        return ActionDispatcher(
            order_repo=self.order_repo,
            status_handler=self.update_order_status(),
        )

    def delete_order(self) -> DeleteOrderHandler:
        return DeleteOrderHandler(self.order_repo, self.synchronizer)

    def list_orders(self) -> ListOrdersHandler:
        return ListOrdersHandler(self.order_repo)

    def browse_catalog(self) -> BrowseCatalogHandler:
        return BrowseCatalogHandler(self.product_repo)

    def save_product(self) -> SaveProductHandler:
        return SaveProductHandler(self.product_repo, self.synchronizer)

    def delete_product(self) -> DeleteProductHandler:
        return DeleteProductHandler(
            product_repo=self.product_repo,
            image_store=self.image_store,
            synchronizer=self.synchronizer,
        )

    def upload_image(self) -> UploadImageHandler:
        return UploadImageHandler(self.image_store)

    def add_category(self) -> AddCategoryHandler:
        return AddCategoryHandler(self.category_repo)

    def delete_category(self) -> DeleteCategoryHandler:
        return DeleteCategoryHandler(self.category_repo)

    def list_categories(self) -> ListCategoriesHandler:
        return ListCategoriesHandler(self.category_repo)
