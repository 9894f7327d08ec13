"""Application services: category management.

Categories are a pick-list for the product form.  Deleting one does not
touch products that still carry its name.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import (
    EntityNotFoundError,
    StoreUnavailableError,
    ValidationError,
)
from storefront.domain.model.identity import timestamped_id
from storefront.domain.model.product import Category
from storefront.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class AddCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, name: str) -> Category:
        if not name or not name.strip():
            raise ValidationError("Category name is required")

        if self._category_repo.get_by_name(name.strip()) is not None:
            raise ValidationError(f"Category '{name.strip()}' already exists")

        category = Category(id=timestamped_id("c"), name=name.strip())
        self._category_repo.save(category)
        logger.info("Category %s '%s' added", category.id, category.name)
        return category


class DeleteCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, category_id: str) -> None:
        if self._category_repo.get_by_id(category_id) is None:
            raise EntityNotFoundError(f"Category with ID '{category_id}' not found")
        self._category_repo.delete(category_id)
        logger.info("Category %s deleted", category_id)


class ListCategoriesHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self) -> list[Category]:
        try:
            return self._category_repo.list_all()
        except StoreUnavailableError:
            logger.exception("Could not load categories; showing none")
            return []
