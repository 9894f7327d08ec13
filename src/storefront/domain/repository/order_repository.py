"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, in insertion order."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order (upsert by ID, last write wins)."""

    @abstractmethod
    def delete(self, order_id: str) -> None:
        """Remove an order; unknown IDs are ignored."""
