"""Snapshot synchronization between open store views ("tabs").

Every message carries the *entire* collection for its topic; receivers
replace what they hold.  There is no delta, merge or acknowledgment.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable


class SyncTopic(Enum):
    ORDERS_UPDATED = "ORDER_UPDATE"
    PRODUCTS_UPDATED = "PRODUCT_UPDATE"


@dataclass(frozen=True)
class SyncMessage:
    topic: SyncTopic
    payload: list[Any]


SyncListener = Callable[[SyncMessage], None]


class Synchronizer(ABC):
    """One endpoint on a broadcast channel, owned by the app context."""

    @abstractmethod
    def open(self) -> None:
        """Attach to the channel.  Opening twice is a no-op."""

    @abstractmethod
    def close(self) -> None:
        """Detach from the channel.  Safe to call repeatedly or unopened."""

    @abstractmethod
    def subscribe(self, listener: SyncListener) -> None:
        """Register a listener for messages sent by *other* endpoints."""

    @abstractmethod
    def unsubscribe(self, listener: SyncListener) -> None:
        """Remove a listener; unknown listeners are ignored."""

    @abstractmethod
    def broadcast(self, message: SyncMessage) -> None:
        """Send ``message`` to every other open endpoint on the channel."""
