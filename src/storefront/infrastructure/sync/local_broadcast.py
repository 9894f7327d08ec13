"""In-process broadcast channels between store views.

A ``LocalBroadcastHub`` keeps named channels; every ``LocalSynchronizer``
that is open on a channel receives what the others send on it, never its
own messages.  Delivery is synchronous, in the order endpoints opened,
and each receiver gets its own deep copy of the payload so no two views
ever share mutable records.
"""

from __future__ import annotations

import copy
import logging

from storefront.application.sync import Synchronizer, SyncListener, SyncMessage

logger = logging.getLogger(__name__)


class LocalBroadcastHub:

    def __init__(self) -> None:
        self._channels: dict[str, list[LocalSynchronizer]] = {}

    def join(self, endpoint: LocalSynchronizer) -> None:
        members = self._channels.setdefault(endpoint.channel, [])
        if endpoint not in members:
            members.append(endpoint)

    def leave(self, endpoint: LocalSynchronizer) -> None:
        members = self._channels.get(endpoint.channel, [])
        if endpoint in members:
            members.remove(endpoint)
        if not members:
            self._channels.pop(endpoint.channel, None)

    def members(self, channel: str) -> list[LocalSynchronizer]:
        return list(self._channels.get(channel, []))

    def post(self, sender: LocalSynchronizer, message: SyncMessage) -> int:
        """Deliver to every other member; returns how many received it."""
        delivered = 0
        for endpoint in self.members(sender.channel):
            if endpoint is sender:
                continue
            endpoint.deliver(
                SyncMessage(message.topic, copy.deepcopy(message.payload))
            )
            delivered += 1
        return delivered


class LocalSynchronizer(Synchronizer):

    def __init__(self, hub: LocalBroadcastHub, channel: str) -> None:
        self._hub = hub
        self.channel = channel
        self._listeners: list[SyncListener] = []
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    # --- Synchronizer interface -----------------------------------------------

    def open(self) -> None:
        if self._open:
            return
        self._hub.join(self)
        self._open = True
        logger.debug("Joined sync channel %r", self.channel)

    def close(self) -> None:
        if not self._open:
            return
        self._hub.leave(self)
        self._open = False
        self._listeners.clear()
        logger.debug("Left sync channel %r", self.channel)

    def subscribe(self, listener: SyncListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: SyncListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def broadcast(self, message: SyncMessage) -> None:
        if not self._open:
            logger.warning(
                "Sync channel %r is closed; %s dropped",
                self.channel,
                message.topic.value,
            )
            return
        delivered = self._hub.post(self, message)
        logger.debug("%s delivered to %d views", message.topic.value, delivered)

    # --- Hub callback ---------------------------------------------------------

    def deliver(self, message: SyncMessage) -> None:
        for listener in list(self._listeners):
            try:
                listener(message)
            except Exception:
                logger.exception(
                    "Sync listener failed on %s; continuing", message.topic.value
                )
