"""In-process registry of relay event subscribers, keyed by connection id."""
from __future__ import annotations

import logging

from relay_client.application.ports.subscriber import RelayEventSubscriber
from relay_client.domain.entities.postbox_deletion_result import PostboxDeletionResult
from relay_client.domain.entities.relay_message import RelayMessage
from relay_client.domain.value_objects.enums import ConnectionState

logger = logging.getLogger(__name__)


class SubscriptionManager:
    def __init__(self) -> None:
        self._subscribers: dict[str, RelayEventSubscriber] = {}

    def replace_subscriber(self, connection_id: str, subscriber: RelayEventSubscriber) -> None:
        self._subscribers[connection_id] = subscriber

    def remove_subscriber(self, connection_id: str) -> None:
        self._subscribers.pop(connection_id, None)

    def remove_all_subscribers(self) -> None:
        self._subscribers.clear()

    def has_subscriber(self, connection_id: str) -> bool:
        return connection_id in self._subscribers

    async def relay_message_incoming(self, connection_id: str, message: RelayMessage) -> None:
        subscriber = self._subscribers.get(connection_id)
        if subscriber is None:
            logger.debug("No subscriber for connection %s, dropping %s", connection_id, message.message_id)
            return
        try:
            await subscriber.message_incoming(message)
        except Exception:
            logger.exception("Subscriber failed on message %s", message.message_id)

    async def postbox_deleted(self, connection_id: str, update: PostboxDeletionResult) -> None:
        subscriber = self._subscribers.get(connection_id)
        if subscriber is None:
            logger.debug("No subscriber for connection %s, dropping postbox deletion", connection_id)
            return
        try:
            await subscriber.postbox_deleted(update)
        except Exception:
            logger.exception("Subscriber failed on postbox deletion for %s", connection_id)

    async def connection_status_changed(
        self,
        connection_id: str,
        state: ConnectionState,
        *,
        expected_change: bool,
    ) -> None:
        """Notify the connection's subscriber.

        An unexpected disconnect also drops the subscriber.
        """
        subscriber = self._subscribers.get(connection_id)
        if not expected_change and state == ConnectionState.DISCONNECTED:
            self._subscribers.pop(connection_id, None)
        if subscriber is None:
            return
        try:
            await subscriber.connection_status_changed(state)
        except Exception:
            logger.exception("Subscriber failed on state change for %s", connection_id)
