from __future__ import annotations

import logging
from dataclasses import dataclass

from relay_client.application.ports.bus import EventPublisher
from relay_client.application.ports.subscriber import RelayEventSubscriber
from relay_client.config import settings
from relay_client.domain.entities.postbox_deletion_result import PostboxDeletionResult
from relay_client.domain.entities.relay_message import RelayMessage
from relay_client.domain.value_objects.enums import ConnectionState, Direction
from relay_client.infrastructure.graphql.mappers import postbox_deletion, relay_message
from relay_client.infrastructure.graphql.operations import on_message_created, on_postbox_deleted
from relay_client.services.subscription_manager import SubscriptionManager

logger = logging.getLogger(__name__)

MESSAGE_CREATED_EVENT = "relay.message_created"
POSTBOX_DELETED_EVENT = "relay.postbox_deleted"


@dataclass(frozen=True, slots=True)
class RelaySubscriptions:
    """Operations the transport must start for one connection."""

    message_created: on_message_created.OnMessageCreatedSubscription
    postbox_deleted: on_postbox_deleted.OnPostBoxDeletedSubscription


class RelayEventService:
    """Turns decoded subscription responses into subscriber notifications."""

    def __init__(
        self,
        manager: SubscriptionManager | None = None,
        publisher: EventPublisher | None = None,
        *,
        channel: str | None = None,
    ) -> None:
        self.manager = manager or SubscriptionManager()
        self._publisher = publisher
        self._channel = channel or settings.RELAY_PUBSUB_CHANNEL

    def subscribe(
        self,
        connection_id: str,
        subscriber: RelayEventSubscriber,
        direction: Direction | str | None = None,
    ) -> RelaySubscriptions:
        """Register `subscriber` and return the operations the transport should start."""
        operations = RelaySubscriptions(
            message_created=on_message_created.OnMessageCreatedSubscription(
                connection_id, direction or settings.DEFAULT_DIRECTION,
            ),
            postbox_deleted=on_postbox_deleted.OnPostBoxDeletedSubscription(connection_id),
        )
        self.manager.replace_subscriber(connection_id, subscriber)
        logger.info("Subscribed to relay events for connection %s", connection_id)
        return operations

    def unsubscribe(self, connection_id: str) -> None:
        self.manager.remove_subscriber(connection_id)

    def unsubscribe_all(self) -> None:
        self.manager.remove_all_subscribers()

    async def on_connected(self, connection_id: str) -> None:
        await self.manager.connection_status_changed(
            connection_id, ConnectionState.CONNECTED, expected_change=True,
        )

    async def on_response(self, connection_id: str, data: on_message_created.Data) -> RelayMessage | None:
        event = data.on_message_created
        if event is None:
            return None

        message = relay_message.event_to_entity(event)
        await self.manager.relay_message_incoming(connection_id, message)
        await self._publish(MESSAGE_CREATED_EVENT, relay_message.entity_to_payload(message))
        return message

    async def on_postbox_deleted(
        self,
        connection_id: str,
        data: on_postbox_deleted.Data,
    ) -> PostboxDeletionResult | None:
        event = data.on_postbox_deleted
        if event is None:
            return None

        result = postbox_deletion.event_to_entity(event)
        await self.manager.postbox_deleted(connection_id, result)
        await self._publish(POSTBOX_DELETED_EVENT, postbox_deletion.entity_to_payload(result))
        return result

    async def on_failure(self, connection_id: str, exc: BaseException) -> None:
        logger.error("Relay subscription error on %s: %s", connection_id, exc)
        await self.manager.connection_status_changed(
            connection_id, ConnectionState.DISCONNECTED, expected_change=False,
        )

    async def on_completed(self, connection_id: str) -> None:
        await self.manager.connection_status_changed(
            connection_id, ConnectionState.DISCONNECTED, expected_change=True,
        )

    async def _publish(self, event_type: str, payload: dict[str, object]) -> None:
        if self._publisher is None:
            return
        await self._publisher.publish(self._channel, {"event_type": event_type, **payload})
